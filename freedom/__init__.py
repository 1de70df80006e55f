"""Financial freedom calculator: withdrawal-rate projections behind a small Flask API."""

__version__ = "0.1.0"
