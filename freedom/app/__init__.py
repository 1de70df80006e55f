"""Application factory and app-wide configuration."""

from datetime import datetime, timezone
from typing import Callable, Optional

from flask import Flask
from flask_cors import CORS

from freedom.app.api.routes import api_bp
from freedom.app.logging_config import configure_logging
from freedom.config import Settings, load_settings

YearClock = Callable[[], int]


def utc_year() -> int:
    return datetime.now(timezone.utc).year


def create_app(settings: Optional[Settings] = None, clock: Optional[YearClock] = None) -> Flask:
    """Build the Flask app instance.

    `clock` supplies the calendar year the projections start from; tests pass
    a fixed one.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["YEAR_CLOCK"] = clock or utc_year

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
