from __future__ import annotations

import pytest

from freedom.core.formatting import (
    UnsupportedCurrencyError,
    describe_outcome,
    format_currency,
    normalize_currency,
)
from freedom.core.projection import project


@pytest.mark.parametrize(
    "value, currency, expected",
    [
        (3333, "USD", "$3,333"),
        (1_159_274.07, "USD", "$1,159,274"),
        (2500, "EUR", "€2,500"),
        (833, "GBP", "£833"),
        (1_000_000, "JPY", "¥1,000,000"),
        (0.5, "CAD", "CA$1"),
        (-1234.5, "AUD", "-A$1,235"),
    ],
)
def test_format_currency(value, currency, expected):
    assert format_currency(value, currency) == expected


def test_currency_labels_are_case_insensitive():
    assert normalize_currency(" eur ") == "EUR"


def test_unknown_currency_is_rejected():
    with pytest.raises(UnsupportedCurrencyError) as excinfo:
        format_currency(10, "BTC")

    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.currency == "BTC"


def test_eternal_outcome_reports_milestones():
    result = project(1_000_000, 7, 0.04, current_year=2024)

    summary = describe_outcome(result)

    assert summary.isEternal
    assert [m.year for m in summary.milestones] == [2029, 2034, 2054]
    assert summary.milestones[0].value == 1_159_274
    assert summary.milestones[0].formatted == "$1,159,274"
    assert summary.yearsLasting is None


def test_depleting_outcome_reports_duration_and_peak():
    result = project(500_000, 4, 0.04, current_year=2024)

    summary = describe_outcome(result, "GBP")

    assert not summary.isEternal
    assert summary.milestones == []
    assert summary.yearsLasting == 29
    assert summary.peakValue == "£500,000"
    assert summary.peakYear == 2024
    assert "29 years" in summary.headline
