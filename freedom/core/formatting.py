"""Display helpers: currency labels and the outcome narrative shown to the user."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel

from freedom.core.projection import ProjectionResult, round_half_up

# en-US display symbols; the amounts themselves are never converted
CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "CA$",
    "AUD": "A$",
}

SUPPORTED_CURRENCIES: List[str] = list(CURRENCY_SYMBOLS)

MILESTONE_OFFSETS = (5, 10, 30)


class UnsupportedCurrencyError(ValueError):
    def __init__(self, currency: str):
        super().__init__(
            f"unsupported currency {currency!r}; expected one of {', '.join(SUPPORTED_CURRENCIES)}"
        )
        self.currency = currency


class Milestone(BaseModel):
    year: int
    value: int
    formatted: str


class OutcomeSummary(BaseModel):
    isEternal: bool
    headline: str
    milestones: List[Milestone] = []
    yearsLasting: Optional[int] = None
    peakValue: Optional[str] = None
    peakYear: Optional[int] = None


def normalize_currency(currency: str) -> str:
    code = currency.strip().upper()
    if code not in CURRENCY_SYMBOLS:
        raise UnsupportedCurrencyError(currency)
    return code


def format_currency(value: float, currency: str = "USD") -> str:
    """Format like `Intl.NumberFormat("en-US", {style: "currency"})` with no decimals."""
    symbol = CURRENCY_SYMBOLS[normalize_currency(currency)]
    amount = round_half_up(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.0f}"


def describe_outcome(result: ProjectionResult, currency: str = "USD") -> OutcomeSummary:
    """
    Build the narrative for one withdrawal scenario.

    Eternal portfolios report their value 5, 10 and 30 years out; the others
    report how long they last and where they peaked.
    """
    if result.is_eternal:
        start_year = result.series[0].year
        milestones = [
            Milestone(
                year=start_year + offset,
                value=result.series[offset].portfolio_value,
                formatted=format_currency(result.series[offset].portfolio_value, currency),
            )
            for offset in MILESTONE_OFFSETS
            if offset < len(result.series)
        ]
        return OutcomeSummary(
            isEternal=True,
            headline="My portfolio will keep growing indefinitely!",
            milestones=milestones,
        )

    peak = format_currency(result.peak_value, currency)
    return OutcomeSummary(
        isEternal=False,
        headline=(
            f"My portfolio would only last for {result.years_lasting} years, "
            f"reaching a peak of {peak} in {result.peak_year}."
        ),
        yearsLasting=result.years_lasting,
        peakValue=peak,
        peakYear=result.peak_year,
    )
