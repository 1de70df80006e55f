from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict


INFLATION_RATE = 0.03
HORIZON_YEARS = 100
MONTHS_PER_YEAR = 12

# label -> fraction of the initial value withdrawn in the first year
WITHDRAWAL_RATES: Dict[str, float] = {
    "1%": 0.01,
    "3%": 0.03,
    "4%": 0.04,
}


class ProjectionInput(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    initial_value: float
    annual_return_percent: float
    withdrawal_rate: float

    @property
    def annual_return(self) -> float:
        return self.annual_return_percent / 100


class YearRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int
    # value at the START of the year, before that year's growth and withdrawals
    portfolio_value: int
    monthly_spending: int


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    series: Tuple[YearRecord, ...]
    years_lasting: int
    peak_value: float
    peak_year: int
    is_eternal: bool

    @property
    def initial_monthly_spending(self) -> int:
        return self.series[0].monthly_spending

    def to_payload(self) -> dict:
        """Camel-cased dict in the shape the frontend chart and table read."""
        return {
            "data": [
                {
                    "year": record.year,
                    "portfolioValue": record.portfolio_value,
                    "monthlySpending": record.monthly_spending,
                }
                for record in self.series
            ],
            "yearsLasting": self.years_lasting,
            "peakValue": self.peak_value,
            "peakYear": self.peak_year,
            "isEternal": self.is_eternal,
            "initialMonthlySpending": self.initial_monthly_spending,
        }


def round_half_up(value: float) -> int:
    """Round half away from zero to a whole currency unit."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _still_growing(series: Tuple[YearRecord, ...]) -> bool:
    # only meaningful on a full horizon; shorter series never count as eternal
    if len(series) != HORIZON_YEARS:
        return False
    return series[-1].portfolio_value > series[-2].portfolio_value


def project(
    initial_value: float,
    annual_return_percent: float,
    withdrawal_rate: float,
    current_year: int,
) -> ProjectionResult:
    """
    Simulate the portfolio year by year for up to HORIZON_YEARS years.

    Order of operations (per year):
      1) From the second year on, inflate monthly spending by INFLATION_RATE.
      2) Record the start-of-year value and the spending in effect (rounded).
      3) Track the peak on the unrounded value (strictly greater wins, so
         ties keep the earliest year).
      4) Grow the value by the annual return and subtract 12 months of spending.
      5) Stop as soon as the value is no longer positive; the depleted year
         is not recorded.

    The caller is responsible for passing a positive initial value; nothing
    here validates the inputs. A value that outgrows the float range ends the
    series early, after the last representable year, without counting as
    depletion.
    """
    params = ProjectionInput.model_construct(
        initial_value=initial_value,
        annual_return_percent=annual_return_percent,
        withdrawal_rate=withdrawal_rate,
    )
    annual_return = params.annual_return

    current_value = float(params.initial_value)
    monthly_spending = params.initial_value * params.withdrawal_rate / MONTHS_PER_YEAR

    peak_value = current_value
    peak_year = current_year
    years_lasting = 0
    depleted = False

    records: List[YearRecord] = []
    for year in range(current_year, current_year + HORIZON_YEARS):
        if year > current_year:
            monthly_spending *= 1 + INFLATION_RATE

        records.append(
            YearRecord(
                year=year,
                portfolio_value=round_half_up(current_value),
                monthly_spending=round_half_up(monthly_spending),
            )
        )

        if current_value > peak_value:
            peak_value = current_value
            peak_year = year

        current_value = current_value * (1 + annual_return) - monthly_spending * MONTHS_PER_YEAR

        if current_value <= 0:
            depleted = True
            break

        years_lasting = year - current_year + 1

        if not math.isfinite(current_value):
            logger.warning(
                f"Portfolio value left the float range after {years_lasting} years; stopping early"
            )
            break

    series = tuple(records)
    is_eternal = not depleted and _still_growing(series)

    logger.debug(
        f"Projection {params.withdrawal_rate:.2%} of {params.initial_value:,.0f} "
        f"at {annual_return_percent}%: {len(series)} years recorded, "
        f"lasting {years_lasting}, eternal={is_eternal}"
    )

    return ProjectionResult(
        series=series,
        years_lasting=years_lasting,
        peak_value=peak_value,
        peak_year=peak_year,
        is_eternal=is_eternal,
    )


def project_all(
    initial_value: float,
    annual_return_percent: float,
    current_year: int,
    rates: Optional[Dict[str, float]] = None,
) -> Dict[str, ProjectionResult]:
    """Run `project` once per candidate withdrawal rate, keyed by its label."""
    rates = rates if rates is not None else WITHDRAWAL_RATES
    return {
        label: project(initial_value, annual_return_percent, rate, current_year)
        for label, rate in rates.items()
    }


__all__ = [
    "INFLATION_RATE",
    "HORIZON_YEARS",
    "MONTHS_PER_YEAR",
    "WITHDRAWAL_RATES",
    "ProjectionInput",
    "YearRecord",
    "ProjectionResult",
    "round_half_up",
    "project",
    "project_all",
]
