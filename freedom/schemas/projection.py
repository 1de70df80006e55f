"""Data contracts for the projection endpoint."""

import re
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from freedom.core.formatting import OutcomeSummary, normalize_currency

_NON_DIGITS = re.compile(r"[^0-9]")

# largest portfolio whose growth at the maximum yearly return stays a finite float for 100 years
MAX_NET_WORTH = 10**100


class ProjectionRequest(BaseModel):
    """Inputs typed into the calculator form."""

    model_config = ConfigDict(extra="forbid")

    netWorth: int = Field(
        ...,
        gt=0,
        description="Portfolio value today. Strings keep only their digits, so '$1,000,000' is accepted.",
    )
    yearlyReturn: float = Field(
        ...,
        ge=-100,
        le=10000,
        allow_inf_nan=False,
        description="Expected nominal yearly return in percent (7 means 7%).",
    )
    currency: str = Field("USD", description="Display currency label; amounts are never converted.")

    @field_validator("netWorth", mode="before")
    @classmethod
    def keep_digits(cls, value: Union[str, int, float]) -> Union[str, int, float]:
        if isinstance(value, str):
            digits = _NON_DIGITS.sub("", value)
            if not digits:
                raise ValueError("netWorth must contain at least one digit")
            return int(digits)
        return value

    @field_validator("netWorth")
    @classmethod
    def representable(cls, value: int) -> int:
        if value > MAX_NET_WORTH:
            raise ValueError("netWorth must be at most 10^100")
        return value

    @field_validator("currency")
    @classmethod
    def known_currency(cls, value: str) -> str:
        return normalize_currency(value)


class ScenarioDisplay(BaseModel):
    initialMonthlySpending: str
    outcome: OutcomeSummary


class YearPoint(BaseModel):
    year: int
    portfolioValue: int
    monthlySpending: int


class ScenarioResponse(BaseModel):
    data: List[YearPoint]
    yearsLasting: int
    peakValue: float
    peakYear: int
    isEternal: bool
    initialMonthlySpending: int
    display: ScenarioDisplay


class ProjectionResponse(BaseModel):
    """All three withdrawal scenarios, keyed by their rate label."""

    currency: str
    currentYear: int
    results: Dict[str, ScenarioResponse]
