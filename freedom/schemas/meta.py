"""Pydantic schemas for the health-check and lookup endpoints."""

from typing import List

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str


class CurrenciesResponse(BaseModel):
    currencies: List[str]
