"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from loguru import logger
from pydantic import ValidationError

from freedom.core.formatting import SUPPORTED_CURRENCIES, describe_outcome, format_currency
from freedom.core.projection import project_all
from freedom.schemas.meta import CurrenciesResponse, PingResponse
from freedom.schemas.projection import (
    ProjectionRequest,
    ProjectionResponse,
    ScenarioDisplay,
    ScenarioResponse,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning(f"Rejected request to {request.path}: {exc.error_count()} validation error(s)")
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False, include_input=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse(message="pong").model_dump())


@api_bp.get("/currencies")
def currencies() -> Any:
    """Currency labels the frontend dropdown may offer."""
    return jsonify(CurrenciesResponse(currencies=SUPPORTED_CURRENCIES).model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Project the portfolio under every candidate withdrawal rate."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)
    current_year = current_app.config["YEAR_CLOCK"]()

    logger.info(
        f"Projecting {payload.netWorth:,} {payload.currency} at {payload.yearlyReturn}% from {current_year}"
    )
    results = project_all(payload.netWorth, payload.yearlyReturn, current_year)

    response = ProjectionResponse(
        currency=payload.currency,
        currentYear=current_year,
        results={
            label: ScenarioResponse(
                **result.to_payload(),
                display=ScenarioDisplay(
                    initialMonthlySpending=format_currency(
                        result.initial_monthly_spending, payload.currency
                    ),
                    outcome=describe_outcome(result, payload.currency),
                ),
            )
            for label, result in results.items()
        },
    )
    return jsonify(response.model_dump())
