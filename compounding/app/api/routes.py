"""HTTP routes for the Flask API."""

import logging
import math
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compounding.config import Settings
from compounding.core.ping import get_ping_response
from compounding.core.projection import (
    DEFAULT_PARAMETERS,
    compute,
    project_schedule,
    schedule_length,
)
from compounding.core.validation import validate
from compounding.domain.investment import InvestmentValidationError
from compounding.schemas.investment import InvestmentParameters, ProjectionResult

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _error_body(exc: InvestmentValidationError) -> Dict[str, Any]:
    return {"message": str(exc), "error": exc.errors}


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected payload shape: %d error(s)", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvestmentValidationError)
def _handle_investment_error(exc: InvestmentValidationError):
    """Domain rule violations go back to the form as a displayable message."""
    logger.info("rejected investment parameters: %s", exc)
    return jsonify(_error_body(exc)), HTTPStatus.BAD_REQUEST


def _parse_parameters() -> InvestmentParameters:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return InvestmentParameters.model_validate(raw_payload)


def _parse_step_months(default: int) -> int:
    raw = request.args.get("stepMonths")
    if raw is None:
        return default
    try:
        step_months = int(raw)
    except ValueError:
        step_months = 0
    if step_months < 1:
        raise InvestmentValidationError(["stepMonths must be a positive whole number"])
    return step_months


def _ensure_representable(result: ProjectionResult) -> None:
    # strict JSON has no Infinity token
    if not math.isfinite(result.futureValue):
        raise InvestmentValidationError(["projection exceeds the representable range"])


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = get_ping_response(_settings().SERVICE_NAME)
    return jsonify(response.model_dump())


@api_bp.get("/projection/defaults")
def projection_defaults() -> Any:
    """Initial values for the calculator form."""
    return jsonify(DEFAULT_PARAMETERS.model_dump(mode="json"))


@api_bp.post("/projection")
def projection() -> Any:
    """Future value, principal and interest component for one set of parameters."""
    result = compute(_parse_parameters())
    _ensure_representable(result)
    return jsonify(result.model_dump())


@api_bp.post("/projection/schedule")
def projection_schedule() -> Any:
    """Chart series of the projection, one point per step plus the final month."""
    settings = _settings()
    step_months = _parse_step_months(settings.SCHEDULE_STEP_MONTHS)

    params = validate(_parse_parameters())
    points = schedule_length(params, step_months)
    if points > settings.MAX_SCHEDULE_POINTS:
        raise InvestmentValidationError(
            [
                f"schedule would have {points} points; "
                f"use a stepMonths that keeps it within {settings.MAX_SCHEDULE_POINTS}"
            ]
        )

    schedule = project_schedule(params, step_months=step_months)
    _ensure_representable(schedule.final)
    return jsonify(schedule.model_dump())
