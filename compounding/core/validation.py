"""Domain validation of raw investment parameters."""

import math
from enum import Enum
from typing import Any, List, Optional, Type, TypeVar

from compounding.domain.investment import (
    CompoundingFrequency,
    ContributionFrequency,
    InvestmentValidationError,
    ValidatedParameters,
    ValidationResult,
)
from compounding.schemas.investment import InvestmentParameters

FrequencyT = TypeVar("FrequencyT", bound=Enum)

NUMERIC_FIELDS = (
    "initialInvestment",
    "annualInterestRatePercent",
    "contributionAmount",
    "durationMonths",
)


def _parse_frequency(value: Any, enum_type: Type[FrequencyT]) -> Optional[FrequencyT]:
    raw = value.value if isinstance(value, Enum) else value
    try:
        return enum_type(str(raw).strip().lower())
    except ValueError:
        return None


def _allowed(enum_type: Type[Enum]) -> str:
    return ", ".join(member.value for member in enum_type)


def check_parameters(raw: InvestmentParameters) -> ValidationResult:
    """Collect every rule violation in `raw` instead of stopping at the first one."""
    errors: List[str] = []

    finite = {name: math.isfinite(getattr(raw, name)) for name in NUMERIC_FIELDS}
    for name, ok in finite.items():
        if not ok:
            errors.append(f"{name} must be a finite number")

    if finite["annualInterestRatePercent"] and raw.annualInterestRatePercent < 0:
        errors.append("annualInterestRatePercent cannot be negative")

    if finite["durationMonths"]:
        if raw.durationMonths < 0:
            errors.append("durationMonths cannot be negative")
        elif not float(raw.durationMonths).is_integer():
            errors.append("durationMonths must be a whole number of months")

    if finite["initialInvestment"] and raw.initialInvestment < 0:
        errors.append("initialInvestment cannot be negative")
    if finite["contributionAmount"] and raw.contributionAmount < 0:
        errors.append("contributionAmount cannot be negative")

    compounding = _parse_frequency(raw.compoundingFrequency, CompoundingFrequency)
    if compounding is None:
        errors.append(f"compoundingFrequency must be one of: {_allowed(CompoundingFrequency)}")

    contribution = _parse_frequency(raw.contributionFrequency, ContributionFrequency)
    if contribution is None:
        errors.append(f"contributionFrequency must be one of: {_allowed(ContributionFrequency)}")

    if errors:
        return ValidationResult(parameters=None, errors=errors)

    parameters = ValidatedParameters(
        initial_investment=float(raw.initialInvestment),
        annual_interest_rate_percent=float(raw.annualInterestRatePercent),
        compounding_frequency=compounding,
        contribution_amount=float(raw.contributionAmount),
        contribution_frequency=contribution,
        duration_months=int(raw.durationMonths),
    )
    return ValidationResult(parameters=parameters, errors=[])


def validate(raw: InvestmentParameters) -> ValidatedParameters:
    """Return validated parameters or raise InvestmentValidationError listing every problem."""
    result = check_parameters(raw)
    if result.errors or result.parameters is None:
        raise InvestmentValidationError(result.errors)
    return result.parameters
