from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import List

from compounding.core.validation import validate
from compounding.domain.investment import (
    CompoundingFrequency,
    ContributionFrequency,
    ValidatedParameters,
)
from compounding.schemas.investment import (
    InvestmentParameters,
    ProjectionPoint,
    ProjectionResult,
    ProjectionSchedule,
)

logger = logging.getLogger(__name__)


# Initial form values of the calculator.
DEFAULT_PARAMETERS = InvestmentParameters(
    initialInvestment=1000.0,
    annualInterestRatePercent=3.0,
    compoundingFrequency=CompoundingFrequency.YEARLY,
    contributionAmount=100.0,
    contributionFrequency=ContributionFrequency.YEARLY,
    durationMonths=12,
)


def _growth_factor(period_rate: float, periods: float) -> float:
    """(1 + period_rate) ** periods, saturating to inf instead of raising on overflow."""
    try:
        return (1.0 + period_rate) ** periods
    except OverflowError:
        return math.inf


def _growth_minus_one(period_rate: float, periods: float) -> float:
    """(1 + period_rate) ** periods - 1 without cancellation for rates near zero."""
    try:
        return math.expm1(periods * math.log1p(period_rate))
    except OverflowError:
        return math.inf


def compound_principal(params: ValidatedParameters) -> float:
    """Lump sum grown at the compounding frequency's period rate.

    With a zero rate the factor is exactly 1.0, so the principal comes back unchanged.
    """
    principal = params.initial_investment
    if principal == 0:
        return 0.0
    n = params.compounding_frequency.periods_per_year
    return principal * _growth_factor(params.annual_rate / n, n * params.years)


def contribution_future_value(params: ValidatedParameters) -> float:
    """
    Future value of the contribution stream as an annuity-due.

    Each deposit lands at the start of its period and grows at the contribution
    frequency's own period rate r/m, independent of the compounding frequency:

        pmt * ((1 + r/m)^(m*t) - 1) / (r/m) * (1 + r/m)

    A zero rate degenerates to the plain sum pmt * m * t.
    """
    if not params.has_contributions:
        return 0.0

    pmt = params.contribution_amount
    m = params.contribution_frequency.periods_per_year
    rate = params.annual_rate
    t = params.years

    if rate == 0:
        return pmt * m * t

    period_rate = rate / m
    growth = _growth_minus_one(period_rate, m * t)
    return pmt * growth / period_rate * (1.0 + period_rate)


def project(params: ValidatedParameters) -> ProjectionResult:
    """Project the future value of validated parameters. Never raises."""
    principal = params.initial_investment
    future_value = compound_principal(params) + contribution_future_value(params)
    logger.debug(
        "projected %s months at %s%%: future value %s",
        params.duration_months,
        params.annual_interest_rate_percent,
        future_value,
    )
    return ProjectionResult(
        principal=principal,
        futureValue=future_value,
        interestComponent=future_value - principal,
    )


def project_schedule(params: ValidatedParameters, step_months: int = 12) -> ProjectionSchedule:
    """
    Build the chart series for a projection.

    Points are taken at month 0, every `step_months` months, and at the final
    month. Each point is the projection with the horizon cut at that month, so
    the last point always matches `final`.
    """
    if step_months < 1:
        raise ValueError("step_months must be at least 1")

    months = list(range(0, params.duration_months, step_months))
    months.append(params.duration_months)

    points: List[ProjectionPoint] = []
    for month in months:
        result = project(replace(params, duration_months=month))
        points.append(ProjectionPoint(month=month, **result.model_dump()))

    final = ProjectionResult(
        principal=points[-1].principal,
        futureValue=points[-1].futureValue,
        interestComponent=points[-1].interestComponent,
    )
    return ProjectionSchedule(points=points, final=final)


def schedule_length(params: ValidatedParameters, step_months: int = 12) -> int:
    """Number of points `project_schedule` would emit."""
    if step_months < 1:
        raise ValueError("step_months must be at least 1")
    return math.ceil(params.duration_months / step_months) + 1 if params.duration_months else 1


def compute(raw: InvestmentParameters) -> ProjectionResult:
    """Validate raw input and project it. Raises InvestmentValidationError before any projection."""
    return project(validate(raw))


def compute_schedule(raw: InvestmentParameters, step_months: int = 12) -> ProjectionSchedule:
    return project_schedule(validate(raw), step_months=step_months)


__all__ = [
    "DEFAULT_PARAMETERS",
    "compound_principal",
    "contribution_future_value",
    "project",
    "project_schedule",
    "schedule_length",
    "compute",
    "compute_schedule",
]
