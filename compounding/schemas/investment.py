"""Data contracts for future value projections."""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from compounding.domain.investment import CompoundingFrequency, ContributionFrequency


class InvestmentParameters(BaseModel):
    """Raw form input. Only JSON types are checked here; domain rules live in the validator."""

    model_config = ConfigDict(extra="forbid")

    initialInvestment: float = Field(..., description="Lump sum invested at month 0.")
    annualInterestRatePercent: float = Field(
        ...,
        description="Nominal annual rate as a percentage (e.g. 3 for 3%).",
    )
    compoundingFrequency: Union[CompoundingFrequency, str] = Field(
        ...,
        description="How often interest is credited: yearly, monthly or weekly.",
    )
    contributionAmount: float = Field(0.0, description="Recurring deposit per contribution period.")
    contributionFrequency: Union[ContributionFrequency, str] = Field(
        ContributionFrequency.NONE,
        description="How often the deposit is made: none, yearly, monthly or weekly.",
    )
    durationMonths: float = Field(..., description="Projection horizon in whole months.")


class ProjectionResult(BaseModel):
    """Outcome of a single projection."""

    principal: float
    futureValue: float
    interestComponent: float


class ProjectionPoint(ProjectionResult):
    """Projection with the horizon cut after `month` elapsed months."""

    month: int = Field(..., ge=0)


class ProjectionSchedule(BaseModel):
    """Month-by-month points for charting plus the full-horizon result."""

    points: List[ProjectionPoint]
    final: ProjectionResult
