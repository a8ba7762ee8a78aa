from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class InvestmentValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class CompoundingFrequency(str, Enum):
    YEARLY = "yearly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"

    @property
    def periods_per_year(self) -> int:
        return PERIODS_PER_YEAR[self]


class ContributionFrequency(str, Enum):
    NONE = "none"
    YEARLY = "yearly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"

    @property
    def periods_per_year(self) -> int:
        if self is ContributionFrequency.NONE:
            return 0
        return PERIODS_PER_YEAR[CompoundingFrequency(self.value)]


PERIODS_PER_YEAR: Dict[CompoundingFrequency, int] = {
    CompoundingFrequency.YEARLY: 1,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.WEEKLY: 52,
}


@dataclass(frozen=True)
class ValidatedParameters:
    initial_investment: float
    annual_interest_rate_percent: float
    compounding_frequency: CompoundingFrequency
    contribution_amount: float
    contribution_frequency: ContributionFrequency
    duration_months: int

    @property
    def annual_rate(self) -> float:
        return self.annual_interest_rate_percent / 100

    @property
    def years(self) -> float:
        return self.duration_months / 12

    @property
    def has_contributions(self) -> bool:
        return (
            self.contribution_frequency is not ContributionFrequency.NONE
            and self.contribution_amount != 0
        )


@dataclass
class ValidationResult:
    parameters: Optional[ValidatedParameters]
    errors: List[str]
