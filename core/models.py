from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from core.config import DISPLAY_DECIMALS
from core.exceptions import InvalidValuesError, MissingFieldError

# Stands in for a class count when the target cannot be reached this term
UNREACHABLE = "unreachable"


class PlanStatus(str, Enum):
    SAFE = "SAFE"
    RISK = "RISK"
    DANGER = "DANGER"


class ErrorKind(str, Enum):
    MISSING_FIELD = "MissingField"
    INVALID_VALUES = "InvalidValues"


@dataclass(frozen=True)
class ProjectionInput:
    """Normalized counts for one course, as produced by validation."""

    attended: int
    conducted: int
    remaining: int
    target: float
    planned: Optional[int] = None

    @property
    def term_total(self) -> int:
        return self.conducted + self.remaining


@dataclass(frozen=True)
class ValidationFailure:
    """Rejected input, returned to the caller instead of a result."""

    kind: ErrorKind
    message: str
    field: Optional[str] = None

    def to_exception(self):
        if self.kind is ErrorKind.MISSING_FIELD:
            return MissingFieldError(self.message)
        return InvalidValuesError(self.message)


@dataclass(frozen=True)
class WhatIfOutcome:
    final_percentage: float
    status: PlanStatus
    message: str

    @property
    def meets_target(self) -> bool:
        return self.status is not PlanStatus.DANGER


@dataclass(frozen=True)
class ProjectionResult:
    """
    Everything derived from one ProjectionInput.

    Percentages keep full precision; use display() for the rounded
    values shown to the student.
    """

    current_percentage: float
    best_case_percentage: float
    worst_case_percentage: float
    minimum_additional_classes: Union[int, str]
    bunk_budget: Optional[int]
    what_if: Optional[WhatIfOutcome] = None
    source: Optional[ProjectionInput] = None

    @property
    def is_reachable(self) -> bool:
        return self.minimum_additional_classes != UNREACHABLE

    def display(self) -> dict:
        view = {
            "current": round(self.current_percentage, DISPLAY_DECIMALS),
            "best_case": round(self.best_case_percentage, DISPLAY_DECIMALS),
            "worst_case": round(self.worst_case_percentage, DISPLAY_DECIMALS),
            "minimum_additional_classes": self.minimum_additional_classes,
            "bunk_budget": self.bunk_budget,
        }

        if self.what_if is not None:
            view["final"] = round(self.what_if.final_percentage, DISPLAY_DECIMALS)
            view["status"] = self.what_if.status.value
            view["message"] = self.what_if.message

        return view
