"""
Attendance projection for a single course.

Every function here is pure: counts in, numbers out. The planner page
calls analyse() with the raw form values and renders whatever comes back,
either a ProjectionResult or a ValidationFailure.
"""

import logging
import math

from core.budget import bunk_budget
from core.models import UNREACHABLE, ProjectionResult, ValidationFailure
from core.validation import check_invariants, validate
from core.what_if import what_if

logger = logging.getLogger(__name__)


# ==============================
# PERCENTAGES
# ==============================

def current_percent(attended, conducted):
    return attended / conducted * 100


def best_case_percent(attended, conducted, remaining):
    """Every remaining class attended."""
    return (attended + remaining) / (conducted + remaining) * 100


def worst_case_percent(attended, conducted, remaining):
    """No remaining class attended."""
    return attended / (conducted + remaining) * 100


# ==============================
# MINIMUM CLASSES NEEDED
# ==============================

def meets_target(attended, conducted, remaining, extra, target):
    return (attended + extra) / (conducted + remaining) * 100 >= target


def minimum_additional_classes(attended, conducted, remaining, target):
    """
    Smallest number of remaining classes that must be attended to
    finish at or above `target`, or UNREACHABLE.

    Starts from the ceiling formula and settles the estimate against
    meets_target(), so float error in the formula can never move the
    answer away from what a class-by-class scan would return.
    """
    total = conducted + remaining

    try:
        gap = target * total / 100 - attended
    except OverflowError:
        gap = math.inf if target > 0 else -math.inf

    # Targets far outside 0..100 overflow the formula
    if math.isinf(gap):
        needed = remaining if gap > 0 else 0
    else:
        needed = min(max(math.ceil(gap), 0), remaining)

    while needed > 0 and meets_target(attended, conducted, remaining, needed - 1, target):
        needed -= 1

    while needed <= remaining and not meets_target(attended, conducted, remaining, needed, target):
        needed += 1

    if needed > remaining:
        return UNREACHABLE

    return needed


# ==============================
# PROJECTION
# ==============================

def project(data):
    """
    Derives every metric for an already validated ProjectionInput.

    Raises InvalidValuesError when handed counts that validate() would
    have rejected.
    """
    failure = check_invariants(data)
    if failure is not None:
        raise failure.to_exception()

    a, c, r = data.attended, data.conducted, data.remaining

    needed = minimum_additional_classes(a, c, r, data.target)
    if needed == UNREACHABLE:
        logger.info(
            "Target %.2f%% unreachable: best case is %.2f%%",
            data.target, best_case_percent(a, c, r)
        )

    outcome = None
    if data.planned is not None:
        outcome = what_if(a, c, r, data.planned, data.target)

    return ProjectionResult(
        current_percentage=current_percent(a, c),
        best_case_percentage=best_case_percent(a, c, r),
        worst_case_percentage=worst_case_percent(a, c, r),
        minimum_additional_classes=needed,
        bunk_budget=bunk_budget(needed, r)["budget"],
        what_if=outcome,
        source=data,
    )


def analyse(raw, require_planned=None):
    result = validate(raw, require_planned=require_planned)
    if isinstance(result, ValidationFailure):
        return result
    return project(result)
