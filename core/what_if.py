from core import config
from core.models import PlanStatus, WhatIfOutcome


def final_percent(attended, conducted, remaining, planned):
    """
    Percentage at the end of term if exactly `planned`
    of the remaining classes are attended
    """
    return (attended + planned) / (conducted + remaining) * 100


def classify(final, target):
    # Thresholds compare unrounded percentages
    if final >= target + config.SAFE_MARGIN:
        return PlanStatus.SAFE
    if final >= target:
        return PlanStatus.RISK
    return PlanStatus.DANGER


def what_if(attended, conducted, remaining, planned, target):
    final = final_percent(attended, conducted, remaining, planned)
    status = classify(final, target)

    if status is PlanStatus.DANGER:
        message = config.PLAN_FALLS_SHORT
    else:
        message = config.PLAN_MEETS_TARGET.format(planned=planned)

    return WhatIfOutcome(
        final_percentage=final,
        status=status,
        message=message
    )
