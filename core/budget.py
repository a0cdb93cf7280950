from core.models import UNREACHABLE


def bunk_budget(minimum_needed, remaining):
    """
    Remaining classes that can still be skipped once the
    minimum needed for the target is attended.
    """
    if minimum_needed == UNREACHABLE:
        return {
            "budget": None,
            "status": "CRITICAL"
        }

    budget = remaining - minimum_needed

    if budget > 0:
        status = "SAFE"
    else:
        status = "WARNING"

    return {
        "budget": budget,
        "status": status
    }
