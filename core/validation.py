import logging
import math

from core import config
from core.models import ErrorKind, ProjectionInput, ValidationFailure

logger = logging.getLogger(__name__)

COUNT_FIELDS = ("attended", "conducted", "remaining")
REQUIRED_FIELDS = COUNT_FIELDS + ("target",)


class _BadNumber(Exception):
    pass


def _is_blank(value):
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _to_number(value):
    if isinstance(value, bool):
        raise _BadNumber(value)

    if isinstance(value, str):
        value = value.strip()

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise _BadNumber(value)

    if not math.isfinite(number):
        raise _BadNumber(value)

    return number


def _to_count(value):
    """
    Whole, non-negative count. Integer text is parsed exactly;
    "10.0" style input goes through float and must be whole.
    """
    if isinstance(value, bool):
        raise _BadNumber(value)

    if isinstance(value, int):
        count = value
    else:
        try:
            count = int(value.strip()) if isinstance(value, str) else None
        except ValueError:
            count = None

        if count is None:
            number = _to_number(value)
            if not number.is_integer():
                raise _BadNumber(value)
            count = int(number)

    if count < 0:
        raise _BadNumber(value)

    # Percentages divide in floating point
    _to_number(count)
    return count


def _is_finite(value):
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False


def _missing(field, require_planned):
    message = config.MISSING_PLANNED_MESSAGE if require_planned else config.MISSING_FIELD_MESSAGE
    logger.debug("Rejected input: %s is empty", field)
    return ValidationFailure(ErrorKind.MISSING_FIELD, message, field)


def _invalid(field, reason):
    logger.debug("Rejected input: %s (%s)", reason, field)
    return ValidationFailure(ErrorKind.INVALID_VALUES, config.INVALID_VALUES_MESSAGE, field)


def validate(raw, require_planned=None):
    """
    Turns raw form values into a ProjectionInput.

    `raw` maps field names to numbers or numeric strings. Returns a
    ValidationFailure instead of raising, so the page can show the
    message and wait for corrected input.
    """
    if require_planned is None:
        require_planned = config.REQUIRE_PLANNED

    for field in REQUIRED_FIELDS:
        if _is_blank(raw.get(field)):
            return _missing(field, require_planned)

    planned_raw = raw.get("planned")
    if require_planned and _is_blank(planned_raw):
        return _missing("planned", require_planned)

    counts = {}
    for field in COUNT_FIELDS:
        try:
            counts[field] = _to_count(raw[field])
        except _BadNumber:
            return _invalid(field, "not a whole number >= 0")

    try:
        target = _to_number(raw["target"])
    except _BadNumber:
        return _invalid("target", "not a number")

    planned = None
    if not _is_blank(planned_raw):
        try:
            planned = _to_count(planned_raw)
        except _BadNumber:
            return _invalid("planned", "not a whole number >= 0")

    if counts["attended"] > counts["conducted"]:
        return _invalid("attended", "attended exceeds conducted")

    if counts["conducted"] == 0:
        return _invalid("conducted", "no classes conducted")

    if planned is not None and planned > counts["remaining"]:
        return _invalid("planned", "planned exceeds remaining")

    return ProjectionInput(
        attended=counts["attended"],
        conducted=counts["conducted"],
        remaining=counts["remaining"],
        target=target,
        planned=planned,
    )


def check_invariants(data):
    """Re-checks a ProjectionInput built by hand rather than by validate()."""
    if data.attended < 0:
        return _invalid("attended", "negative count")
    if data.remaining < 0:
        return _invalid("remaining", "negative count")
    if data.attended > data.conducted:
        return _invalid("attended", "attended exceeds conducted")
    if data.conducted <= 0:
        return _invalid("conducted", "no classes conducted")
    if data.planned is not None and not 0 <= data.planned <= data.remaining:
        return _invalid("planned", "planned outside remaining classes")
    if isinstance(data.target, bool) or not _is_finite(data.target):
        return _invalid("target", "not a finite number")
    return None
