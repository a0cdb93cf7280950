"""
Planner configuration.

Thresholds and user-facing messages live here so the page and the
projector agree on them. A few values can be overridden from the
environment.
"""

import os


def env_flag(name, default=False):
    """Reads 1/0, true/false, yes/no or on/off from the environment."""
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ==============================
# CLASSIFICATION
# ==============================

# Percentage points above target needed for a SAFE plan
SAFE_MARGIN = float(os.environ.get("ATTENDWISE_SAFE_MARGIN", "5"))

DISPLAY_DECIMALS = 2

# Most points drawn in the term forecast chart
FORECAST_POINTS = 60

# Pre-filled target on the planner page
DEFAULT_TARGET = 75.0

# Some deployments treat the what-if field as mandatory
REQUIRE_PLANNED = env_flag("ATTENDWISE_REQUIRE_PLANNED")

LOG_LEVEL = os.environ.get("ATTENDWISE_LOG_LEVEL", "WARNING").upper()


# ==============================
# MESSAGES
# ==============================

MISSING_FIELD_MESSAGE = "Please fill all fields."
MISSING_PLANNED_MESSAGE = "Please fill all fields, including planned attendance."
INVALID_VALUES_MESSAGE = "Invalid attendance values."

PLAN_MEETS_TARGET = "With your plan to attend {planned} more classes, you will meet the target."
PLAN_FALLS_SHORT = "With this plan, you will fall short of the target. Increase planned attendance."

EXPLANATION = (
    "Final Attendance = (Attended + Planned) / (Conducted + Remaining) × 100",
    "Best Case = (Attended + Remaining) / (Conducted + Remaining) × 100",
    "Worst Case = Attended / (Conducted + Remaining) × 100",
    "Status is determined from the final attendance.",
)
