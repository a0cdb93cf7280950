class ProjectionError(Exception):
    """Base exception for attendance input that cannot be projected."""


class MissingFieldError(ProjectionError):
    """Raised when a required input was left empty."""


class InvalidValuesError(ProjectionError):
    """Raised when the counts contradict each other."""
