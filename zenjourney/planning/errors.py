"""
Planning errors.

Every error the planning core raises is a caller/configuration error: the
core performs no I/O, so nothing here is transient or worth retrying.
"""


class SchedulingError(ValueError):
    """Base class for planning contract violations."""

    error_code = "ERR_SCHEDULING"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {"error": self.message, "error_code": self.error_code, "field": self.field}


class InvalidTaskField(SchedulingError):
    """A task carries a priority or effort outside its contract range."""

    error_code = "ERR_INVALID_TASK_FIELD"


class InvalidWorkdayConfig(SchedulingError):
    """
    The workday window cannot be scheduled into.

    Raised for malformed HH:MM values, a window whose start is not before its
    end, a negative or non-integer break, or an unknown timezone.
    """

    error_code = "ERR_INVALID_WORKDAY_CONFIG"
