"""Exception hierarchy for TimeSpan construction and arithmetic."""


class TimeSpanError(Exception):
    """Base exception for TimeSpan errors.

    Provides dual messaging: a short user-facing message and
    internal details naming the offending value for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class OutOfRangeError(TimeSpanError):
    """Raised when a millisecond total falls outside [MIN_VALUE, MAX_VALUE]."""


# Sanitized user-facing error message constants
ERR_MSG_OUT_OF_RANGE = "TimeSpan is too long"
