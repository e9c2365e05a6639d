"""Exception hierarchy for ISO 8601 duration parsing."""


class DurationError(Exception):
    """Base exception for duration parsing errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging. The raw input only ever appears in
    the internal details.
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


class BadFormatError(DurationError):
    """Raised when the input matches neither the week nor the full grammar."""


class NoMonthError(DurationError):
    """Raised when a duration carries a non-zero month component."""


class NumericConversionError(DurationError):
    """Raised when a matched digit run cannot be converted to a number."""


# Sanitized user-facing error message constants
ERR_MSG_BAD_FORMAT = "bad format string"
ERR_MSG_NO_MONTH = "no months allowed"
ERR_MSG_NUMERIC_CONVERSION = "invalid numeric value"
