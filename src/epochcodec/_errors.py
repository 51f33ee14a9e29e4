"""Exception hierarchy for timestamp conversion."""


class TimestampError(Exception):
    """Base exception for timestamp conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
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


class UnknownEpochError(TimestampError):
    """Raised when an encoding name is not in the catalogue."""


class OutOfRangeError(TimestampError):
    """Raised when a value lies outside an encoding's representable domain."""


class TimestampOverflowError(TimestampError):
    """Raised when scale arithmetic exceeds the target numeric representation."""


class InvalidFieldError(TimestampError):
    """Raised when a packed calendar field fails its range check."""


class InvalidRawValueError(TimestampError):
    """Raised when a raw value has the wrong type or is not finite."""


class InvalidByteLengthError(TimestampError):
    """Raised when a byte sequence does not match the encoding's width."""


class InvalidTimestampTextError(TimestampError):
    """Raised when ISO-8601 text cannot be parsed as a UTC instant."""


class UnsupportedOperationError(TimestampError):
    """Raised when an operation is not available for an encoding."""


# Sanitized user-facing error message constants
ERR_MSG_UNKNOWN_EPOCH = "unknown timestamp encoding"
ERR_MSG_OUT_OF_RANGE = "value out of range for encoding"
ERR_MSG_OVERFLOW = "value overflows encoding representation"
ERR_MSG_INVALID_FIELD = "invalid calendar field"
ERR_MSG_INVALID_RAW_VALUE = "invalid raw timestamp value"
ERR_MSG_INVALID_BYTE_LENGTH = "invalid byte sequence length"
ERR_MSG_INVALID_TEXT = "invalid ISO-8601 timestamp"
ERR_MSG_UNSUPPORTED_OPERATION = "operation not supported for encoding"
