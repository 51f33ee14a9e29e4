"""The canonical instant all encodings convert to and from."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from fractions import Fraction
from typing import ClassVar

from epochcodec._calendar import compose, decompose
from epochcodec._constants import MICROSECONDS_PER_SECOND, NANOSECONDS_PER_SECOND
from epochcodec._errors import (
    ERR_MSG_INVALID_RAW_VALUE,
    ERR_MSG_OUT_OF_RANGE,
    InvalidRawValueError,
    OutOfRangeError,
    UnsupportedOperationError,
)
from epochcodec._iso import format_iso, parse_iso


@dataclass(frozen=True, order=True)
class Instant:
    """Exact signed elapsed time since 1970-01-01T00:00:00Z.

    ``seconds`` is a :class:`~fractions.Fraction`, so every tick size in the
    catalogue (down to 2**-32 s) is held without loss. Any precision lost in a
    conversion comes from the encoding's own resolution.
    """

    seconds: Fraction

    UNIX_EPOCH: ClassVar[Instant]

    def __post_init__(self) -> None:
        value = self.seconds
        if isinstance(value, bool) or not isinstance(
            value, (int, float, Fraction, Decimal)
        ):
            raise InvalidRawValueError(
                ERR_MSG_INVALID_RAW_VALUE,
                f"cannot build an instant from {type(value).__name__}",
            )
        if (isinstance(value, float) and not math.isfinite(value)) or (
            isinstance(value, Decimal) and not value.is_finite()
        ):
            raise InvalidRawValueError(
                ERR_MSG_INVALID_RAW_VALUE,
                f"cannot build an instant from {value!r}",
            )
        if not isinstance(value, Fraction):
            object.__setattr__(self, "seconds", Fraction(value))

    @classmethod
    def from_iso(cls, text: str) -> Instant:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.fraction]Z`` text."""
        return cls(parse_iso(text))

    def to_iso(self, digits: int | None = None) -> str:
        return format_iso(self.seconds, digits)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Instant:
        return cls(Fraction(nanoseconds, NANOSECONDS_PER_SECOND))

    @property
    def nanoseconds(self) -> int:
        """Whole nanoseconds since the Unix epoch, floored."""
        return math.floor(self.seconds * NANOSECONDS_PER_SECOND)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Build an instant from a UTC ``datetime``.

        Naive datetimes are read as UTC. Aware datetimes must carry a zero
        UTC offset.
        """
        offset = dt.utcoffset()
        if offset is not None and offset != timedelta(0):
            raise UnsupportedOperationError(
                "only UTC datetimes are supported",
                f"{dt.isoformat()} has UTC offset {offset}",
            )
        whole = compose(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)
        return cls(whole + Fraction(dt.microsecond, MICROSECONDS_PER_SECOND))

    def to_datetime(self) -> datetime:
        """Return an aware UTC ``datetime``; sub-microsecond digits are floored."""
        whole = math.floor(self.seconds)
        micro = math.floor((self.seconds - whole) * MICROSECONDS_PER_SECOND)
        year, month, day, hour, minute, second = decompose(whole)
        if not 1 <= year <= 9999:
            raise OutOfRangeError(
                ERR_MSG_OUT_OF_RANGE,
                f"year {year} is outside the datetime range",
            )
        return datetime(
            year, month, day, hour, minute, second, micro, tzinfo=timezone.utc
        )

    def shift(self, seconds: int | Fraction) -> Instant:
        return Instant(self.seconds + Fraction(seconds))

    def __sub__(self, other: Instant) -> Fraction:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.seconds - other.seconds

    def __str__(self) -> str:
        return self.to_iso()


Instant.UNIX_EPOCH = Instant(0)


def coerce_instant(value: Instant | str | datetime) -> Instant:
    """Accept the hand-off forms a caller may pass where an instant is expected."""
    if isinstance(value, Instant):
        return value
    if isinstance(value, str):
        return Instant.from_iso(value)
    if isinstance(value, datetime):
        return Instant.from_datetime(value)
    raise InvalidRawValueError(
        ERR_MSG_INVALID_RAW_VALUE,
        f"expected Instant, ISO-8601 str or datetime, got {type(value).__name__}",
    )
