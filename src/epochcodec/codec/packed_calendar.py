"""DOS-style packed calendar date and time.

Bit layout of the 32-bit value (date in the high half, time in the low half)::

    31..25  year - 1980   (0-127)
    24..21  month         (1-12)
    20..16  day           (1-31)
    15..11  hour          (0-23)
    10..5   minute        (0-59)
     4..0   second / 2    (0-29)

On disk the value is little-endian. Encoding drops the low bit of the second,
so odd seconds come back one second earlier. Decoding accepts every 32-bit
pattern, calendar-impossible ones included.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from epochcodec._calendar import compose, decompose
from epochcodec._constants import DOS_MAX_YEAR, DOS_MIN_YEAR
from epochcodec._errors import (
    ERR_MSG_INVALID_FIELD,
    ERR_MSG_OUT_OF_RANGE,
    InvalidFieldError,
    OutOfRangeError,
)
from epochcodec._precision import Rounding, check_width, require_int
from epochcodec.codec._base import Codec
from epochcodec.epochs import CodecKind, Epoch, EpochDefinition, lookup
from epochcodec.instant import Instant

_SECOND_SHIFT, _SECOND_MASK = 0, 0x1F
_MINUTE_SHIFT, _MINUTE_MASK = 5, 0x3F
_HOUR_SHIFT, _HOUR_MASK = 11, 0x1F
_DAY_SHIFT, _DAY_MASK = 16, 0x1F
_MONTH_SHIFT, _MONTH_MASK = 21, 0x0F
_YEAR_SHIFT, _YEAR_MASK = 25, 0x7F


@dataclass(frozen=True)
class CalendarFields:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0


# (field, low, high) limits enforced by encode
_ENCODE_LIMITS = (
    ("year", DOS_MIN_YEAR, DOS_MAX_YEAR),
    ("month", 1, 12),
    ("day", 1, 31),
    ("hour", 0, 23),
    ("minute", 0, 59),
    ("second", 0, 59),
)

# A decoded second field can reach 62; only even seconds up to 58 are usable
_DECODED_LIMITS = _ENCODE_LIMITS[1:5] + (("second", 0, 58),)


def _validate(fields: CalendarFields, limits: tuple, *, epoch: str) -> None:
    for name, low, high in limits:
        value = getattr(fields, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidFieldError(
                ERR_MSG_INVALID_FIELD,
                f"{epoch}: {name} must be int, got {type(value).__name__}",
            )
        if not low <= value <= high:
            raise InvalidFieldError(
                ERR_MSG_INVALID_FIELD,
                f"{epoch}: {name} {value} outside [{low}, {high}]",
            )


class PackedCalendarCodec(Codec):
    """Codec for the 32-bit bit-packed calendar encoding."""

    kind = CodecKind.PACKED_CALENDAR

    # --- Field packing ---

    def decode(self, raw: int, *, epoch: str = Epoch.DOS_DATETIME) -> CalendarFields:
        raw = require_int(raw, epoch=epoch)
        check_width(raw, 32, False, epoch=epoch)
        return CalendarFields(
            year=DOS_MIN_YEAR + ((raw >> _YEAR_SHIFT) & _YEAR_MASK),
            month=(raw >> _MONTH_SHIFT) & _MONTH_MASK,
            day=(raw >> _DAY_SHIFT) & _DAY_MASK,
            hour=(raw >> _HOUR_SHIFT) & _HOUR_MASK,
            minute=(raw >> _MINUTE_SHIFT) & _MINUTE_MASK,
            second=((raw >> _SECOND_SHIFT) & _SECOND_MASK) << 1,
        )

    def encode(self, fields: CalendarFields, *, epoch: str = Epoch.DOS_DATETIME) -> int:
        """Pack calendar fields; an odd second is floored to the even one below.

        Raises:
            InvalidFieldError: If any field is outside its range.
        """
        _validate(fields, _ENCODE_LIMITS, epoch=epoch)
        return (
            (fields.year - DOS_MIN_YEAR) << _YEAR_SHIFT
            | fields.month << _MONTH_SHIFT
            | fields.day << _DAY_SHIFT
            | fields.hour << _HOUR_SHIFT
            | fields.minute << _MINUTE_SHIFT
            | (fields.second >> 1) << _SECOND_SHIFT
        )

    def decode_bytes(self, data: bytes) -> CalendarFields:
        """Decode the 4-byte little-endian on-disk form."""
        return self.decode(self.from_bytes(lookup(Epoch.DOS_DATETIME), data))

    def encode_bytes(self, fields: CalendarFields) -> bytes:
        return self.to_bytes(lookup(Epoch.DOS_DATETIME), self.encode(fields))

    # --- Codec interface ---

    def to_canonical(self, definition: EpochDefinition, raw: int) -> Instant:
        fields = self.decode(raw, epoch=definition.name)
        _validate(fields, _DECODED_LIMITS, epoch=definition.name)
        # Days past the end of a short month roll into the next month
        return Instant(
            compose(
                fields.year,
                fields.month,
                fields.day,
                fields.hour,
                fields.minute,
                fields.second,
            )
        )

    def from_canonical(
        self,
        definition: EpochDefinition,
        instant: Instant,
        *,
        rounding: Rounding | None = None,
    ) -> int:
        self._reject_rounding(definition, rounding)
        year, month, day, hour, minute, second = decompose(math.floor(instant.seconds))
        if not DOS_MIN_YEAR <= year <= DOS_MAX_YEAR:
            raise OutOfRangeError(
                ERR_MSG_OUT_OF_RANGE,
                f"{definition.name}: year {year} outside [{DOS_MIN_YEAR}, {DOS_MAX_YEAR}]",
            )
        return self.encode(
            CalendarFields(year, month, day, hour, minute, second), epoch=definition.name
        )
