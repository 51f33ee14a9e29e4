"""NTP 32.32 fixed-point timestamps.

The high 32 bits count whole seconds since 1900-01-01, the low 32 bits count
2**-32 s. Decoding is exact. Encoding truncates the fraction by default so it
can never carry into the seconds field; :attr:`Rounding.NEAREST` rounds and
renormalizes a fraction that reaches 2**32. The seconds field wraps in 2036;
which era a raw value belongs to is left to the caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from epochcodec._constants import FIXED_POINT_FRACTION_BITS, FIXED_POINT_SCALE
from epochcodec._errors import ERR_MSG_OUT_OF_RANGE, OutOfRangeError
from epochcodec._precision import Rounding, check_width, quantize, require_int
from epochcodec.codec._base import Codec
from epochcodec.epochs import CodecKind, Epoch, EpochDefinition, lookup
from epochcodec.instant import Instant

_FRACTION_MASK = FIXED_POINT_SCALE - 1
_MAX_SECONDS = FIXED_POINT_SCALE - 1


@dataclass(frozen=True)
class NTPFixedPoint:
    """The two 32-bit halves of a fixed-point timestamp."""

    seconds: int
    fraction: int

    @classmethod
    def from_raw(cls, raw: int) -> NTPFixedPoint:
        return cls(raw >> FIXED_POINT_FRACTION_BITS, raw & _FRACTION_MASK)

    @property
    def raw(self) -> int:
        return self.seconds << FIXED_POINT_FRACTION_BITS | self.fraction


class FixedPointCodec(Codec):
    """Codec for 64-bit seconds-plus-fraction timestamps."""

    kind = CodecKind.FIXED_POINT

    def split(self, raw: int, *, epoch: str = Epoch.NTP_TIMESTAMP) -> NTPFixedPoint:
        raw = require_int(raw, epoch=epoch)
        check_width(raw, 64, False, epoch=epoch)
        return NTPFixedPoint.from_raw(raw)

    def join(self, parts: NTPFixedPoint) -> int:
        check_width(parts.seconds, 32, False, epoch=Epoch.NTP_TIMESTAMP)
        check_width(parts.fraction, 32, False, epoch=Epoch.NTP_TIMESTAMP)
        return parts.raw

    def decode(self, raw: int) -> Instant:
        return self.to_canonical(lookup(Epoch.NTP_TIMESTAMP), raw)

    def encode(self, instant: Instant, rounding: Rounding = Rounding.TRUNCATE) -> int:
        return self.from_canonical(
            lookup(Epoch.NTP_TIMESTAMP), instant, rounding=rounding
        )

    def to_canonical(self, definition: EpochDefinition, raw: int) -> Instant:
        parts = self.split(raw, epoch=definition.name)
        return Instant(
            definition.reference_offset
            + parts.seconds
            + parts.fraction / definition.ticks_per_second
        )

    def from_canonical(
        self,
        definition: EpochDefinition,
        instant: Instant,
        *,
        rounding: Rounding | None = None,
    ) -> int:
        rounding = rounding or definition.rounding
        delta = instant.seconds - definition.reference_offset
        seconds = math.floor(delta)
        fraction = quantize((delta - seconds) * definition.ticks_per_second, rounding)
        if fraction == FIXED_POINT_SCALE:
            seconds += 1
            fraction = 0

        if not 0 <= seconds <= _MAX_SECONDS:
            raise OutOfRangeError(
                ERR_MSG_OUT_OF_RANGE,
                f"{definition.name}: {seconds} s since 1900 outside [0, {_MAX_SECONDS}]",
            )
        return NTPFixedPoint(seconds, fraction).raw
