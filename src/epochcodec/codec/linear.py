"""Affine codec: raw = (instant - reference) * ticks_per_second.

Integer encodings convert to the canonical instant exactly. Converting back
quantizes with the definition's rounding (truncation toward zero unless a
caller overrides it), so the error is strictly less than one tick. Fractional
encodings return the nearest binary64 value and lose at most half a unit in
the last place of the result.
"""

from __future__ import annotations

from epochcodec._precision import (
    Rounding,
    check_range,
    check_width,
    quantize,
    require_int,
    require_real,
    to_float,
)
from epochcodec.codec._base import Codec, RawValue
from epochcodec.epochs import CodecKind, EpochDefinition
from epochcodec.instant import Instant


class LinearCodec(Codec):
    """Unix variants, FILETIME, WebKit, Cocoa, HFS+ and FIT timestamps."""

    kind = CodecKind.LINEAR

    def to_canonical(self, definition: EpochDefinition, raw: RawValue) -> Instant:
        if definition.fractional:
            ticks = require_real(raw, epoch=definition.name)
        else:
            ticks = require_int(raw, epoch=definition.name)
            check_width(ticks, definition.bits, definition.signed, epoch=definition.name)
            check_range(ticks, *definition.raw_range, epoch=definition.name)
        return Instant(definition.reference_offset + ticks / definition.ticks_per_second)

    def from_canonical(
        self,
        definition: EpochDefinition,
        instant: Instant,
        *,
        rounding: Rounding | None = None,
    ) -> RawValue:
        ticks = (instant.seconds - definition.reference_offset) * definition.ticks_per_second
        if definition.fractional:
            self._reject_rounding(definition, rounding)
            return to_float(ticks, epoch=definition.name)

        # Bounds apply to the exact tick count, before quantization
        if definition.signed:
            check_width(ticks, definition.bits, True, epoch=definition.name)
        check_range(ticks, *definition.raw_range, epoch=definition.name)
        return quantize(ticks, rounding or definition.rounding)
