"""Rounding, range and overflow rules shared by every codec."""

from __future__ import annotations

import enum
import math
from fractions import Fraction
from numbers import Real

from epochcodec._errors import (
    ERR_MSG_INVALID_RAW_VALUE,
    ERR_MSG_OUT_OF_RANGE,
    ERR_MSG_OVERFLOW,
    ERR_MSG_UNSUPPORTED_OPERATION,
    InvalidRawValueError,
    OutOfRangeError,
    TimestampOverflowError,
    UnsupportedOperationError,
)


class Rounding(enum.StrEnum):
    """How an exact value is quantized to a whole number of ticks."""

    TRUNCATE = "truncate"
    """Toward zero."""

    FLOOR = "floor"
    """Toward negative infinity."""

    NEAREST = "nearest"
    """To nearest, ties to even."""


def coerce_rounding(value: object) -> Rounding:
    """Resolve a rounding name or member."""
    try:
        return Rounding(value)
    except (TypeError, ValueError) as exc:
        raise UnsupportedOperationError(
            ERR_MSG_UNSUPPORTED_OPERATION,
            f"unknown rounding mode {value!r}. Available: {', '.join(Rounding)}",
            wrapped=exc,
        ) from exc


def quantize(value: Fraction, rounding: Rounding) -> int:
    rounding = coerce_rounding(rounding)
    if rounding is Rounding.TRUNCATE:
        return math.trunc(value)
    if rounding is Rounding.FLOOR:
        return math.floor(value)
    return round(value)


def width_bounds(bits: int, signed: bool) -> tuple[int, int]:
    """Return the inclusive bounds of a ``bits``-wide integer."""
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def check_range(value: int | Fraction, lo: int, hi: int, *, epoch: str) -> None:
    if not lo <= value <= hi:
        raise OutOfRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{epoch}: raw value {value} outside [{lo}, {hi}]",
        )


def check_width(value: int | Fraction, bits: int, signed: bool, *, epoch: str) -> None:
    lo, hi = width_bounds(bits, signed)
    if not lo <= value <= hi:
        kind = "signed" if signed else "unsigned"
        raise TimestampOverflowError(
            ERR_MSG_OVERFLOW,
            f"{epoch}: {value} does not fit a {bits}-bit {kind} integer",
        )


def to_float(value: Fraction, *, epoch: str) -> float:
    """Convert an exact value to binary64, rejecting results that overflow."""
    try:
        result = float(value)
    except OverflowError as exc:
        raise TimestampOverflowError(
            ERR_MSG_OVERFLOW,
            f"{epoch}: {value} exceeds the binary64 range",
            wrapped=exc,
        ) from exc
    if not math.isfinite(result):
        raise TimestampOverflowError(
            ERR_MSG_OVERFLOW,
            f"{epoch}: {value} exceeds the binary64 range",
        )
    return result


def require_int(raw: object, *, epoch: str) -> int:
    """Reject anything that is not a plain integer (``bool`` included)."""
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidRawValueError(
            ERR_MSG_INVALID_RAW_VALUE,
            f"{epoch}: expected int, got {type(raw).__name__}",
        )
    return raw


def require_real(raw: object, *, epoch: str) -> Fraction:
    """Accept an int or a finite float and return its exact value."""
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise InvalidRawValueError(
            ERR_MSG_INVALID_RAW_VALUE,
            f"{epoch}: expected int or float, got {type(raw).__name__}",
        )
    if isinstance(raw, float) and not math.isfinite(raw):
        raise InvalidRawValueError(
            ERR_MSG_INVALID_RAW_VALUE,
            f"{epoch}: {raw!r} is not finite",
        )
    return Fraction(raw)
