"""epochcodec - Convert platform timestamp encodings to and from UTC instants."""

from __future__ import annotations

import logging
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("epochcodec")
except PackageNotFoundError:  # running from a source tree
    __version__ = "0.0.0.dev0"

from epochcodec._errors import (
    InvalidByteLengthError,
    InvalidFieldError,
    InvalidRawValueError,
    InvalidTimestampTextError,
    OutOfRangeError,
    TimestampError,
    TimestampOverflowError,
    UnknownEpochError,
    UnsupportedOperationError,
)
from epochcodec._precision import Rounding, coerce_rounding
from epochcodec.codec import (
    CalendarFields,
    Codec,
    NTPFixedPoint,
    RawValue,
    get_codec,
)
from epochcodec.epochs import (
    CodecKind,
    Epoch,
    EpochDefinition,
    available_epochs,
    lookup,
)
from epochcodec.instant import Instant, coerce_instant

__all__ = [
    "available_epochs",
    "from_canonical",
    "from_canonical_bytes",
    "get_codec",
    "lookup",
    "to_canonical",
    "to_canonical_bytes",
    "transcode",
    "CalendarFields",
    "Codec",
    "CodecKind",
    "Epoch",
    "EpochDefinition",
    "Instant",
    "NTPFixedPoint",
    "Rounding",
    "InvalidByteLengthError",
    "InvalidFieldError",
    "InvalidRawValueError",
    "InvalidTimestampTextError",
    "OutOfRangeError",
    "TimestampError",
    "TimestampOverflowError",
    "UnknownEpochError",
    "UnsupportedOperationError",
]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

InstantLike = Instant | str | datetime


def to_canonical(epoch: str | EpochDefinition, raw: RawValue) -> Instant:
    """Convert a raw timestamp value to a canonical instant.

    Args:
        epoch: Encoding name (see :func:`available_epochs`) or definition.
        raw: The raw value: an int for integer and packed encodings, an int
            or float for fractional ones.

    Returns:
        The exact UTC instant the raw value denotes.

    Raises:
        UnknownEpochError: If the encoding is not catalogued.
        InvalidRawValueError: If the raw value has the wrong type.
        OutOfRangeError: If the raw value is outside the encoding's range.
        TimestampOverflowError: If the raw value exceeds the encoding's width.
        InvalidFieldError: If a packed calendar value holds unusable fields.
    """
    definition = lookup(epoch)
    instant = get_codec(definition.kind).to_canonical(definition, raw)
    logger.debug("%s %r -> %s s", definition.name, raw, instant.seconds)
    return instant


def from_canonical(
    epoch: str | EpochDefinition,
    instant: InstantLike,
    *,
    rounding: Rounding | None = None,
) -> RawValue:
    """Convert a canonical instant to a raw timestamp value.

    Args:
        epoch: Encoding name (see :func:`available_epochs`) or definition.
        instant: An :class:`Instant`, ISO-8601 UTC text, or a UTC ``datetime``.
        rounding: Override the encoding's default quantization. Only integer
            linear encodings and the fixed-point encoding accept an override.

    Returns:
        The raw value: an int, or a float for fractional encodings.

    Raises:
        UnknownEpochError: If the encoding is not catalogued.
        OutOfRangeError: If the instant is outside the encoding's range.
        TimestampOverflowError: If the result exceeds the storage width of a
            signed encoding, or a fractional result overflows binary64.
        UnsupportedOperationError: If ``rounding`` is unknown or the encoding
            does not accept it.
    """
    definition = lookup(epoch)
    value = coerce_instant(instant)
    if rounding is not None:
        rounding = coerce_rounding(rounding)
    raw = get_codec(definition.kind).from_canonical(definition, value, rounding=rounding)
    logger.debug("%s %s s -> %r", definition.name, value.seconds, raw)
    return raw


def to_canonical_bytes(epoch: str | EpochDefinition, data: bytes) -> Instant:
    """Convert the fixed-width byte form of a raw value to an instant.

    The byte order is the encoding's on-disk or on-wire order, e.g.
    little-endian for ``dos_datetime`` and big-endian for ``ntp_timestamp``.

    Raises:
        UnsupportedOperationError: If the encoding has no byte form.
        InvalidByteLengthError: If ``data`` has the wrong length.
    """
    definition = lookup(epoch)
    codec = get_codec(definition.kind)
    return codec.to_canonical(definition, codec.from_bytes(definition, bytes(data)))


def from_canonical_bytes(
    epoch: str | EpochDefinition,
    instant: InstantLike,
    *,
    rounding: Rounding | None = None,
) -> bytes:
    """Convert an instant to the fixed-width byte form of the raw value."""
    definition = lookup(epoch)
    codec = get_codec(definition.kind)
    # Resolve the byte order first so fractional encodings fail fast
    codec.byteorder(definition)
    raw = from_canonical(definition, instant, rounding=rounding)
    return codec.to_bytes(definition, raw)


def transcode(
    raw: RawValue,
    source: str | EpochDefinition,
    target: str | EpochDefinition,
    *,
    rounding: Rounding | None = None,
) -> RawValue:
    """Convert a raw value in one encoding directly to another encoding.

    Example:
        >>> transcode(1739442600, "unix_seconds", "filetime")
        133839162000000000
    """
    return from_canonical(target, to_canonical(source, raw), rounding=rounding)
