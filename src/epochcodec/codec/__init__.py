"""Codec system for timestamp conversion."""

from epochcodec.codec._base import Codec, RawValue
from epochcodec.codec.fixed_point import FixedPointCodec, NTPFixedPoint
from epochcodec.codec.linear import LinearCodec
from epochcodec.codec.packed_calendar import CalendarFields, PackedCalendarCodec
from epochcodec.epochs import CodecKind

__all__ = [
    "CalendarFields",
    "Codec",
    "FixedPointCodec",
    "LinearCodec",
    "NTPFixedPoint",
    "PackedCalendarCodec",
    "RawValue",
    "get_codec",
]

# Codecs are stateless, so one shared instance per kind
_REGISTRY: dict[str, Codec] = {
    CodecKind.LINEAR: LinearCodec(),
    CodecKind.PACKED_CALENDAR: PackedCalendarCodec(),
    CodecKind.FIXED_POINT: FixedPointCodec(),
}


def get_codec(kind: str) -> Codec:
    """Get the codec instance for a codec kind.

    Args:
        kind: Codec kind (``"linear"``, ``"packed_calendar"``, ``"fixed_point"``).

    Returns:
        The shared Codec instance.

    Raises:
        ValueError: If the kind is unknown.
    """
    codec = _REGISTRY.get(kind)
    if codec is None:
        raise ValueError(
            f"unknown codec kind: {kind!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return codec
