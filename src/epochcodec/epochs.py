"""Static catalogue of supported timestamp encodings."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from fractions import Fraction

from epochcodec._constants import (
    COCOA_EPOCH_OFFSET,
    DOS_EPOCH_OFFSET,
    FILETIME_TICKS_PER_SECOND,
    FIT_EPOCH_OFFSET,
    FIXED_POINT_SCALE,
    HFS_EPOCH_OFFSET,
    MICROSECONDS_PER_SECOND,
    MILLISECONDS_PER_SECOND,
    NANOSECONDS_PER_SECOND,
    NTP_EPOCH_OFFSET,
    UNIX_EPOCH_OFFSET,
    WINDOWS_EPOCH_OFFSET,
)
from epochcodec._errors import ERR_MSG_UNKNOWN_EPOCH, UnknownEpochError
from epochcodec._precision import Rounding, width_bounds

logger = logging.getLogger(__name__)


class CodecKind(enum.StrEnum):
    LINEAR = "linear"
    PACKED_CALENDAR = "packed_calendar"
    FIXED_POINT = "fixed_point"


class Epoch(enum.StrEnum):
    UNIX_SECONDS = "unix_seconds"
    UNIX_MILLISECONDS = "unix_milliseconds"
    UNIX_MICROSECONDS = "unix_microseconds"
    UNIX_NANOSECONDS = "unix_nanoseconds"
    UNIX_SECONDS_FLOAT = "unix_seconds_float"
    UNIX_MILLISECONDS_FLOAT = "unix_milliseconds_float"
    FILETIME = "filetime"
    WEBKIT = "webkit"
    COCOA = "cocoa"
    HFS_PLUS = "hfs_plus"
    GARMIN_FIT = "garmin_fit"
    DOS_DATETIME = "dos_datetime"
    NTP_TIMESTAMP = "ntp_timestamp"


@dataclass(frozen=True)
class EpochDefinition:
    """Immutable description of one timestamp encoding.

    ``reference_offset`` is whole seconds from the Unix epoch to the
    encoding's reference instant. ``ticks_per_second`` is exact; the 2-second
    packed calendar encoding uses 1/2. ``min_raw``/``max_raw`` narrow the
    range implied by ``bits``/``signed`` where the format does.
    """

    name: str
    kind: CodecKind
    reference_offset: int
    ticks_per_second: Fraction
    bits: int = 64
    signed: bool = True
    fractional: bool = False
    min_raw: int | None = None
    max_raw: int | None = None
    rounding: Rounding = Rounding.TRUNCATE
    byteorder: str | None = None
    description: str = ""

    @property
    def resolution(self) -> Fraction:
        """Seconds per tick."""
        return 1 / self.ticks_per_second

    @property
    def raw_range(self) -> tuple[int, int] | None:
        """Inclusive raw bounds, or ``None`` for fractional encodings."""
        if self.fractional:
            return None
        lo, hi = width_bounds(self.bits, self.signed)
        if self.min_raw is not None:
            lo = self.min_raw
        if self.max_raw is not None:
            hi = self.max_raw
        return lo, hi

    @property
    def byte_length(self) -> int:
        return self.bits // 8


def _unix(name: Epoch, ticks: int, description: str) -> EpochDefinition:
    return EpochDefinition(
        name=name,
        kind=CodecKind.LINEAR,
        reference_offset=UNIX_EPOCH_OFFSET,
        ticks_per_second=Fraction(ticks),
        byteorder="little",
        description=description,
    )


_CATALOGUE: tuple[EpochDefinition, ...] = (
    _unix(Epoch.UNIX_SECONDS, 1, "Seconds since 1970-01-01"),
    _unix(Epoch.UNIX_MILLISECONDS, MILLISECONDS_PER_SECOND, "Milliseconds since 1970-01-01"),
    _unix(Epoch.UNIX_MICROSECONDS, MICROSECONDS_PER_SECOND, "Microseconds since 1970-01-01"),
    _unix(Epoch.UNIX_NANOSECONDS, NANOSECONDS_PER_SECOND, "Nanoseconds since 1970-01-01"),
    EpochDefinition(
        name=Epoch.UNIX_SECONDS_FLOAT,
        kind=CodecKind.LINEAR,
        reference_offset=UNIX_EPOCH_OFFSET,
        ticks_per_second=Fraction(1),
        fractional=True,
        description="Fractional seconds since 1970-01-01",
    ),
    EpochDefinition(
        name=Epoch.UNIX_MILLISECONDS_FLOAT,
        kind=CodecKind.LINEAR,
        reference_offset=UNIX_EPOCH_OFFSET,
        ticks_per_second=Fraction(MILLISECONDS_PER_SECOND),
        fractional=True,
        description="Fractional milliseconds since 1970-01-01",
    ),
    EpochDefinition(
        name=Epoch.FILETIME,
        kind=CodecKind.LINEAR,
        reference_offset=WINDOWS_EPOCH_OFFSET,
        ticks_per_second=Fraction(FILETIME_TICKS_PER_SECOND),
        signed=False,
        # FileTimeToSystemTime rejects values with the high bit set
        max_raw=(1 << 63) - 1,
        byteorder="little",
        description="100-nanosecond intervals since 1601-01-01 (Windows FILETIME)",
    ),
    EpochDefinition(
        name=Epoch.WEBKIT,
        kind=CodecKind.LINEAR,
        reference_offset=WINDOWS_EPOCH_OFFSET,
        ticks_per_second=Fraction(MICROSECONDS_PER_SECOND),
        byteorder="little",
        description="Microseconds since 1601-01-01 (Chromium/WebKit)",
    ),
    EpochDefinition(
        name=Epoch.COCOA,
        kind=CodecKind.LINEAR,
        reference_offset=COCOA_EPOCH_OFFSET,
        ticks_per_second=Fraction(1),
        fractional=True,
        description="Fractional seconds since 2001-01-01 (Cocoa/Core Data)",
    ),
    EpochDefinition(
        name=Epoch.HFS_PLUS,
        kind=CodecKind.LINEAR,
        reference_offset=HFS_EPOCH_OFFSET,
        ticks_per_second=Fraction(1),
        bits=32,
        signed=False,
        byteorder="big",
        description="Seconds since 1904-01-01 (HFS+ / classic Mac OS)",
    ),
    EpochDefinition(
        name=Epoch.GARMIN_FIT,
        kind=CodecKind.LINEAR,
        reference_offset=FIT_EPOCH_OFFSET,
        ticks_per_second=Fraction(1),
        bits=32,
        signed=False,
        byteorder="little",
        description="Seconds since 1989-12-31 (Garmin FIT)",
    ),
    EpochDefinition(
        name=Epoch.DOS_DATETIME,
        kind=CodecKind.PACKED_CALENDAR,
        reference_offset=DOS_EPOCH_OFFSET,
        ticks_per_second=Fraction(1, 2),
        bits=32,
        signed=False,
        rounding=Rounding.FLOOR,
        byteorder="little",
        description="Bit-packed calendar date and time, 2-second resolution (DOS/ZIP/FAT)",
    ),
    EpochDefinition(
        name=Epoch.NTP_TIMESTAMP,
        kind=CodecKind.FIXED_POINT,
        reference_offset=NTP_EPOCH_OFFSET,
        ticks_per_second=Fraction(FIXED_POINT_SCALE),
        signed=False,
        byteorder="big",
        description="32.32 fixed-point seconds since 1900-01-01 (NTP)",
    ),
)

_REGISTRY: dict[str, EpochDefinition] = {d.name: d for d in _CATALOGUE}


def lookup(name: str | EpochDefinition) -> EpochDefinition:
    """Resolve an encoding name to its definition.

    Args:
        name: Catalogue name (e.g. ``"filetime"``), an :class:`Epoch` member,
            or an :class:`EpochDefinition`, which is returned unchanged.

    Raises:
        UnknownEpochError: If the name is not catalogued.
    """
    if isinstance(name, EpochDefinition):
        return name
    definition = _REGISTRY.get(name) if isinstance(name, str) else None
    if definition is None:
        logger.debug("unknown encoding requested: %r", name)
        raise UnknownEpochError(
            ERR_MSG_UNKNOWN_EPOCH,
            f"unknown encoding: {name!r}. Available: {', '.join(sorted(_REGISTRY))}",
        )
    return definition


def available_epochs() -> list[str]:
    return sorted(_REGISTRY)
