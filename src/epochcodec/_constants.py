"""Reference-epoch offsets and unit constants.

Offsets are whole seconds from 1970-01-01T00:00:00Z to each reference
instant, leap-second-naive.
"""

SECONDS_PER_DAY = 86400

UNIX_EPOCH_OFFSET = 0
NTP_EPOCH_OFFSET = -2208988800
"""1900-01-01T00:00:00Z."""

WINDOWS_EPOCH_OFFSET = -11644473600
"""1601-01-01T00:00:00Z, shared by FILETIME and WebKit."""

HFS_EPOCH_OFFSET = -2082844800
"""1904-01-01T00:00:00Z."""

DOS_EPOCH_OFFSET = 315532800
"""1980-01-01T00:00:00Z."""

FIT_EPOCH_OFFSET = 631065600
"""1989-12-31T00:00:00Z."""

COCOA_EPOCH_OFFSET = 978307200
"""2001-01-01T00:00:00Z."""

MILLISECONDS_PER_SECOND = 1000
MICROSECONDS_PER_SECOND = 1_000_000
NANOSECONDS_PER_SECOND = 1_000_000_000
FILETIME_TICKS_PER_SECOND = 10_000_000

FIXED_POINT_FRACTION_BITS = 32
FIXED_POINT_SCALE = 1 << FIXED_POINT_FRACTION_BITS

DOS_MIN_YEAR = 1980
DOS_MAX_YEAR = 2107

DEFAULT_ISO_FRACTION_DIGITS = 9
"""Maximum fractional-second digits emitted by ISO formatting."""
