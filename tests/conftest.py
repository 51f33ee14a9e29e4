"""Shared test fixtures."""

import pytest

from epochcodec.codec import FixedPointCodec, LinearCodec, PackedCalendarCodec
from epochcodec.epochs import lookup


@pytest.fixture
def linear_codec():
    return LinearCodec()


@pytest.fixture
def packed_codec():
    return PackedCalendarCodec()


@pytest.fixture
def fixed_point_codec():
    return FixedPointCodec()


@pytest.fixture
def dos_definition():
    return lookup("dos_datetime")


@pytest.fixture
def ntp_definition():
    return lookup("ntp_timestamp")


INTEGER_LINEAR_EPOCHS = [
    "unix_seconds",
    "unix_milliseconds",
    "unix_microseconds",
    "unix_nanoseconds",
    "filetime",
    "webkit",
    "hfs_plus",
    "garmin_fit",
]

FRACTIONAL_LINEAR_EPOCHS = [
    "unix_seconds_float",
    "unix_milliseconds_float",
    "cocoa",
]

# Instants inside the range of every integer linear encoding
SAMPLE_INSTANTS = [
    "1990-01-01T00:00:00Z",
    "2000-02-29T23:59:59.999999999Z",
    "2004-09-27T03:17:07.694744Z",
    "2025-02-13T10:30:00Z",
    "2025-02-13T18:48:19.1234567Z",
    "2038-01-19T03:14:08.5Z",
]
