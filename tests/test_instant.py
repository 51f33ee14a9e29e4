"""Canonical instant and ISO-8601 hand-off tests."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from fractions import Fraction

import pytest

from epochcodec._errors import (
    InvalidRawValueError,
    InvalidTimestampTextError,
    OutOfRangeError,
    UnsupportedOperationError,
)
from epochcodec.instant import Instant, coerce_instant


class TestConstruction:
    def test_int_becomes_fraction(self):
        instant = Instant(5)
        assert isinstance(instant.seconds, Fraction)
        assert instant.seconds == 5

    def test_decimal_is_exact(self):
        assert Instant(Decimal("0.1")).seconds == Fraction(1, 10)

    def test_rejects_bool(self):
        with pytest.raises(InvalidRawValueError):
            Instant(True)

    def test_rejects_nan(self):
        with pytest.raises(InvalidRawValueError):
            Instant(float("nan"))

    @pytest.mark.parametrize("value", ["NaN", "sNaN", "Infinity", "-Infinity"])
    def test_rejects_non_finite_decimal(self, value):
        with pytest.raises(InvalidRawValueError):
            Instant(Decimal(value))

    def test_ordering_and_equality(self):
        assert Instant(1) < Instant(Fraction(3, 2)) < Instant(2)
        assert Instant(1) == Instant(Fraction(2, 2))
        assert len({Instant(1), Instant(Fraction(1))}) == 1

    def test_unix_epoch(self):
        assert Instant.UNIX_EPOCH.seconds == 0
        assert str(Instant.UNIX_EPOCH) == "1970-01-01T00:00:00Z"


class TestParseIso:
    @pytest.mark.parametrize(
        "text,seconds",
        [
            ("1970-01-01T00:00:00Z", 0),
            ("2025-02-13T10:30:00Z", 1739442600),
            ("2025-02-13t10:30:00z", 1739442600),
            ("2025-02-13 10:30:00Z", 1739442600),
            ("2025-02-13T10:30:00+00:00", 1739442600),
            ("2025-02-13T10:30:00-0000", 1739442600),
            ("1969-12-31T23:59:59Z", -1),
            ("1601-01-01T00:00:00Z", -11644473600),
        ],
    )
    def test_whole_seconds(self, text, seconds):
        assert Instant.from_iso(text).seconds == seconds

    def test_fraction_is_exact(self):
        instant = Instant.from_iso("2025-02-13T18:48:19.1234567Z")
        assert instant.seconds == 1739472499 + Fraction(1234567, 10**7)

    def test_comma_decimal_mark(self):
        assert Instant.from_iso("1970-01-01T00:00:00,5Z").seconds == Fraction(1, 2)

    def test_long_fraction(self):
        instant = Instant.from_iso("1970-01-01T00:00:00.000000000001Z")
        assert instant.seconds == Fraction(1, 10**12)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2025-02-13",
            "2025-02-13T10:30Z",
            "2025-02-13T10:30:00",
            "25-02-13T10:30:00Z",
            "2025-02-13T10:30:00.Z",
            "2025/02/13T10:30:00Z",
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(InvalidTimestampTextError):
            Instant.from_iso(text)

    @pytest.mark.parametrize(
        "text",
        [
            "2025-13-01T00:00:00Z",
            "2025-00-01T00:00:00Z",
            "2025-02-29T00:00:00Z",
            "2025-04-31T00:00:00Z",
            "2025-02-13T24:00:00Z",
            "2025-02-13T10:60:00Z",
            "2016-12-31T23:59:60Z",
        ],
    )
    def test_field_out_of_range(self, text):
        with pytest.raises(InvalidTimestampTextError):
            Instant.from_iso(text)

    def test_leap_day(self):
        assert Instant.from_iso("2024-02-29T00:00:00Z").to_iso() == "2024-02-29T00:00:00Z"

    def test_non_utc_offset(self):
        with pytest.raises(InvalidTimestampTextError, match="only UTC"):
            Instant.from_iso("2025-02-13T10:30:00+01:00")

    def test_parse_error_is_wrapped(self):
        with pytest.raises(InvalidTimestampTextError) as exc_info:
            Instant.from_iso("garbage")
        assert exc_info.value.wrapped is not None


class TestFormatIso:
    def test_no_fraction(self):
        assert Instant(1739442600).to_iso() == "2025-02-13T10:30:00Z"

    def test_trailing_zeros_stripped(self):
        assert Instant(Fraction(1, 2)).to_iso() == "1970-01-01T00:00:00.5Z"

    def test_nine_digit_truncation(self):
        assert Instant(Fraction(1, 3)).to_iso() == "1970-01-01T00:00:00.333333333Z"

    def test_explicit_digits(self):
        instant = Instant(Fraction(2, 3))
        assert instant.to_iso(digits=3) == "1970-01-01T00:00:00.666Z"
        assert instant.to_iso(digits=0) == "1970-01-01T00:00:00Z"

    def test_negative_fraction(self):
        assert Instant(Fraction(-1, 4)).to_iso() == "1969-12-31T23:59:59.75Z"

    def test_year_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            Instant(-62135596801).to_iso()

    def test_round_trip_100ns(self):
        text = "2025-02-13T18:48:19.1234567Z"
        assert Instant.from_iso(text).to_iso() == text


class TestDatetime:
    def test_from_aware(self):
        dt = datetime(2025, 2, 13, 10, 30, tzinfo=timezone.utc)
        assert Instant.from_datetime(dt).seconds == 1739442600

    def test_from_naive_is_utc(self):
        dt = datetime(2025, 2, 13, 10, 30, 0, 250000)
        assert Instant.from_datetime(dt).seconds == Fraction(6957770401, 4)

    def test_from_non_utc_rejected(self):
        dt = datetime(2025, 2, 13, 10, 30, tzinfo=timezone(timedelta(hours=2)))
        with pytest.raises(UnsupportedOperationError):
            Instant.from_datetime(dt)

    def test_to_datetime_floors_microseconds(self):
        instant = Instant.from_iso("2025-02-13T18:48:19.1234567Z")
        assert instant.to_datetime() == datetime(
            2025, 2, 13, 18, 48, 19, 123456, tzinfo=timezone.utc
        )

    def test_to_datetime_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            Instant(10**12).to_datetime()


class TestArithmetic:
    def test_nanoseconds(self):
        instant = Instant.from_nanoseconds(1739442600123456789)
        assert instant.nanoseconds == 1739442600123456789
        assert instant.to_iso() == "2025-02-13T10:30:00.123456789Z"

    def test_nanoseconds_floor(self):
        assert Instant(Fraction(-1, 3 * 10**9)).nanoseconds == -1

    def test_difference(self):
        a = Instant.from_iso("2025-02-13T10:30:00Z")
        b = Instant.from_iso("2025-02-13T10:30:01.5Z")
        assert b - a == Fraction(3, 2)

    def test_shift(self):
        assert Instant(0).shift(Fraction(1, 10)).seconds == Fraction(1, 10)


class TestCoerce:
    def test_passthrough(self):
        instant = Instant(1)
        assert coerce_instant(instant) is instant

    def test_text(self):
        assert coerce_instant("1970-01-01T00:00:01Z") == Instant(1)

    def test_datetime(self):
        dt = datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
        assert coerce_instant(dt) == Instant(1)

    def test_rejects_number(self):
        with pytest.raises(InvalidRawValueError):
            coerce_instant(1)
