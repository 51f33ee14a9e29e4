"""Proleptic Gregorian calendar arithmetic.

Days are counted from 1970-01-01 (day 0). Everything here is plain integer
arithmetic so results never depend on a host calendar, timezone database or
locale.
"""

from __future__ import annotations

from epochcodec._constants import SECONDS_PER_DAY

DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days before each month (cumulative), for non-leap years; index 0 unused
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

_DAYS_PER_400_YEARS = 146097
_DAYS_PER_100_YEARS = 36524
_DAYS_PER_4_YEARS = 1461

# Ordinal of 1970-01-01 where 0001-01-01 is ordinal 1
_UNIX_EPOCH_ORDINAL = 719163


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since 1970-01-01.

    ``day`` is not checked against the month length: a day past the end of
    the month counts forward into the following month.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    days_before_month = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        days_before_month += 1
    return days_before_year + days_before_month + day - _UNIX_EPOCH_ORDINAL


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to ``(year, month, day)``."""
    # n is 0-indexed from 0001-01-01; floor divmod keeps this valid for n < 0
    n = days + _UNIX_EPOCH_ORDINAL - 1

    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, _DAYS_PER_100_YEARS)
    n4, n = divmod(n, _DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return year - 1, 12, 31

    month = 1
    while True:
        dim = days_in_month(year, month)
        if n < dim:
            return year, month, n + 1
        n -= dim
        month += 1


def compose(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> int:
    """Return whole seconds since the Unix epoch for a UTC calendar time."""
    days = days_from_civil(year, month, day)
    return days * SECONDS_PER_DAY + hour * 3600 + minute * 60 + second


def decompose(seconds: int) -> tuple[int, int, int, int, int, int]:
    """Split whole seconds since the Unix epoch into UTC calendar fields."""
    days, second_of_day = divmod(seconds, SECONDS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, rem = divmod(second_of_day, 3600)
    minute, second = divmod(rem, 60)
    return year, month, day, hour, minute, second
