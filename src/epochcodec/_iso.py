"""ISO-8601 UTC text hand-off for canonical instants.

Parsing uses a small Lark grammar so fractional seconds of any length are
read exactly (``datetime`` stops at microseconds, FILETIME needs 100 ns and
NTP finer still). Formatting is plain arithmetic on the exact value.
"""

from __future__ import annotations

import math
from fractions import Fraction

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from epochcodec._calendar import compose, days_in_month, decompose
from epochcodec._constants import DEFAULT_ISO_FRACTION_DIGITS
from epochcodec._errors import (
    ERR_MSG_INVALID_TEXT,
    ERR_MSG_OUT_OF_RANGE,
    InvalidTimestampTextError,
    OutOfRangeError,
)

_GRAMMAR = r"""
    start: date _SEP time zone

    date: year "-" month "-" day
    time: hour ":" minute ":" second fraction?

    year: DIGIT DIGIT DIGIT DIGIT
    month: DIGIT DIGIT
    day: DIGIT DIGIT
    hour: DIGIT DIGIT
    minute: DIGIT DIGIT
    second: DIGIT DIGIT
    fraction: _DECIMAL_MARK DIGIT+

    zone: ZULU | OFFSET

    _SEP: /[Tt ]/
    _DECIMAL_MARK: /[.,]/
    ZULU: /[Zz]/
    OFFSET: /[+-][0-9][0-9]:?[0-9][0-9]/
    DIGIT: /[0-9]/
"""


class _TimestampTransformer(Transformer):
    """Fold the parse tree into ``(date, time, offset_minutes)``."""

    def _number(self, digits: list[Token]) -> int:
        return int("".join(digits))

    year = month = day = hour = minute = second = _number

    def fraction(self, digits: list[Token]) -> Fraction:
        text = "".join(digits)
        return Fraction(int(text), 10 ** len(text))

    def zone(self, children: list[Token]) -> int:
        token = children[0]
        if token.type == "ZULU":
            return 0
        sign = -1 if token[0] == "-" else 1
        digits = token[1:].replace(":", "")
        return sign * (int(digits[:2]) * 60 + int(digits[2:]))

    def date(self, children: list[int]) -> tuple[int, int, int]:
        return tuple(children)

    def time(self, children: list) -> tuple[int, int, int, Fraction]:
        hour, minute, second = children[:3]
        fraction = children[3] if len(children) > 3 else Fraction(0)
        return hour, minute, second, fraction

    def start(self, children: list) -> tuple:
        return tuple(children)


_parser = Lark(_GRAMMAR, parser="lalr", transformer=_TimestampTransformer())


def parse_iso(text: str) -> Fraction:
    """Parse ISO-8601 UTC text into exact seconds since the Unix epoch.

    Raises:
        InvalidTimestampTextError: If the text is malformed, names a field
            outside its range, or carries a non-zero UTC offset.
    """
    try:
        date, time, offset = _parser.parse(text.strip())
    except LarkError as exc:
        raise InvalidTimestampTextError(
            ERR_MSG_INVALID_TEXT,
            f"cannot parse {text!r}: {exc}",
            wrapped=exc,
        ) from exc

    year, month, day = date
    hour, minute, second, fraction = time

    if offset != 0:
        raise InvalidTimestampTextError(
            "only UTC timestamps are supported",
            f"{text!r} has a UTC offset of {offset} minutes",
        )
    if not 1 <= month <= 12:
        raise InvalidTimestampTextError(
            ERR_MSG_INVALID_TEXT, f"month {month} out of range in {text!r}"
        )
    if not 1 <= day <= days_in_month(year, month):
        raise InvalidTimestampTextError(
            ERR_MSG_INVALID_TEXT, f"day {day} out of range in {text!r}"
        )
    if hour > 23 or minute > 59 or second > 59:
        raise InvalidTimestampTextError(
            ERR_MSG_INVALID_TEXT, f"time of day out of range in {text!r}"
        )

    return compose(year, month, day, hour, minute, second) + fraction


def format_iso(seconds: Fraction, digits: int | None = None) -> str:
    """Format exact seconds since the Unix epoch as ISO-8601 UTC text.

    Args:
        seconds: Seconds since 1970-01-01T00:00:00Z.
        digits: Number of fractional digits to emit, truncated. ``None``
            emits up to nine digits with trailing zeros removed.

    Raises:
        OutOfRangeError: If the year falls outside 1-9999.
    """
    whole = math.floor(seconds)
    fraction = seconds - whole
    year, month, day, hour, minute, second = decompose(whole)
    if not 1 <= year <= 9999:
        raise OutOfRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"year {year} cannot be written as ISO-8601 text",
        )

    text = (
        f"{year:04d}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}"
    )
    if digits is None:
        scaled = math.floor(fraction * 10**DEFAULT_ISO_FRACTION_DIGITS)
        if scaled:
            digits_text = f"{scaled:0{DEFAULT_ISO_FRACTION_DIGITS}d}".rstrip("0")
            text += "." + digits_text
    elif digits > 0:
        scaled = math.floor(fraction * 10**digits)
        text += f".{scaled:0{digits}d}"
    return text + "Z"
