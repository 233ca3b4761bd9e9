"""Tag utility helpers.

Where: src/trackmeta/features/metadata/usecases/extraction/_tag_utils.py
What: Provide pure helper routines for parsing numeric tag text.
Why: Give every reader the same lenient rules so bad values never abort a read.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

__all__ = [
    "U32_MAX",
    "first_or_none",
    "parse_leading_number",
    "parse_signed",
    "parse_unsigned",
    "parse_year_prefix",
]

U32_MAX: Final[int] = 2**32 - 1
_I32_MIN: Final[int] = -(2**31)
_I32_MAX: Final[int] = 2**31 - 1

_UNSIGNED_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")
_SIGNED_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_LEADING_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[0-9]+")
_YEAR_PREFIX_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([0-9]{4})(?:$|-)")


def parse_unsigned(text: str | None) -> int | None:
    """Parse a whole string as an unsigned 32-bit integer.

    Returns ``None`` for anything else, including ``"3/12"`` and values
    outside the 32-bit range.
    """
    if text is None or not _UNSIGNED_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= U32_MAX else None


def parse_signed(text: str | None) -> int | None:
    """Parse a whole string as a signed 32-bit integer, or return ``None``."""
    if text is None or not _SIGNED_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else None


def parse_leading_number(text: str | None) -> int | None:
    """Parse the leading run of digits of an ``x/y`` or ``x`` value.

    Anything after the digits, such as a ``/total`` denominator, is ignored.
    """
    if text is None:
        return None
    match = _LEADING_DIGITS_PATTERN.match(text)
    if match is None:
        return None
    value = int(match.group(0))
    return value if value <= U32_MAX else None


def parse_year_prefix(text: str | None) -> int | None:
    """Parse the year of an ID3 timestamp such as ``2016`` or ``2016-04-01``."""
    if text is None:
        return None
    match = _YEAR_PREFIX_PATTERN.match(text.strip())
    return int(match.group(1)) if match else None


def first_or_none(values: Iterable[str] | None) -> str | None:
    """Return the first value of an iterable, or ``None`` when it is empty."""
    if values is None:
        return None
    for value in values:
        return value
    return None
