"""Strict integer parsing for rule clauses and positional placeholders.

Python's int() accepts surrounding whitespace, digit-group underscores and
non-ASCII digits. Template syntax does not: a rule bound or a positional
index is an optional sign followed by ASCII digits, and nothing else.

Python 3.13+. Zero external dependencies.
"""

import re

from tarjama.constants import I64_MAX, I64_MIN, USIZE_MAX

__all__ = ["parse_i64", "parse_usize"]

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse(text: str, pattern: re.Pattern[str], low: int, high: int) -> int:
    if not text:
        msg = "cannot parse integer from empty string"
        raise ValueError(msg)
    if pattern.fullmatch(text) is None:
        msg = "invalid digit found in string"
        raise ValueError(msg)
    value = int(text)
    if value > high:
        msg = "number too large to fit in target type"
        raise ValueError(msg)
    if value < low:
        msg = "number too small to fit in target type"
        raise ValueError(msg)
    return value


def parse_i64(text: str) -> int:
    """Parse a signed 64-bit decimal integer.

    Args:
        text: Candidate text, not trimmed

    Returns:
        Parsed integer

    Raises:
        ValueError: With a diagnostic naming why the text is not an integer

    Example:
        >>> parse_i64("-12")
        -12
        >>> parse_i64("two")
        Traceback (most recent call last):
        ...
        ValueError: invalid digit found in string
    """
    return _parse(text, _SIGNED, I64_MIN, I64_MAX)


def parse_usize(text: str) -> int:
    """Parse an unsigned 64-bit decimal integer.

    Raises:
        ValueError: With a diagnostic naming why the text is not an integer
    """
    return _parse(text, _UNSIGNED, 0, USIZE_MAX)
