"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading ASCII whitespace is skipped, one optional sign is accepted and
    digits are read until the first non-digit. Text without digits gives 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)