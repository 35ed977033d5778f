"""Parsing of command-line strings: number validation and decimal conversion."""

from __future__ import annotations

import string

_DIGITS = frozenset(string.digits)


def is_number(text: str) -> bool:
    """Return True if *text* is an optionally signed decimal with at most one point.

    A lone sign or a lone point is rejected, as is the empty string.
    """
    body = text[1:] if text[:1] in ("+", "-") else text
    if body.count(".") > 1:
        return False
    if any(ch != "." and ch not in _DIGITS for ch in body):
        return False
    if not text:
        return False
    if len(text) == 1 and text in ("+", "-", "."):
        return False
    return True


def _leading_digits(text: str) -> str:
    """Return the run of decimal digits at the start of *text*."""
    end = 0
    for ch in text:
        if ch not in _DIGITS:
            break
        end += 1
    return text[:end]


def parse_decimal(text: str | None) -> float:
    """Convert the leading decimal number in *text* to a float.

    Only a leading minus sign is honoured; parsing stops at the first
    character that does not belong to the number. ``None`` gives 0.0.
    """
    if text is None:
        return 0.0
    sign = 1.0
    rest = text
    if rest.startswith("-"):
        sign = -1.0
        rest = rest[1:]

    integer_digits = _leading_digits(rest)
    result = 0.0
    for ch in integer_digits:
        result = result * 10 + int(ch)
    rest = rest[len(integer_digits):]

    fraction = 0.0
    divisor = 1.0
    if rest.startswith("."):
        for ch in _leading_digits(rest[1:]):
            fraction = fraction * 10 + int(ch)
            divisor *= 10
    result += fraction / divisor
    return result * sign


def matches_prefix(text: str | None, name: str | None, length: int) -> bool:
    """Return True if the first *length* characters of *text* and *name* agree."""
    if text is None or name is None or length == 0:
        return True
    return text[:length] == name[:length]