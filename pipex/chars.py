"""Character classification, case mapping and integer/string conversion."""

from __future__ import annotations

import operator
import re
from typing import Union

CharLike = Union[str, int]

_ATOI_PATTERN = re.compile(r"[\t\n\x0b\x0c\r ]*([+-]?)([0-9]*)")


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (string or integer) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace (tab to carriage return, and space) is skipped, one
    optional sign is honoured, and digits are read until the first
    non-digit. A string with no digits yields 0.
    """
    match = _ATOI_PATTERN.match(s)
    sign, digits = match.group(1), match.group(2)
    number = int(digits) if digits else 0
    return -number if sign == "-" else number


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(operator.index(n))


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + 32)
    return c