"""String helpers: splitting, trimming, bounded comparison and search."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def trim(s: str, chars: str) -> str:
    """Remove every leading and trailing character found in ``chars``."""
    return s.strip(chars)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first differing character codes, the end
    of a string counting as code 0; returns 0 when the compared parts match.
    """
    _non_negative(n, "n")
    pairs = zip_longest(map(ord, a), map(ord, b), fillvalue=0)
    for x, y in islice(pairs, n):
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[str]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the rest of ``haystack`` from the match onwards, or None. An
    empty needle matches at the start.
    """
    _non_negative(length, "length")
    if not needle:
        return haystack
    index = haystack.find(needle, 0, length)
    return None if index < 0 else haystack[index:]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string yields an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    return s[start:start + length]