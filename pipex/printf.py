"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator

_INT_RANGE = 1 << 32
_INT_MIN = 1 << 31
_UINT_MASK = _INT_RANGE - 1
_POINTER_MASK = (1 << 64) - 1
_MISSING = object()


def _as_int32(value: Any) -> int:
    return ((operator.index(value) + _INT_MIN) % _INT_RANGE) - _INT_MIN


def _as_uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _as_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_as_int32(value))
    if spec == "u":
        return str(_as_uint32(value))
    if spec == "x":
        return f"{_as_uint32(value):x}"
    if spec == "X":
        return f"{_as_uint32(value):X}"
    return _as_pointer(value)


def render(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions produce nothing. A format ending in a lone ``%``
    raises ValueError; too few arguments raise TypeError.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pending = iter(args)
    chars = iter(fmt)
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        out.append(_convert(spec, pending))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)