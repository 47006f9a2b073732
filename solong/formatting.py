"""A small printf-style formatter with the conversions the game messages use."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value & 0x80000000 else value


def _take(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for '%{spec}'") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        value = _take(args, spec)
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError(f"'%c' needs a single character, got {value!r}")
            return value
        return chr(value & 0xFF)
    if spec == "s":
        value = _take(args, spec)
        return "(null)" if value is None else str(value)
    if spec == "p":
        value = _take(args, spec)
        if not value:
            return "(nil)"
        return "0x" + format(value & _UINT64, "x")
    if spec in ("x", "X"):
        return format(_take(args, spec) & _UINT32, spec)
    if spec in ("d", "i"):
        return str(_to_int32(_take(args, spec)))
    if spec == "u":
        return str(_take(args, spec) & _UINT32)
    # "%%" gives a percent sign; any other letter stands for itself.
    return spec


def format_message(fmt: str, *args: Any) -> str:
    """Expand %c %s %p %x %X %d %i %u and %% in ``fmt`` with ``args``.

    Integers are taken as 32-bit values (64-bit for %p); an unknown
    conversion letter is written as it is and takes no argument. Extra
    arguments are ignored.
    """
    pending = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        parts.append(_convert(spec, pending))
    return "".join(parts)


def print_message(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted message to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_message(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)