"""Writing characters, strings and numbers, and a small printf."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import IO, Any, Optional

_INT_MODULUS = 2**32
_INT_MIN = -(2**31)
_SIZE_MODULUS = 2**64


def _target(stream: Optional[IO[str]]) -> IO[str]:
    return sys.stdout if stream is None else stream


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"expected a character or an integer, got {type(value).__name__}")


def _integer(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def put_char(c: int | str, stream: Optional[IO[str]] = None) -> None:
    """Write one character to stream (standard output by default)."""
    _target(stream).write(_char(c))


def put_str(s: str, stream: Optional[IO[str]] = None) -> None:
    """Write s to stream (standard output by default)."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[IO[str]] = None) -> None:
    """Write s followed by a newline to stream (standard output by default)."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[IO[str]] = None) -> None:
    """Write the decimal text of n to stream (standard output by default)."""
    _target(stream).write(str(_integer(n)))


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for format %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csidpuxX":
        return ""
    value = _next_arg(values, spec)
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "id":
        wrapped = (_integer(value) - _INT_MIN) % _INT_MODULUS + _INT_MIN
        return str(wrapped)
    if spec == "p":
        address = 0 if value is None else _integer(value) % _SIZE_MODULUS
        return "(nil)" if address == 0 else f"0x{address:x}"
    unsigned = _integer(value) % _INT_MODULUS
    if spec == "u":
        return str(unsigned)
    return format(unsigned, spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %d %i %p %u %x %X and %% in fmt.

    Integers are taken as 32-bit values (signed for %d and %i, unsigned for
    %u, %x and %X). A None string prints as "(null)" and a null pointer as
    "(nil)". An unknown conversion prints nothing and takes no argument; a
    lone '%' at the end is dropped.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    values = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of fmt to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)