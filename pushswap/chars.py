"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import TypeVar

LONG_MAX = 2**63 - 1
_ULL_MODULUS = 2**64
_INT_MODULUS = 2**32
_INT_MIN = -(2**31)
_WHITESPACE = " \t\r\n\v\f"

CharLike = TypeVar("CharLike", int, str)


def _code(c: int | str) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, low: int, high: int, shift: int) -> CharLike:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    return _convert(c, ord("a"), ord("z"), -32)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    return _convert(c, ord("A"), ord("Z"), 32)


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % _INT_MODULUS + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Once the magnitude exceeds LONG_MAX the result is 0 for a
    negative number and -1 for a positive one. Otherwise the value is
    truncated to a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = (value * 10 + int(ch)) % _ULL_MODULUS
        if value > LONG_MAX:
            return 0 if negative else -1
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading '-' when negative."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)