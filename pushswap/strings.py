"""String helpers with C-library semantics over Python strings.

Positions are returned as indices (or None when nothing is found) and
functions that would fill a caller's buffer return the new string instead.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _as_char(c: int | str) -> str:
    """Turn an integer or a one-character string into a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character yields the index just past the end.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character yields the index just past the end.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; the end of a string counts as NUL.

    Returns the difference of the first pair of unequal character codes,
    or 0 when the compared parts match.
    """
    _check_non_negative(n, "n")
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a == _NUL and b == _NUL:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first occurrence of little lying wholly within big[:length].

    An empty needle is found at index 0; otherwise a zero length finds nothing.
    """
    _check_non_negative(length, "length")
    if not little:
        return 0
    if not length:
        return None
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the (possibly truncated) copy and the full length of src.
    """
    _check_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting string and the length the full result would have.
    When size does not exceed len(dst), dst is returned unchanged together
    with size + len(src).
    """
    _check_non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start; empty past the end."""
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenation of first and second."""
    return first + second


def strtrim(s: str, charset: str) -> str:
    """s with every leading and trailing character found in charset removed."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Non-empty pieces of s separated by runs of the character sep."""
    ch = _as_char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string built from f(index, character) for every character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, MutableSequence[str]], None]) -> None:
    """Call f(index, s) for every position of the mutable character sequence s.

    f may change s[index] in place.
    """
    for index in range(len(s)):
        f(index, s)