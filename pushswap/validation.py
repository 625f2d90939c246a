"""Checking and parsing the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

from .chars import atoi, is_digit

INT_MAX = 2**31 - 1
_WHITESPACE = " \t\r\n\v\f"
_SIGNS = ("-", "+")


class InputError(ValueError):
    """The arguments are not a list of distinct integers that fit in an int."""


def fits_int(text: str) -> bool:
    """True unless the magnitude of the leading number in text exceeds INT_MAX.

    Leading whitespace and one sign are skipped; reading stops at the first
    non-digit. The magnitude alone is checked, so "-2147483648" does not fit.
    """
    rest = text.lstrip(_WHITESPACE)
    if rest[:1] in _SIGNS:
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + int(ch)
        if value > INT_MAX:
            return False
    return True


def validate_arguments(args: Sequence[str]) -> None:
    """Raise InputError unless every argument is a distinct in-range integer.

    An argument is an optional sign followed by at least one ASCII digit and
    nothing else.
    """
    for arg in args:
        digits = arg[1:] if arg[:1] in _SIGNS else arg
        if not digits or not all(is_digit(ch) for ch in digits):
            raise InputError(f"not an integer: {arg!r}")
        if not fits_int(arg):
            raise InputError(f"out of range: {arg!r}")
    seen: set[int] = set()
    for arg in args:
        value = atoi(arg)
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate args and return their integer values in order."""
    validate_arguments(args)
    return [atoi(arg) for arg in args]


def is_sorted(values: Iterable[int]) -> bool:
    """True when no value is greater than the one after it."""
    return all(first <= second for first, second in pairwise(values))