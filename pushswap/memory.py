"""Byte-buffer primitives working on bytes-like objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(buffer_len: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name}: negative length {n}")
    if n > buffer_len:
        raise IndexError(f"{name}: length {n} exceeds buffer of {buffer_len} bytes")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of value."""
    _check_length(len(buffer), n, "memset")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of count * size bytes.

    Raises OverflowError when the product would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("calloc: negative count or size")
    if count and SIZE_MAX // count < size:
        raise OverflowError("calloc: count * size overflows")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest."""
    _check_length(len(dest), n, "memcpy")
    _check_length(len(src), n, "memcpy")
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("memmove: negative offset")
    _check_length(len(buffer) - src, n, "memmove")
    _check_length(len(buffer) - dest, n, "memmove")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of value among the first n, or None."""
    _check_length(len(data), n, "memchr")
    target = value & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Difference of the first unequal bytes among the first n, or 0 if they match."""
    _check_length(len(first), n, "memcmp")
    _check_length(len(second), n, "memcmp")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0