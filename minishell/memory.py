"""Byte-buffer helpers: search, compare, copy, move, fill and allocate."""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
Buffer = Union[bytearray, memoryview]


def _check_length(name: str, buffer: BytesLike, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: negative length {n}")
    if n > len(buffer):
        raise ValueError(f"{name}: {n} bytes exceed a buffer of {len(buffer)}")


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first ``n`` bytes, or None."""
    _check_length("memchr", data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(left: BytesLike, right: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length("memcmp", left, n)
    _check_length("memcmp", right, n)
    return next(
        (a - b for a, b in zip(bytes(left[:n]), bytes(right[:n])) if a != b),
        0,
    )


def memcpy(dest: Buffer, src: BytesLike, n: int) -> Buffer:
    """Copy ``n`` bytes of ``src`` into the start of ``dest`` and return ``dest``."""
    _check_length("memcpy", dest, n)
    _check_length("memcpy", src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled as if through a temporary copy.
    """
    if dest < 0 or src < 0:
        raise ValueError("memmove: negative offset")
    if n < 0:
        raise ValueError(f"memmove: negative length {n}")
    if dest + n > len(buffer) or src + n > len(buffer):
        raise ValueError("memmove: region exceeds the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes to the low byte of ``value`` and return ``buffer``."""
    _check_length("memset", buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: negative size")
    return bytearray(count * size)