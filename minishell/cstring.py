"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices (or None when nothing is found) instead
of pointers, and functions that would fill a caller's buffer return the
resulting string instead.
"""

from typing import Callable, Optional, Tuple

_ATOI_SPACE = frozenset(" \t\n\v\f\r")
_NUL = "\0"


def _single_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text with no digits gives 0.
    """
    stripped = text.lstrip("".join(_ATOI_SPACE))
    sign = 1
    if stripped[:1] == "+":
        stripped = stripped[1:]
    elif stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _difference(left: str, right: str) -> int:
    for a, b in zip(left + _NUL, right + _NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(left: str, right: str) -> int:
    """Compare two strings; return the code difference of the first mismatch, or 0."""
    return _difference(left, right)


def strncmp(left: str, right: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    _non_negative("n", n)
    left_part = left[:n]
    right_part = right[:n]
    if len(left_part) == len(right_part) == n:
        return next(
            (ord(a) - ord(b) for a, b in zip(left_part, right_part) if a != b), 0
        )
    return _difference(left_part, right_part)


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``n`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _non_negative("n", n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def strlen(text: str) -> int:
    """Return the length of ``text``."""
    return len(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives the empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(left: str, right: str) -> str:
    """Return the concatenation of two strings."""
    if left is None or right is None:
        raise TypeError("strjoin needs two strings")
    return left + right


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("strtrim needs two strings")
    return text.strip(charset) if charset else text


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Return the copied text and the length of ``src``; the copy was
    truncated when that length is at least ``size``.
    """
    _non_negative("size", size)
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters, NUL included.

    Return the resulting text and the length it tried to create.
    """
    _non_negative("size", size)
    used = min(len(dest), size)
    if used < size:
        room = size - used - 1
        dest = dest + src[:room]
    return dest, used + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for every character.

    A string returned by ``func`` replaces the character; None leaves it as
    it is. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)