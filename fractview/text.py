"""String helpers with C-string semantics: search, compare, slice, split and copy.

Text arguments may be ``str`` or bytes-like. A NUL character ends a string,
as it does in a C buffer. The bounded copy functions write into a
``bytearray`` buffer and NUL-terminate it.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integers are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL, or the whole length."""
    if isinstance(s, str):
        end = s.find("\0")
    else:
        end = bytes(s).find(0)
    return len(s) if end < 0 else end


def _visible(s: str) -> str:
    return s[: strlen(s)]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL gives the index of the terminator, i.e. the length.
    """
    target = _char(c)
    text = _visible(s)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL gives the index of the terminator, i.e. the length.
    """
    target = _char(c)
    text = _visible(s)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of differing code points, where
    a string that has ended counts as NUL, or 0 when they agree.
    """
    _check_size(n, "n")
    pairs = zip_longest(first[:n], second[:n], fillvalue="\0")
    for a, b in pairs:
        if a == "\0" and b == "\0":
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index where ``little`` first occurs wholly within ``big[:length]``.

    An empty ``little`` is found at index 0. Returns None when absent.
    """
    _check_size(length, "length")
    if not _visible(little):
        return 0
    index = _visible(big)[:length].find(_visible(little))
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives the empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    text = _visible(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _visible(first) + _visible(second)


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that belongs to ``charset``."""
    return _visible(s).strip(_visible(charset))


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on runs of the character ``sep``, dropping empty words."""
    text = _visible(s)
    separator = _char(sep)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(_visible(s)))


def striteri(
    s: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``f(index, char)`` for every character of ``s``, in place.

    When ``f`` returns a character it replaces the one at that index; a
    return of None leaves it unchanged. Iteration stops at a NUL character.
    """
    for index, char in enumerate(s):
        if char == "\0":
            break
        replacement = f(index, char)
        if replacement is not None:
            s[index] = replacement
    return s


def _source_bytes(src: Text) -> bytes:
    data = src.encode() if isinstance(src, str) else bytes(src)
    return data[: strlen(data)]


def _check_buffer(dst: bytearray, size: int) -> None:
    _check_size(size, "size")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer of size {len(dst)}")


def strlcpy(dst: bytearray, src: Text, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated. With ``size`` 0 nothing is written.
    """
    _check_buffer(dst, size)
    data = _source_bytes(src)
    if size == 0:
        return len(data)
    count = min(len(data), size - 1)
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst``, keeping the total within ``size`` bytes.

    Returns the length of the string it tried to build. When ``size`` is not
    larger than the current length of ``dst`` nothing is written and the
    result is ``size`` plus the length of ``src``.
    """
    _check_buffer(dst, size)
    data = _source_bytes(src)
    dst_length = strlen(dst)
    if size <= dst_length:
        return size + len(data)
    count = min(len(data), size - 1 - dst_length)
    dst[dst_length : dst_length + count] = data[:count]
    dst[dst_length + count] = 0
    return dst_length + len(data)