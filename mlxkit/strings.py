"""String searching, comparison, slicing, joining, trimming and splitting."""

from __future__ import annotations

from typing import Optional

_NUL = "\0"


def _require_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected exactly one character")
    return c


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value


def str_find(text: str, c: str) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``text``, or None.

    Looking for the NUL character finds the end of the string.
    """
    _require_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def str_rfind(text: str, c: str) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``text``, or None.

    Looking for the NUL character finds the end of the string.
    """
    _require_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def str_compare(s1: str, s2: str) -> int:
    """Compare two strings, returning the code difference at the first mismatch.

    The result is negative, zero or positive as ``s1`` sorts before, equal to
    or after ``s2``; the end of a string counts as code 0.
    """
    return str_ncompare(s1, s2, max(len(s1), len(s2)) + 1)


def str_ncompare(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the code difference at the first mismatch within the first ``n``
    characters, or 0 when they agree (or ``n`` is 0).
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def str_nfind(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. Returns the index or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from index ``start``.

    A start past the end of the text gives an empty string.
    """
    _require_str(text, "text")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def str_join(*args: str) -> str:
    """Concatenate the given strings into a new one."""
    for position, part in enumerate(args):
        _require_str(part, f"argument {position}")
    return "".join(args)


def str_trim(text: str, charset: str) -> str:
    """Remove every character in ``charset`` from both ends of ``text``."""
    _require_str(text, "text")
    _require_str(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _require_str(text, "text")
    _require_char(sep)
    return [word for word in text.split(sep) if word]