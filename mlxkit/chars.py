"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Callable, Union

CharLike = Union[str, int]

_ATOI_SPACE = " \t\n\v\f\r"


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an integer code."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError("expected a one-character string or an integer code")


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (string or integer) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as the C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0.
    """
    stripped = text.lstrip(_ATOI_SPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if "0" <= ch <= "9":
            digits.append(ch)
        else:
            break
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("itoa expects an integer")
    return str(number)


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _like(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _like(c, code)


def str_map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to every character."""
    if func is None:
        raise TypeError("a mapping function is required")
    return "".join(func(index, ch) for index, ch in enumerate(text))