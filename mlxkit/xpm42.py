"""Loading images in the XPM42 format.

An XPM42 file starts with the line ``!XPM42``, then a header line
``width height colour_count chars_per_pixel mode`` where mode is ``c`` for
colour or ``m`` for monochrome. Then come the colour entries, one per line,
``<chars> #RRGGBBAA``, and finally one line of pixel characters per row.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import IO, Optional, Union

from .chars import is_alnum
from .errors import MlxErrno, MlxError
from .lines import LineReader
from .pixels import fnv_hash, pack_pixel, rgba_to_mono

BYTES_PER_PIXEL = 4
MAX_DIMENSION = 32767
MAX_CHARS_PER_PIXEL = 10
_TABLE_SIZE = 65535
_MAGIC = "!XPM42\n"
_C_SPACE = " \t\n\v\f\r"
_HEX_DIGITS = "0123456789abcdefABCDEF"

_INT_RE = re.compile(r"\s*([+-]?(?:0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*))")
_CHAR_RE = re.compile(r"\s*(\S)")


@dataclass
class Xpm:
    """A decoded XPM42 image with RGBA pixel bytes."""

    width: int
    height: int
    color_count: int
    cpp: int
    mode: str
    pixels: bytearray = field(repr=False)
    bytes_per_pixel: int = BYTES_PER_PIXEL


def _invalid() -> MlxError:
    return MlxError(MlxErrno.INVXPM)


def _c_int(token: str) -> int:
    """Value of an integer written with an optional sign, 0x or 0 prefix."""
    sign = -1 if token.startswith("-") else 1
    body = token.lstrip("+-")
    if body[:2] in ("0x", "0X"):
        return sign * int(body[2:], 16)
    if len(body) > 1 and body.startswith("0"):
        return sign * int(body, 8)
    return sign * int(body, 10)


def _parse_header(text: str) -> tuple[int, int, int, int, str]:
    values = []
    position = 0
    for _ in range(4):
        match = _INT_RE.match(text, position)
        if match is None:
            raise _invalid()
        values.append(_c_int(match.group(1)))
        position = match.end()
    mode_match = _CHAR_RE.match(text, position)
    if mode_match is None:
        raise _invalid()
    width, height, color_count, cpp = values
    mode = mode_match.group(1)
    if not 0 <= width <= MAX_DIMENSION or not 0 <= height <= MAX_DIMENSION:
        raise _invalid()
    if mode not in ("c", "m") or not 0 <= cpp <= MAX_CHARS_PER_PIXEL:
        raise _invalid()
    return width, height, color_count, cpp, mode


def _hex_channel(text: str) -> int:
    """Read a two-character hexadecimal channel, stopping at the first non-digit."""
    body = text.lstrip(_C_SPACE)
    negative = body.startswith("-")
    body = body.lstrip("+-")[:2] if body[:1] in "+-" else body
    digits = ""
    for ch in body:
        if ch not in _HEX_DIGITS:
            break
        digits += ch
    value = int(digits, 16) if digits else 0
    return (-value if negative else value) & 0xFF


def _slot(key: str) -> int:
    return fnv_hash(key) % _TABLE_SIZE


def _parse_entry(line: str, cpp: int, mode: str, table: dict[int, int]) -> None:
    if line.rfind(" ") != cpp:
        raise _invalid()
    if len(line) < cpp + 3 or line[cpp + 1] != "#" or not is_alnum(line[cpp + 2]):
        raise _invalid()
    start = cpp + 2
    color = 0
    for shift, offset in ((24, 0), (16, 2), (8, 4), (0, 6)):
        color |= _hex_channel(line[start + offset:start + offset + 2]) << shift
    table[_slot(line[:cpp])] = rgba_to_mono(color) if mode == "m" else color


def _as_text(line: Union[str, bytes, None]) -> Optional[str]:
    if isinstance(line, bytes):
        return line.decode("latin-1")
    return line


def parse_xpm42(stream: IO) -> Xpm:
    """Decode an XPM42 image from a text or binary stream.

    Raises MlxError with code INVXPM when the data is malformed.
    """
    reader = LineReader(stream)

    def next_line() -> str:
        line = _as_text(reader.read_line())
        if line is None:
            raise _invalid()
        return line

    if next_line() != _MAGIC:
        raise _invalid()
    width, height, color_count, cpp, mode = _parse_header(next_line())

    table: dict[int, int] = {}
    for _ in range(color_count):
        _parse_entry(next_line(), cpp, mode, table)

    pixels = bytearray()
    for _ in range(height):
        line = next_line()
        if line.endswith("\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _invalid()
        keys = [line[i:i + cpp] for i in range(0, width * cpp, cpp)] if cpp else [""] * width
        for key in keys:
            pixels += pack_pixel(table.get(_slot(key), 0))

    return Xpm(width, height, color_count, cpp, mode, pixels)


def load_xpm42(path: Union[str, os.PathLike]) -> Xpm:
    """Load an XPM42 file.

    Raises MlxError with INVEXT when the path lacks the ``.xpm42`` extension,
    INVFILE when the file cannot be opened and INVXPM when it is malformed.
    """
    if ".xpm42" not in os.fspath(path):
        raise MlxError(MlxErrno.INVEXT)
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise MlxError(MlxErrno.INVFILE) from exc
    with handle:
        return parse_xpm42(handle)