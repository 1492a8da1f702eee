"""Writing characters, strings and numbers to streams or file descriptors."""

from __future__ import annotations

import os
import sys
from typing import TextIO, Union

Target = Union[TextIO, int, None]


def _write(text: str, stream: Target) -> None:
    if stream is None:
        stream = sys.stdout
    if isinstance(stream, bool):
        raise TypeError("stream must be a writable text stream or a file descriptor")
    if isinstance(stream, int):
        data = text.encode()
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def put_char(c: str, stream: Target = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("put_char expects exactly one character")
    _write(c, stream)


def put_str(text: str, stream: Target = None) -> None:
    """Write a string as it is."""
    _write(text, stream)


def put_endl(text: str, stream: Target = None) -> None:
    """Write a string followed by a newline."""
    _write(text + "\n", stream)


def put_nbr(number: int, stream: Target = None) -> None:
    """Write an integer in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("put_nbr expects an integer")
    _write(str(number), stream)