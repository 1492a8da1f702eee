"""Pixel packing, colour conversion and string hashing."""

from __future__ import annotations

import struct
from typing import Union

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


_RED_WEIGHT = _f32(0.299)
_GREEN_WEIGHT = _f32(0.587)
_BLUE_WEIGHT = _f32(0.114)


def fnv_hash(data: Union[bytes, bytearray, str]) -> int:
    """64-bit FNV-1a hash of ``data``; strings are hashed as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    result = _FNV_OFFSET
    for byte in data:
        result ^= byte
        result = (result * _FNV_PRIME) & _MASK64
    return result


def _check_color(color: int) -> int:
    if isinstance(color, bool) or not isinstance(color, int):
        raise TypeError("colour must be an integer")
    if not 0 <= color <= 0xFFFFFFFF:
        raise ValueError("colour must fit in 32 bits")
    return color


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to grey, keeping its alpha."""
    _check_color(color)
    red = int(_f32(_RED_WEIGHT * ((color >> 24) & 0xFF))) & 0xFF
    green = int(_f32(_GREEN_WEIGHT * ((color >> 16) & 0xFF))) & 0xFF
    blue = int(_f32(_BLUE_WEIGHT * ((color >> 8) & 0xFF))) & 0xFF
    grey = (red + green + blue) & 0xFF
    return (grey << 24) | (grey << 16) | (grey << 8) | (color & 0xFF)


def pack_pixel(color: int) -> bytes:
    """The four bytes R, G, B, A of an RGBA colour."""
    return _check_color(color).to_bytes(4, "big")


def unpack_pixel(data: Union[bytes, bytearray, memoryview]) -> int:
    """The RGBA colour stored in four pixel bytes."""
    raw = bytes(data)
    if len(raw) != 4:
        raise ValueError("a pixel is exactly four bytes")
    return int.from_bytes(raw, "big")