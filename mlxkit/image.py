"""Images with RGBA pixel buffers, and textures to build them from."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Protocol, Union

from .errors import MlxErrno, MlxError
from .pixels import pack_pixel, unpack_pixel

BYTES_PER_PIXEL = 4
MAX_DIMENSION = 32767


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _check_dimensions(width: int, height: int) -> None:
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("image dimensions must be integers")
    if not 0 < width <= MAX_DIMENSION or not 0 < height <= MAX_DIMENSION:
        raise MlxError(MlxErrno.INVDIM)


class _TextureLike(Protocol):
    width: int
    height: int
    pixels: Union[bytes, bytearray]
    bytes_per_pixel: int


@dataclass
class Texture:
    """Pixel data loaded from a file, not yet shown anywhere."""

    width: int
    height: int
    pixels: bytearray = field(repr=False)
    bytes_per_pixel: int = BYTES_PER_PIXEL


@dataclass(eq=False)
class Instance:
    """One placement of an image in the window."""

    x: int
    y: int
    z: int = 0
    enabled: bool = True


class Image:
    """A width by height buffer of RGBA pixels, four bytes per pixel."""

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self._width = width
        self._height = height
        self.pixels = bytearray(width * height * BYTES_PER_PIXEL)
        self.enabled = True
        self.instances: list[Instance] = []

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def count(self) -> int:
        """Number of instances of this image."""
        return len(self.instances)

    def _offset(self, x: int, y: int) -> int:
        if not 0 <= x < self._width or not 0 <= y < self._height:
            raise MlxError(MlxErrno.INVPOS)
        return (y * self._width + x) * BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to an RGBA colour."""
        start = self._offset(x, y)
        self.pixels[start:start + BYTES_PER_PIXEL] = pack_pixel(color)

    def get_pixel(self, x: int, y: int) -> int:
        """The RGBA colour of the pixel at (x, y)."""
        start = self._offset(x, y)
        return unpack_pixel(self.pixels[start:start + BYTES_PER_PIXEL])

    def resize(self, width: int, height: int) -> None:
        """Scale the pixel buffer to a new size, nearest neighbour."""
        _check_dimensions(width, height)
        if width == self._width and height == self._height:
            return
        old_width, old_height = self._width, self._height
        origin = self.pixels
        wstep = _f32(old_width / width)
        hstep = _f32(old_height / height)
        columns = [min(int(_f32(i * wstep)), old_width - 1) for i in range(width)]
        resized = bytearray(width * height * BYTES_PER_PIXEL)
        out = 0
        for j in range(height):
            row = min(int(_f32(j * hstep)), old_height - 1) * old_width
            for column in columns:
                src = (row + column) * BYTES_PER_PIXEL
                resized[out:out + BYTES_PER_PIXEL] = origin[src:src + BYTES_PER_PIXEL]
                out += BYTES_PER_PIXEL
        self.pixels = resized
        self._width = width
        self._height = height

    @classmethod
    def from_texture(cls, texture: _TextureLike) -> "Image":
        """A new image holding a copy of the texture's pixels."""
        image = cls(texture.width, texture.height)
        row_bytes = texture.width * texture.bytes_per_pixel
        if len(texture.pixels) < row_bytes * texture.height:
            raise ValueError("texture pixel data is shorter than its dimensions")
        image_row = image.width * texture.bytes_per_pixel
        for row in range(texture.height):
            src = row * row_bytes
            dst = row * image_row
            image.pixels[dst:dst + row_bytes] = texture.pixels[src:src + row_bytes]
        return image