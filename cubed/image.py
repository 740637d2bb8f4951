"""In-memory 32-bit pixel buffer used for frames and textures."""

from __future__ import annotations

import sys
from array import array

_MASK = 0xFFFFFFFF
_TYPECODE = next(code for code in "IL" if array(code).itemsize == 4)


class Image:
    """A width x height grid of 0xAARRGGBB pixels.

    The origin is the top-left corner and y grows downwards.  The alpha
    byte means transparency, not opacity, and is ignored when the image
    is converted to RGB bytes.
    """

    def __init__(self, width: int, height: int, fill: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array(_TYPECODE, [fill & _MASK]) * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.width + x

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at (x, y)."""
        return self._pixels[self._index(x, y)]

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a colour at (x, y), truncated to 32 bits."""
        self._pixels[self._index(x, y)] = color & _MASK

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels row by row as packed R, G, B bytes."""
        words = array(_TYPECODE, self._pixels)
        if sys.byteorder == "little":
            words.byteswap()
        raw = words.tobytes()
        rgb = bytearray(len(words) * 3)
        rgb[0::3] = raw[1::4]
        rgb[1::3] = raw[2::4]
        rgb[2::3] = raw[3::4]
        return bytes(rgb)