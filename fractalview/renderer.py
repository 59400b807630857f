"""Assembly of RGBA bitmaps from screen-space pixelators."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import PIL.Image

from .errors import InvalidImageSizeError
from .pixelators import Pixelator, Rgba8
from .spaces import Point, Screen

CHANNELS = 4


@dataclass(frozen=True, eq=False)
class Bitmap:
    """A row-major RGBA8 image with its origin at the top-left corner."""

    width: int
    height: int
    pixels: np.ndarray

    @property
    def nbytes(self) -> int:
        return int(self.pixels.nbytes)

    def tobytes(self) -> bytes:
        """The raw buffer: 4 bytes per pixel, no row padding."""
        return self.pixels.tobytes()

    def pixel(self, x: int, y: int) -> Rgba8:
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return Rgba8(r, g, b, a)

    def to_image(self) -> PIL.Image.Image:
        return PIL.Image.fromarray(np.ascontiguousarray(self.pixels))


def allocate_pixels(width: int, height: int) -> np.ndarray:
    if width < 0 or height < 0:
        raise InvalidImageSizeError(f"image size must not be negative, got {width}x{height}")
    return np.zeros((height, width, CHANNELS), dtype=np.uint8)


def empty_bitmap(width: int, height: int) -> Bitmap:
    pixels = allocate_pixels(width, height)
    pixels.setflags(write=False)
    return Bitmap(width=width, height=height, pixels=pixels)


def create_image(width: int, height: int, pixelator: Pixelator[Screen]) -> Bitmap:
    """Fill a ``width`` x ``height`` bitmap by asking ``pixelator`` for every pixel.

    Pixels are visited in buffer order; pixel ``(x, y)`` is sampled at the
    screen point ``(x, y)``. The returned pixel array is read-only.
    """

    width = int(width)
    height = int(height)
    pixels = allocate_pixels(width, height)
    flat = pixels.reshape(-1, CHANNELS)

    for index in range(width * height):
        x = float(index % width)
        y = float(index // width)
        flat[index] = pixelator.get_pixel(Point(x, y, Screen))

    pixels.setflags(write=False)
    return Bitmap(width=width, height=height, pixels=pixels)
