"""Render entry points used by an interactive front end.

The front end exchanges plain data with this module: iteration counts, pixel
sizes, ``ViewportDescriptor`` records and ``JuliaConstant`` values. Each
``FractalExplorer`` owns one ``SingleCache`` per fractal kind so that a
repeated request (for example an idle redraw) is served without re-rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .cache import SingleCache
from .console import log
from .pixelators import Julia, Mandelbrot
from .renderer import Bitmap, create_image, empty_bitmap
from .spaces import JuliaPlane, MandelbrotPlane, Viewport, screen_viewport


@dataclass(frozen=True)
class ViewportDescriptor:
    """An untagged viewport as stored by the front end."""

    x1: float
    y1: float
    dx: float
    dy: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.dx, self.dy)


@dataclass(frozen=True)
class JuliaConstant:
    real: float
    imag: float


MandelbrotKey = tuple[int, Viewport[MandelbrotPlane], int, int]
JuliaKey = tuple[int, Viewport[JuliaPlane], JuliaConstant, int, int]


@dataclass
class FractalExplorer:
    """Owns the render caches of one interactive session."""

    mandelbrot_cache: SingleCache[MandelbrotKey, Bitmap] = field(default_factory=SingleCache)
    julia_cache: SingleCache[JuliaKey, Bitmap] = field(default_factory=SingleCache)

    def generate_mandelbrot(self, iterations: int, viewport, width: int, height: int) -> Bitmap:
        """Render the Mandelbrot set seen through ``viewport`` into a ``width`` x ``height`` bitmap."""

        mandelbrot_viewport = Viewport.from_descriptor(viewport, MandelbrotPlane)
        key = (iterations, mandelbrot_viewport, width, height)

        def render() -> Bitmap:
            log(f"generate_mandelbrot {width}x{height} it={iterations} viewport={mandelbrot_viewport}")
            mandelbrot = Mandelbrot(iterations)
            if width == 0 or height == 0:
                return empty_bitmap(width, height)
            pixelator = screen_viewport(width, height).decorate_pixelator(mandelbrot_viewport, mandelbrot)
            return create_image(width, height, pixelator)

        return self.mandelbrot_cache.get_or_set(key, render)

    def generate_julia(self, iterations: int, c, viewport, width: int, height: int) -> Bitmap:
        """Render the Julia set for constant ``c`` seen through ``viewport``."""

        julia_viewport = Viewport.from_descriptor(viewport, JuliaPlane)
        constant = JuliaConstant(float(c.real), float(c.imag))
        key = (iterations, julia_viewport, constant, width, height)

        def render() -> Bitmap:
            log(f"generate_julia {constant} {width}x{height} it={iterations} viewport={julia_viewport}")
            julia = Julia(iterations, constant.real, constant.imag)
            if width == 0 or height == 0:
                return empty_bitmap(width, height)
            pixelator = screen_viewport(width, height).decorate_pixelator(julia_viewport, julia)
            return create_image(width, height, pixelator)

        return self.julia_cache.get_or_set(key, render)
