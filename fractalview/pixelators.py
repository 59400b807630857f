"""Per-point color generators for escape-time fractals."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Generic, NamedTuple, Protocol, Type, TypeVar

from .errors import InvalidIterationsError
from .spaces import CoordinateSpace, JuliaPlane, MandelbrotPlane, Point, S, T, require_space
from .transform import Transformer

HORIZON_SQUARED = 4.0

P = TypeVar("P", bound=CoordinateSpace, contravariant=True)


class Rgba8(NamedTuple):
    r: int
    g: int
    b: int
    a: int


INSIDE = Rgba8(0, 0, 0, 0)


class Pixelator(Protocol[P]):
    """Anything that colors a point of one coordinate space."""

    def get_pixel(self, point: Point[P]) -> Rgba8:
        ...


def escape_color(step: int, iterations: int) -> Rgba8:
    """Opaque gray level for a point that escaped at ``step``."""

    gray = (step * (255 // iterations)) & 0xFF
    return Rgba8(gray, gray, gray, 255)


def escape_time(z_r: float, z_i: float, c_r: float, c_i: float, iterations: int) -> Rgba8:
    """Iterate ``z -> z**2 + c`` from ``z`` until ``|z|**2`` exceeds the horizon.

    Steps run from 0 to ``iterations`` inclusive. A point that escapes after
    step ``i`` is shaded by ``i``; one that never escapes is transparent.
    """

    for i in range(iterations + 1):
        z_r2 = z_r * z_r
        z_i2 = z_i * z_i
        new_z_r = z_r2 - z_i2 + c_r
        new_z_i = 2.0 * z_r * z_i + c_i
        z_r = new_z_r
        z_i = new_z_i
        if z_r * z_r + z_i * z_i > HORIZON_SQUARED:
            return escape_color(i, iterations)
    return INSIDE


def _check_iterations(iterations: int) -> int:
    if isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral):
        raise InvalidIterationsError(f"iterations must be a whole number, got {iterations!r}")
    iterations = int(iterations)
    if iterations < 1:
        raise InvalidIterationsError(f"iterations must be at least 1, got {iterations}")
    return iterations


@dataclass(frozen=True)
class Mandelbrot:
    """Mandelbrot set: ``c`` is the point, ``z`` starts at the origin."""

    iterations: int
    space: Type[MandelbrotPlane] = MandelbrotPlane

    def __post_init__(self) -> None:
        object.__setattr__(self, "iterations", _check_iterations(self.iterations))

    def get_pixel(self, point: Point[MandelbrotPlane]) -> Rgba8:
        require_space(point, self.space)
        return escape_time(0.0, 0.0, point.x, point.y, self.iterations)


@dataclass(frozen=True)
class Julia:
    """Julia set for the constant ``c = c_r + c_i*i``: ``z`` starts at the point."""

    iterations: int
    c_r: float
    c_i: float
    space: Type[JuliaPlane] = JuliaPlane

    def __post_init__(self) -> None:
        object.__setattr__(self, "iterations", _check_iterations(self.iterations))

    def get_pixel(self, point: Point[JuliaPlane]) -> Rgba8:
        require_space(point, self.space)
        return escape_time(point.x, point.y, self.c_r, self.c_i, self.iterations)


@dataclass(frozen=True)
class ViewportDecorator(Generic[S, T]):
    """Evaluates a pixelator over space ``T`` with points from space ``S``."""

    transformer: Transformer[S, T]
    pixelator: Pixelator[T]

    def get_pixel(self, point: Point[S]) -> Rgba8:
        return self.pixelator.get_pixel(self.transformer(point))
