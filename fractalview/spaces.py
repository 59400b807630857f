"""Coordinate-space tags and the tagged ``Point``/``Viewport`` value types.

Screen pixels, the Mandelbrot parameter plane and the Julia plane are all
plain pairs of floats. To keep them from being mixed up, every ``Point`` and
``Viewport`` carries the marker class of the space it lives in. Static type
checkers see ``Point[Screen]`` and ``Point[MandelbrotPlane]`` as distinct
types, and the operations that consume points check the tag at runtime.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Type, TypeVar

from .errors import CoordinateSpaceMismatchError, DegenerateViewportError

if TYPE_CHECKING:
    from .pixelators import Pixelator, ViewportDecorator
    from .session import ViewportDescriptor
    from .transform import Transformer


class CoordinateSpace:
    """Marker base for coordinate-space tags. Tags are never instantiated."""


class Screen(CoordinateSpace):
    """Pixel coordinates of the target bitmap, origin top-left, y down."""


class MandelbrotPlane(CoordinateSpace):
    """The complex plane of Mandelbrot parameters ``c``."""


class JuliaPlane(CoordinateSpace):
    """The complex plane of Julia starting values ``z0``."""


S = TypeVar("S", bound=CoordinateSpace)
T = TypeVar("T", bound=CoordinateSpace)


def require_space(value: Any, space: type) -> None:
    """Raise ``CoordinateSpaceMismatchError`` unless ``value`` is tagged with ``space``."""

    if value.space is not space:
        raise CoordinateSpaceMismatchError(
            f"expected a point in {space.__name__}, got one in {value.space.__name__}"
        )


@dataclass(frozen=True)
class Point(Generic[S]):
    """An (x, y) pair in the coordinate space ``space``."""

    x: float
    y: float
    space: Type[S]


@dataclass(frozen=True)
class Viewport(Generic[S]):
    """The rectangle ``[x1, x1+dx] x [y1, y1+dy]`` in ``space``.

    Negative extents flip the axis relative to the space's natural
    orientation. Zero or non-finite extents are rejected.
    """

    x1: float
    y1: float
    dx: float
    dy: float
    space: Type[S]

    def __post_init__(self) -> None:
        for name in ("x1", "y1", "dx", "dy"):
            if not math.isfinite(getattr(self, name)):
                raise DegenerateViewportError(
                    f"{self.space.__name__} viewport has non-finite {name}: {getattr(self, name)!r}"
                )
        if self.dx == 0 or self.dy == 0:
            raise DegenerateViewportError(
                f"{self.space.__name__} viewport has zero extent (dx={self.dx!r}, dy={self.dy!r})"
            )

    @property
    def center(self) -> Point[S]:
        return Point(self.x1 + self.dx / 2.0, self.y1 + self.dy / 2.0, self.space)

    def transformer(self, dest: Viewport[T]) -> Transformer[S, T]:
        """Return the mapping from points in this viewport to points in ``dest``."""
        from .transform import Transformer

        return Transformer.between(self, dest)

    def decorate_pixelator(self, dest: Viewport[T], pixelator: Pixelator[T]) -> ViewportDecorator[S, T]:
        """Evaluate ``pixelator`` (defined over ``dest``'s space) with points from this viewport."""
        from .pixelators import ViewportDecorator

        return ViewportDecorator(self.transformer(dest), pixelator)

    @classmethod
    def from_descriptor(cls, descriptor: Any, space: Type[S]) -> Viewport[S]:
        """Tag a plain ``{x1, y1, dx, dy}`` record with a coordinate space."""
        return cls(
            float(descriptor.x1),
            float(descriptor.y1),
            float(descriptor.dx),
            float(descriptor.dy),
            space,
        )

    def to_descriptor(self) -> ViewportDescriptor:
        from .session import ViewportDescriptor

        return ViewportDescriptor(self.x1, self.y1, self.dx, self.dy)


def screen_viewport(width: float, height: float) -> Viewport[Screen]:
    """The full pixel area of a ``width`` x ``height`` bitmap."""

    return Viewport(0.0, 0.0, float(width), float(height), Screen)
