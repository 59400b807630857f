"""Aspect-preserving mapping between two tagged viewports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Type

from .spaces import S, T, Point, Viewport, require_space


@dataclass(frozen=True)
class Transformer(Generic[S, T]):
    """Maps points of ``source_space`` onto ``dest_space``.

    Both axes share one scale magnitude, the larger of the two per-axis
    ratios, so shapes are never stretched. When the two viewports have
    different aspect ratios the narrower axis fits exactly and the other
    overflows symmetrically around the center. The sign of each per-axis
    ratio is kept, which handles an axis flipped between the two viewports.
    """

    source_space: Type[S]
    dest_space: Type[T]
    x_factor: float
    y_factor: float
    center_source_x: float
    center_source_y: float
    center_dest_x: float
    center_dest_y: float

    @classmethod
    def between(cls, source: Viewport[S], dest: Viewport[T]) -> Transformer[S, T]:
        dx_factor = dest.dx / source.dx
        dy_factor = dest.dy / source.dy
        factor = max(abs(dx_factor), abs(dy_factor))

        # Needed when one of the axes flips its sign between the two viewports.
        x_factor = -factor if dx_factor < 0.0 else factor
        y_factor = -factor if dy_factor < 0.0 else factor

        source_center = source.center
        dest_center = dest.center

        return cls(
            source_space=source.space,
            dest_space=dest.space,
            x_factor=x_factor,
            y_factor=y_factor,
            center_source_x=source_center.x,
            center_source_y=source_center.y,
            center_dest_x=dest_center.x,
            center_dest_y=dest_center.y,
        )

    @classmethod
    def inverse_of(cls, source: Viewport[S], dest: Viewport[T]) -> Transformer[T, S]:
        """The mapping back from ``dest`` to ``source``.

        Derived by running the construction with the viewports swapped; the
        scale factor is recomputed from the swapped pair rather than inverted.
        """
        return cls.between(dest, source)

    def __call__(self, point: Point[S]) -> Point[T]:
        require_space(point, self.source_space)
        new_x = (point.x - self.center_source_x) * self.x_factor + self.center_dest_x
        new_y = (point.y - self.center_source_y) * self.y_factor + self.center_dest_y
        return Point(new_x, new_y, self.dest_space)
