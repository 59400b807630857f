"""Viewport updates driven by mouse interaction on a rendered fractal."""

from __future__ import annotations

from typing import Iterator

from .session import JuliaConstant, ViewportDescriptor
from .spaces import MandelbrotPlane, Point, Screen, Viewport, screen_viewport

MAX_ZOOM_PERCENT = 60.0


def zoom_diff_factor(scroll: float) -> float:
    """Fraction of the current extent removed by one scroll step.

    Positive scroll zooms in, at most 60% per step; negative scroll zooms out.
    """

    return min(scroll / 10.0, MAX_ZOOM_PERCENT) / 100.0


def zoom_viewport(viewport, scroll: float, mousex: float, mousey: float, width: float, height: float) -> ViewportDescriptor:
    """Zoom ``viewport`` by ``scroll``, keeping the fractal point under the cursor in place."""

    fractal_viewport = Viewport.from_descriptor(viewport, MandelbrotPlane)
    screen = screen_viewport(width, height)

    diff_factor = zoom_diff_factor(scroll)
    dx_diff = fractal_viewport.dx * diff_factor
    dy_diff = fractal_viewport.dy * diff_factor

    cursor = screen.transformer(fractal_viewport)(Point(float(mousex), float(mousey), Screen))

    zoomed = Viewport(
        fractal_viewport.x1 + dx_diff * (cursor.x - fractal_viewport.x1) / fractal_viewport.dx,
        fractal_viewport.y1 + dy_diff * (cursor.y - fractal_viewport.y1) / fractal_viewport.dy,
        fractal_viewport.dx - dx_diff,
        fractal_viewport.dy - dy_diff,
        MandelbrotPlane,
    )
    return zoomed.to_descriptor()


def calculate_julia_constant(viewport, width: float, height: float, x: float, y: float) -> JuliaConstant:
    """The Mandelbrot-plane point under the screen pixel ``(x, y)``, used as a Julia constant."""

    mandelbrot_viewport = Viewport.from_descriptor(viewport, MandelbrotPlane)
    screen = screen_viewport(width, height)
    point = screen.transformer(mandelbrot_viewport)(Point(float(x), float(y), Screen))
    return JuliaConstant(real=point.x, imag=point.y)


def zoom_sequence(
    viewport,
    scroll: float,
    mousex: float,
    mousey: float,
    width: float,
    height: float,
    frames: int,
) -> Iterator[ViewportDescriptor]:
    """Yield ``frames`` viewports, each one scroll step deeper than the last."""

    current = ViewportDescriptor(float(viewport.x1), float(viewport.y1), float(viewport.dx), float(viewport.dy))
    for _ in range(max(frames, 0)):
        current = zoom_viewport(current, scroll, mousex, mousey, width, height)
        yield current
