"""Exceptions raised by the fractal rendering core."""

from __future__ import annotations


class FractalViewError(Exception):
    """Base class for all rendering failures."""


class DegenerateViewportError(FractalViewError, ValueError):
    """A viewport has a zero or non-finite extent."""


class InvalidIterationsError(FractalViewError, ValueError):
    """The escape-time iteration count is below one."""


class InvalidImageSizeError(FractalViewError, ValueError):
    """A negative image width or height was requested."""


class CoordinateSpaceMismatchError(FractalViewError, TypeError):
    """A point or viewport was used in a coordinate space it does not belong to."""
