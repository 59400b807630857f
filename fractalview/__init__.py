"""Public API for escape-time fractal rendering utilities."""

from .cache import SingleCache
from .config import ExplorerConfig, default_config, load_config
from .errors import (
    CoordinateSpaceMismatchError,
    DegenerateViewportError,
    FractalViewError,
    InvalidImageSizeError,
    InvalidIterationsError,
)
from .navigation import calculate_julia_constant, zoom_sequence, zoom_viewport
from .pixelators import Julia, Mandelbrot, Pixelator, Rgba8, ViewportDecorator
from .renderer import Bitmap, create_image
from .session import FractalExplorer, JuliaConstant, ViewportDescriptor
from .spaces import CoordinateSpace, JuliaPlane, MandelbrotPlane, Point, Screen, Viewport, screen_viewport
from .transform import Transformer

__all__ = [
    "Bitmap",
    "CoordinateSpace",
    "CoordinateSpaceMismatchError",
    "DegenerateViewportError",
    "ExplorerConfig",
    "FractalExplorer",
    "FractalViewError",
    "InvalidImageSizeError",
    "InvalidIterationsError",
    "Julia",
    "JuliaConstant",
    "JuliaPlane",
    "Mandelbrot",
    "MandelbrotPlane",
    "Pixelator",
    "Point",
    "Rgba8",
    "Screen",
    "SingleCache",
    "Transformer",
    "Viewport",
    "ViewportDecorator",
    "ViewportDescriptor",
    "calculate_julia_constant",
    "create_image",
    "default_config",
    "load_config",
    "screen_viewport",
    "zoom_sequence",
    "zoom_viewport",
]
