import numpy as np
import pytest

from fractalview import (
    CoordinateSpaceMismatchError,
    InvalidIterationsError,
    Julia,
    JuliaPlane,
    Mandelbrot,
    MandelbrotPlane,
    Point,
    Rgba8,
    Screen,
    ViewportDecorator,
    screen_viewport,
)
from fractalview.pixelators import escape_color
from fractalview.spaces import Viewport

TRANSPARENT = Rgba8(0, 0, 0, 0)


def mandel_point(x, y):
    return Point(float(x), float(y), MandelbrotPlane)


def julia_point(x, y):
    return Point(float(x), float(y), JuliaPlane)


@pytest.mark.parametrize("iterations", [1, 2, 10, 100, 1000])
def test_origin_is_inside_the_mandelbrot_set(iterations):
    assert Mandelbrot(iterations).get_pixel(mandel_point(0, 0)) == TRANSPARENT


@pytest.mark.parametrize("iterations", [1, 10, 255])
def test_far_point_escapes_on_the_first_step(iterations):
    assert Mandelbrot(iterations).get_pixel(mandel_point(2, 2)) == Rgba8(0, 0, 0, 255)


def test_gray_level_counts_escape_steps():
    # c = 1: z runs 1, 2, 5 and leaves the radius-2 disc on step 2.
    assert Mandelbrot(10).get_pixel(mandel_point(1, 0)) == Rgba8(50, 50, 50, 255)


def test_last_step_is_included():
    # c = 1 needs three steps to escape; with two iterations the loop runs steps 0, 1, 2.
    assert Mandelbrot(2).get_pixel(mandel_point(1, 0)) == Rgba8(254, 254, 254, 255)
    assert Mandelbrot(1).get_pixel(mandel_point(1, 0)) == TRANSPARENT


@pytest.mark.parametrize("step, iterations, gray", [
    (0, 1, 0),
    (1, 1, 255),
    (10, 10, 250),
    (7, 100, 14),
    (299, 300, 0),
])
def test_escape_color_uses_integer_step_width(step, iterations, gray):
    assert escape_color(step, iterations) == Rgba8(gray, gray, gray, 255)


def test_julia_with_zero_constant_keeps_the_unit_disc():
    julia = Julia(50, 0.0, 0.0)
    assert julia.get_pixel(julia_point(0, 0)) == TRANSPARENT
    assert julia.get_pixel(julia_point(0.5, -0.5)) == TRANSPARENT


def test_julia_starts_from_the_point():
    # z0 = 1.1: |z|^2 goes 1.46, 2.14, 4.59 -> escapes on step 2.
    assert Julia(5, 0.0, 0.0).get_pixel(julia_point(1.1, 0)) == Rgba8(102, 102, 102, 255)
    assert Julia(5, 0.0, 0.0).get_pixel(julia_point(3, 0)) == Rgba8(0, 0, 0, 255)


def test_julia_uses_its_constant():
    # With c = 1 the origin follows the same orbit as the Mandelbrot point c = 1.
    assert Julia(10, 1.0, 0.0).get_pixel(julia_point(0, 0)) == Mandelbrot(10).get_pixel(mandel_point(1, 0))


@pytest.mark.parametrize("iterations", [0, -1])
def test_iteration_count_must_be_positive(iterations):
    with pytest.raises(InvalidIterationsError):
        Mandelbrot(iterations)
    with pytest.raises(InvalidIterationsError):
        Julia(iterations, 0.0, 0.0)


@pytest.mark.parametrize("iterations", [1.9, 2.5, "8", True])
def test_iteration_count_must_be_a_whole_number(iterations):
    with pytest.raises(InvalidIterationsError):
        Mandelbrot(iterations)
    with pytest.raises(InvalidIterationsError):
        Julia(iterations, 0.0, 0.0)


def test_integral_iteration_counts_are_accepted():
    assert Mandelbrot(np.int64(16)).iterations == 16
    assert Julia(np.int32(4), 0.0, 0.0).iterations == 4


def test_pixelators_reject_points_from_other_spaces():
    with pytest.raises(CoordinateSpaceMismatchError):
        Mandelbrot(10).get_pixel(Point(0.0, 0.0, Screen))
    with pytest.raises(CoordinateSpaceMismatchError):
        Julia(10, 0.0, 0.0).get_pixel(mandel_point(0, 0))


def test_decorator_evaluates_inner_pixelator_in_its_own_space(recorder):
    screen = screen_viewport(800, 800)
    fractal = Viewport(-2.0, 1.25, 2.5, -2.5, MandelbrotPlane)
    decorator = ViewportDecorator(screen.transformer(fractal), recorder)

    decorator.get_pixel(Point(640.0, 400.0, Screen))

    (seen,) = recorder.points
    assert seen.space is MandelbrotPlane
    assert (seen.x, seen.y) == pytest.approx((0.0, 0.0))


def test_decorated_mandelbrot_colors_screen_pixels():
    screen = screen_viewport(800, 800)
    fractal = Viewport(-2.0, 1.25, 2.5, -2.5, MandelbrotPlane)
    pixelator = screen.decorate_pixelator(fractal, Mandelbrot(20))

    assert pixelator.get_pixel(Point(640.0, 400.0, Screen)) == TRANSPARENT
    # Top-left corner is c = -2 + 1.25i, outside the radius-2 disc.
    assert pixelator.get_pixel(Point(0.0, 0.0, Screen)) == Rgba8(0, 0, 0, 255)
