import pytest

from fractalview import ExplorerConfig, JuliaConstant, ViewportDescriptor, default_config, load_config
from fractalview.config import DEFAULT_CONFIG, override_config, parse_image_size


def test_defaults():
    config = ExplorerConfig()
    assert config == DEFAULT_CONFIG
    assert config.fractal == "mandelbrot"
    assert config.active_viewport == ViewportDescriptor(-2.0, 1.25, 2.5, -2.5)
    assert config.constant == JuliaConstant(-0.8, 0.156)
    assert config.image_size == "400x400"


def test_default_config_overrides():
    config = default_config(fractal="JULIA", image_size="320x200", iterations="32")
    assert config.fractal == "julia"
    assert (config.width, config.height) == (320, 200)
    assert config.iterations == 32
    assert config.active_viewport == ViewportDescriptor(-2.0, 2.0, 4.0, -4.0)


def test_override_config_ignores_unset_values():
    config = override_config(DEFAULT_CONFIG, iterations=None, width=64)
    assert config.iterations == DEFAULT_CONFIG.iterations
    assert config.width == 64


def test_with_active_viewport_replaces_only_the_active_one():
    viewport = ViewportDescriptor(-1.0, 1.0, 2.0, -2.0)
    config = default_config(fractal="julia").with_active_viewport(viewport)
    assert config.julia_viewport == (-1.0, 1.0, 2.0, -2.0)
    assert config.mandelbrot_viewport == DEFAULT_CONFIG.mandelbrot_viewport


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "view.yaml"
    path.write_text(
        "fractal: julia\n"
        "iterations: 128\n"
        "image_size: 64x48\n"
        "julia_viewport: {x1: -1.5, y1: 1.5, dx: 3, dy: -3}\n"
        "julia_constant: [0.285, 0.01]\n"
        "colormap: magma\n"
    )
    config = load_config(path)
    assert config.fractal == "julia"
    assert config.iterations == 128
    assert (config.width, config.height) == (64, 48)
    assert config.julia_viewport == (-1.5, 1.5, 3.0, -3.0)
    assert config.constant == JuliaConstant(0.285, 0.01)
    assert config.colormap == "magma"


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


@pytest.mark.parametrize("text", [
    "zoom: 3\n",
    "fractal: burning-ship\n",
    "mandelbrot_viewport: [1, 2, 3]\n",
    "julia_constant: {real: 1}\n",
    "- just\n- a list\n",
    "iterations: 1.9\n",
])
def test_invalid_yaml_is_rejected(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_config(path)


def test_whole_float_iterations_are_accepted():
    assert default_config(iterations=32.0).iterations == 32


def test_parse_image_size():
    assert parse_image_size("640X480") == (640, 480)
