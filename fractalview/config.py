"""Configuration objects and YAML loading for fractal exploration runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

from .session import JuliaConstant, ViewportDescriptor

FRACTAL_KINDS = ("mandelbrot", "julia")


@dataclass(frozen=True)
class ExplorerConfig:
    """Everything needed to render one view of either fractal."""

    fractal: str = "mandelbrot"
    iterations: int = 64
    width: int = 400
    height: int = 400
    # Negative dy puts +imag at the top of the screen.
    mandelbrot_viewport: Tuple[float, float, float, float] = (-2.0, 1.25, 2.5, -2.5)
    julia_viewport: Tuple[float, float, float, float] = (-2.0, 2.0, 4.0, -4.0)
    julia_constant: Tuple[float, float] = (-0.8, 0.156)
    colormap: Optional[str] = None

    def __post_init__(self) -> None:
        if self.fractal not in FRACTAL_KINDS:
            raise ValueError(f"Unknown fractal '{self.fractal}'. Valid choices: {', '.join(FRACTAL_KINDS)}.")

    @property
    def active_viewport(self) -> ViewportDescriptor:
        raw = self.mandelbrot_viewport if self.fractal == "mandelbrot" else self.julia_viewport
        return ViewportDescriptor(*raw)

    @property
    def constant(self) -> JuliaConstant:
        return JuliaConstant(*self.julia_constant)

    @property
    def image_size(self) -> str:
        return f"{self.width}x{self.height}"

    def with_active_viewport(self, viewport: ViewportDescriptor) -> ExplorerConfig:
        key = "mandelbrot_viewport" if self.fractal == "mandelbrot" else "julia_viewport"
        return replace(self, **{key: viewport.as_tuple()})

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_CONFIG = ExplorerConfig()


def default_config(**overrides: object) -> ExplorerConfig:
    """Return the default config optionally overridden with kwargs."""
    return override_config(DEFAULT_CONFIG, **overrides)


def override_config(base: ExplorerConfig, **overrides: object) -> ExplorerConfig:
    """Return ``base`` with every override that is not ``None`` applied."""
    return replace(base, **_coerce({k: v for k, v in overrides.items() if v is not None}))


def load_config(yaml_path: str | Path, base: ExplorerConfig = DEFAULT_CONFIG) -> ExplorerConfig:
    """Apply the keys of a YAML mapping on top of ``base``."""
    with open(yaml_path) as f:
        cfg = yaml.safe_load(f) or {}

    if not isinstance(cfg, dict):
        raise ValueError(f"{yaml_path}: expected a mapping at the top level")

    return replace(base, **_coerce(cfg))


def parse_image_size(value: str) -> Tuple[int, int]:
    width_str, height_str = value.lower().split("x")
    return int(width_str.strip()), int(height_str.strip())


def _coerce(raw: Dict[str, object]) -> Dict[str, object]:
    data = dict(raw)
    image = data.pop("image_size", None)
    if image is not None:
        width, height = parse_image_size(str(image))
        data.setdefault("width", width)
        data.setdefault("height", height)

    known = {f.name for f in fields(ExplorerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    for name in ("iterations", "width", "height"):
        if name in data:
            data[name] = _whole_number(name, data[name])
    for name, size in (("mandelbrot_viewport", 4), ("julia_viewport", 4), ("julia_constant", 2)):
        if name in data:
            data[name] = _float_tuple(name, data[name], size)
    if "fractal" in data:
        data["fractal"] = str(data["fractal"]).lower()
    return data


def _whole_number(name: str, value: object) -> int:
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return int(value)


def _float_tuple(name: str, value: object, size: int) -> tuple:
    if isinstance(value, dict):
        keys = ("x1", "y1", "dx", "dy") if size == 4 else ("real", "imag")
        missing = [k for k in keys if k not in value]
        if missing:
            raise ValueError(f"{name} must include {', '.join(keys)}")
        value = [value[k] for k in keys]
    if not isinstance(value, (list, tuple)) or len(value) != size:
        raise ValueError(f"{name} must have {size} numbers, got {value!r}")
    return tuple(float(v) for v in value)
