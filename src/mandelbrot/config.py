"""Configuration objects, argument parsing helpers and YAML loading for renders."""

from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import product
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, TypeVar

import yaml

from .plane import Complex

T = TypeVar("T", int, float)

MAX_ITERATION_LIMIT = 255


def parse_pair(s: str, separator: str, kind: Callable[[str], T] = int) -> Optional[Tuple[T, T]]:
    """Parse ``"<a><separator><b>"`` into ``(a, b)``, or ``None`` if malformed.

    The string is split at the first separator and each side must parse
    completely as ``kind``.
    """
    index = s.find(separator)
    if index < 0:
        return None
    left = _parse_number(s[:index], kind)
    right = _parse_number(s[index + 1 :], kind)
    if left is None or right is None:
        return None
    return left, right


def _parse_number(text: str, kind: Callable[[str], T]) -> Optional[T]:
    # int()/float() tolerate whitespace and digit separators; a pair does not
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return kind(text)
    except ValueError:
        return None


def parse_complex(s: str) -> Optional[Complex]:
    pair = parse_pair(s, ",", float)
    if pair is None:
        return None
    return Complex(pair[0], pair[1])


def parse_image_size(value: str) -> Optional[Tuple[int, int]]:
    return parse_pair(value, "x", int)


@dataclass(frozen=True)
class RenderConfig:
    """Runtime configuration for a single render."""

    output: str
    width: int
    height: int
    top_left: Complex
    bottom_right: Complex
    workers: int = 8
    max_iterations: int = 255

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be at least 1x1, got {self.image_size}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if not 0 <= self.max_iterations <= MAX_ITERATION_LIMIT:
            raise ValueError(
                f"max_iterations must be in [0, {MAX_ITERATION_LIMIT}], got {self.max_iterations}"
            )

    @property
    def bounds(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def image_size(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def run_name(self) -> str:
        """Generate unique run name embedding the render parameters."""
        return (
            f"mandelbrot_{self.image_size}_"
            f"{self.top_left.re},{self.top_left.im}_"
            f"{self.bottom_right.re},{self.bottom_right.im}_"
            f"w{self.workers}_i{self.max_iterations}"
        )

    def to_dict(self) -> dict:
        return {
            "output": self.output,
            "width": self.width,
            "height": self.height,
            "top_left": f"{self.top_left.re},{self.top_left.im}",
            "bottom_right": f"{self.bottom_right.re},{self.bottom_right.im}",
            "workers": self.workers,
            "max_iterations": self.max_iterations,
        }


DEFAULT_RENDER_CONFIG = RenderConfig(
    output="mandel.png",
    width=1000,
    height=750,
    top_left=Complex(-1.20, 0.35),
    bottom_right=Complex(-1.0, 0.20),
)


def default_render_config(**overrides: object) -> RenderConfig:
    """Return the canonical default config optionally overridden with kwargs."""
    return replace(DEFAULT_RENDER_CONFIG, **_coerce_fields(overrides))


def load_render_configs(yaml_path: str | Path) -> List[RenderConfig]:
    """Load a YAML batch file and expand every render entry.

    The file holds optional top-level ``defaults`` and a ``renders`` list.
    Each entry may carry a ``sweep`` mapping of lists, expanded as a
    cartesian product over the listed fields.
    """
    with open(yaml_path) as f:
        cfg = yaml.safe_load(f) or {}

    defaults: Dict[str, object] = cfg.get("defaults", {}) or {}
    configs: List[RenderConfig] = []
    for entry in cfg.get("renders") or []:
        entry = dict(entry)
        sweep = entry.pop("sweep", None) or {}
        configs.extend(_expand_sweep({**defaults, **entry}, sweep))
    return configs


def get_config_by_index(yaml_path: str | Path, index: int) -> RenderConfig:
    """Get a specific config by index from a batch file."""
    configs = load_render_configs(yaml_path)
    if index < 0 or index >= len(configs):
        raise ValueError(f"Config index {index} out of range [0, {len(configs) - 1}]")
    return configs[index]


def _expand_sweep(base: Dict[str, object], sweep: Dict[str, object]) -> List[RenderConfig]:
    keys = list(sweep.keys())
    if not keys:
        return [_build_render_config(base)]

    configs: List[RenderConfig] = []
    for combo in product(*[sweep[k] for k in keys]):
        configs.append(_build_render_config({**base, **dict(zip(keys, combo))}))
    return configs


def _build_render_config(raw_data: Dict[str, object]) -> RenderConfig:
    data = _coerce_fields(raw_data)
    if "output" not in data:
        raise ValueError("Render entry is missing 'output'")
    config = RenderConfig(**data)  # type: ignore[arg-type]
    output = config.output.format(run_name=config.run_name, **config.to_dict())
    return replace(config, output=output)


def _coerce_fields(data: Dict[str, object]) -> Dict[str, object]:
    result = dict(data)
    image = result.pop("image_size", None)
    if image is not None:
        width, height = _normalize_shape_entry(image)
        result.setdefault("width", width)
        result.setdefault("height", height)
    for key in ("width", "height", "workers", "max_iterations"):
        if key in result:
            result[key] = int(result[key])
    for key in ("top_left", "bottom_right"):
        if key in result:
            result[key] = _normalize_point(result[key])
    if "output" in result:
        result["output"] = str(result["output"])
    return result


def _normalize_shape_entry(entry: object) -> Tuple[int, int]:
    if isinstance(entry, dict):
        width = entry.get("width")
        height = entry.get("height")
        if width is None or height is None:
            raise ValueError("image_size dict must include 'width' and 'height'")
        return int(width), int(height)
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return int(entry[0]), int(entry[1])
    if isinstance(entry, str):
        size = parse_image_size(entry)
        if size is not None:
            return size
    raise ValueError(f"Unsupported image size specification: {entry!r}")


def _normalize_point(entry: object) -> Complex:
    if isinstance(entry, Complex):
        return entry
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        return Complex(float(entry[0]), float(entry[1]))
    if isinstance(entry, str):
        point = parse_complex(entry)
        if point is not None:
            return point
    raise ValueError(f"Unsupported complex point specification: {entry!r}")
