"""Banded parallel Mandelbrot renderer."""

__version__ = "1.0.0"

# Core computation and config - no image encoder dependency
from .computation import escape_time, render
from .config import (
    RenderConfig,
    default_render_config,
    get_config_by_index,
    load_render_configs,
    parse_complex,
    parse_pair,
)
from .parallel import render_parallel, run_render
from .plane import Complex, pixel_to_point
from .report import RenderReport


# Conditional imports - only loaded when needed
def __getattr__(name):
    """Lazy loading of the image sink."""
    if name == "write_image":
        from .image import write_image

        return write_image
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Complex",
    "RenderConfig",
    "RenderReport",
    "default_render_config",
    "escape_time",
    "get_config_by_index",
    "load_render_configs",
    "parse_complex",
    "parse_pair",
    "pixel_to_point",
    "render",
    "render_parallel",
    "run_render",
    "write_image",
]
