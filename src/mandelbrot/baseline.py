"""Baseline Mandelbrot implementation."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .plane import Complex, pixel_to_point


def escape_time(c: Complex, limit: int) -> Optional[int]:
    """Escape time of ``c`` using plain ``Complex`` arithmetic."""
    z = Complex(0.0, 0.0)
    for i in range(limit):
        z = z * z + c
        if z.norm_sqr() > 4.0:
            return i
    return None


def compute_mandelbrot(
    bounds: Tuple[int, int],
    top_left: Complex,
    bottom_right: Complex,
    limit: int = 255,
) -> np.ndarray:
    """Compute a single-band grayscale image one pixel at a time."""
    width, height = bounds
    image = np.zeros(width * height, dtype=np.uint8)

    for row in range(height):
        for col in range(width):
            point = pixel_to_point(bounds, (col, row), top_left, bottom_right)
            i = escape_time(point, limit)
            image[row * width + col] = 0 if i is None else 255 - i

    return image
