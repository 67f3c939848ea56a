from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from numba import njit

from .plane import Complex, map_pixel

__all__ = ["ESCAPE_LIMIT", "allocate_image", "escape_time", "render"]

ESCAPE_LIMIT = 255
BOUNDED = -1


def allocate_image(bounds: Tuple[int, int]) -> np.ndarray:
    return np.zeros(bounds[0] * bounds[1], dtype=np.uint8)


@njit(nogil=True)
def _escape_time(c_re: float, c_im: float, limit: int) -> int:
    z_re = 0.0
    z_im = 0.0
    for i in range(limit):
        z_re, z_im = (
            z_re * z_re - z_im * z_im + c_re,
            z_re * z_im + z_im * z_re + c_im,
        )
        if z_re * z_re + z_im * z_im > 4.0:
            return i
    return BOUNDED


@njit(nogil=True)
def _render_band(
    pixels: np.ndarray,
    width: int,
    height: int,
    tl_re: float,
    tl_im: float,
    br_re: float,
    br_im: float,
    limit: int,
) -> None:
    for row in range(height):
        for col in range(width):
            re, im = map_pixel(width, height, col, row, tl_re, tl_im, br_re, br_im)
            i = _escape_time(re, im, limit)
            if i == BOUNDED:
                pixels[row * width + col] = 0
            else:
                pixels[row * width + col] = 255 - i


def escape_time(c: Complex, limit: int) -> Optional[int]:
    """Return the iteration at which ``c`` escapes, or ``None`` if it stays bounded."""
    i = _escape_time(float(c.re), float(c.im), limit)
    return None if i == BOUNDED else int(i)


def render(
    pixels: np.ndarray,
    bounds: Tuple[int, int],
    top_left: Complex,
    bottom_right: Complex,
    limit: int = ESCAPE_LIMIT,
) -> None:
    """Fill ``pixels`` (flat, row-major, uint8) with escape-time intensities."""
    width, height = bounds
    if pixels.size != width * height:
        raise ValueError(
            f"Buffer of {pixels.size} bytes does not match bounds {width}x{height}"
        )
    _render_band(
        pixels,
        width,
        height,
        float(top_left.re),
        float(top_left.im),
        float(bottom_right.re),
        float(bottom_right.im),
        limit,
    )
