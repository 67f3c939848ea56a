"""Complex-plane values and the pixel-to-plane mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from numba import njit

__all__ = ["Complex", "map_pixel", "pixel_to_point"]


@dataclass(frozen=True)
class Complex:
    """Double-precision complex value (real, imaginary)."""

    re: float
    im: float

    def __add__(self, other: Complex) -> Complex:
        return Complex(self.re + other.re, self.im + other.im)

    def __mul__(self, other: Complex) -> Complex:
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def norm_sqr(self) -> float:
        return self.re * self.re + self.im * self.im


@njit(nogil=True)
def map_pixel(
    width: int,
    height: int,
    col: int,
    row: int,
    tl_re: float,
    tl_im: float,
    br_re: float,
    br_im: float,
) -> Tuple[float, float]:
    plane_width = br_re - tl_re
    plane_height = tl_im - br_im
    return (
        tl_re + col * plane_width / width,
        tl_im - row * plane_height / height,
    )


def pixel_to_point(
    bounds: Tuple[int, int],
    pixel: Tuple[int, int],
    top_left: Complex,
    bottom_right: Complex,
) -> Complex:
    """Map pixel ``(col, row)`` of a ``(width, height)`` grid onto the plane.

    ``col == width`` and ``row == height`` are accepted and give the
    exclusive lower-right corner of the grid.
    """
    re, im = map_pixel(
        bounds[0],
        bounds[1],
        pixel[0],
        pixel[1],
        float(top_left.re),
        float(top_left.im),
        float(bottom_right.re),
        float(bottom_right.im),
    )
    return Complex(float(re), float(im))
