"""Band partitioning for parallel Mandelbrot rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .plane import Complex, pixel_to_point

__all__ = ["Band", "StaticScheduler", "rows_per_band", "split_bands"]


def rows_per_band(height: int, worker_count: int) -> int:
    if worker_count < 1:
        raise ValueError(f"worker_count must be >= 1, got {worker_count}")
    return (height + worker_count - 1) // worker_count


@dataclass(frozen=True)
class Band:
    """One horizontal slice of the image and its exclusive buffer view."""

    index: int
    top: int
    bounds: Tuple[int, int]
    top_left: Complex
    bottom_right: Complex
    pixels: np.ndarray = field(repr=False, compare=False)

    @property
    def start(self) -> int:
        return self.top * self.bounds[0]

    @property
    def stop(self) -> int:
        return self.start + self.bounds[0] * self.bounds[1]


@dataclass
class StaticScheduler:
    """Static band plan - fixed row ranges derived from the worker count."""
    bounds: Tuple[int, int]
    worker_count: int
    rows: List[Tuple[int, int]] = field(init=False)

    def __post_init__(self) -> None:
        height = self.bounds[1]
        step = rows_per_band(height, self.worker_count)
        self.rows = [(top, min(top + step, height)) for top in range(0, height, step)]

    @property
    def rows_per_band(self) -> int:
        return rows_per_band(self.bounds[1], self.worker_count)

    @property
    def total_bands(self) -> int:
        return len(self.rows)

    def band_corners(
        self, band_index: int, top_left: Complex, bottom_right: Complex
    ) -> Tuple[Complex, Complex]:
        """Plane corners of a band, always mapped through the full image bounds."""
        top, end = self.rows[band_index]
        band_top_left = pixel_to_point(self.bounds, (0, top), top_left, bottom_right)
        band_bottom_right = pixel_to_point(
            self.bounds, (self.bounds[0], end), top_left, bottom_right
        )
        return band_top_left, band_bottom_right


def split_bands(
    pixels: np.ndarray,
    bounds: Tuple[int, int],
    top_left: Complex,
    bottom_right: Complex,
    worker_count: int,
) -> List[Band]:
    """Carve ``pixels`` into disjoint row-contiguous bands."""
    width, height = bounds
    if pixels.size != width * height:
        raise ValueError(
            f"Buffer of {pixels.size} bytes does not match bounds {width}x{height}"
        )

    scheduler = StaticScheduler(bounds, worker_count)
    bands: List[Band] = []
    for index, (top, end) in enumerate(scheduler.rows):
        band_top_left, band_bottom_right = scheduler.band_corners(index, top_left, bottom_right)
        bands.append(
            Band(
                index=index,
                top=top,
                bounds=(width, end - top),
                top_left=band_top_left,
                bottom_right=band_bottom_right,
                pixels=pixels[top * width : end * width],
            )
        )
    return bands
