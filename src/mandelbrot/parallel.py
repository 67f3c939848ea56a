"""Thread-parallel band dispatch for Mandelbrot rendering."""

from __future__ import annotations

import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Tuple

import numpy as np

from .computation import ESCAPE_LIMIT, allocate_image, render
from .config import RenderConfig
from .plane import Complex
from .report import RenderReport
from .scheduling import Band, split_bands

__all__ = ["pool_size", "render_parallel", "run_render"]

DEFAULT_WORKERS = 8


def _band_log(index: int, message: str) -> None:
    """Emit a progress message for a given band."""
    print(f"[Band {index}] {message}", flush=True)


def pool_size(band_count: int) -> int:
    """Number of threads to run ``band_count`` bands on."""
    return max(1, min(band_count, os.cpu_count() or 1))


def _render_band_timed(band: Band, limit: int) -> float:
    start = time.perf_counter()
    render(band.pixels, band.bounds, band.top_left, band.bottom_right, limit)
    return time.perf_counter() - start


def _band_record(band: Band, comp_time: float) -> Dict:
    """Create a uniform band metadata record."""
    return {
        "band": band.index,
        "start_row": band.top,
        "end_row": band.top + band.bounds[1],
        "rows": band.bounds[1],
        "comp_time": comp_time,
    }


def _dispatch(
    bands: List[Band],
    limit: int,
    verbose: bool = False,
) -> Tuple[List[Dict], int]:
    """Render every band on its own task and wait for all of them."""
    threads = pool_size(len(bands))
    records: List[Dict] = []
    with ThreadPoolExecutor(max_workers=threads, thread_name_prefix="band") as pool:
        futures = [pool.submit(_render_band_timed, band, limit) for band in bands]
        # result() re-raises the first band failure; no partial image is returned
        for band, future in zip(bands, futures):
            comp_time = future.result()
            if verbose:
                _band_log(
                    band.index,
                    f"rows {band.top}:{band.top + band.bounds[1]} took {comp_time:.4f}s",
                )
            records.append(_band_record(band, comp_time))
    return records, threads


def render_parallel(
    bounds: Tuple[int, int],
    top_left: Complex,
    bottom_right: Complex,
    worker_count: int = DEFAULT_WORKERS,
    limit: int = ESCAPE_LIMIT,
) -> np.ndarray:
    """Render the full image by splitting it into ``worker_count`` bands."""
    pixels = allocate_image(bounds)
    bands = split_bands(pixels, bounds, top_left, bottom_right, worker_count)
    _dispatch(bands, limit)
    return pixels


def run_render(config: RenderConfig, verbose: bool = False) -> RenderReport:
    """Execute a render and return the image with timing and band records."""
    start_time = time.perf_counter()

    pixels = allocate_image(config.bounds)
    bands = split_bands(
        pixels, config.bounds, config.top_left, config.bottom_right, config.workers
    )
    records, threads = _dispatch(bands, config.max_iterations, verbose)

    total_time = time.perf_counter() - start_time
    timing = {
        "wall_time": float(total_time),
        "comp_total": float(sum(record["comp_time"] for record in records)),
        "total_bands": len(records),
        "pool_size": threads,
    }
    return RenderReport(pixels, timing, records)
