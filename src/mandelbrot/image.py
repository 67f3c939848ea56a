"""Grayscale image output."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image


def write_image(path: str | Path, pixels: np.ndarray, bounds: Tuple[int, int]) -> Path:
    """Write a flat row-major uint8 buffer as a single-channel 8-bit image.

    The format follows the file extension; paths without an extension Pillow
    can write are saved as PNG. ``OSError`` from the filesystem or the
    encoder is not caught.
    """
    width, height = bounds
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = np.asarray(pixels, dtype=np.uint8).reshape(height, width)
    # extensions Pillow can only read fall back to PNG as well
    writable = Image.registered_extensions().get(path.suffix.lower()) in Image.SAVE
    Image.fromarray(frame).save(path, format=None if writable else "PNG")
    return path
