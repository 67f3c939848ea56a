"""Structured results returned from a parallel render."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np


@dataclass(frozen=True)
class RenderReport:
    """Container for outputs produced by ``run_render``."""

    image: np.ndarray
    timing: Dict[str, Any]
    bands: List[Dict[str, Any]]

    def copy_bands(self) -> List[Dict[str, Any]]:
        return [record.copy() for record in self.bands]
