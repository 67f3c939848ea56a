"""Console and CSV reporting for renders."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import pandas as pd

from .config import RenderConfig
from .report import RenderReport


def log_report(
    config: RenderConfig,
    report: RenderReport,
    table_path: Optional[str | Path] = None,
) -> None:
    """Print the render summary and optionally save the per-band table.

    Args:
        config: Render configuration
        report: Combined outputs (image, timing stats, band table)
        table_path: CSV destination for the band records, skipped when ``None``
    """
    timing = report.timing or {}
    wall_time = float(timing.get("wall_time", 0.0))
    comp_total = float(timing.get("comp_total", 0.0))

    print(
        f"[Run] {config.run_name}: {timing.get('total_bands', 0)} bands "
        f"on {timing.get('pool_size', 0)} threads",
        flush=True,
    )
    print(f"[Timing] Total: {wall_time:.4f}s (band compute {comp_total:.4f}s)")

    band_records = report.copy_bands()
    if table_path is not None and band_records:
        frame = band_table(config, band_records)
        table_path = Path(table_path)
        table_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(table_path, index=False)
        print(f"[Run] Band table saved to {table_path}")


def band_table(config: RenderConfig, band_records: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    """Band records as a DataFrame, one row per band, tagged with the run parameters."""
    frame = pd.DataFrame.from_records(band_records)
    for key, value in config.to_dict().items():
        frame[key] = value
    frame["run_name"] = config.run_name
    return frame

