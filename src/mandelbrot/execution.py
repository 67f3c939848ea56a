"""Execution helpers for Mandelbrot CLI workflows."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from .config import RenderConfig
from .image import write_image
from .logging import log_report
from .parallel import run_render


def run_single_render(
    config: RenderConfig,
    verbose: bool = False,
    table_path: Optional[str | Path] = None,
) -> Path:
    """Render one configuration and write its image."""
    print(
        f"[Run] Starting render '{config.run_name}' "
        f"(size={config.image_size}, workers={config.workers}, "
        f"max_iterations={config.max_iterations})",
        flush=True,
    )

    report = run_render(config, verbose=verbose)
    path = write_image(config.output, report.image, config.bounds)
    log_report(config, report, table_path)
    print(f"[Run] Image written to {path}")
    return path


def run_sweep(
    configs: List[RenderConfig],
    descriptor: str = "sweep",
    task_id: Optional[int] = None,
    verbose: bool = False,
) -> int:
    """Run a batch of renders in-process and return an exit code."""
    if not configs:
        print("ERROR: No configurations found in sweep", file=sys.stderr)
        return 1

    if task_id is not None:
        if task_id < 0 or task_id >= len(configs):
            print(f"ERROR: task-id {task_id} out of range [0, {len(configs) - 1}]", file=sys.stderr)
            return 1
        config = configs[task_id]
        print(f"[Task {task_id}] Running: {config.run_name}")
        try:
            run_single_render(config, verbose=verbose)
        except OSError as exc:
            print(f"    ✗ FAILED: {exc}", file=sys.stderr)
            return 1
        return 0

    print("=" * 70)
    print(f"Running {len(configs)} configurations from {descriptor}")
    print("=" * 70)

    successes = 0
    failures: list[tuple[int, str]] = []

    for idx, cfg in enumerate(configs):
        print(f"\n[{idx + 1}/{len(configs)}] {cfg.run_name}")
        try:
            run_single_render(cfg, verbose=verbose)
        except OSError as exc:
            print(f"    ✗ FAILED: {exc}", file=sys.stderr)
            failures.append((idx, cfg.run_name))
            continue
        successes += 1
        print("    ✓ Completed")

    print("\n" + "=" * 70)
    print("Summary")
    print("=" * 70)
    print(f"Total:      {len(configs)}")
    print(f"Successful: {successes}")
    print(f"Failed:     {len(failures)}")

    if failures:
        print("\nFailed configurations:")
        for idx, name in failures:
            print(f"  [{idx}] {name}")
        return 1

    return 0
