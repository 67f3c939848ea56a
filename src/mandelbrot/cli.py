from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .config import RenderConfig, load_render_configs, parse_complex, parse_image_size
from .execution import run_single_render, run_sweep

_EXAMPLE = "e.g. mandel.png 1000x750 -1.20,0.35 -1,0.20"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mandelbrot-render",
        usage="%(prog)s [options] FILE PIXELS TOP_LEFT BOTTOM_RIGHT",
        description="Render the Mandelbrot set as a grayscale image.",
        epilog=f"{_EXAMPLE}. Options must precede the positional arguments.",
    )
    parser.add_argument("--workers", type=int, default=8,
                        help="number of horizontal bands rendered in parallel (default: 8)")
    parser.add_argument("--max-iterations", type=int, default=255, dest="max_iterations",
                        help="escape-time iteration limit, at most 255 (default: 255)")
    parser.add_argument("--band-table", type=str, dest="band_table", metavar="CSV",
                        help="write per-band timing records to this CSV file")
    parser.add_argument("--sweep", type=str, help="Path to a YAML batch file")
    parser.add_argument("--task-id", type=int, help="Run specific config index from the batch file")
    parser.add_argument("-v", "--verbose", action="store_true", help="print per-band progress")

    # REMAINDER keeps negative coordinates such as -1,0.20 from being read as options
    parser.add_argument("render", nargs=argparse.REMAINDER,
                        help="FILE PIXELS(WIDTHxHEIGHT) TOP_LEFT(RE,IM) BOTTOM_RIGHT(RE,IM)")
    return parser


def _config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> RenderConfig:
    if len(args.render) != 4:
        parser.error(f"expected FILE PIXELS TOP_LEFT BOTTOM_RIGHT, {_EXAMPLE}")

    output, pixels, top_left_arg, bottom_right_arg = args.render
    bounds = parse_image_size(pixels)
    if bounds is None:
        parser.error(f"error parsing PIXELS: {pixels!r}")
    top_left = parse_complex(top_left_arg)
    if top_left is None:
        parser.error(f"error parsing TOP_LEFT: {top_left_arg!r}")
    bottom_right = parse_complex(bottom_right_arg)
    if bottom_right is None:
        parser.error(f"error parsing BOTTOM_RIGHT: {bottom_right_arg!r}")

    try:
        return RenderConfig(
            output=output,
            width=bounds[0],
            height=bounds[1],
            top_left=top_left,
            bottom_right=bottom_right,
            workers=args.workers,
            max_iterations=args.max_iterations,
        )
    except ValueError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Handle batch runs
    if args.sweep:
        if args.render:
            parser.error("--sweep does not take positional arguments")
        sweep_path = Path(args.sweep)
        try:
            configs = load_render_configs(sweep_path)
        except (OSError, TypeError, ValueError, yaml.YAMLError) as exc:
            parser.error(f"error loading {sweep_path}: {exc}")
        return run_sweep(configs, str(sweep_path), args.task_id, args.verbose)

    if args.task_id is not None:
        parser.error("--task-id requires --sweep")

    config = _config_from_args(parser, args)
    try:
        run_single_render(config, verbose=args.verbose, table_path=args.band_table)
    except OSError as exc:
        print(f"ERROR: error writing image file: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
