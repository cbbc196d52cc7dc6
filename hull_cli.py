#!/usr/bin/env python3
"""Generate (or load) points, compute their convex hull and emit an R plot script.

Usage: hull_cli.py number_of_points [key=value ...]

Settings: seed, range, png_filename, input_csv, output. With ``input_csv``
the points are read from the file and ``number_of_points`` caps how many are
used (0 = all of them).
"""
from __future__ import annotations

import sys
from typing import Dict, List, Optional

from analysis import hull_summary
from io_points_csv import CsvFormatError, load_points_csv
from models import RunConfig
from point_source import generate_points, sort_points_by_x
from quickhull import compute_convex_hull
from rscript import render_rscript, write_rscript
from validation import apply_overrides_to_config

USAGE = "Usage: hull_cli.py number_of_points [key=value ...]"


def _parse_overrides(args: List[str]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected key=value, got {arg!r}")
        overrides[key] = value
    return overrides


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        num_point = int(args[0])
        cfg = apply_overrides_to_config(_parse_overrides(args[1:]), RunConfig())
    except ValueError as exc:
        print(f"{exc}\n{USAGE}", file=sys.stderr)
        return 1

    if cfg.input_csv:
        try:
            points = load_points_csv(cfg.input_csv)
        except (CsvFormatError, OSError) as exc:
            print(f"Failed to load points: {exc}", file=sys.stderr)
            return 1
        if num_point > 0:
            points = points[:num_point]
        num_point = len(points)
    if num_point <= 0:
        print("The number of points should be a positive integer!", file=sys.stderr)
        return 0
    cfg.num_points = num_point

    if not cfg.input_csv:
        points = generate_points(cfg.num_points, cfg.plot_range, cfg.seed)
        print(f"{cfg.num_points} points created!", file=sys.stderr)

    points = sort_points_by_x(points)
    segments = compute_convex_hull(points, cfg.num_points)
    print(f"{len(segments)} lines created!", file=sys.stderr)

    summary = hull_summary(points, segments)
    if summary["closed"]:
        print(f"hull: {summary['vertices']} vertices, area={summary['area']:.1f}", file=sys.stderr)

    script = render_rscript(
        points, segments, png_filename=cfg.png_filename, plot_range=cfg.plot_range
    )
    if cfg.output:
        write_rscript(cfg.output, script)
        print(f"Wrote: {cfg.output}", file=sys.stderr)
    else:
        sys.stdout.write(script)
    return 0


if __name__ == "__main__":
    sys.exit(main())
