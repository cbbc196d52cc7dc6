"""Render points and hull segments as an R plotting script."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from models import LineSegment, Point


def render_rscript(
    points: Sequence[Point],
    segments: Sequence[LineSegment],
    *,
    png_filename: str = "convex.png",
    plot_range: int = 10000,
) -> str:
    """Return an Rscript that draws ``points`` and ``segments`` into a PNG."""

    lines: List[str] = [
        "#! /usr/bin/env Rscript",
        f'png("{png_filename}", width=700, height=700)',
        f'plot(1:{plot_range}, 1:{plot_range}, type="n")',
        "",
        "#points",
    ]
    lines.extend(f"points({p.x},{p.y})" for p in points)
    lines.append("")
    lines.append("#line segments")
    lines.extend(
        f"segments({s.start.x},{s.start.y},{s.end.x},{s.end.y})" for s in segments
    )
    lines.append("dev.off()")
    return "\n".join(lines) + "\n"


def write_rscript(path: str, script: str) -> None:
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    path_obj.write_text(script, encoding="utf-8")


__all__ = ["render_rscript", "write_rscript"]
