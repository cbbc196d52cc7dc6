"""Random point generation and the x-sort required by the hull builder."""
from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from models import Point


def generate_points(count: int, plot_range: int, seed: Optional[int] = None) -> List[Point]:
    """Draw ``count`` points with both coordinates in ``1..plot_range``."""

    if count <= 0:
        raise ValueError(f"Point count must be positive, got {count}.")
    if plot_range <= 0:
        raise ValueError(f"Coordinate range must be positive, got {plot_range}.")
    rng = np.random.default_rng(seed)
    coords = rng.integers(1, plot_range, size=(count, 2), endpoint=True)
    return [Point(int(x), int(y)) for x, y in coords]


def sort_points_by_x(points: Iterable[Point]) -> List[Point]:
    """Sort by x, breaking ties by y, so the first and last points are hull anchors."""

    return sorted(points, key=lambda p: (p.x, p.y))


__all__ = ["generate_points", "sort_points_by_x"]
