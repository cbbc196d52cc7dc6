"""Split a point set by a directed line."""
from __future__ import annotations

from typing import Iterable, List, Tuple

from geometry import side_value
from models import DirectedLine, Point


def partition(
    points: Iterable[Point], start: Point, end: Point
) -> Tuple[List[Point], List[Point]]:
    """Return ``(left, right)`` subsets of ``points`` for the line ``start -> end``.

    Collinear points are dropped from both outputs, as is any point equal to
    ``start`` or ``end``. Input order is kept and ``points`` is not modified.
    """

    line = DirectedLine(start, end)
    left: List[Point] = []
    right: List[Point] = []
    for pt in points:
        if pt == start or pt == end:
            continue
        value = side_value(line, pt)
        if value < 0:
            left.append(pt)
        elif value > 0:
            right.append(pt)
    return left, right


__all__ = ["partition"]
