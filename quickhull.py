"""Quickhull: divide-and-conquer convex hull over integer 2D points.

The hull is returned as a list of :class:`LineSegment` edges in discovery
order. Edges are not guaranteed to be adjacent to each other; use
:func:`analysis.stitch_polygon` to walk them as a polygon.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from geometry import signed_distance
from models import DirectedLine, LineSegment, Point
from partition import partition
from validation import validate_hull_input

_ChainTask = Tuple[List[Point], Point, Point]


def _farthest_point(points: Sequence[Point], p1: Point, pn: Point) -> Point:
    line = DirectedLine(p1, pn)
    best = points[0]
    best_dist = -1
    for pt in points:
        dist = signed_distance(line, pt)
        # strict '>' keeps the first point found on ties
        if dist > best_dist:
            best_dist = dist
            best = pt
    return best


def build_chain(points: Sequence[Point], p1: Point, pn: Point) -> List[LineSegment]:
    """Return the hull edges between anchors ``p1`` and ``pn``.

    ``points`` must hold only points strictly on the left of ``p1 -> pn``.
    Work is kept on an explicit stack, so degenerate inputs whose split
    depth grows with the number of points do not exhaust the interpreter
    stack. Edges come out in the same order a depth-first recursion (left
    branch first) would produce them.
    """

    segments: List[LineSegment] = []
    stack: List[_ChainTask] = [(list(points), p1, pn)]
    while stack:
        subset, start, end = stack.pop()
        if not subset:
            segments.append(LineSegment(start, end))
            continue

        p_far = _farthest_point(subset, start, end)
        outer_left, _ = partition(subset, start, p_far)
        outer_right, _ = partition(subset, p_far, end)

        # LIFO: push the right branch first so the left one is emitted first.
        stack.append((outer_right, p_far, end))
        stack.append((outer_left, start, p_far))
    return segments


def full_hull(points: Sequence[Point]) -> List[LineSegment]:
    """Build the closed hull of ``points`` (sorted ascending by (x, y)).

    ``points[0]`` and ``points[-1]`` are the anchors. A single point, or a
    set whose anchors coincide, yields no segments. A collinear set yields
    the two coincident segments ``(min, max)`` and ``(max, min)``.
    """

    if len(points) < 2:
        return []
    p_min = points[0]
    p_max = points[-1]
    if p_min == p_max:
        return []

    upper, lower = partition(points, p_min, p_max)
    hull = build_chain(upper, p_min, p_max)
    hull.extend(build_chain(lower, p_max, p_min))
    return hull


def compute_convex_hull(points: Sequence, count: int) -> List[LineSegment]:
    """Validate the first ``count`` points and return their convex hull.

    Raises
    ------
    validation.HullInputError
        If ``count`` is not positive, ``points`` holds fewer than ``count``
        items, or the points are not sorted by (x, y).
    """

    resolved = validate_hull_input(points, count)
    return full_hull(resolved)


__all__ = ["build_chain", "compute_convex_hull", "full_hull"]
