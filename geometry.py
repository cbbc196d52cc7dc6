# geometry.py
# Line predicates used by the partitioner and the hull builder.

from __future__ import annotations

from models import Coefficients, DirectedLine, Point


def line_coefficients(line: DirectedLine) -> Coefficients:
    """Return (a, b, c) of ``a*x + b*y - c = 0`` for ``line``."""
    return line.coefficients


def side_value(line: DirectedLine, point: Point) -> int:
    """Evaluate ``a*x + b*y - c`` at ``point``.

    Negative means the point is left of (above) the directed line, positive
    means right of (below) it, zero means collinear.
    """
    a, b, c = line_coefficients(line)
    return a * point.x + b * point.y - c


def signed_distance(line: DirectedLine, point: Point) -> int:
    """Unnormalized distance ``|a*x + b*y - c|`` from ``point`` to ``line``.

    The ``sqrt(a^2 + b^2)`` denominator is constant for a fixed line, so it
    is left out; only compare values computed against the same line.
    """
    return abs(side_value(line, point))


__all__ = ["line_coefficients", "side_value", "signed_distance"]
