"""Core data models for convex hull computation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Coefficients = Tuple[int, int, int]


@dataclass(frozen=True, order=True)
class Point:
    """Integer 2D point. Orders lexicographically by (x, y)."""

    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class DirectedLine:
    """Line through two points; orientation decides which side is left."""

    start: Point
    end: Point

    @property
    def coefficients(self) -> Coefficients:
        """Return (a, b, c) of the implicit form ``a*x + b*y - c = 0``."""
        a = self.end.y - self.start.y
        b = self.start.x - self.end.x
        c = self.start.x * self.end.y - self.start.y * self.end.x
        return (a, b, c)

    def reversed(self) -> "DirectedLine":
        return DirectedLine(self.end, self.start)


@dataclass(frozen=True)
class LineSegment:
    """One hull edge, stored in discovery direction."""

    start: Point
    end: Point

    def key(self) -> Tuple[Point, Point]:
        """Endpoints in sorted order, so (p, q) and (q, p) compare equal."""
        return (self.start, self.end) if self.start <= self.end else (self.end, self.start)

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end


@dataclass
class RunConfig:
    """Settings shared by the CLI and the Streamlit viewer."""

    num_points: int = 100
    plot_range: int = 10000  # coordinates are drawn from 1..plot_range
    seed: Optional[int] = None
    png_filename: str = "convex.png"
    input_csv: Optional[str] = None
    output: Optional[str] = None  # None -> stdout


__all__ = [
    "Coefficients",
    "DirectedLine",
    "LineSegment",
    "Point",
    "RunConfig",
]
