# analysis.py
# Checks and metrics over a computed hull (stitching, closure, containment, area).
from __future__ import annotations
from typing import Dict, List, Sequence
import numpy as np

from models import LineSegment, Point

# ---------- Stitching -----------------------------------------------------------

def hull_vertices(segments: Sequence[LineSegment]) -> List[Point]:
    """Distinct segment endpoints, sorted by (x, y)."""
    return sorted({pt for seg in segments for pt in (seg.start, seg.end)})


def _adjacency(segments: Sequence[LineSegment]) -> Dict[Point, List[Point]]:
    adj: Dict[Point, List[Point]] = {}
    for seg in segments:
        if seg.is_degenerate:
            continue
        adj.setdefault(seg.start, []).append(seg.end)
        adj.setdefault(seg.end, []).append(seg.start)
    return adj


def stitch_polygon(segments: Sequence[LineSegment]) -> List[Point]:
    """Walk the segments by shared endpoints and return the vertex ring in CCW order.

    Raises ValueError if the segments are not a single closed loop in which
    every endpoint is shared by exactly two segments.
    """
    adj = _adjacency(segments)
    if not adj:
        return []
    for pt, nbrs in adj.items():
        if len(nbrs) != 2:
            raise ValueError(f"Vertex {pt.as_tuple()} touches {len(nbrs)} segments, expected 2.")

    start = min(adj)
    ring = [start]
    prev = None
    cur = start
    while True:
        nbrs = adj[cur]
        nxt = nbrs[1] if (prev is not None and nbrs[0] == prev) else nbrs[0]
        if nxt == start:
            break
        if len(ring) >= len(adj):
            raise ValueError("Segments do not form a single closed polygon.")
        ring.append(nxt)
        prev, cur = cur, nxt
    if len(ring) != len(adj):
        raise ValueError("Segments form more than one closed loop.")

    if len(ring) >= 3 and _signed_area2(ring) < 0:
        ring = [ring[0]] + ring[:0:-1]
    return ring


def is_closed(segments: Sequence[LineSegment]) -> bool:
    """True when the segments form one closed loop."""
    if not segments:
        return False
    try:
        stitch_polygon(segments)
    except ValueError:
        return False
    return True

# ---------- Metrics -------------------------------------------------------------

def _as_array(points: Sequence[Point]) -> np.ndarray:
    return np.array([(p.x, p.y) for p in points], dtype=np.int64).reshape(-1, 2)


def _signed_area2(ring: Sequence[Point]) -> int:
    xy = _as_array(ring)
    x, y = xy[:, 0], xy[:, 1]
    return int(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def polygon_area(ring: Sequence[Point]) -> float:
    """Shoelace area of a vertex ring (0 for fewer than three vertices)."""
    if len(ring) < 3:
        return 0.0
    return abs(_signed_area2(ring)) / 2.0


def points_outside(points: Sequence[Point], segments: Sequence[LineSegment]) -> List[Point]:
    """Input points lying strictly outside the hull described by ``segments``.

    Points on the boundary count as inside. For a degenerate two-vertex hull
    every point off the closed segment is outside.
    """
    if not points:
        return []
    ring = stitch_polygon(segments)
    if not ring:
        return list(points)

    pts = _as_array(points)
    verts = _as_array(ring)
    a = verts
    b = np.roll(verts, -1, axis=0)
    # cross[i, j]: side of point i relative to edge j (>0 left, <0 right)
    cross = ((b[:, 0] - a[:, 0])[None, :] * (pts[:, 1][:, None] - a[:, 1][None, :])
             - (b[:, 1] - a[:, 1])[None, :] * (pts[:, 0][:, None] - a[:, 0][None, :]))

    if len(ring) == 2:
        lo = verts.min(axis=0)
        hi = verts.max(axis=0)
        off_line = cross[:, 0] != 0
        off_box = np.any((pts < lo) | (pts > hi), axis=1)
        mask = off_line | off_box
    else:
        mask = np.any(cross < 0, axis=1)
    return [p for p, out in zip(points, mask) if out]


def has_collinear_vertices(ring: Sequence[Point]) -> bool:
    """True if three consecutive ring vertices are collinear."""
    n = len(ring)
    if n < 3:
        return False
    for i in range(n):
        o, a, b = ring[i - 1], ring[i], ring[(i + 1) % n]
        if (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x) == 0:
            return True
    return False

# ---------- Summary -------------------------------------------------------------

def hull_summary(points: Sequence[Point], segments: Sequence[LineSegment]) -> dict:
    closed = is_closed(segments)
    ring = stitch_polygon(segments) if closed else []
    return {"points": len(points),
            "segments": len(segments),
            "vertices": len(hull_vertices(segments)),
            "closed": bool(closed),
            "area": float(polygon_area(ring)),
            "outside": len(points_outside(points, segments)) if closed else None}


__all__ = [
    "has_collinear_vertices",
    "hull_summary",
    "hull_vertices",
    "is_closed",
    "points_outside",
    "polygon_area",
    "stitch_polygon",
]
