"""Scenario and property tests for the quickhull builder."""
from __future__ import annotations

import random
from typing import List, Set, Tuple

import pytest

from analysis import has_collinear_vertices, is_closed, points_outside, stitch_polygon
from models import LineSegment, Point
from point_source import generate_points, sort_points_by_x
from quickhull import build_chain, compute_convex_hull, full_hull
from validation import HullInputError


def _keys(segments) -> Set[Tuple[Point, Point]]:
    return {seg.key() for seg in segments}


def _reference_hull(points: List[Point]) -> Set[Point]:
    """Monotone chain hull vertices, collinear points dropped."""
    pts = sorted(set(points))
    if len(pts) <= 1:
        return set(pts)

    def cross(o, a, b):
        return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)

    lower: List[Point] = []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper: List[Point] = []
    for p in reversed(pts):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return set(lower[:-1] + upper[:-1])


# ---------- Scenarios -----------------------------------------------------------

def test_triangle():
    points = sort_points_by_x([Point(0, 0), Point(10, 0), Point(5, 10)])
    assert points == [Point(0, 0), Point(5, 10), Point(10, 0)]
    segments = compute_convex_hull(points, 3)
    assert len(segments) == 3
    assert _keys(segments) == {
        (Point(0, 0), Point(5, 10)),
        (Point(5, 10), Point(10, 0)),
        (Point(0, 0), Point(10, 0)),
    }


def test_interior_point_is_not_on_hull():
    points = sort_points_by_x([Point(0, 0), Point(10, 0), Point(5, 10), Point(5, 5)])
    segments = compute_convex_hull(points, len(points))
    assert len(segments) == 3
    assert all(Point(5, 5) not in (s.start, s.end) for s in segments)


def test_collinear_set_gives_two_coincident_segments():
    points = [Point(0, 0), Point(1, 1), Point(2, 2)]
    segments = compute_convex_hull(points, 3)
    assert segments == [
        LineSegment(Point(0, 0), Point(2, 2)),
        LineSegment(Point(2, 2), Point(0, 0)),
    ]
    assert _keys(segments) == {(Point(0, 0), Point(2, 2))}


def test_single_point_gives_no_segments():
    assert compute_convex_hull([Point(5, 5)], 1) == []


def test_identical_points_give_no_segments():
    assert full_hull([Point(3, 3), Point(3, 3), Point(3, 3)]) == []


def test_two_points():
    segments = compute_convex_hull([Point(1, 2), Point(4, 8)], 2)
    assert segments == [
        LineSegment(Point(1, 2), Point(4, 8)),
        LineSegment(Point(4, 8), Point(1, 2)),
    ]


def test_segment_order_is_upper_chain_then_lower_chain():
    points = sort_points_by_x(
        [Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0), Point(5, 5)]
    )
    assert full_hull(points) == [
        LineSegment(Point(0, 0), Point(0, 10)),
        LineSegment(Point(0, 10), Point(10, 10)),
        LineSegment(Point(10, 10), Point(10, 0)),
        LineSegment(Point(10, 0), Point(0, 0)),
    ]


def test_only_first_count_points_are_used():
    points = [Point(0, 0), Point(5, 10), Point(10, 0), Point(20, 50)]
    segments = compute_convex_hull(points, 3)
    assert Point(20, 50) not in {pt for s in segments for pt in (s.start, s.end)}


def test_tuples_are_accepted():
    segments = compute_convex_hull([(0, 0), (5, 10), (10, 0)], 3)
    assert len(segments) == 3


def test_duplicates_do_not_add_edges():
    points = sort_points_by_x(
        [Point(0, 0), Point(0, 0), Point(5, 10), Point(5, 10), Point(10, 0), Point(10, 0)]
    )
    segments = compute_convex_hull(points, len(points))
    assert len(segments) == 3
    assert is_closed(segments)

# ---------- build_chain ---------------------------------------------------------

def test_build_chain_empty_emits_single_segment():
    assert build_chain([], Point(0, 0), Point(4, 0)) == [LineSegment(Point(0, 0), Point(4, 0))]


def test_build_chain_first_farthest_point_wins_ties():
    p1, pn = Point(0, 0), Point(10, 0)
    segments = build_chain([Point(3, 5), Point(7, 5)], p1, pn)
    assert segments == [
        LineSegment(Point(0, 0), Point(3, 5)),
        LineSegment(Point(3, 5), Point(7, 5)),
        LineSegment(Point(7, 5), Point(10, 0)),
    ]


def test_build_chain_does_not_modify_input():
    pts = [Point(3, 5), Point(2, 1), Point(7, 5)]
    snapshot = list(pts)
    build_chain(pts, Point(0, 0), Point(10, 0))
    assert pts == snapshot


def test_long_convex_chain():
    # every point of a strictly convex curve is a hull vertex
    points = [Point(i, i * i) for i in range(1501)]
    segments = full_hull(points)
    assert len(segments) == len(points)
    assert is_closed(segments)

# ---------- Input validation ----------------------------------------------------

@pytest.mark.parametrize("count", [0, -3])
def test_non_positive_count_rejected(count):
    with pytest.raises(HullInputError):
        compute_convex_hull([Point(0, 0)], count)


def test_short_input_rejected():
    with pytest.raises(HullInputError, match="at least 3"):
        compute_convex_hull([Point(0, 0), Point(1, 1)], 3)


def test_unsorted_input_rejected():
    with pytest.raises(HullInputError, match="sorted"):
        compute_convex_hull([Point(5, 0), Point(0, 0), Point(9, 9)], 3)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ([Point(0, 0), Point(0, 5), Point(0, 0)], (Point(0, 0), Point(0, 5))),
        ([Point(0, 5), Point(0, 0), Point(0, 10)], (Point(0, 0), Point(0, 10))),
    ],
)
def test_vertical_run_must_be_ordered_by_y(raw, expected):
    with pytest.raises(HullInputError, match="sorted"):
        compute_convex_hull(raw, len(raw))

    points = sort_points_by_x(raw)
    segments = compute_convex_hull(points, len(points))
    assert _keys(segments) == {expected}
    assert points_outside(points, segments) == []


def test_non_integer_coordinates_rejected():
    with pytest.raises(HullInputError):
        compute_convex_hull([(0.5, 1), (2, 2)], 2)


def test_malformed_item_rejected():
    with pytest.raises(HullInputError, match="Item 1"):
        compute_convex_hull([(0, 0), (1, 2, 3)], 2)

# ---------- Properties ----------------------------------------------------------

@pytest.mark.parametrize(
    "seed,count,plot_range",
    [(0, 50, 10000), (1, 300, 10000), (2, 200, 20), (3, 500, 50), (4, 40, 5), (5, 1000, 1000)],
)
def test_hull_properties_on_random_sets(seed, count, plot_range):
    points = sort_points_by_x(generate_points(count, plot_range, seed=seed))
    segments = compute_convex_hull(points, len(points))
    expected = _reference_hull(points)

    if len(expected) < 3:
        pytest.skip("degenerate sample")

    # closure: one polygon, every endpoint shared by exactly two edges
    assert is_closed(segments)
    ring = stitch_polygon(segments)
    # convexity: nothing strictly outside
    assert points_outside(points, segments) == []
    # minimality: same vertices as the reference, no collinear runs
    assert set(ring) == expected
    assert len(segments) == len(expected)
    assert not has_collinear_vertices(ring)
    input_set = set(points)
    assert all(s.start in input_set and s.end in input_set for s in segments)


def test_same_hull_regardless_of_input_order():
    points = generate_points(400, 500, seed=11)
    baseline = _keys(compute_convex_hull(sort_points_by_x(points), len(points)))
    rnd = random.Random(3)
    for _ in range(5):
        shuffled = list(points)
        rnd.shuffle(shuffled)
        ordered = sort_points_by_x(shuffled)
        assert _keys(compute_convex_hull(ordered, len(ordered))) == baseline


def test_vertical_ties_resolved_by_sort():
    points = sort_points_by_x([Point(0, 5), Point(0, 0), Point(0, 10), Point(10, 5)])
    segments = compute_convex_hull(points, len(points))
    assert _keys(segments) == {
        (Point(0, 0), Point(0, 10)),
        (Point(0, 10), Point(10, 5)),
        (Point(0, 0), Point(10, 5)),
    }
