import math

import pytest

from delaunay.line_segment import (
    LineSegment,
    closest_point,
    closest_point_between,
    coincident,
    contains_point,
    contains_segment,
    distance_between,
    distance_to_point,
    intersect,
    intersect_or_coincident,
    intersection,
    length,
    length_squared,
)
from delaunay.point import EPSILON, Point


@pytest.fixture
def shapes():
    p00 = Point(0.0, 0.0)
    p01 = Point(1.0, 1.0)
    p10 = Point(1.0, 0.0)
    p11 = Point(0.0, 1.0)
    p2 = Point(0.5, 0.5)
    return {
        "p00": p00,
        "p01": p01,
        "p10": p10,
        "p11": p11,
        "p2": p2,
        "l0": LineSegment(p00, p01),
        "l1": LineSegment(p10, p11),
        "l2": LineSegment(p00, p01),
        "l3": LineSegment(p00, p2),
        "l4": LineSegment(p00, p10),
        "l5": LineSegment(p10, p01),
    }


def test_line_segment_comparisons():
    p00 = Point(0.0, 0.0)
    p01 = Point(1.0, 1.0)
    l0 = LineSegment(p00, p01)
    l1 = LineSegment(Point(1.0, 0.0), Point(1.0, 0.0))
    l2 = LineSegment(p00, p01)

    assert l0 != l1
    assert l0 == l2
    assert l0 < l1


def test_endpoints_are_ordered():
    seg = LineSegment(Point(2.0, 3.0), Point(1.0, 5.0))
    assert seg.a == Point(1.0, 5.0)
    assert seg.b == Point(2.0, 3.0)
    assert LineSegment(Point(1, 5), Point(2, 3)) == seg
    assert str(seg) == "((1,5),(2,3))"


def test_segment_is_immutable():
    seg = LineSegment(Point(0, 0), Point(1, 1))
    with pytest.raises(AttributeError):
        seg.a = Point(2, 2)


def test_contains_point(shapes):
    assert contains_point(shapes["l0"], shapes["p2"]) is True
    assert contains_point(shapes["l0"], shapes["p10"]) is False


def test_lengths(shapes):
    assert abs(length_squared(shapes["l1"]) - 2.0) < EPSILON
    assert abs(length(shapes["l0"]) - math.sqrt(2.0)) < EPSILON


def test_closest_point_and_distance_to_point(shapes):
    assert closest_point(shapes["p00"], shapes["l1"]) == shapes["p2"]
    assert abs(distance_to_point(shapes["p00"], shapes["l1"]) - math.sqrt(0.5)) < EPSILON


def test_closest_point_on_degenerate_segment():
    seg = LineSegment(Point(2.0, 2.0), Point(2.0, 2.0))
    assert closest_point(Point(0.0, 0.0), seg) == Point(2.0, 2.0)


def test_coincident(shapes):
    assert coincident(shapes["l1"], shapes["l3"]) is True
    assert coincident(shapes["l0"], shapes["l4"]) is True
    assert coincident(shapes["l0"], shapes["l3"]) is True
    assert coincident(shapes["l0"], shapes["l1"]) is False


def test_intersect(shapes):
    assert intersect(shapes["l0"], shapes["l1"]) is True
    assert intersect(shapes["l0"], shapes["l3"]) is False
    assert intersect(shapes["l1"], shapes["l3"]) is False


def test_intersect_or_coincident(shapes):
    assert intersect_or_coincident(shapes["l0"], shapes["l1"]) is True
    assert intersect_or_coincident(shapes["l0"], shapes["l3"]) is True
    far = LineSegment(Point(5.0, 5.0), Point(6.0, 7.0))
    assert intersect_or_coincident(shapes["l0"], far) is False


def test_intersection(shapes):
    assert intersection(shapes["l0"], shapes["l1"]) == shapes["p2"]
    parallel = LineSegment(Point(0.0, 1.0), Point(1.0, 2.0))
    assert intersection(shapes["l0"], parallel) is None
    short = LineSegment(Point(2.0, 0.0), Point(3.0, -1.0))
    assert intersection(shapes["l0"], short) is None


def test_contains_segment(shapes):
    assert contains_segment(shapes["l3"], shapes["l0"]) == -1
    inner = LineSegment(Point(0.25, 0.25), Point(0.5, 0.5))
    assert contains_segment(inner, shapes["l0"]) == 1
    assert contains_segment(shapes["l1"], shapes["l0"]) == 0


def test_closest_point_between(shapes):
    assert closest_point_between(shapes["l3"], shapes["l1"]) == shapes["p2"]


def test_distance_between(shapes):
    assert abs(distance_between(shapes["l3"], shapes["l5"]) - 0.5) < EPSILON
    assert distance_between(shapes["l0"], shapes["l1"]) == 0.0