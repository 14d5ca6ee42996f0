import pytest

from delaunay.line_segment import LineSegment
from delaunay.point import Point, distance
from delaunay.triangle import Triangle


@pytest.fixture
def t0():
    p00 = Point(0.0, 0.0)
    p01 = Point(1.0, 0.0)
    p02 = Point(0.0, 1.0)
    return Triangle(LineSegment(p00, p01), LineSegment(p01, p02), LineSegment(p02, p00))


@pytest.fixture
def t1():
    p10 = Point(1.0, 1.0)
    p11 = Point(1.0, 0.0)
    p12 = Point(0.0, 1.0)
    return Triangle(LineSegment(p10, p11), LineSegment(p11, p12), LineSegment(p12, p10))


@pytest.fixture
def t2():
    p00 = Point(0.0, 0.0)
    p01 = Point(1.0, 0.0)
    p02 = Point(0.0, 1.0)
    return Triangle(LineSegment(p00, p01), LineSegment(p01, p02), LineSegment(p02, p00))


def test_different_triangles_are_unequal(t0, t1):
    assert (t0 != t1) is True


def test_same_triangles_are_equal(t0, t2):
    assert (t0 == t2) is True


def test_ordering_between_different_triangles(t0, t1):
    assert (t0 < t1) is True
    assert (t1 > t0) is True
    assert (t0 >= t1) is False


def test_edges_are_sorted(t0, t1):
    for tri in (t0, t1):
        assert tri.ab <= tri.ac <= tri.bc


def test_edge_order_does_not_matter():
    p, q, r = Point(0.0, 0.0), Point(2.0, 0.5), Point(0.5, 3.0)
    a = Triangle(LineSegment(p, q), LineSegment(p, r), LineSegment(q, r))
    b = Triangle(LineSegment(q, r), LineSegment(p, q), LineSegment(r, p))
    assert a == b


def test_vertices_available_from_edges(t0):
    vertices = sorted([t0.ab.a, t0.ab.b, t0.ac.b])
    assert vertices == [Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 0.0)]


@pytest.mark.parametrize(
    "p, q, r",
    [
        (Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)),
        (Point(-1.0, 2.0), Point(3.0, -1.0), Point(2.5, 4.0)),
        (Point(0.1, 0.2), Point(5.0, 0.3), Point(2.0, 7.0)),
    ],
)
def test_circumcircle_passes_through_vertices(p, q, r):
    tri = Triangle(LineSegment(p, q), LineSegment(p, r), LineSegment(q, r))
    center = tri.circumcircle.center
    radius = tri.circumcircle.radius
    for v in (p, q, r):
        assert distance(center, v) == pytest.approx(radius)


def test_duplicate_edges_raise():
    p, q, r = Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)
    with pytest.raises(ValueError):
        Triangle(LineSegment(p, q), LineSegment(q, p), LineSegment(q, r))


def test_colinear_vertices_raise():
    p, q, r = Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0)
    with pytest.raises(ValueError):
        Triangle(LineSegment(p, q), LineSegment(p, r), LineSegment(q, r))


def test_triangle_is_immutable(t0):
    original_ab = t0.ab
    with pytest.raises(AttributeError):
        t0.ab = t0.bc
    assert t0.ab is original_ab
    assert t0.ab == LineSegment(Point(0.0, 0.0), Point(0.0, 1.0))


def test_iteration_yields_sorted_edges(t0):
    assert list(t0) == [t0.ab, t0.ac, t0.bc]
    assert str(t0) == f"({t0.ab},{t0.ac},{t0.bc})"