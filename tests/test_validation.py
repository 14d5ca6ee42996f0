from delaunay.point import Point
from delaunay.polygon import Polygon
from delaunay.validation import is_valid_polygon


def test_square_is_valid():
    square = Polygon(
        [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
    )
    assert is_valid_polygon(square) is True


def test_triangle_is_valid():
    tri = Polygon([Point(0.0, 0.0), Point(2.0, 0.0), Point(1.0, 1.0)])
    assert is_valid_polygon(tri) is True


def test_bowtie_is_invalid():
    bowtie = Polygon(
        [Point(0.0, 0.0), Point(1.0, 1.0), Point(1.0, 0.0), Point(0.0, 1.0)]
    )
    assert is_valid_polygon(bowtie) is False


def test_duplicate_point_is_invalid():
    poly = Polygon(
        [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(2.0, 0.0)]
    )
    assert is_valid_polygon(poly) is False


def test_concave_polygon_is_valid():
    poly = Polygon(
        [
            Point(0.0, 0.0),
            Point(4.0, 0.0),
            Point(4.0, 4.0),
            Point(2.0, 1.0),
            Point(0.0, 4.0),
        ]
    )
    assert is_valid_polygon(poly) is True