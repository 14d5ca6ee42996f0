"""Geometric queries between triangles, points and line segments."""

from __future__ import annotations

import math

from delaunay import line_segment as seg
from delaunay.line_segment import LineSegment
from delaunay.point import EPSILON, Point, cross, distance, dot
from delaunay.triangle import Triangle


def _vertices(triangle: Triangle) -> tuple[Point, Point, Point]:
    return triangle.ab.a, triangle.ab.b, triangle.ac.b


def _edges(triangle: Triangle) -> tuple[LineSegment, LineSegment, LineSegment]:
    return triangle.ab, triangle.bc, triangle.ac


def _parametric(a: Point, b: Point, c: Point, p: Point) -> tuple[float, float]:
    b_a = b - a
    c_a = c - a
    p_a = p - a

    ratio = b_a.x / b_a.y
    denom = c_a.x - ratio * c_a.y
    num = p_a.x - ratio * p_a.y

    t = num / denom
    s = p_a.y / b_a.y - (c_a.y / b_a.y) * t
    return s, t


def _parametric_coordinates(triangle: Triangle, p: Point) -> tuple[float, float]:
    """Parametric coordinates of a point with respect to the triangle."""
    a, b, c = _vertices(triangle)
    if a.y != b.y:
        return _parametric(a, b, c, p)
    return _parametric(c, a, b, p)


def _pick_closest(candidates: list[tuple[Point, float]]) -> Point:
    """Select among three (point, distance) pairs, preferring later ones on ties."""
    (p1, d1), (p2, d2), (p3, d3) = candidates
    if d1 < d2 and d1 < d3:
        return p1
    return p2 if d2 < d3 else p3


def point_coincident(triangle: Triangle, point: Point) -> bool:
    """Does the point lie on the perimeter of the triangle?"""
    s, t = _parametric_coordinates(triangle, point)
    return (
        (abs(s) < EPSILON and 0.0 <= t <= 1.0)
        or (abs(t) < EPSILON and 0.0 <= s <= 1.0)
        or (s >= 0.0 and t >= 0.0 and abs(s + t - 1.0) < EPSILON)
    )


def contains_point(triangle: Triangle, point: Point) -> bool:
    """Does the point lie within the triangle (perimeter included)?"""
    s, t = _parametric_coordinates(triangle, point)
    return s >= -EPSILON and t >= -EPSILON and (s + t) <= 1.0 + EPSILON


def area(triangle: Triangle) -> float:
    """Area of the triangle."""
    a, b, c = _vertices(triangle)
    return 0.5 * abs(cross(b - a, c - a))


def centroid(triangle: Triangle) -> Point:
    """Centroid of the triangle."""
    a, b, c = _vertices(triangle)
    return (a + b + c) / 3.0


def _acos(value: float) -> float:
    return math.acos(max(-1.0, min(1.0, value)))


def angles(triangle: Triangle) -> tuple[float, float, float]:
    """Interior angles in radians at the three vertices."""
    a, b, c = _vertices(triangle)
    len_ab = seg.length(triangle.ab)
    len_ac = seg.length(triangle.ac)
    len_bc = seg.length(triangle.bc)
    return (
        _acos(dot(b - a, c - a) / (len_ab * len_ac)),
        _acos(dot(a - b, c - b) / (len_ab * len_bc)),
        _acos(dot(a - c, b - c) / (len_ac * len_bc)),
    )


def closest_point_to_point(triangle: Triangle, point: Point) -> Point:
    """Closest point on (or in) the triangle to the given point."""
    if contains_point(triangle, point):
        return point
    candidates = []
    for edge in _edges(triangle):
        p = seg.closest_point(point, edge)
        candidates.append((p, distance(p, point)))
    return _pick_closest(candidates)


def distance_to_point(triangle: Triangle, point: Point) -> float:
    """Distance between the triangle and a point."""
    return distance(point, closest_point_to_point(triangle, point))


def segment_coincident(triangle: Triangle, segment: LineSegment) -> bool:
    """Does the line segment touch the triangle?"""
    return (
        point_coincident(triangle, segment.a)
        or point_coincident(triangle, segment.b)
        or any(seg.coincident(edge, segment) for edge in _edges(triangle))
    )


def contains_segment(triangle: Triangle, segment: LineSegment) -> bool:
    """Does the line segment lie within the triangle?"""
    return contains_point(triangle, segment.a) and contains_point(triangle, segment.b)


def segment_intersects(triangle: Triangle, segment: LineSegment) -> bool:
    """Does the line segment properly cross an edge of the triangle?"""
    return any(seg.intersect(segment, edge) for edge in _edges(triangle))


def segment_intersects_or_coincident(triangle: Triangle, segment: LineSegment) -> bool:
    """Does the line segment cross or touch an edge of the triangle?"""
    return any(seg.intersect_or_coincident(segment, edge) for edge in _edges(triangle))


def segment_intersection(triangle: Triangle, segment: LineSegment) -> tuple[Point, ...]:
    """Points where the segment meets the triangle's edges.

    Returns an empty tuple, one point, or two distinct points.
    """
    found = [
        p
        for p in (seg.intersection(segment, edge) for edge in _edges(triangle))
        if p is not None
    ]
    if not found:
        return ()
    first = found[0]
    for other in found[1:]:
        if other != first:
            return (first, other)
    return (first,)


def closest_point_to_segment(triangle: Triangle, segment: LineSegment) -> Point:
    """Closest point on the triangle to the line segment."""
    if contains_point(triangle, segment.a):
        return segment.a
    if contains_point(triangle, segment.b):
        return segment.b
    p1 = closest_point_to_point(triangle, segment.a)
    p2 = closest_point_to_point(triangle, segment.b)
    return p1 if distance(p1, segment.a) < distance(p2, segment.b) else p2


def distance_to_segment(triangle: Triangle, segment: LineSegment) -> float:
    """Distance between the triangle and a line segment."""
    return seg.distance_to_point(closest_point_to_segment(triangle, segment), segment)


def triangles_coincident(t1: Triangle, t2: Triangle) -> bool:
    """Does the first triangle touch the second?"""
    return any(segment_coincident(t2, edge) for edge in _edges(t1))


def contains_triangle(t1: Triangle, t2: Triangle) -> bool:
    """Does any vertex of the first triangle lie within the second?"""
    return any(contains_point(t2, vertex) for vertex in _vertices(t1))


def triangles_intersect(t1: Triangle, t2: Triangle) -> bool:
    """Does an edge of the first triangle cross the second?"""
    return any(segment_intersects(t2, edge) for edge in _edges(t1))


def closest_point_between(t1: Triangle, t2: Triangle) -> Point:
    """Closest point on the first triangle to the second."""
    for vertex in _vertices(t1):
        if contains_point(t2, vertex):
            return vertex
    for vertex in _vertices(t2):
        if contains_point(t1, vertex):
            return vertex

    candidates = []
    for edge in _edges(t1):
        p = closest_point_to_segment(t2, edge)
        candidates.append((p, distance_to_point(t2, p)))
    return _pick_closest(candidates)


def _argmin3(values: list[float]) -> int:
    if values[0] < values[1] and values[0] < values[2]:
        return 0
    return 1 if values[1] < values[2] else 2


def distance_between(t1: Triangle, t2: Triangle) -> float:
    """Distance between two triangles."""
    if any(contains_point(t2, v) for v in _vertices(t1)):
        return 0.0
    if any(contains_point(t1, v) for v in _vertices(t2)):
        return 0.0

    edges1 = _edges(t1)
    d1 = [distance_to_segment(t2, edge) for edge in edges1]
    c1 = _argmin3(d1)
    nearest = edges1[c1]

    d2 = [seg.distance_between(edge, nearest) for edge in _edges(t2)]
    c2 = _argmin3(d2)

    return d1[c1] if d1[c1] < d2[c2] else d2[c2]