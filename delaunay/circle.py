"""Circles and their relations to points, line segments and triangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from delaunay.line_segment import LineSegment, length_squared
from delaunay.point import EPSILON, Point, cross, distance

if TYPE_CHECKING:
    from delaunay.triangle import Triangle


@dataclass(frozen=True)
class Circle:
    """A circle given by its center and radius."""

    center: Point
    radius: float

    @classmethod
    def through(cls, center: Point, point: Point) -> Circle:
        """The circle around ``center`` that passes through ``point``."""
        return cls(center, distance(center, point))

    def __str__(self) -> str:
        return f"{self.center}, {self.radius:g}"


def _sign(value: float) -> float:
    return float((0.0 < value) - (value < 0.0))


def circle_contains(circle: Circle, point: Point) -> bool:
    """Does the point lie strictly within the circle?"""
    return distance(circle.center, point) < circle.radius


def circle_intersects_segment(circle: Circle, segment: LineSegment) -> bool:
    """Does the line through the segment cross the circle?"""
    d = cross(segment.a - circle.center, segment.b - circle.center)
    dr2 = length_squared(segment)
    return circle.radius * circle.radius * dr2 > d * d


def circle_intersects_triangle(circle: Circle, triangle: Triangle) -> bool:
    """Does the circle cross any edge of the triangle?"""
    return any(
        circle_intersects_segment(circle, edge)
        for edge in (triangle.ab, triangle.bc, triangle.ac)
    )


def circle_segment_intersection(
    circle: Circle, segment: LineSegment
) -> tuple[Point, ...]:
    """Points where the line through the segment meets the circle.

    Returns an empty tuple if they do not meet, one point for a tangent
    and two points otherwise.
    """
    dr2 = length_squared(segment)
    if dr2 == 0.0:
        raise ValueError("cannot intersect a circle with a degenerate segment")

    d_cross = cross(segment.a - circle.center, segment.b - circle.center)
    delta = circle.radius * circle.radius * dr2 - d_cross * d_cross

    if delta < -EPSILON / 2.0:
        return ()

    d = segment.b - segment.a
    a = d_cross / dr2

    if abs(delta) <= EPSILON:
        return (Point(a * d.y, -a * d.x) + circle.center,)

    b = math.sqrt(delta) / dr2

    x1 = a * d.y + _sign(d.y) * d.x * b
    y1 = -a * d.x + abs(d.y) * b
    x2 = a * d.y - _sign(d.y) * d.x * b
    y2 = -a * d.x - abs(d.y) * b

    return (Point(x1, y1) + circle.center, Point(x2, y2) + circle.center)