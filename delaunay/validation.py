"""Checks that a polygon is simple."""

from __future__ import annotations

from delaunay.line_segment import LineSegment, intersect
from delaunay.polygon import Polygon


def is_valid_polygon(polygon: Polygon) -> bool:
    """Is the polygon free of duplicate points and crossing edges?"""
    points = polygon.points
    count = len(points)
    edges = [
        LineSegment(point, points[(index + 1) % count])
        for index, point in enumerate(points)
    ]
    for i, (point, edge) in enumerate(zip(points, edges)):
        for other_point, other_edge in zip(points[i + 1 :], edges[i + 1 :]):
            if point == other_point:
                return False
            if intersect(edge, other_edge):
                return False
    return True