"""Polygons given by an ordered ring of points."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator

from delaunay.point import Point, orientation


class Polygon:
    """A closed ring of points, rotated so the smallest point comes first."""

    __slots__ = ("points",)

    def __init__(self, points: Iterable[Point]) -> None:
        ring = list(points)
        if ring:
            start = ring.index(min(ring), 0) if False else _first_min_index(ring)
            ring = ring[start:] + ring[:start]
        self.points: list[Point] = ring

    def _insert(self, index: int, point: Point) -> int:
        """Insert a point before ``index`` and return its position."""
        self.points.insert(index, point)
        return min(index, len(self.points) - 1) if index >= 0 else self.points.index(point)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __lt__(self, other: Polygon) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        if len(self.points) != len(other.points):
            return len(self.points) < len(other.points)
        for mine, theirs in zip(self.points, other.points):
            if mine != theirs:
                return mine < theirs
        return False

    def __repr__(self) -> str:
        return f"Polygon({self.points!r})"

    def __str__(self) -> str:
        return "( " + "".join(f"{p} " for p in self.points) + ")"


def _first_min_index(ring: list[Point]) -> int:
    best = 0
    for index, point in enumerate(ring):
        if point < ring[best]:
            best = index
    return best


def bounds(polygon: Polygon) -> tuple[float, float, float, float]:
    """Return ``(x_min, x_max, y_min, y_max)`` of the polygon's points."""
    x_min = y_min = sys.float_info.max
    x_max = y_max = -sys.float_info.max
    for point in polygon.points:
        x_min = min(x_min, point.x)
        x_max = max(x_max, point.x)
        y_min = min(y_min, point.y)
        y_max = max(y_max, point.y)
    return (x_min, x_max, y_min, y_max)


def polygon_orientation(polygon: Polygon) -> int:
    """Return +1 for a counterclockwise polygon and -1 for a clockwise one."""
    points = polygon.points
    if len(points) < 3:
        raise ValueError("orientation needs a polygon of at least three points")
    return orientation(points[-1], points[0], points[1])