"""Two-dimensional points and the basic vector operations on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 1.0e-10


@dataclass(frozen=True, eq=False, slots=True)
class Point:
    """An immutable point in the plane.

    Equality is tolerant (coordinates within ``EPSILON``), while ordering
    compares coordinates exactly, first by ``x`` and then by ``y``.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) < EPSILON and abs(self.y - other.y) < EPSILON

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x < other.x if self.x != other.x else self.y < other.y

    def __gt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x > other.x if self.x != other.x else self.y > other.y

    def __ge__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return not self < other

    def __le__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return not self > other

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if isinstance(factor, Point):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        if isinstance(divisor, Point):
            return NotImplemented
        return Point(self.x / divisor, self.y / divisor)

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g})"


def orientation(p1: Point, p2: Point, p3: Point) -> int:
    """Return +1 for counterclockwise, 0 for colinear, -1 for clockwise."""
    c = cross(p2 - p1, p3 - p1)
    if abs(c) < EPSILON:
        return 0
    return 1 if c > 0.0 else -1


def dot(p1: Point, p2: Point) -> float:
    """Dot product of two points taken as vectors from the origin."""
    return p1.x * p2.x + p1.y * p2.y


def cross(p1: Point, p2: Point) -> float:
    """Magnitude of the cross product of two points taken as vectors."""
    return p1.x * p2.y - p1.y * p2.x


def distance_squared(p1: Point, p2: Point) -> float:
    """Squared distance between two points."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def distance(p1: Point, p2: Point) -> float:
    """Distance between two points."""
    return math.sqrt(distance_squared(p1, p2))


def angle(p1: Point, p2: Point, p3: Point) -> float:
    """Angle in radians formed at ``p2`` by the three points."""
    a = distance(p1, p2)
    b = distance(p2, p3)
    c2 = distance_squared(p1, p3)
    cosine = (a * a + b * b - c2) / (2.0 * a * b)
    cosine = max(-1.0, min(1.0, cosine))
    return math.acos(cosine) + math.pi * (orientation(p1, p2, p3) == 1)