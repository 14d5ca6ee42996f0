"""Triangles built from three line segments."""

from __future__ import annotations

from typing import Iterator

from delaunay.circle import Circle
from delaunay.line_segment import LineSegment
from delaunay.point import Point


def _circumcenter(ls1: LineSegment, ls2: LineSegment) -> Point:
    a = ls1.a
    b = ls1.b
    c = ls2.b if (ls2.a == a or ls2.a == b) else ls2.a
    d = 2.0 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))
    if d == 0.0:
        raise ValueError("triangle vertices are colinear")

    a2 = a.x * a.x + a.y * a.y
    b2 = b.x * b.x + b.y * b.y
    c2 = c.x * c.x + c.y * c.y
    return Point(
        (a2 * (b.y - c.y) + b2 * (c.y - a.y) + c2 * (a.y - b.y)) / d,
        (a2 * (c.x - b.x) + b2 * (a.x - c.x) + c2 * (b.x - a.x)) / d,
    )


class Triangle:
    """A triangle whose edges are kept in sorted order.

    After construction ``ab <= ac <= bc``; ``ab.a`` and ``ab.b`` are two
    vertices and ``ac.b`` is the third.
    """

    __slots__ = ("ab", "ac", "bc", "circumcircle")

    def __init__(self, ab: LineSegment, ac: LineSegment, bc: LineSegment) -> None:
        if ab == bc or ab == ac or ac == bc:
            raise ValueError("triangle edges must be distinct")

        first, second, third = sorted((ab, bc, ac))
        object.__setattr__(self, "ab", first)
        object.__setattr__(self, "ac", second)
        object.__setattr__(self, "bc", third)
        object.__setattr__(
            self, "circumcircle", Circle.through(_circumcenter(ab, ac), ab.a)
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self) -> Iterator[LineSegment]:
        yield self.ab
        yield self.ac
        yield self.bc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.ab == other.ab and self.bc == other.bc and self.ac == other.ac

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Triangle) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        if self.ab != other.ab:
            return self.ab < other.ab
        if self.bc != other.bc:
            return self.bc < other.bc
        return self.ac < other.ac

    def __gt__(self, other: Triangle) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        if self.ab != other.ab:
            return self.ab > other.ab
        if self.bc != other.bc:
            return self.bc > other.bc
        return self.ac > other.ac

    def __ge__(self, other: Triangle) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return not self < other

    def __le__(self, other: Triangle) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return not self > other

    def __repr__(self) -> str:
        return f"Triangle({self.ab!r}, {self.ac!r}, {self.bc!r})"

    def __str__(self) -> str:
        return f"({self.ab},{self.ac},{self.bc})"