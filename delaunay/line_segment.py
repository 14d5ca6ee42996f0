"""Line segments and the geometric queries between them and points."""

from __future__ import annotations

from typing import Iterator

from delaunay.point import (
    EPSILON,
    Point,
    distance,
    distance_squared,
    dot,
    orientation,
)


class LineSegment:
    """A segment between two points, stored with the smaller point first."""

    __slots__ = ("a", "b")

    def __init__(self, a: Point, b: Point) -> None:
        first, second = (a, b) if a < b else (b, a)
        object.__setattr__(self, "a", first)
        object.__setattr__(self, "b", second)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self) -> Iterator[Point]:
        yield self.a
        yield self.b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: LineSegment) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.a < other.a if self.a != other.a else self.b < other.b

    def __gt__(self, other: LineSegment) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.a > other.a if self.a != other.a else self.b > other.b

    def __ge__(self, other: LineSegment) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return not self < other

    def __le__(self, other: LineSegment) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return not self > other

    def __repr__(self) -> str:
        return f"LineSegment({self.a!r}, {self.b!r})"

    def __str__(self) -> str:
        return f"({self.a},{self.b})"


def length_squared(segment: LineSegment) -> float:
    """Squared length of the segment."""
    return distance_squared(segment.a, segment.b)


def length(segment: LineSegment) -> float:
    """Length of the segment."""
    return distance(segment.a, segment.b)


def contains_point(segment: LineSegment, point: Point) -> bool:
    """Does the point lie on the segment?"""
    seg_len = length(segment)
    if seg_len < EPSILON:
        return point == segment.a

    projection = dot(point - segment.b, segment.a - segment.b)
    if abs(projection - seg_len * distance(point, segment.b)) > seg_len * EPSILON:
        return False

    t = projection / seg_len
    return -EPSILON <= t <= seg_len + EPSILON


def _on_line_segment(segment: LineSegment, point: Point) -> bool:
    """Assuming colinearity, does the point lie on the segment?"""
    a, b = segment.a, segment.b
    if a == point or b == point:
        return True
    if abs(a.x - point.x) > EPSILON:
        return (a.x < point.x < b.x) or (b.x < point.x < a.x)
    return (a.y < point.y < b.y) or (b.y < point.y < a.y)


def contains_segment(l1: LineSegment, l2: LineSegment) -> int:
    """Does ``l2`` contain ``l1``?

    Returns 0 if not, -1 if it does and the two share an end point,
    and 1 if it does otherwise.
    """
    if (
        orientation(l2.a, l2.b, l1.a)
        or orientation(l2.a, l2.b, l1.b)
        or not (_on_line_segment(l2, l1.a) and _on_line_segment(l2, l1.b))
    ):
        return 0
    if l1.a == l2.a or l1.b == l2.a or l1.b == l2.b:
        return -1
    return 1


def closest_point(point: Point, segment: LineSegment) -> Point:
    """Closest point on the segment to the given point."""
    offset = point - segment.a
    direction = segment.b - segment.a
    denom = length_squared(segment)
    if denom == 0.0:
        return segment.b
    t = max(0.0, min(1.0, dot(offset, direction) / denom))
    return segment.a + t * direction


def distance_to_point(point: Point, segment: LineSegment) -> float:
    """Distance between a point and the segment."""
    return distance(point, closest_point(point, segment))


def _intersect_kind(l1: LineSegment, l2: LineSegment) -> int:
    """+1 if the segments cross, -1 if an end point of one lies on the
    other, and 0 if they do not meet."""
    o0 = orientation(l1.a, l1.b, l2.a)
    o1 = orientation(l1.a, l1.b, l2.b)
    o2 = orientation(l2.a, l2.b, l1.a)
    o3 = orientation(l2.a, l2.b, l1.b)

    if o0 == 0:
        return -1 if _on_line_segment(l1, l2.a) else 0
    if o1 == 0:
        return -1 if _on_line_segment(l1, l2.b) else 0
    if o2 == 0:
        return -1 if _on_line_segment(l2, l1.a) else 0
    if o3 == 0:
        return -1 if _on_line_segment(l2, l1.b) else 0

    return 1 if o0 * o1 == -1 and o2 * o3 == -1 else 0


def coincident(l1: LineSegment, l2: LineSegment) -> bool:
    """Do the two segments touch?"""
    return _intersect_kind(l1, l2) == -1


def intersect(l1: LineSegment, l2: LineSegment) -> bool:
    """Do the two segments properly cross?"""
    return _intersect_kind(l1, l2) == 1


def intersect_or_coincident(l1: LineSegment, l2: LineSegment) -> bool:
    """Do the two segments cross or touch?"""
    return _intersect_kind(l1, l2) != 0


def intersection(l1: LineSegment, l2: LineSegment) -> Point | None:
    """Point where the two segments meet, or None if they do not."""
    a1 = l1.b.y - l1.a.y
    b1 = l1.a.x - l1.b.x
    c1 = a1 * l1.a.x + b1 * l1.a.y

    a2 = l2.b.y - l2.a.y
    b2 = l2.a.x - l2.b.x
    c2 = a2 * l2.a.x + b2 * l2.a.y

    denom = a1 * b2 - a2 * b1
    if abs(denom) < EPSILON:
        return None

    p = Point((b2 * c1 - b1 * c2) / denom, (a1 * c2 - a2 * c1) / denom)
    if not contains_point(l1, p) or not contains_point(l2, p):
        return None
    return p


def closest_point_between(l1: LineSegment, l2: LineSegment) -> Point:
    """A closest point between the first segment and the second."""
    d2 = l2.b - l2.a
    offset = l2.a - l1.a
    d1 = l1.b - l1.a
    denom = d2.x * d1.y - d1.x * d2.y
    if denom < EPSILON:
        candidates = [
            (closest_point(l1.a, l2), l1.a),
            (closest_point(l1.b, l2), l1.b),
            (closest_point(l2.a, l1), l2.a),
            (closest_point(l2.b, l1), l2.b),
        ]
        (p1, d1_), (p2, d2_), (p3, d3_), (p4, d4_) = (
            (p, distance(p, q)) for p, q in candidates
        )
        if d1_ < d2_ and d1_ < d3_ and d1_ < d4_:
            return p1
        if d2_ < d3_ and d2_ < d4_:
            return p2
        return p3 if d3_ < d4_ else p4

    s = (d2.x * offset.y - offset.x * d2.y) / denom
    return l1.a + max(0.0, min(1.0, s)) * l1.b


def distance_between(l1: LineSegment, l2: LineSegment) -> float:
    """Distance between two segments."""
    if intersect(l1, l2):
        return 0.0

    p1 = closest_point(l1.a, l2)
    p2 = closest_point(l1.b, l2)
    p3 = closest_point(l2.a, l1)
    p4 = closest_point(l2.b, l1)

    return min(
        distance(p1, p3),
        distance(p1, p4),
        distance(p2, p3),
        distance(p2, p4),
    )