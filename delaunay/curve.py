"""Parametric curves in the plane."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from delaunay.point import Point


class ParametricCurve(ABC):
    """A curve evaluated at a parameter ``t`` in ``[0, 1]``."""

    def __init__(self, closed: bool = False) -> None:
        self.closed = closed

    @abstractmethod
    def __call__(self, t: float) -> Point:
        """Return the point on the curve at parameter ``t``."""


class BezierCurve(ParametricCurve):
    """A Bezier curve defined by its control points.

    A closed curve returns to its first control point at ``t = 1``.
    """

    def __init__(self, points: Iterable[Point], closed: bool = False) -> None:
        super().__init__(closed)
        self.points: list[Point] = list(points)
        if not self.points:
            raise ValueError("a Bezier curve needs at least one control point")
        if len(self._control_points()) < 2:
            raise ValueError("an open Bezier curve needs at least two control points")

    def _control_points(self) -> list[Point]:
        if self.closed:
            return [*self.points, self.points[0]]
        return list(self.points)

    def __call__(self, t: float) -> Point:
        """Evaluate the curve at ``t`` by repeated linear interpolation."""
        level = self._control_points()
        while len(level) > 1:
            level = [(1.0 - t) * p + t * q for p, q in zip(level, level[1:])]
        return level[0]

    def __repr__(self) -> str:
        return f"BezierCurve({self.points!r}, closed={self.closed!r})"