# delaunay

Two-dimensional geometry primitives and predicates: points, line segments,
circles, triangles, polygons, Bezier curves, a simple-polygon check and RGBA
colours. It has no dependencies outside the standard library.

Points compare equal when both coordinates agree to within `1e-10`
(`delaunay.point.EPSILON`); ordering compares coordinates exactly, by `x`
and then by `y`. The predicates use the same tolerance.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Overview

| Module | Contents |
| --- | --- |
| `delaunay.point` | `Point`, `EPSILON`, `orientation`, `dot`, `cross`, `distance_squared`, `distance`, `angle` |
| `delaunay.line_segment` | `LineSegment`, `length`, `length_squared`, `contains_point`, `contains_segment`, `closest_point`, `distance_to_point`, `coincident`, `intersect`, `intersect_or_coincident`, `intersection`, `closest_point_between`, `distance_between` |
| `delaunay.circle` | `Circle`, `Circle.through`, `circle_contains`, `circle_intersects_segment`, `circle_intersects_triangle`, `circle_segment_intersection` |
| `delaunay.triangle` | `Triangle`, built from three distinct edges, with its `circumcircle` |
| `delaunay.triangle_utilities` | `area`, `centroid`, `angles`, point, segment and triangle containment, coincidence, intersection, closest points and distances |
| `delaunay.polygon` | `Polygon`, `bounds`, `polygon_orientation` |
| `delaunay.curve` | `ParametricCurve` (abstract), `BezierCurve` |
| `delaunay.validation` | `is_valid_polygon` |
| `delaunay.color` | `Color`, `Palette`, `Color.from_hex`, `Color.from_range` and named colours (`CLEAR`, `WHITE`, `BLACK`, `RED`, `ORANGE`, `YELLOW`, `GREEN`, `BLUE`, `INDIGO`, `VIOLET`, `CYAN`, `PURPLE`) |

A few conventions:

- `LineSegment` stores its end points with the smaller one first as `a` and `b`.
- `Triangle` sorts its three edges so that `ab <= ac <= bc`; its vertices are
  `ab.a`, `ab.b` and `ac.b`. Equal edges or colinear vertices raise
  `ValueError`.
- `Polygon` rotates its ring of points so that the smallest point comes first.
- `intersection` returns `None` when two segments do not meet;
  `circle_segment_intersection` and `segment_intersection` return a tuple of
  zero, one or two points.
- `polygon_orientation` raises `ValueError` for fewer than three points;
  `Color` raises `ValueError` for a channel outside `0..255`.

## Examples

Points and segments:

```python
from delaunay.point import Point, orientation
from delaunay.line_segment import LineSegment, intersect, closest_point

a, b = Point(0.0, 0.0), Point(1.0, 1.0)
c, d = Point(1.0, 0.0), Point(0.0, 1.0)

orientation(a, b, c)                              # -1 (clockwise)
intersect(LineSegment(a, b), LineSegment(c, d))   # True
closest_point(a, LineSegment(c, d))               # the point (0.5, 0.5)
```

A triangle built from its edges:

```python
from delaunay.point import Point
from delaunay.line_segment import LineSegment
from delaunay.triangle import Triangle
from delaunay.triangle_utilities import area, contains_point

p0, p1, p2 = Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)
t = Triangle(LineSegment(p0, p1), LineSegment(p1, p2), LineSegment(p2, p0))

area(t)                                 # 0.5
contains_point(t, Point(0.25, 0.25))    # True
t.circumcircle.radius                   # about 0.7071
```

Polygons, curves and validation:

```python
from delaunay.point import Point
from delaunay.polygon import Polygon, bounds, polygon_orientation
from delaunay.curve import BezierCurve
from delaunay.validation import is_valid_polygon

square = Polygon([Point(1, 0), Point(1, 1), Point(0, 1), Point(0, 0)])
bounds(square)               # (0.0, 1.0, 0.0, 1.0) as x_min, x_max, y_min, y_max
polygon_orientation(square)  # 1 (counterclockwise)
is_valid_polygon(square)     # True

curve = BezierCurve([Point(0, 0), Point(1, 2), Point(2, 0)])
curve(0.5)                   # the point (1.0, 1.0)
```

Colours:

```python
from delaunay.color import Color, Palette

Color.from_hex(0xFF8000)                    # Color(red=255, green=128, blue=0, alpha=255)
Color.from_range(0.5, Palette.BLUE_TO_RED)  # Color(red=127, green=0, blue=127, alpha=255)
```

## What it does not do

The package provides geometric building blocks only. It does not build
triangulations or meshes, and it does not draw anything: `Color` and the
palettes are plain values with no canvas or window to render onto.