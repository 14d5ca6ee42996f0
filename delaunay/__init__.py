"""Planar geometry primitives and predicates: points, segments, circles, triangles, polygons, curves and colours."""

__version__ = "0.1.0"