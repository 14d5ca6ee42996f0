[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "delaunay"
version = "0.1.0"
description = "Planar geometry primitives and predicates: points, line segments, circles, triangles, polygons, Bezier curves and RGBA colours"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "triangle", "polygon", "bezier", "computational-geometry", "predicates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["delaunay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
