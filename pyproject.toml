[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planegeom"
version = "0.1.0"
description = "Integer plane geometry: orientation tests, convex hulls, point location in polygons, segment sweeps and short tours"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "computational-geometry",
    "convex-hull",
    "polygon",
    "point-in-polygon",
    "sweep-line",
    "fenwick-tree",
    "tsp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["planegeom"]

[tool.hatch.build.targets.sdist]
include = ["planegeom", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["planegeom"]
