"""Orientation tests, convex hulls, polygons, segment sweeps and tours in the plane."""

__version__ = "0.1.0"
__all__ = ["orientation", "polygon", "segments", "tsp"]