"""Distance functions used by TSPLIB edge weight types."""

from __future__ import annotations

import math

Point = tuple[float, float]

_PI = 3.141592
_EARTH_RADIUS = 6378.388


def euclidean(a: Point, b: Point) -> float:
    """Plain Euclidean distance between two points."""
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


def pseudo_euclidean(a: Point, b: Point) -> float:
    """Pseudo-Euclidean (ATT) distance, always a whole number."""
    rij = math.sqrt(((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2) / 10)
    tij = math.floor(rij + 0.5)
    return float(tij + 1 if tij < rij else tij)


def to_radians(coordinate: float) -> float:
    """Convert a DDD.MM geographical coordinate to radians."""
    degrees = int(coordinate)
    minutes = coordinate - degrees
    return _PI * (degrees + 5.0 * minutes / 3.0) / 180.0


def geo_distance(a: Point, b: Point) -> float:
    """Geographical distance between (latitude, longitude) pairs in radians."""
    q1 = math.cos(a[1] - b[1])
    q2 = math.cos(a[0] - b[0])
    q3 = math.cos(a[0] + b[0])
    return float(int(_EARTH_RADIUS * math.acos(0.5 * ((1.0 + q1) * q2 - (1.0 - q1) * q3)) + 1.0))