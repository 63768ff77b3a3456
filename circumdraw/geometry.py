"""Plane geometry on integer points: circumcircles, distances and hit tests."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPSILON = 1e-10


@dataclass(frozen=True)
class Point:
    """A point with integer pixel coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class Circle:
    """A circle with an integer centre and radius."""

    center: Point
    radius: int


class CollinearPointsError(ValueError):
    """Raised when three points lie on one line and have no circumcircle."""


def distance(p1: Point, p2: Point) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def circumcircle(p1: Point, p2: Point, p3: Point) -> Circle:
    """Return the circle through three points, rounded to whole pixels.

    The centre is rounded half up; the radius is measured from the
    truncated centre to ``p1`` and then rounded half up.
    """
    det = (p2.x - p1.x) * (p3.y - p1.y) - (p3.x - p1.x) * (p2.y - p1.y)
    if abs(det) < _EPSILON:
        raise CollinearPointsError(f"points {p1}, {p2}, {p3} are collinear")

    x1, y1 = float(p1.x), float(p1.y)
    x2, y2 = float(p2.x), float(p2.y)
    x3, y3 = float(p3.x), float(p3.y)

    a = x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2)
    if abs(a) < _EPSILON:
        raise CollinearPointsError(f"points {p1}, {p2}, {p3} are collinear")

    s1 = x1 * x1 + y1 * y1
    s2 = x2 * x2 + y2 * y2
    s3 = x3 * x3 + y3 * y3

    bx = -(y1 * (s2 - s3) + y2 * (s3 - s1) + y3 * (s1 - s2))
    by = x1 * (s2 - s3) + x2 * (s3 - s1) + x3 * (s1 - s2)

    cx = bx / (2 * a)
    cy = by / (2 * a)

    center = Point(int(cx + 0.5), int(cy + 0.5))
    r = distance(Point(int(cx), int(cy)), p1)
    return Circle(center, int(r + 0.5))


def is_point_in_circle(test_point: Point, center: Point, radius: int) -> bool:
    """Return True if ``test_point`` lies inside or on the given circle."""
    dx = test_point.x - center.x
    dy = test_point.y - center.y
    return dx * dx + dy * dy <= radius * radius