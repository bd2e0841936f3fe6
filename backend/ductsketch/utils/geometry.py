"""Leaf-node 2D vector helpers. No engine imports."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

import numpy as np
from numpy.typing import NDArray


class Point(NamedTuple):
    """Immutable 2D coordinate. Also used as a free vector."""

    x: float
    y: float


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def sub(a: Point, b: Point) -> Point:
    """Vector from b to a."""
    return Point(a.x - b.x, a.y - b.y)


def scale(v: Point, k: float) -> Point:
    return Point(v.x * k, v.y * k)


def length(v: Point) -> float:
    return math.hypot(v.x, v.y)


def distance(a: Point, b: Point) -> float:
    """Chord length between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def normalize(v: Point) -> Point:
    """Unit vector along v. A zero vector stays zero instead of raising."""
    n = length(v)
    if n == 0:
        return Point(0.0, 0.0)
    return Point(v.x / n, v.y / n)


def dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def cross(a: Point, b: Point) -> float:
    """z-component of a × b. In y-down screen space, > 0 turns clockwise."""
    return a.x * b.y - a.y * b.x


def left_normal(v: Point) -> Point:
    """(-dy, dx): v rotated a quarter turn towards positive angles."""
    return Point(-v.y, v.x)


def angle_between(a: Point, b: Point) -> float:
    """Unsigned angle in radians between two vectors, 0 if either is zero.

    The cosine is clamped so rounding noise near ±1 never leaves acos's domain.
    """
    la = length(a)
    lb = length(b)
    if la == 0 or lb == 0:
        return 0.0
    cos_value = max(-1.0, min(1.0, dot(a, b) / (la * lb)))
    return math.acos(cos_value)


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def as_array(points: Sequence[Point]) -> NDArray[np.float64]:
    """Nx2 float array of a point sequence."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.asarray(points, dtype=np.float64)


def signed_area(points: Sequence[Point] | NDArray[np.float64]) -> float:
    """Shoelace formula over a closed ring (last point joins the first).

    Positive = CCW in y-up axes, which is clockwise on a y-down canvas.
    """
    pts = as_array(points)
    if len(pts) < 3:
        return 0.0
    x = pts[:, 0]
    y = pts[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )
