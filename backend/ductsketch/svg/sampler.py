"""Boundary sampling — facade over svgpathtools + shapely.

Turns a rendered ``d`` string back into sampled points, a shapely polygon,
its length and bounding box. The store uses this for hit testing, so a
pointer-down is tested against exactly the outline the user sees.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon
from svgpathtools import Path, parse_path

from ductsketch.utils.geometry import Point, bbox, signed_area

logger = logging.getLogger(__name__)

# Points per segment: arcs need enough samples for a smooth hit region.
_SAMPLES_PER_SEGMENT = 12


def parse_boundary(d: str) -> Path:
    return parse_path(d) if d else Path()


def sample_boundary(d: str, samples_per_segment: int = _SAMPLES_PER_SEGMENT) -> NDArray[np.float64]:
    """Nx2 points along the boundary, segment by segment, skipping empty ones."""
    path = parse_boundary(d)
    points: list[tuple[float, float]] = []

    for seg in path:
        if seg.length() < 1e-10:
            continue
        for t in np.linspace(0, 1, samples_per_segment, endpoint=False):
            pt = seg.point(t)
            points.append((pt.real, pt.imag))

    if not points:
        return np.empty((0, 2))
    return np.array(points)


def boundary_polygon(d: str) -> Polygon | None:
    """Shapely polygon of the boundary, repaired if self-touching; None if empty."""
    pts = sample_boundary(d)
    if len(pts) < 3:
        return None
    poly = Polygon(pts)
    if not poly.is_valid:
        logger.debug("Boundary polygon invalid, repairing with buffer(0)")
        poly = poly.buffer(0)
    if poly.is_empty:
        return None
    return poly


def boundary_length(d: str) -> float:
    path = parse_boundary(d)
    if len(path) == 0:
        return 0.0
    return float(path.length())


def boundary_area(d: str) -> float:
    """Enclosed area of the sampled boundary."""
    return abs(signed_area(sample_boundary(d)))


def boundary_bbox(d: str) -> tuple[float, float, float, float]:
    """(xmin, ymin, xmax, ymax) of the sampled boundary."""
    return bbox(sample_boundary(d))


def boundary_contains(d: str, point: Point) -> bool:
    poly = boundary_polygon(d)
    if poly is None:
        return False
    return bool(poly.intersects(ShapelyPoint(point.x, point.y)))
