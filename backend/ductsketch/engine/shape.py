"""Shape value type shared by the engine and the shape store.

A Shape is a closed polygon: vertex i joins vertex (i + 1) % N. Every
per-vertex array has one entry per vertex:

    corner_radii[i]    rounding radius at vertex i (>= 0)
    segment_depths[i]  signed bulge of the edge from vertex i to vertex i + 1

The engine reads shapes but never mutates them; the store replaces a shape
with a new instance on every edit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ductsketch.utils.geometry import Point


@dataclass(frozen=True)
class Shape:
    vertices: tuple[Point, ...]
    corner_radii: tuple[float, ...]
    segment_depths: tuple[float, ...]
    id: str = field(default="")

    def __len__(self) -> int:
        return len(self.vertices)

    def edge(self, index: int) -> tuple[Point, Point]:
        """Endpoints of edge ``index`` (vertex i to vertex i + 1, wrapping)."""
        n = len(self.vertices)
        return self.vertices[index % n], self.vertices[(index + 1) % n]


def make_shape(
    vertices: Iterable[Sequence[float]],
    corner_radii: Sequence[float] | None = None,
    segment_depths: Sequence[float] | None = None,
    shape_id: str = "",
) -> Shape:
    """Build a Shape, zero-filling missing radius/depth arrays.

    Raises ValueError when a supplied array does not match the vertex count
    or a value is not finite.
    """
    pts = tuple(Point(float(v[0]), float(v[1])) for v in vertices)
    n = len(pts)
    radii = tuple(float(r) for r in corner_radii) if corner_radii is not None else (0.0,) * n
    depths = tuple(float(d) for d in segment_depths) if segment_depths is not None else (0.0,) * n

    if len(radii) != n or len(depths) != n:
        raise ValueError(
            f"corner_radii ({len(radii)}) and segment_depths ({len(depths)}) "
            f"must match vertex count ({n})"
        )
    if any(r < 0 for r in radii):
        raise ValueError("corner radii must be non-negative")

    shape = Shape(vertices=pts, corner_radii=radii, segment_depths=depths, id=shape_id)
    check_finite(shape)
    return shape


def check_finite(shape: Shape) -> None:
    """Raise ValueError if any coordinate, radius or depth is inf or NaN."""
    values = [c for p in shape.vertices for c in p]
    values += [*shape.corner_radii, *shape.segment_depths]
    if not all(math.isfinite(v) for v in values):
        raise ValueError("shape coordinates, radii and depths must be finite")
