"""Boundary path builder — shape arrays → ordered MoveTo/LineTo/ArcTo commands.

Walk:
    1. Solve the fillet at every vertex.
    2. Start at the end of the last vertex's fillet, i.e. mid-edge, so the
       path never begins on a rounded corner.
    3. For each vertex i: draw the incoming edge (straight or bulged) up to
       the fillet start, then the fillet itself if the corner is rounded.

The path is implicitly closed. Nothing is cached: the same Shape always
yields an equal path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Union

from ductsketch.engine.bulge_arc import solve_bulge
from ductsketch.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from ductsketch.engine.corner_arc import CornerArc, solve_corner
from ductsketch.engine.shape import Shape
from ductsketch.utils.geometry import Point, cross, sub

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class ArcTo:
    point: Point
    radius: float
    sweep_clockwise: bool
    kind: Literal["corner", "bulge"] = "bulge"


PathCommand = Union[MoveTo, LineTo, ArcTo]
BoundaryPath = tuple[PathCommand, ...]


def corner_sweep_clockwise(p: Point, p_prev: Point, p_next: Point) -> bool:
    """Direction of the fillet at ``p``: the way the boundary turns there."""
    return cross(sub(p, p_prev), sub(p_next, p)) > 0


def solve_corners(shape: Shape, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> list[CornerArc]:
    """Fillet geometry for every vertex of the shape, in vertex order."""
    vertices = shape.vertices
    n = len(vertices)
    return [
        solve_corner(
            vertices[i],
            vertices[(i - 1) % n],
            vertices[(i + 1) % n],
            shape.corner_radii[i],
            config,
        )
        for i in range(n)
    ]


def build_boundary_path(shape: Shape, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> BoundaryPath:
    vertices = shape.vertices
    n = len(vertices)
    if n < 2:
        return ()

    corners = solve_corners(shape, config)
    commands: list[PathCommand] = [MoveTo(corners[n - 1].arc_end)]

    for i in range(n):
        start = corners[(i - 1) % n].arc_end
        corner = corners[i]
        depth = shape.segment_depths[(i - 1) % n]

        bulge = solve_bulge(start, corner.arc_start, depth, config)
        if bulge is None:
            commands.append(LineTo(corner.arc_start))
        else:
            commands.append(ArcTo(corner.arc_start, bulge.radius, bulge.sweep_clockwise, "bulge"))

        if corner.is_rounded:
            sweep = corner_sweep_clockwise(vertices[i], vertices[(i - 1) % n], vertices[(i + 1) % n])
            commands.append(ArcTo(corner.arc_end, corner.radius, sweep, "corner"))

    logger.debug("Boundary path for %s: %d commands", shape.id or "<anon>", len(commands))
    return tuple(commands)
