"""Rounded-corner solver — tangent points of a fillet at one polygon vertex.

For a corner P with neighbours Pprev and Pnext and interior angle θ, a fillet
of radius r touches both edges at distance t = r / tan(θ/2) from P. The
tangent distance is capped at half of each adjacent edge so neighbouring
fillets never overlap; the radius actually drawn shrinks to match.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ductsketch.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from ductsketch.utils.geometry import Point, add, angle_between, length, scale, sub

# Interior angles within this of 0 (edge doubles back) or π (straight through)
# have no fillet to draw.
_ANGLE_EPS = 1e-9


@dataclass(frozen=True)
class CornerArc:
    arc_start: Point  # tangent point on the edge towards the previous vertex
    arc_end: Point  # tangent point on the edge towards the next vertex
    radius: float  # effective radius; 0 means "no rounding"
    tangent_distance: float = 0.0

    @property
    def is_rounded(self) -> bool:
        return self.radius > 0


def _degenerate(p: Point) -> CornerArc:
    return CornerArc(arc_start=p, arc_end=p, radius=0.0)


def solve_corner(
    p: Point,
    p_prev: Point,
    p_next: Point,
    radius: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> CornerArc:
    """Fit a fillet of the requested radius into the corner at ``p``."""
    v_prev = sub(p_prev, p)
    v_next = sub(p_next, p)
    l_prev = length(v_prev)
    l_next = length(v_next)

    if l_prev == 0 or l_next == 0 or radius <= 0:
        return _degenerate(p)

    theta = angle_between(v_prev, v_next)
    if theta < _ANGLE_EPS or theta > math.pi - _ANGLE_EPS:
        return _degenerate(p)

    tan_half = math.tan(theta / 2)
    dist = min(radius / tan_half, l_prev / 2, l_next / 2)
    effective = dist * tan_half

    if effective < config.min_corner_radius:
        return _degenerate(p)

    return CornerArc(
        arc_start=add(p, scale(v_prev, dist / l_prev)),
        arc_end=add(p, scale(v_next, dist / l_next)),
        radius=effective,
        tangent_distance=dist,
    )
