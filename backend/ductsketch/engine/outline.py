"""Orthogonal outliner — thicken a centerline polyline into a closed polygon.

Each centerline vertex contributes one point to each rail: the left rail
(offset along the left normal (-dy, dx)) and the right rail (the opposite
side). Offsets per vertex, with h = thickness / 2:

    start cap        ±h·n(out)
    end cap          ±h·n(in)
    straight run     ±h·n(in)            when |cross(in, out)| is small
    turn             ±h·(n(in) + n(out)) miter: summed, not averaged

Summing the normals lands exactly on the miter corner for right-angle turns,
which is all an orthogonal sketch produces. Near-straight joins would shrink
that vector towards zero, hence the straight-run case is tested first.

The polygon is the right rail followed by the reversed left rail.
"""

from __future__ import annotations

import enum
from typing import Sequence

from ductsketch.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from ductsketch.utils.geometry import Point, add, cross, left_normal, normalize, scale, sub


class JoinKind(enum.Enum):
    START_CAP = "start_cap"
    END_CAP = "end_cap"
    STRAIGHT = "straight"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"


def _directions(centerline: Sequence[Point], i: int) -> tuple[Point, Point]:
    """Unit incoming and outgoing directions at vertex ``i``."""
    last = len(centerline) - 1
    d_out = normalize(sub(centerline[i + 1], centerline[i])) if i < last else None
    d_in = normalize(sub(centerline[i], centerline[i - 1])) if i > 0 else None
    if d_in is None:
        d_in = d_out
    if d_out is None:
        d_out = d_in
    return d_in, d_out


def _classify(i: int, last: int, d_in: Point, d_out: Point, config: EngineConfig) -> JoinKind:
    if i == 0:
        return JoinKind.START_CAP
    if i == last:
        return JoinKind.END_CAP
    turn = cross(d_in, d_out)
    if abs(turn) < config.collinear_tolerance:
        return JoinKind.STRAIGHT
    return JoinKind.TURN_LEFT if turn > 0 else JoinKind.TURN_RIGHT


def classify_joins(
    centerline: Sequence[Point],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[JoinKind]:
    """Join kind at every centerline vertex (empty for fewer than 2 points)."""
    if len(centerline) < 2:
        return []
    last = len(centerline) - 1
    kinds = []
    for i in range(len(centerline)):
        d_in, d_out = _directions(centerline, i)
        kinds.append(_classify(i, last, d_in, d_out, config))
    return kinds


def build_outline(
    centerline: Sequence[Point],
    thickness: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[Point]:
    """Closed outline polygon, ``2 * len(centerline)`` points, or [] if too short."""
    if len(centerline) < 2:
        return []

    pts = [Point(float(p[0]), float(p[1])) for p in centerline]
    h = thickness / 2
    last = len(pts) - 1
    left_rail: list[Point] = []
    right_rail: list[Point] = []

    for i, p in enumerate(pts):
        d_in, d_out = _directions(pts, i)
        kind = _classify(i, last, d_in, d_out, config)

        if kind is JoinKind.START_CAP:
            offset = scale(left_normal(d_out), h)
        elif kind in (JoinKind.END_CAP, JoinKind.STRAIGHT):
            offset = scale(left_normal(d_in), h)
        else:
            # The outer rail of the turn gets the miter corner, the inner
            # rail its mirror; both stay on their own side of the centerline.
            offset = scale(add(left_normal(d_in), left_normal(d_out)), h)

        left_rail.append(add(p, offset))
        right_rail.append(sub(p, offset))

    return right_rail + left_rail[::-1]
