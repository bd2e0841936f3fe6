"""Bulged-edge solver — circular arc through a chord with a given sagitta."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ductsketch.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from ductsketch.utils.geometry import Point, distance


@dataclass(frozen=True)
class BulgeArc:
    radius: float
    sweep_clockwise: bool


def solve_bulge(
    a: Point,
    b: Point,
    depth: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> BulgeArc | None:
    """Arc from ``a`` to ``b`` sagging ``depth`` away from the chord.

    Returns None when the edge should stay straight: a near-zero depth (which
    also keeps the radius away from the d → 0 singularity) or a zero chord.
    Sagitta relation: r = (d² + (c/2)²) / 2d. Positive depth sweeps clockwise
    on a y-down canvas.
    """
    if abs(depth) < config.min_bulge_depth:
        return None
    chord = distance(a, b)
    if chord == 0:
        return None
    half = chord / 2
    radius = (depth * depth + half * half) / (2 * depth)
    return BulgeArc(radius=abs(radius), sweep_clockwise=depth > 0)


def arc_length(
    a: Point,
    b: Point,
    depth: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> float:
    """Drawn length of the edge: minor-arc length when bulged, else the chord."""
    chord = distance(a, b)
    arc = solve_bulge(a, b, depth, config)
    if arc is None:
        return chord
    ratio = min(1.0, (chord / 2) / arc.radius)
    return arc.radius * 2 * math.asin(ratio)
