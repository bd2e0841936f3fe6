"""Engine tolerances and sketch-session tuning."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Numeric cut-offs below which geometry degenerates to straight lines."""

    # Corner arcs smaller than this are sub-pixel: skip them
    min_corner_radius: float = 0.1

    # |depth| below this draws the edge as a straight line
    min_bulge_depth: float = 0.1

    # |cross(in, out)| of unit directions below this is a straight run
    collinear_tolerance: float = 0.1


@dataclass(frozen=True)
class SketchConfig:
    """Controls the freehand pipe sketch."""

    # Outline width of the generated pipe
    pipe_thickness: float = 150.0

    # Perpendicular travel from the anchor that registers a turn
    turn_threshold: float = 150.0

    # Live segments shorter than this show no preview
    min_preview_length: float = 5.0

    # A finished outline needs more than this many vertices to become a shape
    min_outline_vertices: int = 3


DEFAULT_ENGINE_CONFIG = EngineConfig()
DEFAULT_SKETCH_CONFIG = SketchConfig()
