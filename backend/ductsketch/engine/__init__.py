"""DuctSketch geometry engine."""

from ductsketch.engine.boundary_path import ArcTo, BoundaryPath, LineTo, MoveTo, build_boundary_path
from ductsketch.engine.bulge_arc import BulgeArc, solve_bulge
from ductsketch.engine.config import EngineConfig, SketchConfig
from ductsketch.engine.corner_arc import CornerArc, solve_corner
from ductsketch.engine.outline import JoinKind, build_outline, classify_joins
from ductsketch.engine.shape import Shape, make_shape
from ductsketch.engine.sketch import Axis, SessionStatus, SketchSession

__all__ = [
    "ArcTo",
    "Axis",
    "BoundaryPath",
    "BulgeArc",
    "CornerArc",
    "EngineConfig",
    "JoinKind",
    "LineTo",
    "MoveTo",
    "SessionStatus",
    "Shape",
    "SketchConfig",
    "SketchSession",
    "build_boundary_path",
    "build_outline",
    "classify_joins",
    "make_shape",
    "solve_bulge",
    "solve_corner",
]
