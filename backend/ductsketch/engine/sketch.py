"""Pipe sketch session — pointer stream → orthogonal centerline → outline.

States:
    IDLE ──start──▶ DRAWING ──commit──▶ COMMITTED
                       │
                       └──cancel / modifier──▶ CANCELLED

While drawing, the live endpoint moves along one locked axis from the last
committed vertex (the anchor). Dragging far enough across that axis commits
the current constrained point as a turn and flips the lock, so the centerline
alternates horizontal and vertical runs.

Each update is a function of the previous session state and the new pointer
position only; nothing is deferred.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Sequence

from ductsketch.engine.config import DEFAULT_ENGINE_CONFIG, DEFAULT_SKETCH_CONFIG, EngineConfig, SketchConfig
from ductsketch.engine.outline import build_outline
from ductsketch.utils.geometry import Point, distance

logger = logging.getLogger(__name__)


class Axis(enum.Enum):
    UNDETERMINED = "undetermined"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def flipped(self) -> Axis:
        if self is Axis.HORIZONTAL:
            return Axis.VERTICAL
        if self is Axis.VERTICAL:
            return Axis.HORIZONTAL
        return self


class SessionStatus(enum.Enum):
    IDLE = "idle"
    DRAWING = "drawing"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


@dataclass
class SketchState:
    anchor: Point
    locked_axis: Axis = Axis.UNDETERMINED
    centerline: list[Point] = field(default_factory=list)
    live_endpoint: Point | None = None
    preview: list[Point] | None = None


def _constrain(anchor: Point, pos: Point, axis: Axis) -> Point:
    if axis is Axis.HORIZONTAL:
        return Point(pos.x, anchor.y)
    return Point(anchor.x, pos.y)


def _perpendicular_offset(anchor: Point, pos: Point, axis: Axis) -> float:
    if axis is Axis.HORIZONTAL:
        return abs(pos.y - anchor.y)
    return abs(pos.x - anchor.x)


class SketchSession:
    """Owns at most one in-progress pipe sketch."""

    def __init__(
        self,
        config: SketchConfig = DEFAULT_SKETCH_CONFIG,
        engine_config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    ) -> None:
        self.config = config
        self.engine_config = engine_config
        self.status = SessionStatus.IDLE
        self.state: SketchState | None = None

    @property
    def is_drawing(self) -> bool:
        return self.status is SessionStatus.DRAWING

    @property
    def centerline(self) -> list[Point]:
        """Committed vertices plus the live endpoint, if any."""
        if self.state is None:
            return []
        path = list(self.state.centerline)
        if self._live_is_visible():
            path.append(self.state.live_endpoint)
        return path

    def start(self, pos: Sequence[float], modifier_held: bool = False) -> bool:
        """Begin a sketch at ``pos``. Returns False if the press was ignored."""
        if self.is_drawing:
            logger.debug("Sketch start ignored: a session is already drawing")
            return False
        if modifier_held:
            logger.debug("Sketch start ignored: modifier held")
            return False

        anchor = Point(float(pos[0]), float(pos[1]))
        self.state = SketchState(anchor=anchor, centerline=[anchor])
        self.status = SessionStatus.DRAWING
        logger.debug("Sketch started at (%.1f, %.1f)", anchor.x, anchor.y)
        return True

    def update(self, pos: Sequence[float], modifier_held: bool = False) -> list[Point] | None:
        """Feed one pointer move. Returns the preview outline, or None."""
        if not self.is_drawing or self.state is None:
            return None
        if modifier_held:
            self.cancel()
            return None

        state = self.state
        pointer = Point(float(pos[0]), float(pos[1]))

        if state.locked_axis is Axis.UNDETERMINED:
            dx = pointer.x - state.anchor.x
            dy = pointer.y - state.anchor.y
            state.locked_axis = Axis.HORIZONTAL if abs(dx) > abs(dy) else Axis.VERTICAL
            logger.debug("Sketch axis locked %s", state.locked_axis.value)

        if _perpendicular_offset(state.anchor, pointer, state.locked_axis) > self.config.turn_threshold:
            turn_point = _constrain(state.anchor, pointer, state.locked_axis)
            if turn_point != state.anchor:
                state.centerline.append(turn_point)
                state.anchor = turn_point
            state.locked_axis = state.locked_axis.flipped()
            logger.debug(
                "Sketch turn at (%.1f, %.1f), now %s",
                turn_point.x,
                turn_point.y,
                state.locked_axis.value,
            )

        state.live_endpoint = _constrain(state.anchor, pointer, state.locked_axis)

        if not self._live_is_visible():
            state.preview = None
            return None

        state.preview = build_outline(
            state.centerline + [state.live_endpoint],
            self.config.pipe_thickness,
            self.engine_config,
        )
        return state.preview

    def commit(self) -> list[Point] | None:
        """Finish the sketch. Returns outline vertices for a new shape, or None."""
        if not self.is_drawing or self.state is None:
            return None

        outline = build_outline(self.centerline, self.config.pipe_thickness, self.engine_config)
        self.status = SessionStatus.COMMITTED
        self.state = None

        if len(outline) <= self.config.min_outline_vertices:
            logger.info("Sketch committed without a shape (%d outline vertices)", len(outline))
            return None
        logger.info("Sketch committed: %d outline vertices", len(outline))
        return outline

    def cancel(self) -> None:
        """Discard the centerline and preview. No-op unless drawing."""
        if not self.is_drawing:
            return
        self.status = SessionStatus.CANCELLED
        self.state = None
        logger.info("Sketch cancelled")

    def request_cancel(self) -> None:
        """The abstract cancel signal (Escape in a typical host)."""
        self.cancel()

    def set_modifier(self, held: bool) -> None:
        """The abstract modifier signal; pressing it mid-sketch cancels."""
        if held:
            self.cancel()

    def _live_is_visible(self) -> bool:
        state = self.state
        if state is None or state.live_endpoint is None:
            return False
        return distance(state.live_endpoint, state.centerline[-1]) >= self.config.min_preview_length
