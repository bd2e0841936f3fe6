"""Workspace — wires pointer input to the store and the sketch session.

Decides what a pointer-down means: over a shape it selects that shape,
over empty canvas it clears the selection and starts a pipe sketch.
A committed sketch becomes a new, selected shape.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ductsketch.canvas.store import ShapeStore
from ductsketch.engine.config import DEFAULT_SKETCH_CONFIG, SketchConfig
from ductsketch.engine.shape import Shape
from ductsketch.engine.sketch import SketchSession
from ductsketch.utils.geometry import Point

logger = logging.getLogger(__name__)


class Workspace:
    def __init__(
        self,
        store: ShapeStore | None = None,
        sketch_config: SketchConfig = DEFAULT_SKETCH_CONFIG,
    ) -> None:
        self.store = store or ShapeStore()
        self.session = SketchSession(sketch_config, self.store.engine_config)

    def pointer_down(self, pos: Sequence[float], modifier_held: bool = False) -> Shape | None:
        """Returns the shape hit, or None if the press landed on empty canvas."""
        if self.session.is_drawing:
            logger.debug("Pointer down ignored while sketching")
            return None
        if modifier_held:
            logger.debug("Pointer down ignored: modifier held")
            return None
        hit = self.store.shape_at(pos)
        if hit is not None:
            self.store.select(hit.id)
            return hit
        self.store.select(None)
        self.session.start(pos)
        return None

    def pointer_move(self, pos: Sequence[float], modifier_held: bool = False) -> list[Point] | None:
        return self.session.update(pos, modifier_held=modifier_held)

    def pointer_up(self) -> Shape | None:
        """Finish any sketch; returns the created shape, if one was made."""
        vertices = self.session.commit()
        if vertices is None:
            return None
        return self.store.add_shape(vertices, select=True)

    def cancel(self) -> None:
        self.session.request_cancel()

    def set_modifier(self, held: bool) -> None:
        self.session.set_modifier(held)
