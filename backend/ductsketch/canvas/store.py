"""ShapeStore — exclusive owner of the shape collection and the selection.

Shapes are frozen; every edit builds a replacement and swaps it in under the
same id. Callers only ever receive snapshots. The vertex/radius/depth arrays
are kept the same length here, at the point of mutation.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Iterable, Sequence

from ductsketch.canvas.labels import is_horizontal
from ductsketch.engine.boundary_path import BoundaryPath, build_boundary_path
from ductsketch.engine.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from ductsketch.engine.shape import Shape, check_finite, make_shape
from ductsketch.svg.sampler import boundary_contains
from ductsketch.svg.serializer import path_to_d
from ductsketch.utils.geometry import Point, distance, midpoint

logger = logging.getLogger(__name__)

MIN_SHAPE_VERTICES = 3


class ShapeNotFoundError(KeyError):
    def __init__(self, shape_id: str) -> None:
        super().__init__(shape_id)
        self.shape_id = shape_id

    def __str__(self) -> str:
        return f"Unknown shape: {self.shape_id}"


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


class ShapeStore:
    def __init__(self, engine_config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> None:
        self.engine_config = engine_config
        self._shapes: dict[str, Shape] = {}
        self.selected_id: str | None = None

    # ── queries ────────────────────────────────────────────────────

    def shapes(self) -> list[Shape]:
        return list(self._shapes.values())

    def get(self, shape_id: str) -> Shape:
        try:
            return self._shapes[shape_id]
        except KeyError:
            raise ShapeNotFoundError(shape_id) from None

    @property
    def selected(self) -> Shape | None:
        if self.selected_id is None:
            return None
        return self._shapes.get(self.selected_id)

    def boundary_path(self, shape_id: str) -> BoundaryPath:
        return build_boundary_path(self.get(shape_id), self.engine_config)

    def path_data(self, shape_id: str) -> str:
        return path_to_d(self.boundary_path(shape_id))

    def shape_at(self, point: Sequence[float]) -> Shape | None:
        """Topmost shape whose drawn boundary contains ``point``."""
        p = Point(float(point[0]), float(point[1]))
        for shape in reversed(self.shapes()):
            if boundary_contains(self.path_data(shape.id), p):
                return shape
        return None

    # ── lifecycle ──────────────────────────────────────────────────

    def add_shape(
        self,
        vertices: Iterable[Sequence[float]],
        corner_radii: Sequence[float] | None = None,
        segment_depths: Sequence[float] | None = None,
        select: bool = True,
    ) -> Shape:
        """Create a shape (missing radii/depths start at zero) and select it."""
        shape = make_shape(vertices, corner_radii, segment_depths, shape_id=_new_id())
        if len(shape) < MIN_SHAPE_VERTICES:
            raise ValueError(f"a shape needs at least {MIN_SHAPE_VERTICES} vertices, got {len(shape)}")
        self._shapes[shape.id] = shape
        if select:
            self.selected_id = shape.id
        logger.info("Created shape %s with %d vertices", shape.id, len(shape))
        return shape

    def delete_shape(self, shape_id: str) -> None:
        self.get(shape_id)
        del self._shapes[shape_id]
        if self.selected_id == shape_id:
            self.selected_id = None
        logger.info("Deleted shape %s", shape_id)

    def select(self, shape_id: str | None) -> None:
        if shape_id is not None:
            self.get(shape_id)
        self.selected_id = shape_id

    # ── vertex edits ───────────────────────────────────────────────

    def update_vertex(
        self,
        shape_id: str,
        index: int,
        position: Sequence[float],
        drag_start: Sequence[float] | None = None,
    ) -> Shape:
        """Move one vertex. With ``drag_start``, the move snaps to its dominant axis."""
        shape = self.get(shape_id)
        self._check_index(shape, index)
        pos = Point(float(position[0]), float(position[1]))
        if drag_start is not None:
            start = Point(float(drag_start[0]), float(drag_start[1]))
            if abs(pos.x - start.x) > abs(pos.y - start.y):
                pos = Point(pos.x, start.y)
            else:
                pos = Point(start.x, pos.y)
        vertices = list(shape.vertices)
        vertices[index] = pos
        return self._replace(replace(shape, vertices=tuple(vertices)))

    def insert_vertex(self, shape_id: str, after: int, position: Sequence[float] | None = None) -> Shape:
        """Split edge ``after`` with a new vertex (default: the edge midpoint)."""
        shape = self.get(shape_id)
        self._check_index(shape, after)
        pos = Point(float(position[0]), float(position[1])) if position is not None else midpoint(*shape.edge(after))
        at = after + 1
        vertices = list(shape.vertices)
        radii = list(shape.corner_radii)
        depths = list(shape.segment_depths)
        vertices.insert(at, pos)
        radii.insert(at, 0.0)
        depths.insert(at, 0.0)
        return self._replace(
            replace(shape, vertices=tuple(vertices), corner_radii=tuple(radii), segment_depths=tuple(depths))
        )

    def remove_vertex(self, shape_id: str, index: int) -> Shape:
        shape = self.get(shape_id)
        self._check_index(shape, index)
        if len(shape) <= MIN_SHAPE_VERTICES:
            raise ValueError(f"a shape needs at least {MIN_SHAPE_VERTICES} vertices")
        vertices = list(shape.vertices)
        radii = list(shape.corner_radii)
        depths = list(shape.segment_depths)
        del vertices[index], radii[index], depths[index]
        return self._replace(
            replace(shape, vertices=tuple(vertices), corner_radii=tuple(radii), segment_depths=tuple(depths))
        )

    def set_corner_radius(self, shape_id: str, index: int, radius: float) -> Shape:
        shape = self.get(shape_id)
        self._check_index(shape, index)
        if radius < 0:
            raise ValueError("corner radius must be non-negative")
        radii = list(shape.corner_radii)
        radii[index] = float(radius)
        return self._replace(replace(shape, corner_radii=tuple(radii)))

    # ── segment edits ──────────────────────────────────────────────

    def set_segment_depth(self, shape_id: str, index: int, depth: float) -> Shape:
        """Set an edge's bulge, clamped to ± its chord length."""
        shape = self.get(shape_id)
        self._check_index(shape, index)
        chord = distance(*shape.edge(index))
        clamped = max(-chord, min(chord, float(depth)))
        if clamped != depth:
            logger.debug("Depth %.2f clamped to %.2f on %s edge %d", depth, clamped, shape_id, index)
        depths = list(shape.segment_depths)
        depths[index] = clamped
        return self._replace(replace(shape, segment_depths=tuple(depths)))

    def move_segment(self, shape_id: str, index: int, dx: float, dy: float) -> Shape:
        """Slide edge ``index`` perpendicular to itself, moving both endpoints.

        The component of the delta along the edge is dropped, so the
        neighbouring edges keep their direction.
        """
        shape = self.get(shape_id)
        self._check_index(shape, index)
        if is_horizontal(*shape.edge(index)):
            dx = 0.0
        else:
            dy = 0.0
        n = len(shape)
        vertices = list(shape.vertices)
        for i in (index, (index + 1) % n):
            vertices[i] = Point(vertices[i].x + dx, vertices[i].y + dy)
        return self._replace(replace(shape, vertices=tuple(vertices)))

    def set_segment_length(self, shape_id: str, index: int, new_length: float) -> Shape:
        """Resize the whole shape along edge ``index``'s axis so the edge gets ``new_length``."""
        shape = self.get(shape_id)
        self._check_index(shape, index)
        a, b = shape.edge(index)
        current = distance(a, b)
        if new_length <= 0 or current == 0:
            raise ValueError("segment length must be positive on a non-empty segment")
        return self.scale_all(shape_id, new_length / current, is_horizontal(a, b))

    def scale_all(self, shape_id: str, ratio: float, horizontal: bool) -> Shape:
        """Stretch along one axis, keeping the shape's min x (or min y) fixed."""
        if ratio <= 0:
            raise ValueError("scale ratio must be positive")
        shape = self.get(shape_id)
        if horizontal:
            origin = min(v.x for v in shape.vertices)
            vertices = tuple(Point(origin + (v.x - origin) * ratio, v.y) for v in shape.vertices)
        else:
            origin = min(v.y for v in shape.vertices)
            vertices = tuple(Point(v.x, origin + (v.y - origin) * ratio) for v in shape.vertices)
        return self._replace(replace(shape, vertices=vertices))

    def move_shape(self, shape_id: str, dx: float, dy: float) -> Shape:
        shape = self.get(shape_id)
        vertices = tuple(Point(v.x + dx, v.y + dy) for v in shape.vertices)
        return self._replace(replace(shape, vertices=vertices))

    # ── internals ──────────────────────────────────────────────────

    def _replace(self, shape: Shape) -> Shape:
        check_finite(shape)
        self._shapes[shape.id] = shape
        return shape

    @staticmethod
    def _check_index(shape: Shape, index: int) -> None:
        if not 0 <= index < len(shape):
            raise ValueError(f"index {index} out of range for {len(shape)} vertices")
