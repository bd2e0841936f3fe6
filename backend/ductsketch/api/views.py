"""Engine/store objects → API response models."""

from __future__ import annotations

from typing import Sequence

from ductsketch.canvas.labels import Label, angle_labels, centerline_labels, midpoint_handles, segment_labels
from ductsketch.canvas.store import ShapeStore
from ductsketch.engine.boundary_path import ArcTo, BoundaryPath, LineTo
from ductsketch.engine.shape import Shape
from ductsketch.engine.sketch import SketchSession
from ductsketch.models.requests import PointModel
from ductsketch.models.responses import LabelModel, PathCommandModel, ShapeResponse, SketchResponse
from ductsketch.utils.geometry import Point


def point_models(points: Sequence[Point]) -> list[PointModel]:
    return [PointModel(x=p.x, y=p.y) for p in points]


def label_models(labels: Sequence[Label]) -> list[LabelModel]:
    return [
        LabelModel(text=lb.text, x=lb.position.x, y=lb.position.y, anchor=lb.anchor, index=lb.index)
        for lb in labels
    ]


def command_models(path: BoundaryPath) -> list[PathCommandModel]:
    models = []
    for cmd in path:
        if isinstance(cmd, ArcTo):
            models.append(
                PathCommandModel(
                    command="A",
                    x=cmd.point.x,
                    y=cmd.point.y,
                    radius=cmd.radius,
                    sweep_clockwise=cmd.sweep_clockwise,
                    kind=cmd.kind,
                )
            )
        else:
            code = "L" if isinstance(cmd, LineTo) else "M"
            models.append(PathCommandModel(command=code, x=cmd.point.x, y=cmd.point.y))
    return models


def shape_view(shape: Shape, store: ShapeStore) -> ShapeResponse:
    return ShapeResponse(
        id=shape.id,
        vertices=point_models(shape.vertices),
        corner_radii=list(shape.corner_radii),
        segment_depths=list(shape.segment_depths),
        selected=shape.id == store.selected_id,
        d=store.path_data(shape.id),
        midpoint_handles=point_models(midpoint_handles(shape)),
        segment_labels=label_models(segment_labels(shape)),
        angle_labels=label_models(angle_labels(shape)),
    )


def sketch_view(
    session: SketchSession,
    preview: Sequence[Point] | None = None,
    shape: ShapeResponse | None = None,
) -> SketchResponse:
    state = session.state
    centerline = session.centerline
    return SketchResponse(
        status=session.status.value,
        locked_axis=state.locked_axis.value if state is not None else None,
        centerline=point_models(centerline),
        preview=point_models(preview) if preview is not None else None,
        labels=label_models(centerline_labels(centerline)),
        shape=shape,
    )
