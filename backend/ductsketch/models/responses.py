"""API response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ductsketch.models.requests import PointModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    shape_count: int = 0


class PathCommandModel(BaseModel):
    command: Literal["M", "L", "A"]
    x: float
    y: float
    radius: float | None = None
    sweep_clockwise: bool | None = None
    kind: Literal["corner", "bulge"] | None = None


class LabelModel(BaseModel):
    text: str
    x: float
    y: float
    anchor: str = "center"
    index: int = 0


class ShapeResponse(BaseModel):
    id: str
    vertices: list[PointModel]
    corner_radii: list[float]
    segment_depths: list[float]
    selected: bool = False
    d: str = ""
    midpoint_handles: list[PointModel] = Field(default_factory=list)
    segment_labels: list[LabelModel] = Field(default_factory=list)
    angle_labels: list[LabelModel] = Field(default_factory=list)


class ShapeListResponse(BaseModel):
    shapes: list[ShapeResponse] = Field(default_factory=list)
    selected_id: str | None = None


class PathResponse(BaseModel):
    id: str
    d: str
    commands: list[PathCommandModel] = Field(default_factory=list)
    length: float = 0.0
    area: float = 0.0
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


class HitResponse(BaseModel):
    shape_id: str | None = None


class SketchResponse(BaseModel):
    status: str
    locked_axis: str | None = None
    centerline: list[PointModel] = Field(default_factory=list)
    preview: list[PointModel] | None = None
    labels: list[LabelModel] = Field(default_factory=list)
    shape: ShapeResponse | None = None
