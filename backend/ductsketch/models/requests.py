"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, FiniteFloat, model_validator


class PointModel(BaseModel):
    x: FiniteFloat
    y: FiniteFloat


class ShapeCreateRequest(BaseModel):
    vertices: list[PointModel] = Field(..., min_length=3, description="Closed polygon, in drawing order")
    corner_radii: list[FiniteFloat] | None = Field(default=None, description="Per-vertex radius; zeros if omitted")
    segment_depths: list[FiniteFloat] | None = Field(default=None, description="Per-edge bulge; zeros if omitted")

    @model_validator(mode="after")
    def _check_lengths(self) -> ShapeCreateRequest:
        n = len(self.vertices)
        for name in ("corner_radii", "segment_depths"):
            values = getattr(self, name)
            if values is not None and len(values) != n:
                raise ValueError(f"{name} has {len(values)} entries, expected {n}")
        if self.corner_radii is not None and any(r < 0 for r in self.corner_radii):
            raise ValueError("corner_radii must be non-negative")
        return self


class VertexUpdateRequest(BaseModel):
    position: PointModel
    drag_start: PointModel | None = Field(
        default=None,
        description="Where the drag began; constrains the move to its dominant axis",
    )


class VertexInsertRequest(BaseModel):
    after: int = Field(..., ge=0, description="Edge index to split")
    position: PointModel | None = Field(default=None, description="Defaults to the edge midpoint")


class RadiusRequest(BaseModel):
    radius: FiniteFloat = Field(..., ge=0)


class DepthRequest(BaseModel):
    depth: FiniteFloat = Field(..., description="Signed bulge; clamped to ± the chord length")


class SegmentLengthRequest(BaseModel):
    length: FiniteFloat = Field(..., gt=0)


class MoveRequest(BaseModel):
    dx: FiniteFloat = 0.0
    dy: FiniteFloat = 0.0


class PointerRequest(BaseModel):
    x: FiniteFloat = Field(..., description="Pointer x in canvas units")
    y: FiniteFloat = Field(..., description="Pointer y in canvas units")
    modifier_held: bool = False


class ModifierRequest(BaseModel):
    held: bool
