"""/api/shapes — shape collection, selection and edits."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ductsketch.api.views import command_models, shape_view
from ductsketch.canvas.workspace import Workspace
from ductsketch.dependencies import get_workspace
from ductsketch.models.requests import (
    DepthRequest,
    MoveRequest,
    RadiusRequest,
    SegmentLengthRequest,
    ShapeCreateRequest,
    VertexInsertRequest,
    VertexUpdateRequest,
)
from ductsketch.models.responses import PathResponse, ShapeListResponse, ShapeResponse
from ductsketch.svg.sampler import boundary_area, boundary_bbox, boundary_length

router = APIRouter()


@router.get("/shapes", response_model=ShapeListResponse)
async def list_shapes(workspace: Workspace = Depends(get_workspace)) -> ShapeListResponse:
    store = workspace.store
    return ShapeListResponse(
        shapes=[shape_view(s, store) for s in store.shapes()],
        selected_id=store.selected_id,
    )


@router.post("/shapes", response_model=ShapeResponse, status_code=201)
async def create_shape(req: ShapeCreateRequest, workspace: Workspace = Depends(get_workspace)) -> ShapeResponse:
    store = workspace.store
    shape = store.add_shape(
        [(p.x, p.y) for p in req.vertices],
        req.corner_radii,
        req.segment_depths,
    )
    return shape_view(shape, store)


@router.get("/shapes/{shape_id}", response_model=ShapeResponse)
async def get_shape(shape_id: str, workspace: Workspace = Depends(get_workspace)) -> ShapeResponse:
    return shape_view(workspace.store.get(shape_id), workspace.store)


@router.delete("/shapes/{shape_id}", status_code=204)
async def delete_shape(shape_id: str, workspace: Workspace = Depends(get_workspace)) -> Response:
    workspace.store.delete_shape(shape_id)
    return Response(status_code=204)


@router.get("/shapes/{shape_id}/path", response_model=PathResponse)
async def shape_path(shape_id: str, workspace: Workspace = Depends(get_workspace)) -> PathResponse:
    store = workspace.store
    path = store.boundary_path(shape_id)
    d = store.path_data(shape_id)
    return PathResponse(
        id=shape_id,
        d=d,
        commands=command_models(path),
        length=round(boundary_length(d), 3),
        area=round(boundary_area(d), 3),
        bbox=boundary_bbox(d),
    )


# ── selection ──────────────────────────────────────────────────────


@router.post("/shapes/{shape_id}/select", response_model=ShapeListResponse)
async def select_shape(shape_id: str, workspace: Workspace = Depends(get_workspace)) -> ShapeListResponse:
    workspace.store.select(shape_id)
    return await list_shapes(workspace)


@router.post("/selection/clear", response_model=ShapeListResponse)
async def clear_selection(workspace: Workspace = Depends(get_workspace)) -> ShapeListResponse:
    workspace.store.select(None)
    return await list_shapes(workspace)


# ── vertices ───────────────────────────────────────────────────────


@router.put("/shapes/{shape_id}/vertices/{index}", response_model=ShapeResponse)
async def update_vertex(
    shape_id: str,
    index: int,
    req: VertexUpdateRequest,
    workspace: Workspace = Depends(get_workspace),
) -> ShapeResponse:
    drag_start = (req.drag_start.x, req.drag_start.y) if req.drag_start is not None else None
    shape = workspace.store.update_vertex(shape_id, index, (req.position.x, req.position.y), drag_start)
    return shape_view(shape, workspace.store)


@router.post("/shapes/{shape_id}/vertices", response_model=ShapeResponse)
async def insert_vertex(
    shape_id: str,
    req: VertexInsertRequest,
    workspace: Workspace = Depends(get_workspace),
) -> ShapeResponse:
    position = (req.position.x, req.position.y) if req.position is not None else None
    shape = workspace.store.insert_vertex(shape_id, req.after, position)
    return shape_view(shape, workspace.store)


@router.delete("/shapes/{shape_id}/vertices/{index}", response_model=ShapeResponse)
async def remove_vertex(shape_id: str, index: int, workspace: Workspace = Depends(get_workspace)) -> ShapeResponse:
    shape = workspace.store.remove_vertex(shape_id, index)
    return shape_view(shape, workspace.store)


@router.put("/shapes/{shape_id}/radii/{index}", response_model=ShapeResponse)
async def set_radius(
    shape_id: str,
    index: int,
    req: RadiusRequest,
    workspace: Workspace = Depends(get_workspace),
) -> ShapeResponse:
    shape = workspace.store.set_corner_radius(shape_id, index, req.radius)
    return shape_view(shape, workspace.store)


# ── segments ───────────────────────────────────────────────────────


@router.put("/shapes/{shape_id}/depths/{index}", response_model=ShapeResponse)
async def set_depth(
    shape_id: str,
    index: int,
    req: DepthRequest,
    workspace: Workspace = Depends(get_workspace),
) -> ShapeResponse:
    shape = workspace.store.set_segment_depth(shape_id, index, req.depth)
    return shape_view(shape, workspace.store)


@router.put("/shapes/{shape_id}/segments/{index}/length", response_model=ShapeResponse)
async def set_segment_length(
    shape_id: str,
    index: int,
    req: SegmentLengthRequest,
    workspace: Workspace = Depends(get_workspace),
) -> ShapeResponse:
    shape = workspace.store.set_segment_length(shape_id, index, req.length)
    return shape_view(shape, workspace.store)


@router.post("/shapes/{shape_id}/segments/{index}/move", response_model=ShapeResponse)
async def move_segment(
    shape_id: str,
    index: int,
    req: MoveRequest,
    workspace: Workspace = Depends(get_workspace),
) -> ShapeResponse:
    shape = workspace.store.move_segment(shape_id, index, req.dx, req.dy)
    return shape_view(shape, workspace.store)


@router.post("/shapes/{shape_id}/move", response_model=ShapeResponse)
async def move_shape(shape_id: str, req: MoveRequest, workspace: Workspace = Depends(get_workspace)) -> ShapeResponse:
    shape = workspace.store.move_shape(shape_id, req.dx, req.dy)
    return shape_view(shape, workspace.store)
