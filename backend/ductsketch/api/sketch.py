"""POST /api/sketch/* — freehand pipe sketching driven by pointer events."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ductsketch.api.views import shape_view, sketch_view
from ductsketch.canvas.workspace import Workspace
from ductsketch.dependencies import get_workspace
from ductsketch.models.requests import ModifierRequest, PointerRequest
from ductsketch.models.responses import SketchResponse

router = APIRouter(prefix="/sketch")


@router.get("", response_model=SketchResponse)
async def current_sketch(workspace: Workspace = Depends(get_workspace)) -> SketchResponse:
    session = workspace.session
    preview = session.state.preview if session.state is not None else None
    return sketch_view(session, preview)


@router.post("/start", response_model=SketchResponse)
async def start_sketch(req: PointerRequest, workspace: Workspace = Depends(get_workspace)) -> SketchResponse:
    """Pointer down: selects the shape under the pointer or starts a sketch."""
    hit = workspace.pointer_down((req.x, req.y), modifier_held=req.modifier_held)
    view = shape_view(hit, workspace.store) if hit is not None else None
    return sketch_view(workspace.session, shape=view)


@router.post("/update", response_model=SketchResponse)
async def update_sketch(req: PointerRequest, workspace: Workspace = Depends(get_workspace)) -> SketchResponse:
    preview = workspace.pointer_move((req.x, req.y), modifier_held=req.modifier_held)
    return sketch_view(workspace.session, preview)


@router.post("/commit", response_model=SketchResponse)
async def commit_sketch(workspace: Workspace = Depends(get_workspace)) -> SketchResponse:
    shape = workspace.pointer_up()
    view = shape_view(shape, workspace.store) if shape is not None else None
    return sketch_view(workspace.session, shape=view)


@router.post("/cancel", response_model=SketchResponse)
async def cancel_sketch(workspace: Workspace = Depends(get_workspace)) -> SketchResponse:
    workspace.cancel()
    return sketch_view(workspace.session)


@router.post("/modifier", response_model=SketchResponse)
async def modifier(req: ModifierRequest, workspace: Workspace = Depends(get_workspace)) -> SketchResponse:
    workspace.set_modifier(req.held)
    return sketch_view(workspace.session)
