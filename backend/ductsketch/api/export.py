"""Hit testing and SVG export of the whole drawing."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ductsketch.canvas.workspace import Workspace
from ductsketch.dependencies import get_workspace
from ductsketch.models.responses import HitResponse
from ductsketch.svg.sampler import boundary_bbox
from ductsketch.svg.serializer import serialize_svg, shape_elements

router = APIRouter()

# Empty-drawing canvas and the padding kept around exported shapes
_DEFAULT_VIEWBOX = (0.0, 0.0, 1200.0, 800.0)
_EXPORT_MARGIN = 20.0


@router.get("/hit", response_model=HitResponse)
async def hit_test(x: float, y: float, workspace: Workspace = Depends(get_workspace)) -> HitResponse:
    shape = workspace.store.shape_at((x, y))
    return HitResponse(shape_id=shape.id if shape is not None else None)


@router.get("/export.svg")
async def export_svg(workspace: Workspace = Depends(get_workspace)) -> Response:
    store = workspace.store
    paths = [(s.id, store.boundary_path(s.id)) for s in store.shapes()]
    elements = shape_elements(paths, store.selected_id)

    viewbox = _DEFAULT_VIEWBOX
    boxes = [boundary_bbox(e["d"]) for e in elements]
    if boxes:
        xmin = min(b[0] for b in boxes) - _EXPORT_MARGIN
        ymin = min(b[1] for b in boxes) - _EXPORT_MARGIN
        xmax = max(b[2] for b in boxes) + _EXPORT_MARGIN
        ymax = max(b[3] for b in boxes) + _EXPORT_MARGIN
        viewbox = (xmin, ymin, xmax - xmin, ymax - ymin)

    svg = serialize_svg(elements, viewbox=viewbox, title="DuctSketch drawing")
    return Response(content=svg, media_type="image/svg+xml")
