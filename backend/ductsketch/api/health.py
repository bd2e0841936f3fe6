"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ductsketch import __version__
from ductsketch.canvas.workspace import Workspace
from ductsketch.config import Settings
from ductsketch.dependencies import get_settings, get_workspace
from ductsketch.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    workspace: Workspace = Depends(get_workspace),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        env=settings.ductsketch_env,
        shape_count=len(workspace.store.shapes()),
    )
