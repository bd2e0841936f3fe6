"""FastAPI dependency injection."""

from __future__ import annotations

from ductsketch.canvas.workspace import Workspace
from ductsketch.config import settings

_workspace: Workspace | None = None


def get_settings():
    return settings


def get_workspace() -> Workspace:
    """The process-wide workspace, created on first use."""
    global _workspace
    if _workspace is None:
        _workspace = Workspace(sketch_config=settings.sketch_config())
    return _workspace


def reset_workspace() -> Workspace:
    """Drop all shapes and any sketch in progress."""
    global _workspace
    _workspace = Workspace(sketch_config=settings.sketch_config())
    return _workspace
