"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ductsketch import __version__
from ductsketch.canvas.store import ShapeNotFoundError
from ductsketch.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.ductsketch_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="DuctSketch",
        description="Duct/pipe shape editor — rounded, bulged polygons and orthogonal pipe sketching",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    from ductsketch.api.router import api_router

    app.include_router(api_router)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    """Map store errors onto HTTP status codes."""

    @app.exception_handler(ShapeNotFoundError)
    async def _not_found(request: Request, exc: ShapeNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def _invalid_edit(request: Request, exc: ValueError) -> JSONResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})


app = create_app()
