"""Application factory that builds the FastAPI app."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..config import A2CardConfig, load_config
from ..converter import CardConverter
from ..errors import A2CardError
from ..observability.logging_utils import configure_logging
from ..version import __version__
from .routes import build_convert_router, build_health_router


def create_app(config: Optional[A2CardConfig] = None) -> FastAPI:
    config = config or load_config()
    configure_logging(config.log_level)
    converter = CardConverter(config)

    app = FastAPI(title="a2card", version=__version__)
    app.state.config = config
    app.state.converter = converter

    @app.exception_handler(A2CardError)
    async def _a2card_error(request: Request, exc: A2CardError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    app.include_router(build_health_router())
    app.include_router(build_convert_router(converter))
    return app


__all__ = ["create_app"]
