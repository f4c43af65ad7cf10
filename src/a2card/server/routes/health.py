"""Health route."""

from __future__ import annotations

import logging
from typing import Dict

from fastapi import APIRouter

from ...version import __version__

log = logging.getLogger(__name__)


def build_health_router() -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    def health() -> Dict[str, str]:
        log.debug("health_ping")
        return {"status": "ok", "version": __version__}

    return router


__all__ = ["build_health_router"]
