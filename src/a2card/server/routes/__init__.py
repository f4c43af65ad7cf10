"""Route builders for the FastAPI app."""

from .convert import build_convert_router
from .health import build_health_router

__all__ = ["build_convert_router", "build_health_router"]
