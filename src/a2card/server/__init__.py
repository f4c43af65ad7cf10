"""
FastAPI surface for a2card.
"""

from .factory import create_app

__all__ = ["create_app"]
