"""
Custom error types for a2card.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class A2CardError(Exception):
    """Base error with optional component metadata."""

    message: str
    component_id: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.component_id is not None:
            return f"{self.message} (component '{self.component_id}')"
        return self.message


class GraphError(A2CardError):
    """Raised when a raw payload cannot be turned into a component graph."""


class ConfigError(A2CardError):
    """Invalid configuration passed in code."""
