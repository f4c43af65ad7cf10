"""
Centralized configuration loader for the converter and its surfaces.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

log = logging.getLogger(__name__)

DEFAULT_FALLBACK_IMAGE_URL = "https://images.unsplash.com/photo-1517248135467-4c7edcad34c4?w=500"
DEFAULT_MAX_DEPTH = 64
DEFAULT_LOG_LEVEL = "INFO"

# Interpreter frames reserved for callers, and frames one nesting level may use.
_RESERVED_FRAMES = 200
_FRAMES_PER_LEVEL = 4


def max_depth_ceiling() -> int:
    """Deepest nesting the converter can render under the current recursion limit."""
    return max(1, (sys.getrecursionlimit() - _RESERVED_FRAMES) // _FRAMES_PER_LEVEL)


@dataclass
class A2CardConfig:
    fallback_image_url: str = DEFAULT_FALLBACK_IMAGE_URL
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not self.fallback_image_url:
            raise ConfigError("fallback_image_url must not be empty")
        if self.max_depth < 1:
            raise ConfigError(f"max_depth must be at least 1, got {self.max_depth}")
        ceiling = max_depth_ceiling()
        if self.max_depth > ceiling:
            log.warning("max_depth %d exceeds the recursion ceiling; using %d", self.max_depth, ceiling)
            self.max_depth = ceiling


def _env_int(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


def load_config(env: Optional[dict] = None) -> A2CardConfig:
    environ = env if env is not None else os.environ
    return A2CardConfig(
        fallback_image_url=environ.get("A2CARD_FALLBACK_IMAGE_URL") or DEFAULT_FALLBACK_IMAGE_URL,
        max_depth=_env_int(environ.get("A2CARD_MAX_DEPTH"), DEFAULT_MAX_DEPTH),
        log_level=(environ.get("A2CARD_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
    )
