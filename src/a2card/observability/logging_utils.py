from __future__ import annotations

import logging
import os

_HANDLER_NAME = "a2card.console"


def _env_bool(name: str, default: bool = True) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Attach a single console handler to the ``a2card`` logger.

    Safe to call repeatedly; the level is updated and no duplicate handler is added.
    """

    logger = logging.getLogger("a2card")
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger


def redact_text(text: str) -> str:
    if not _env_bool("A2CARD_LOG_REDACT_REPLIES", True):
        return text
    if not text:
        return text
    return f"[REDACTED {len(text)} chars]"

