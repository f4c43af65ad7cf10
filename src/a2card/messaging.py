"""
Shaping of model replies into outgoing chat messages with card attachments.

The chat layer hands over raw model output (expected to be a JSON object with
``text`` and optionally ``a2ui`` or ``adaptiveCard``) and receives a message it
can deliver. Nothing here talks to a model or a transport.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .converter import CardConverter
from .errors import GraphError
from .observability.logging_utils import redact_text

log = logging.getLogger(__name__)

ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
FALLBACK_ERROR_TEXT = "The agent encountered an error while processing your request."


@dataclass
class ModelReply:
    text: str = ""
    a2ui: Any = None
    adaptive_card: Any = None


@dataclass
class OutgoingMessage:
    text: str
    attachments: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "attachments": list(self.attachments)}


def parse_model_reply(raw_text: str) -> ModelReply:
    """Decode model output; anything that is not a JSON object becomes plain text."""
    try:
        data = json.loads(raw_text)
    except (TypeError, ValueError):
        log.error("Failed to parse model reply: %s", redact_text(raw_text or ""))
        return ModelReply(text=raw_text)
    if not isinstance(data, dict):
        log.error("Model reply is not a JSON object: %s", redact_text(raw_text))
        return ModelReply(text=raw_text)
    text = data.get("text")
    if text is None:
        text = ""
    elif not isinstance(text, str):
        text = str(text)
    return ModelReply(text=text, a2ui=data.get("a2ui"), adaptive_card=data.get("adaptiveCard"))


def card_attachment(card: Dict[str, Any]) -> Dict[str, Any]:
    return {"contentType": ADAPTIVE_CARD_CONTENT_TYPE, "content": card}


def build_outgoing_message(reply: ModelReply, converter: Optional[CardConverter] = None) -> OutgoingMessage:
    """
    Attach at most one card: a converted ``a2ui`` graph wins over a prebuilt
    ``adaptiveCard``. A malformed graph degrades to a text-only message.
    """

    message = OutgoingMessage(text=reply.text)
    if reply.a2ui is not None:
        converter = converter or CardConverter()
        try:
            card = converter.convert_payload(reply.a2ui)
        except GraphError as exc:
            log.warning("Sending text-only reply, A2UI payload rejected: %s", exc)
            return message
        message.attachments.append(card_attachment(card))
    elif isinstance(reply.adaptive_card, dict):
        message.attachments.append(card_attachment(reply.adaptive_card))
    return message


def submit_action_input(text: Optional[str], value: Any = None) -> Optional[str]:
    """
    Derive the user input for a turn: typed text, else the echo of an
    Action.Submit payload, else None when there is nothing to answer.
    """

    if text:
        return text
    if value is not None:
        return f"User performed action: {json.dumps(value, separators=(',', ':'))}"
    return None


def reply_for_model_output(raw_text: str, converter: Optional[CardConverter] = None) -> OutgoingMessage:
    """Parse and shape model output; any failure becomes the plain fallback reply."""
    try:
        return build_outgoing_message(parse_model_reply(raw_text), converter)
    except Exception:
        log.exception("Failed to build reply for model output: %s", redact_text(raw_text or ""))
        return OutgoingMessage(text=FALLBACK_ERROR_TEXT)
