"""
Adaptive Card element builders.

Field names and literal values are the Adaptive Card wire format and must be
reproduced exactly.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .version import CARD_SCHEMA_VERSION

Element = Dict[str, Any]

INPUT_ELEMENT_TYPES = {
    "text": "Input.Text",
    "date": "Input.Date",
    "time": "Input.Time",
    "number": "Input.Number",
}


def container(items: List[Element]) -> Element:
    return {"type": "Container", "items": items}


def emphasis_container(items: List[Element]) -> Element:
    return {
        "type": "Container",
        "style": "emphasis",
        "bleed": True,
        "separator": True,
        "spacing": "Medium",
        "items": items,
    }


def column_set(columns: List[Element]) -> Element:
    return {"type": "ColumnSet", "columns": columns}


def stretch_column(items: List[Element]) -> Element:
    return {"type": "Column", "width": "stretch", "items": items}


def text_block(text: str) -> Element:
    return {"type": "TextBlock", "text": text, "wrap": True}


def title_block(text: str) -> Element:
    return {
        "type": "TextBlock",
        "text": text,
        "weight": "Bolder",
        "size": "Large",
        "wrap": True,
        "color": "Accent",
    }


def image(url: str, alt_text: str) -> Element:
    return {
        "type": "Image",
        "url": url,
        "altText": alt_text,
        "size": "Large",
        "style": "default",
        "horizontalAlignment": "Center",
    }


def submit_action_set(title: str, data: Dict[str, Any]) -> Element:
    return {
        "type": "ActionSet",
        "actions": [{"type": "Action.Submit", "title": title, "data": dict(data)}],
    }


def input_element(kind: str, element_id: str, fields: Optional[Dict[str, Any]] = None) -> Element:
    element: Element = {"type": INPUT_ELEMENT_TYPES.get(kind, "Input.Text"), "id": element_id}
    element.update(fields or {})
    return element


def envelope(body: List[Element]) -> Element:
    return {"type": "AdaptiveCard", "version": CARD_SCHEMA_VERSION, "body": body}
