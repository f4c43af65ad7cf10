"""
Component graph model for A2UI payloads.

A graph is an arena of typed components plus the id of the root. Raw JSON
components are validated into one dataclass per supported type when the graph
is built, so every property default is resolved once, here, and the renderer
only reads typed fields.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Optional

from .errors import GraphError

log = logging.getLogger(__name__)

InputKind = Literal["text", "date", "time", "number"]

_INPUT_KINDS = {"date", "time", "number"}


@dataclass
class Component:
    id: str
    type: str
    properties: Dict[str, Any] = field(default_factory=dict)
    children: List[str] = field(default_factory=list)


@dataclass
class ColumnComponent(Component):
    """Vertical stack; also used for ``Form``."""


@dataclass
class RowComponent(Component):
    """Horizontal stack, one column per child."""


@dataclass
class CardComponent(Component):
    title: str = ""


@dataclass
class TextComponent(Component):
    text: str = ""


@dataclass
class ImageComponent(Component):
    src: Optional[str] = None
    alt: str = "Image"


@dataclass
class ButtonComponent(Component):
    label: str = "Click"
    # Submit payload; holds "action" only when the source component declared one.
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass
class InputComponent(Component):
    input_type: InputKind = "text"
    # Extra element fields; holds "placeholder" only when the source component declared one.
    fields: Dict[str, Any] = field(default_factory=dict)


@dataclass
class UnknownComponent(Component):
    """Any type tag without a render rule."""


@dataclass
class Graph:
    components: List[Component] = field(default_factory=list)
    root_component_id: str = ""
    data_model: Any = None

    def index(self) -> Dict[str, int]:
        """Map component id to its position in ``components``; later duplicates win."""
        positions: Dict[str, int] = {}
        for pos, comp in enumerate(self.components):
            positions[comp.id] = pos
        return positions

    def get(self, component_id: str) -> Optional[Component]:
        for comp in reversed(self.components):
            if comp.id == component_id:
                return comp
        return None


def _text(props: Mapping, key: str, default: str) -> str:
    value = props.get(key)
    if not value:
        return default
    return value if isinstance(value, str) else str(value)


def _children(raw: Any, component_id: str) -> List[str]:
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        log.warning("Ignoring non-list children on component '%s'", component_id)
        return []
    return [child if isinstance(child, str) else str(child) for child in raw if child is not None]


def _column(base: dict, props: Mapping) -> Component:
    return ColumnComponent(**base)


def _row(base: dict, props: Mapping) -> Component:
    return RowComponent(**base)


def _card(base: dict, props: Mapping) -> Component:
    return CardComponent(**base, title=_text(props, "title", ""))


def _text_component(base: dict, props: Mapping) -> Component:
    return TextComponent(**base, text=_text(props, "text", ""))


def _image(base: dict, props: Mapping) -> Component:
    src = props.get("src")
    return ImageComponent(
        **base,
        src=(src if isinstance(src, str) else str(src)) if src else None,
        alt=_text(props, "alt", "Image"),
    )


def _button(base: dict, props: Mapping) -> Component:
    payload = {"action": props["action"]} if "action" in props else {}
    return ButtonComponent(**base, label=_text(props, "label", "Click"), payload=payload)


def _input(base: dict, props: Mapping) -> Component:
    requested = props.get("type")
    input_type = requested if isinstance(requested, str) and requested in _INPUT_KINDS else "text"
    fields = {"placeholder": props["placeholder"]} if "placeholder" in props else {}
    return InputComponent(**base, input_type=input_type, fields=fields)


_BUILDERS: Dict[str, Callable[[dict, Mapping], Component]] = {
    "Column": _column,
    "Form": _column,
    "Row": _row,
    "Card": _card,
    "Text": _text_component,
    "Image": _image,
    "Button": _button,
    "Input": _input,
}


def component_from_dict(raw: Any) -> Component:
    if not isinstance(raw, Mapping):
        raise GraphError(f"Component must be an object, got {type(raw).__name__}")
    raw_id = raw.get("id")
    if isinstance(raw_id, bool) or not isinstance(raw_id, (str, int)) or raw_id == "":
        raise GraphError("Component is missing a string 'id'")
    component_id = str(raw_id)

    type_tag = raw.get("type")
    type_tag = "" if type_tag is None else str(type_tag)

    props = raw.get("properties")
    if props is None:
        props = {}
    elif not isinstance(props, Mapping):
        log.warning("Ignoring non-object properties on component '%s'", component_id)
        props = {}
    props = copy.deepcopy(dict(props))

    base = {
        "id": component_id,
        "type": type_tag,
        "properties": props,
        "children": _children(raw.get("children"), component_id),
    }
    builder = _BUILDERS.get(type_tag)
    if builder is None:
        return UnknownComponent(**base)
    return builder(base, props)


def graph_from_dict(payload: Any) -> Graph:
    """
    Build a Graph from a decoded A2UI payload.

    Malformed component entries are skipped with a warning so one bad node
    cannot sink the rest of the graph. Only a payload that is not an object, or
    whose ``components`` is not a list, raises GraphError.
    """

    if not isinstance(payload, Mapping):
        raise GraphError(f"A2UI payload must be an object, got {type(payload).__name__}")
    raw_components = payload.get("components")
    if raw_components is None:
        raw_components = []
    if not isinstance(raw_components, (list, tuple)):
        raise GraphError("A2UI 'components' must be a list")

    components: List[Component] = []
    for position, raw in enumerate(raw_components):
        try:
            components.append(component_from_dict(raw))
        except GraphError as exc:
            log.warning("Skipping component at position %d: %s", position, exc)

    root = payload.get("rootComponentId", payload.get("root_component_id"))
    return Graph(
        components=components,
        root_component_id="" if root is None else str(root),
        data_model=payload.get("dataModel"),
    )
