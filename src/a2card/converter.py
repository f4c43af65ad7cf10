"""
A2UI component graph to Adaptive Card converter.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set

from . import cards
from .config import A2CardConfig, load_config, max_depth_ceiling
from .graph import (
    ButtonComponent,
    CardComponent,
    ColumnComponent,
    Component,
    Graph,
    ImageComponent,
    InputComponent,
    RowComponent,
    TextComponent,
    graph_from_dict,
)

log = logging.getLogger(__name__)

# Renders allowed per input component; bounds work on graphs that share children.
RENDER_BUDGET_PER_COMPONENT = 4


@dataclass
class _RenderPass:
    """State for a single convert() call: the id index, the render path and the render budget."""

    graph: Graph
    index: Dict[str, int]
    max_depth: int
    budget: int
    path: Set[str] = field(default_factory=set)
    rendered: int = 0
    budget_warned: bool = False

    def lookup(self, component_id: str) -> Optional[Component]:
        pos = self.index.get(component_id)
        if pos is None:
            return None
        return self.graph.components[pos]


class CardConverter:
    """
    Renders a Graph into an Adaptive Card envelope.

    Unresolved ids and unknown component types render as nothing and are
    dropped from their parent; convert() never raises for graph content. A
    component already on the current render path (a cycle), one nested deeper
    than ``config.max_depth``, or one past the render budget of
    ``RENDER_BUDGET_PER_COMPONENT`` renders per input component is dropped the
    same way, with a warning.
    """

    def __init__(self, config: Optional[A2CardConfig] = None) -> None:
        self.config = config or load_config()
        self._renderers: Dict[type, Callable[[Any, _RenderPass, int], Optional[cards.Element]]] = {
            ColumnComponent: self._render_column,
            RowComponent: self._render_row,
            CardComponent: self._render_card,
            TextComponent: self._render_text,
            ImageComponent: self._render_image,
            ButtonComponent: self._render_button,
            InputComponent: self._render_input,
        }

    def convert(self, graph: Graph) -> cards.Element:
        state = _RenderPass(
            graph=graph,
            index=graph.index(),
            max_depth=min(self.config.max_depth, max_depth_ceiling()),
            budget=RENDER_BUDGET_PER_COMPONENT * len(graph.components),
        )
        root = self.render(graph.root_component_id, state)
        if root is None:
            body: List[cards.Element] = []
        elif root.get("type") == "Container":
            body = root["items"]
        else:
            body = [root]
        return cards.envelope(body)

    def convert_payload(self, payload: Any) -> cards.Element:
        return self.convert(graph_from_dict(payload))

    def render(self, component_id: str, state: _RenderPass, depth: int = 1) -> Optional[cards.Element]:
        comp = state.lookup(component_id)
        if comp is None:
            return None
        renderer = self._renderers.get(type(comp))
        if renderer is None:
            log.debug("Dropping component '%s' with unsupported type '%s'", comp.id, comp.type)
            return None
        if comp.id in state.path:
            log.warning("Dropping cyclic reference to component '%s'", comp.id)
            return None
        if depth > state.max_depth:
            log.warning("Dropping component '%s': nesting exceeds max depth %d", comp.id, state.max_depth)
            return None
        if state.rendered >= state.budget:
            if not state.budget_warned:
                log.warning("Render budget of %d nodes exhausted; dropping remaining components", state.budget)
                state.budget_warned = True
            return None
        state.rendered += 1
        state.path.add(comp.id)
        try:
            return renderer(comp, state, depth)
        finally:
            state.path.discard(comp.id)

    def _render_children(self, comp: Component, state: _RenderPass, depth: int) -> List[cards.Element]:
        items = []
        for child_id in comp.children:
            node = self.render(child_id, state, depth + 1)
            if node is not None:
                items.append(node)
        return items

    def _render_column(self, comp: ColumnComponent, state: _RenderPass, depth: int) -> cards.Element:
        return cards.container(self._render_children(comp, state, depth))

    def _render_row(self, comp: RowComponent, state: _RenderPass, depth: int) -> cards.Element:
        columns = []
        for child_id in comp.children:
            node = self.render(child_id, state, depth + 1)
            columns.append(cards.stretch_column([node] if node is not None else []))
        return cards.column_set(columns)

    def _render_card(self, comp: CardComponent, state: _RenderPass, depth: int) -> cards.Element:
        items = [cards.title_block(comp.title)]
        items.extend(self._render_children(comp, state, depth))
        return cards.emphasis_container(items)

    def _render_text(self, comp: TextComponent, state: _RenderPass, depth: int) -> cards.Element:
        return cards.text_block(comp.text)

    def _render_image(self, comp: ImageComponent, state: _RenderPass, depth: int) -> cards.Element:
        return cards.image(comp.src or self.config.fallback_image_url, comp.alt)

    def _render_button(self, comp: ButtonComponent, state: _RenderPass, depth: int) -> cards.Element:
        return cards.submit_action_set(comp.label, copy.deepcopy(comp.payload))

    def _render_input(self, comp: InputComponent, state: _RenderPass, depth: int) -> cards.Element:
        return cards.input_element(comp.input_type, comp.id, copy.deepcopy(comp.fields))


def convert_a2ui_to_adaptive_card(payload: Any, config: Optional[A2CardConfig] = None) -> cards.Element:
    """Convert a decoded A2UI payload (or an already built Graph) to an Adaptive Card."""
    converter = CardConverter(config)
    if isinstance(payload, Graph):
        return converter.convert(payload)
    return converter.convert_payload(payload)
