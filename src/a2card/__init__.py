"""
a2card: A2UI component graphs to Adaptive Cards.
"""

from .version import __version__, CARD_SCHEMA_VERSION  # noqa: F401
from .converter import CardConverter, convert_a2ui_to_adaptive_card  # noqa: F401
from .graph import Graph, graph_from_dict  # noqa: F401

__all__ = [
    "graph",
    "cards",
    "converter",
    "messaging",
    "errors",
    "CardConverter",
    "Graph",
    "graph_from_dict",
    "convert_a2ui_to_adaptive_card",
    "__version__",
    "CARD_SCHEMA_VERSION",
]
