"""
Central version constants for a2card.
"""

__version__ = "1.0.0"

# Adaptive Card schema version emitted in every envelope
CARD_SCHEMA_VERSION = "1.5"
