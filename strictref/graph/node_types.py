"""Node and edge type definitions for the reference graph."""

from enum import Enum


class NodeType(str, Enum):
    """Types of nodes in the reference graph."""

    MODEL = "model"
    UNDEFINED = "undefined"  # Referenced but never declared


class EdgeType(str, Enum):
    """Types of edges in the reference graph."""

    REFERENCE = "reference"
    STRICT_REFERENCE = "strict_reference"
