"""Graph layer for representing model references as networkx graphs."""

from .node_types import NodeType, EdgeType
from .reference_graph import ReferenceGraph
from .builder import build_graph

__all__ = [
    "NodeType",
    "EdgeType",
    "ReferenceGraph",
    "build_graph",
]
