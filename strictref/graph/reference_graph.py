"""ReferenceGraph wrapper around networkx."""

from typing import Any

import networkx as nx

from .node_types import EdgeType, NodeType


class ReferenceGraph:
    """A graph of models and the references between them.

    Wraps a networkx MultiDiGraph: one node per model, one edge per
    reference field, so two fields pointing at the same model stay distinct.
    """

    def __init__(self):
        """Initialize an empty reference graph."""
        self._graph = nx.MultiDiGraph()

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Node management
    # -------------------------------------------------------------------------

    def add_model(self, name: str, **attrs: Any) -> str:
        """Add a declared model node.

        Returns:
            The node ID.
        """
        self._graph.add_node(name, node_type=NodeType.MODEL, name=name, **attrs)
        return name

    def add_reference(
        self,
        from_model: str,
        to_model: str,
        path: str,
        strict: bool = False,
        is_array: bool = False,
    ) -> None:
        """Add a reference edge for one field.

        A target that was never declared is added as an UNDEFINED node.

        Args:
            from_model: The model declaring the field.
            to_model: The referenced model name.
            path: The field path.
            strict: Whether the reference must exist at write time.
            is_array: Whether the field holds an array of references.
        """
        if not self._graph.has_node(to_model):
            self._graph.add_node(to_model, node_type=NodeType.UNDEFINED, name=to_model)

        self._graph.add_edge(
            from_model,
            to_model,
            key=path,
            edge_type=EdgeType.STRICT_REFERENCE if strict else EdgeType.REFERENCE,
            path=path,
            is_array=is_array,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_referrers(self, model: str, strict_only: bool = False) -> list[tuple[str, str]]:
        """Get ``(model, path)`` pairs of the fields referencing a model.

        Args:
            model: The referenced model.
            strict_only: Skip references that are not enforced on write.
        """
        if not self._graph.has_node(model):
            return []
        return [
            (source, data["path"])
            for source, _, data in self._graph.in_edges(model, data=True)
            if not strict_only or data["edge_type"] == EdgeType.STRICT_REFERENCE
        ]

    def strict_subgraph(self) -> nx.DiGraph:
        """Collapse strict reference edges into a simple DiGraph."""
        strict = nx.DiGraph()
        strict.add_nodes_from(self._graph.nodes)
        for source, target, data in self._graph.edges(data=True):
            if data["edge_type"] == EdgeType.STRICT_REFERENCE:
                strict.add_edge(source, target)
        return strict

    def get_strict_cycles(self) -> list[list[str]]:
        """Get cycles made only of strict references, self-references included.

        Each cycle lists models in reference order, starting from its
        alphabetically smallest member.
        """
        cycles = []
        for cycle in nx.simple_cycles(self.strict_subgraph()):
            start = cycle.index(min(cycle))
            cycles.append(cycle[start:] + cycle[:start])
        return sorted(cycles)
