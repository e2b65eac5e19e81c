# src/dcsim_core/analysis/topology.py

"""
Connectivity analysis of a circuit, used to explain why a system cannot be solved.
"""

import logging
from typing import List, Sequence, Set

import networkx as nx

from ..components.base import Component, ComponentKind
from ..nodes import GROUND_NODE_ID, NodeRegistry, natural_node_sort_key

logger = logging.getLogger(__name__)


class TopologyAnalyzer:
    """
    Builds the DC connectivity graph of a circuit.

    Graph nodes are node identifiers (every registered node, ground included).
    Each component contributes one edge keyed by its position in the component
    list. Current sources are ideal and fix no potential, so they are excluded
    from the conduction graph used for ground reachability.
    """
    def __init__(self, registry: NodeRegistry, components: Sequence[Component]):
        self.registry = registry
        self.components = tuple(components)
        self._graph = None
        self._conduction_graph = None

    @property
    def graph(self) -> nx.MultiGraph:
        """All components as edges, with `kind`, `name` and `value` attributes."""
        if self._graph is None:
            self._graph = self._build_graph(include_current_sources=True)
        return self._graph

    @property
    def conduction_graph(self) -> nx.MultiGraph:
        """Edges for resistors and voltage sources only."""
        if self._conduction_graph is None:
            self._conduction_graph = self._build_graph(include_current_sources=False)
        return self._conduction_graph

    def _build_graph(self, include_current_sources: bool) -> nx.MultiGraph:
        graph = nx.MultiGraph()
        for node in self.registry.nodes(include_ground=True):
            graph.add_node(node.node_id, name=node.name)
        for index, comp in enumerate(self.components):
            if comp.kind is ComponentKind.CURRENT_SOURCE and not include_current_sources:
                continue
            graph.add_edge(
                comp.node_a, comp.node_b, key=index,
                kind=comp.kind, name=comp.name, value=comp.value,
            )
        return graph

    def is_grounded(self) -> bool:
        """True if at least one component touches ground."""
        return self.graph.degree(GROUND_NODE_ID) > 0

    def grounded_nodes(self) -> Set[int]:
        """Node ids with a conduction path to ground (ground included)."""
        return set(nx.node_connected_component(self.conduction_graph, GROUND_NODE_ID))

    def floating_nodes(self) -> List[str]:
        """
        Names of non-ground nodes without a resistor/voltage-source path to ground,
        in natural display order.
        """
        reachable = self.grounded_nodes()
        floating = [
            self.registry.name_of(node_id)
            for node_id in self.conduction_graph.nodes
            if node_id not in reachable
        ]
        if floating:
            logger.debug(f"Floating nodes: {floating}")
        return sorted(floating, key=natural_node_sort_key)

    def isolated_nodes(self) -> List[str]:
        """Names of non-ground nodes no component touches at all."""
        return sorted(
            (self.registry.name_of(node_id) for node_id in nx.isolates(self.graph) if node_id != GROUND_NODE_ID),
            key=natural_node_sort_key,
        )

    def connected_groups(self) -> List[List[str]]:
        """Node names grouped by connected component of the full graph."""
        groups = [
            sorted((self.registry.name_of(node_id) for node_id in group), key=natural_node_sort_key)
            for group in nx.connected_components(self.graph)
        ]
        return sorted(groups, key=lambda names: natural_node_sort_key(names[0]))
