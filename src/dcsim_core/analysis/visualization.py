# src/dcsim_core/analysis/visualization.py
"""
Text renderings of a circuit for humans: a console adjacency list, Graphviz DOT
source and a node-voltage table. Node order is the natural display order
(ground first, then "2" before "10"); it has no bearing on storage order.
"""
import logging
from typing import List, Optional, Sequence

from ..components.base import Component, ComponentKind
from ..constants import VOLTAGE_DISPLAY_DECIMALS
from ..nodes import GROUND_NODE_ID, Node, NodeRegistry, natural_node_sort_key
from ..simulation.results import DCSolution

logger = logging.getLogger(__name__)

_ARROWS_FROM_A = {
    ComponentKind.RESISTOR: " --- ",
    ComponentKind.CURRENT_SOURCE: " --> ",
    ComponentKind.VOLTAGE_SOURCE: " (+)- ",
}
_ARROWS_FROM_B = {
    ComponentKind.RESISTOR: " --- ",
    ComponentKind.CURRENT_SOURCE: " <-- ",
    ComponentKind.VOLTAGE_SOURCE: " -(-) ",
}


def display_order(registry: NodeRegistry) -> List[Node]:
    """Ground first, then the remaining nodes in natural order."""
    nodes = registry.nodes(include_ground=True)
    return sorted(nodes, key=lambda node: (not node.is_ground, natural_node_sort_key(node.name)))


def format_adjacency_list(registry: NodeRegistry, components: Sequence[Component]) -> str:
    """Renders each node with the components attached to it and the node on their far side."""
    if not components and registry.node_count == 0:
        return "Circuit is empty. Nothing to visualize."

    lines = ["", "====== CIRCUIT GRAPH TOPOLOGY (Adjacency List) ======"]
    for node in display_order(registry):
        lines.append(f" Node [{node.name}] connects to:")
        connected = False
        for comp in components:
            if comp.node_a == node.node_id:
                neighbor_id, arrow = comp.node_b, _ARROWS_FROM_A[comp.kind]
            elif comp.node_b == node.node_id:
                neighbor_id, arrow = comp.node_a, _ARROWS_FROM_B[comp.kind]
            else:
                continue
            connected = True
            lines.append(
                f"   |-- [{comp.name} ({comp.value:g})]{arrow}Node [{registry.name_of(neighbor_id)}]"
            )
        if not connected:
            lines.append("   (No connections - Isolated)")
        lines.append("")
    lines.append("=====================================================")
    return "\n".join(lines)


def _dot_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _dot_quote(text: str) -> str:
    return '"' + _dot_escape(text) + '"'


def to_graphviz_dot(registry: NodeRegistry, components: Sequence[Component], graph_name: str = "Circuit") -> str:
    """Graphviz source with one undirected edge per component, labelled with its name and value."""
    lines = [
        f"graph {_dot_quote(graph_name)} {{",
        "  rankdir=LR;",
        "  node [shape=circle, style=filled, fillcolor=lightblue];",
    ]
    for comp in components:
        label = f"{_dot_escape(comp.name)}\\n{comp.value:g} {comp.kind.unit_symbol}"
        lines.append(
            f"  {_dot_quote(registry.name_of(comp.node_a))} -- {_dot_quote(registry.name_of(comp.node_b))}"
            f" [label=\"{label}\"];"
        )
    lines.append("}")
    return "\n".join(lines)


def format_results(solution: Optional[DCSolution], decimals: int = VOLTAGE_DISPLAY_DECIMALS) -> str:
    """Tabulates non-ground node voltages, or explains that nothing has been solved yet."""
    if solution is None:
        return "No results available. Please solve the circuit first."

    lines = ["", "--- Simulation Results ---"]
    ordered = sorted(
        ((node_id, name) for node_id, name in solution.node_names.items() if node_id != GROUND_NODE_ID),
        key=lambda item: natural_node_sort_key(item[1]),
    )
    for node_id, name in ordered:
        lines.append(f"Node [{name}]: {solution.node_voltages[node_id]:.{decimals}f} V")
    for comp, current in zip(solution.voltage_sources, solution.source_currents):
        lines.append(f"Source [{comp.name}]: {current:.{decimals}f} A")
    lines.append("--------------------------")
    return "\n".join(lines)
