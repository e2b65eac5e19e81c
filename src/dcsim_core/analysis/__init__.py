# src/dcsim_core/analysis/__init__.py
"""
Read-only services over a populated circuit: connectivity analysis and text
renderings for display or export.
"""
from .topology import TopologyAnalyzer
from .visualization import display_order, format_adjacency_list, format_results, to_graphviz_dot

__all__ = [
    "TopologyAnalyzer",
    "display_order",
    "format_adjacency_list",
    "format_results",
    "to_graphviz_dot",
]
