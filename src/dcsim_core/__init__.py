# src/dcsim_core/__init__.py
import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

from .log_config import setup_logging
from .units import ureg, Quantity, parse_quantity
from .nodes import Node, NodeRegistry, GROUND_NODE_ID, GROUND_ALIASES, natural_node_sort_key
from .components import Component, ComponentKind, ComponentStore, ValidationError
from .simulation import (
    MnaAssembler, MnaSystem, gaussian_elimination, SolverConfig,
    DCSolution, SolveOutcome, run_dc_analysis,
    EmptyCircuitError, GroundReferenceError, SingularMatrixError, NoSolutionError,
)
from .circuit import Circuit
from .circuit_builder import CircuitBuilder, load_netlist, load_into_circuit
from .parser import NetlistParser, save_circuit_text, FileIOError, ParsingError, SchemaValidationError
from .analysis import TopologyAnalyzer, format_adjacency_list, format_results, to_graphviz_dot
from .errors import DCSimError, NetlistLoadError, SimulationRunError, DiagnosableError

__all__ = [
    # Logging & Units
    "setup_logging", "ureg", "Quantity", "parse_quantity",
    # Nodes & Components
    "Node", "NodeRegistry", "GROUND_NODE_ID", "GROUND_ALIASES", "natural_node_sort_key",
    "Component", "ComponentKind", "ComponentStore",
    # Simulation
    "MnaAssembler", "MnaSystem", "gaussian_elimination", "SolverConfig",
    "DCSolution", "SolveOutcome", "run_dc_analysis",
    # Circuit & Persistence
    "Circuit", "CircuitBuilder", "load_netlist", "load_into_circuit",
    "NetlistParser", "save_circuit_text",
    # Analysis & Display
    "TopologyAnalyzer", "format_adjacency_list", "format_results", "to_graphviz_dot",
    # Errors
    "DCSimError", "NetlistLoadError", "SimulationRunError", "DiagnosableError",
    "ValidationError", "EmptyCircuitError", "GroundReferenceError", "SingularMatrixError",
    "NoSolutionError", "FileIOError", "ParsingError", "SchemaValidationError",
]
