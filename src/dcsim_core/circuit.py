# src/dcsim_core/circuit.py
"""
Defines `Circuit`, the single entry point that collaborators (CLI, persistence,
visualization) use to edit a resistive DC network and read its node voltages.

A circuit moves through the states Empty -> Populated -> Solved. Adding a
component after a solve makes the stored voltages stale until the next solve.
A failed solve reports its error and keeps the previous solution, which is
then flagged as stale (`is_stale`); callers that must not see stale voltages
should check the returned `SolveOutcome` or `is_stale`.
"""
import logging
from typing import Dict, Optional, Tuple

from .analysis.topology import TopologyAnalyzer
from .components.base import Component, ComponentKind
from .components.store import ComponentStore, RawValue
from .errors import DiagnosableError
from .nodes import GROUND_NODE_ID, NodeRegistry
from .simulation.config import SolverConfig
from .simulation.exceptions import (
    EmptyCircuitError,
    GroundReferenceError,
    NoSolutionError,
    SingularMatrixError,
)
from .simulation.mna import MnaAssembler, MnaSystem
from .simulation.results import DCSolution, SolveOutcome, build_solution
from .simulation.solver import gaussian_elimination

logger = logging.getLogger(__name__)


class Circuit:
    """
    An editable resistive DC network: node registry, ordered components and the
    most recent DC solution.

    Instances are independent of one another and are not thread-safe.
    """

    def __init__(self, name: str = "Circuit", solver_config: Optional[SolverConfig] = None):
        self.name: str = name
        self.solver_config: SolverConfig = solver_config if solver_config is not None else SolverConfig()
        self.node_registry: NodeRegistry = NodeRegistry()
        self.component_store: ComponentStore = ComponentStore(self.node_registry)
        self._solution: Optional[DCSolution] = None
        self._last_error: Optional[DiagnosableError] = None
        self._is_stale: bool = True

    # --- Editing ---

    def add(self, kind: ComponentKind, name: str, node_a: str, node_b: str, value: RawValue) -> Component:
        component = self.component_store.add(kind, name, node_a, node_b, value)
        self._is_stale = True
        return component

    def add_resistor(self, name: str, n1: str, n2: str, resistance: RawValue) -> Component:
        return self.add(ComponentKind.RESISTOR, name, n1, n2, resistance)

    def add_current_source(self, name: str, from_node: str, to_node: str, current: RawValue) -> Component:
        """Adds an ideal current source driving `current` amperes from `from_node` into `to_node`."""
        return self.add(ComponentKind.CURRENT_SOURCE, name, from_node, to_node, current)

    def add_voltage_source(self, name: str, pos: str, neg: str, voltage: RawValue) -> Component:
        """Adds an ideal voltage source holding `pos` at `voltage` volts above `neg`."""
        return self.add(ComponentKind.VOLTAGE_SOURCE, name, pos, neg, voltage)

    def clear(self) -> None:
        """Discards all components, nodes and results, and re-seeds ground."""
        self.component_store.clear()
        self.node_registry.reset()
        self._solution = None
        self._last_error = None
        self._is_stale = True
        logger.debug(f"Circuit '{self.name}' cleared.")

    # --- Read access ---

    def resolve_node(self, name: str) -> int:
        """Returns the id for `name`, registering it if unseen (ground aliases give 0)."""
        return self.node_registry.resolve(name)

    @property
    def node_count(self) -> int:
        return self.node_registry.node_count

    def list_components(self) -> Tuple[Component, ...]:
        return self.component_store.components

    def list_nodes(self) -> Dict[str, int]:
        """Name -> id for every known name (ground aliases included), in creation order."""
        return self.node_registry.as_mapping()

    def is_empty(self) -> bool:
        return len(self.component_store) == 0 and self.node_count == 0

    # --- Solving ---

    def build_system(self) -> MnaSystem:
        """Assembles a fresh MNA system from the current components."""
        return MnaAssembler(self.node_count, self.component_store.components).assemble()

    def solve_or_raise(self) -> DCSolution:
        """
        Re-derives and solves the MNA system from scratch.

        On failure the previous solution is kept but marked stale.

        Raises:
            EmptyCircuitError: No nodes registered.
            GroundReferenceError: No component touches ground.
            SingularMatrixError: The system has no unique solution.
        """
        try:
            system = self.build_system()
            x = gaussian_elimination(system.matrix, system.rhs, self.solver_config)
        except (GroundReferenceError, SingularMatrixError) as e:
            e.floating_nodes = tuple(self._analyze_topology().floating_nodes())
            self._record_failure(e)
            raise
        except EmptyCircuitError as e:
            self._record_failure(e)
            raise

        self._solution = build_solution(system, x, self.node_registry)
        self._last_error = None
        self._is_stale = False
        logger.info(f"Circuit '{self.name}' solved successfully ({system.size}x{system.size} system).")
        return self._solution

    def solve(self) -> SolveOutcome:
        """
        Like `solve_or_raise`, but reports solver failures through the returned
        `SolveOutcome` instead of raising.
        """
        try:
            return SolveOutcome(solution=self.solve_or_raise())
        except (EmptyCircuitError, GroundReferenceError, SingularMatrixError) as e:
            logger.error(f"[SOLVER ERROR] {e}")
            return SolveOutcome(error=e)

    def _record_failure(self, error: DiagnosableError) -> None:
        self._last_error = error
        self._is_stale = True

    def _analyze_topology(self) -> TopologyAnalyzer:
        return TopologyAnalyzer(self.node_registry, self.component_store.components)

    @property
    def solution(self) -> Optional[DCSolution]:
        """The most recent successful solution, possibly stale (see `is_stale`)."""
        return self._solution

    @property
    def last_error(self) -> Optional[DiagnosableError]:
        """The error of the most recent solve, or None if it succeeded."""
        return self._last_error

    @property
    def is_solved(self) -> bool:
        return self._solution is not None

    @property
    def is_stale(self) -> bool:
        """True unless the stored solution reflects the current components."""
        return self._is_stale

    def get_voltage(self, node_id: int) -> float:
        """
        Voltage of `node_id` from the most recent successful solve.

        Raises:
            NoSolutionError: No solve has succeeded yet (ground still reads 0.0).
            KeyError: The node was not part of the last solution.
        """
        if node_id == GROUND_NODE_ID:
            return 0.0
        if self._solution is None:
            raise NoSolutionError(f"Circuit '{self.name}' has not been solved yet.")
        return self._solution.voltage(node_id)

    def voltage_of(self, node_name: str) -> float:
        """`get_voltage` by node name."""
        return self.get_voltage(self.node_registry.lookup(node_name))

    def __repr__(self) -> str:
        return (
            f"Circuit(name={self.name!r}, nodes={self.node_count}, "
            f"components={len(self.component_store)}, solved={self.is_solved}, stale={self.is_stale})"
        )
