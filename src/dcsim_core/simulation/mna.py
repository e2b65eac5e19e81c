# src/dcsim_core/simulation/mna.py

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from ..components.base import Component, ComponentKind
from ..nodes import GROUND_NODE_ID
from .exceptions import EmptyCircuitError, GroundReferenceError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MnaSystem:
    """
    The assembled DC MNA system `matrix @ x = rhs`.

    The first `node_count` unknowns are the voltages of nodes 1..node_count (row
    `id - 1`). The remaining unknowns are the branch currents of
    `voltage_sources`, in order: each is the current entering the source's
    positive terminal from the external circuit.
    """
    matrix: np.ndarray
    rhs: np.ndarray
    node_count: int
    voltage_sources: Tuple[Component, ...]

    @property
    def size(self) -> int:
        return self.node_count + len(self.voltage_sources)


class MnaAssembler:
    """
    Constructs the Modified Nodal Analysis (MNA) system for a resistive DC network.

    Ground (node id 0) is the reference and has no row or column; every other
    node `id` maps to index `id - 1`. Each voltage source adds one auxiliary
    row/column after the node block, in order of appearance.

    The assembler holds no state between calls: `assemble` rebuilds the dense
    matrix and right-hand side from scratch every time.
    """
    def __init__(self, node_count: int, components: Sequence[Component]):
        """
        Args:
            node_count: Number of non-ground nodes.
            components: The ordered component list.
        """
        self.node_count: int = node_count
        self.components: Tuple[Component, ...] = tuple(components)
        self.voltage_sources: Tuple[Component, ...] = tuple(
            comp for comp in self.components if comp.kind is ComponentKind.VOLTAGE_SOURCE
        )

    @property
    def size(self) -> int:
        return self.node_count + len(self.voltage_sources)

    def check_preconditions(self) -> None:
        """
        Raises:
            EmptyCircuitError: If no non-ground node exists.
            GroundReferenceError: If no component touches ground.
        """
        if self.node_count <= 0:
            raise EmptyCircuitError()
        if not any(comp.touches(GROUND_NODE_ID) for comp in self.components):
            raise GroundReferenceError(
                details="No component is connected to ground, so node voltages have no reference."
            )

    def assemble(self) -> MnaSystem:
        """Checks the preconditions, then stamps every component into a fresh system."""
        self.check_preconditions()

        size = self.size
        A = np.zeros((size, size), dtype=float)
        B = np.zeros(size, dtype=float)
        logger.debug(f"Building MNA system ({size}x{size}) for {len(self.components)} components.")

        v_source_index = 0
        for comp in self.components:
            if comp.kind is ComponentKind.RESISTOR:
                self._stamp_resistor(A, comp)
            elif comp.kind is ComponentKind.CURRENT_SOURCE:
                self._stamp_current_source(B, comp)
            elif comp.kind is ComponentKind.VOLTAGE_SOURCE:
                self._stamp_voltage_source(A, B, comp, self.node_count + v_source_index)
                v_source_index += 1
            else:
                raise TypeError(f"Unsupported component kind {comp.kind!r} for '{comp.name}'.")

        return MnaSystem(matrix=A, rhs=B, node_count=self.node_count, voltage_sources=self.voltage_sources)

    @staticmethod
    def _stamp_resistor(A: np.ndarray, comp: Component) -> None:
        g = comp.conductance
        u, v = comp.node_a, comp.node_b
        if u != GROUND_NODE_ID:
            A[u - 1, u - 1] += g
        if v != GROUND_NODE_ID:
            A[v - 1, v - 1] += g
        if u != GROUND_NODE_ID and v != GROUND_NODE_ID:
            A[u - 1, v - 1] -= g
            A[v - 1, u - 1] -= g

    @staticmethod
    def _stamp_current_source(B: np.ndarray, comp: Component) -> None:
        # Current leaves node_a and is injected into node_b.
        u, v = comp.node_a, comp.node_b
        if u != GROUND_NODE_ID:
            B[u - 1] -= comp.value
        if v != GROUND_NODE_ID:
            B[v - 1] += comp.value

    @staticmethod
    def _stamp_voltage_source(A: np.ndarray, B: np.ndarray, comp: Component, row: int) -> None:
        p, n = comp.node_a, comp.node_b
        if p != GROUND_NODE_ID:
            A[p - 1, row] = 1.0
            A[row, p - 1] = 1.0
        if n != GROUND_NODE_ID:
            A[n - 1, row] = -1.0
            A[row, n - 1] = -1.0
        B[row] = comp.value
