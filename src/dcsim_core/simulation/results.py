# src/dcsim_core/simulation/results.py
"""
Formal result contracts for a DC solve.

`DCSolution` maps the raw solution vector back onto node identifiers. It is an
immutable, self-contained record: it keeps its own snapshot of node names so
consumers do not need the registry that produced it.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import numpy as np

from ..components.base import Component
from ..errors import DiagnosableError
from ..nodes import GROUND_NODE_ID, NodeRegistry
from .mna import MnaSystem


@dataclass(frozen=True)
class DCSolution:
    """
    The result of one successful DC solve.

    Attributes:
        node_voltages: Node id -> voltage in volts. Ground (id 0) is always 0.0.
        node_names: Node id -> name, captured at solve time.
        voltage_sources: The voltage sources, in MNA order.
        source_currents: Current entering each voltage source's positive terminal
                         from the external circuit, aligned with `voltage_sources`.
                         A source delivering power has a negative value.
        raw_solution: The full solution vector, node voltages first.
    """
    node_voltages: Mapping[int, float]
    node_names: Mapping[int, str]
    voltage_sources: Tuple[Component, ...]
    source_currents: Tuple[float, ...]
    raw_solution: np.ndarray

    def voltage(self, node_id: int) -> float:
        try:
            return self.node_voltages[node_id]
        except KeyError:
            raise KeyError(f"Node id {node_id} is not part of this solution.") from None

    def voltage_by_name(self, name: str) -> float:
        for node_id, node_name in self.node_names.items():
            if node_name == name:
                return self.node_voltages[node_id]
        raise KeyError(f"Node '{name}' is not part of this solution.")

    def source_current(self, name: str) -> float:
        """Branch current of the first voltage source called `name`."""
        for comp, current in zip(self.voltage_sources, self.source_currents):
            if comp.name == name:
                return current
        raise KeyError(f"No voltage source named '{name}' in this solution.")


def build_solution(system: MnaSystem, x: np.ndarray, registry: NodeRegistry) -> DCSolution:
    """
    Records the node voltages of a solved MNA system.

    Only the first `system.node_count` entries of `x` are node voltages; the
    rest are voltage-source branch currents.
    """
    if x.shape != (system.size,):
        raise ValueError(f"Solution vector has shape {x.shape}, expected ({system.size},).")

    voltages: Dict[int, float] = {GROUND_NODE_ID: 0.0}
    for idx in range(system.node_count):
        voltages[idx + 1] = float(x[idx])

    names = {node.node_id: node.name for node in registry.nodes(include_ground=True)}
    currents = tuple(float(value) for value in x[system.node_count:])
    raw = x.copy()
    raw.setflags(write=False)

    return DCSolution(
        node_voltages=MappingProxyType(voltages),
        node_names=MappingProxyType(names),
        voltage_sources=system.voltage_sources,
        source_currents=currents,
        raw_solution=raw,
    )


@dataclass(frozen=True)
class SolveOutcome:
    """
    What `Circuit.solve()` returns instead of raising: exactly one of `solution`
    and `error` is set.
    """
    solution: Optional[DCSolution] = None
    error: Optional[DiagnosableError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok
