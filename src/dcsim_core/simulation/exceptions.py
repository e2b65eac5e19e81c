# src/dcsim_core/simulation/exceptions.py
"""
Defines custom, diagnosable exceptions specific to assembling and solving the
DC Modified Nodal Analysis system.

All of them are known, recoverable failure modes: `Circuit.solve()` catches
them, reports them, and leaves the circuit free to be edited and re-solved.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from ..errors import DiagnosableError, format_diagnostic_report


def _floating_nodes_line(floating_nodes: Tuple[str, ...]) -> str:
    if not floating_nodes:
        return ""
    return f"\nNodes without a path to ground: {', '.join(floating_nodes)}"


@dataclass()
class EmptyCircuitError(DiagnosableError):
    """Raised when a solve is attempted before any node has been registered."""
    details: str = "Circuit is empty. Add components first."

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Empty Circuit",
            details=self.details,
            suggestion="Add at least one resistor or source connected to ground before solving.",
            context={}
        )


@dataclass()
class GroundReferenceError(DiagnosableError):
    """
    Raised when no component touches the ground node. Node voltages of such a
    network are only defined up to an additive constant.
    """
    details: str
    floating_nodes: Tuple[str, ...] = field(default_factory=tuple)

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Missing Ground Reference",
            details=self.details + _floating_nodes_line(self.floating_nodes),
            suggestion="Connect at least one component to ground using the node name '0' or 'GND'.",
            context={}
        )


@dataclass()
class SingularMatrixError(DiagnosableError, np.linalg.LinAlgError):
    """
    Raised when Gaussian elimination meets a pivot below the singularity
    threshold, or produces a non-finite solution.

    This class uses multiple inheritance to be catchable both as our custom
    `DiagnosableError` and as a standard `LinAlgError`.
    """
    details: str
    pivot_index: Optional[int] = None
    pivot_value: Optional[float] = None
    floating_nodes: Tuple[str, ...] = field(default_factory=tuple)

    def __str__(self):
        where = f" at pivot column {self.pivot_index}" if self.pivot_index is not None else ""
        return f"Singular matrix detected{where}: {self.details}"

    def get_diagnostic_report(self) -> str:
        """Generates the diagnostic report for a singular matrix error."""
        pivot_line = ""
        if self.pivot_index is not None:
            pivot_line = f"\nPivot column {self.pivot_index} has magnitude {abs(self.pivot_value or 0.0):.3e}."
        return format_diagnostic_report(
            error_type="Singular Matrix Encountered",
            details=self.details + pivot_line + _floating_nodes_line(self.floating_nodes),
            suggestion="This is often caused by a floating node, a node reached only through current sources, or a loop of ideal voltage sources. Check your circuit topology.",
            context={}
        )


class NoSolutionError(LookupError):
    """Raised when node voltages are requested before any successful solve."""
    pass
