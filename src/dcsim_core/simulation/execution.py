# src/dcsim_core/simulation/execution.py
"""
Exception-style public entry point for running a DC analysis.

`Circuit.solve()` reports failures through its return value. Scripts and
batch tools that would rather stop on the first failure use `run_dc_analysis`,
which turns any diagnosable error into a single, user-facing
`SimulationRunError` carrying the formatted report.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import DiagnosableError, SimulationRunError
from .results import DCSolution

if TYPE_CHECKING:
    from ..circuit import Circuit

logger = logging.getLogger(__name__)


def run_dc_analysis(circuit: Circuit) -> DCSolution:
    """
    Solves `circuit` and returns its DC solution.

    Raises:
        SimulationRunError: A user-friendly, diagnosable error if the solve fails.
                            The original exception is chained for debugging.
    """
    logger.info(f"--- Starting DC analysis for '{circuit.name}' ---")
    try:
        return circuit.solve_or_raise()
    except DiagnosableError as e:
        logger.error(f"A diagnosable error occurred during DC analysis: {e}")
        raise SimulationRunError(e.get_diagnostic_report()) from e
