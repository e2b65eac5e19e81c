# src/dcsim_core/errors.py
"""
Error types shared across the package.

Internal failures (bad component definitions, unreadable netlists, singular
systems) are `DiagnosableError`s that know how to describe themselves. At the
public boundaries (loading a netlist, running an analysis) they are converted
into one of the `DCSimError` wrappers, whose message is the rendered report.
"""
import logging
from abc import abstractmethod
from typing import Any, Dict, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class DCSimError(Exception):
    """Root of the errors a DCSim Core user is expected to catch."""
    pass

class NetlistLoadError(DCSimError):
    """A netlist file could not be read into a circuit. Carries the report text."""
    pass

class SimulationRunError(DCSimError):
    """
    A DC solve failed (empty circuit, no ground reference or a singular system)
    and the caller asked for exceptions rather than a `SolveOutcome`.
    Carries the report text.
    """
    pass


@runtime_checkable
class Diagnosable(Protocol):
    """Anything that can render a report for the person who wrote the circuit."""
    def get_diagnostic_report(self) -> str:
        ...

class DiagnosableError(Exception, Diagnosable):
    """
    Base for the package's internal exceptions. Subclasses are dataclasses that
    hold the structured context of the failure and must implement
    `get_diagnostic_report`.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Renders the framed, multi-line report used by every diagnosable error.

    Args:
        error_type: Short heading, e.g. "Singular Matrix Encountered".
        details: What went wrong; may span several lines.
        suggestion: How to fix the netlist or circuit. Omitted when empty.
        context: Optional `component`, `node`, `source_file`, `line_number` and
            `user_input` entries. Missing or None entries are not printed.
    """
    lines = [
        "\n",
        "================ DCSim Core: Actionable Diagnostic Report ================",
        f"Error Type:     {error_type}",
    ]
    if component := context.get('component'):
        lines.append(f"Component:      {component}")
    if node := context.get('node'):
        lines.append(f"Node:           {node}")
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")
    if (line_number := context.get('line_number')) is not None:
        lines.append(f"Line:           {line_number}")
    if user_input := context.get('user_input'):
        lines.append(f"User Input:     '{user_input}'")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("========================================================================")
    return "\n".join(lines)
