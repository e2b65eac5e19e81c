# src/dcsim_core/components/exceptions.py
"""
Defines the custom, diagnosable exceptions for the components subsystem.
"""
from dataclasses import dataclass
from typing import Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class ValidationError(DiagnosableError, ValueError):
    """
    Raised when a component or node definition is malformed: an empty node name,
    a component whose two terminals resolve to the same node, or a non-positive
    resistance.

    It is raised synchronously at insertion time and never leaves the component
    store partially updated.
    """
    details: str
    component_name: Optional[str] = None
    node_name: Optional[str] = None

    def __str__(self):
        prefix = f"Component '{self.component_name}': " if self.component_name else ""
        return f"{prefix}{self.details}"

    def get_diagnostic_report(self) -> str:
        """Generates the diagnostic report for an invalid component definition."""
        return format_diagnostic_report(
            error_type="Component Validation Error",
            details=self.details,
            suggestion="Check that both node names are non-empty and distinct, and that resistances are strictly positive.",
            context={'component': self.component_name, 'node': self.node_name}
        )
