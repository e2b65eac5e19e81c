# src/dcsim_core/parser/exceptions.py
"""
Defines custom, diagnosable exceptions for reading and writing netlist files.

`FileIOError` covers paths that cannot be opened for reading or writing,
`ParsingError` covers content that cannot be interpreted, and
`SchemaValidationError` covers YAML netlists that do not match the Cerberus
schema. All derive from `DiagnosableError`.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """
    A local, concrete base class for all netlist I/O and parsing errors.
    """
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Netlist Error",
            details=str(self),
            suggestion="Please check the format and content of the netlist file.",
            context={}
        )


@dataclass()
class FileIOError(BaseParsingError):
    """Raised when a netlist path cannot be opened for reading or writing."""
    details: str
    file_path: Path

    def __str__(self):
        return f"Could not access file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="File Access Error",
            details=self.details,
            suggestion="Ensure the file exists and that you have permission to read (or write) it.",
            context={'source_file': self.file_path}
        )


@dataclass()
class ParsingError(BaseParsingError):
    """
    Raised for content that cannot be turned into a circuit: invalid YAML syntax,
    or a component definition rejected while loading.
    """
    details: str
    file_path: Optional[Path] = None
    line_number: Optional[int] = None

    def __str__(self):
        location = f" in file '{self.file_path}'" if self.file_path else ""
        if self.line_number is not None:
            location += f" (line {self.line_number})"
        return f"Parsing error{location}: {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Netlist Content Error",
            details=self.details,
            suggestion="Each component needs a type (R, I or V), a name, two distinct node names and a numeric value. Resistances must be positive.",
            context={'source_file': self.file_path, 'line_number': self.line_number}
        )


@dataclass()
class SchemaValidationError(BaseParsingError):
    """
    Raised when a YAML netlist is syntactically valid but does not match the
    required structure (missing keys, wrong types, unknown component types).
    """
    errors: Dict[str, Any]
    file_path: Path

    def _error_lines(self):
        return [f"  - Field '{key}': {value}" for key, value in sorted(self.errors.items(), key=lambda item: str(item[0]))]

    def __str__(self):
        return f"YAML schema validation failed for file '{self.file_path}':\n" + "\n".join(self._error_lines())

    def get_diagnostic_report(self) -> str:
        details = (
            "The structure of the YAML file does not conform to the required schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n" + "\n".join(self._error_lines())
        )
        return format_diagnostic_report(
            error_type="YAML Schema Validation Error",
            details=details,
            suggestion="Correct the specified fields. Every entry under 'components' needs 'type' (R, I or V), 'name', 'nodes' (exactly two) and 'value'.",
            context={'source_file': self.file_path}
        )
