# src/dcsim_core/circuit_builder.py

"""
Defines the CircuitBuilder, which turns a parsed netlist (text or YAML) into a
populated `Circuit`.

The builder is also the top-level error boundary for loading: any diagnosable
error raised while reading a file or adding its components is re-raised as a
single, user-friendly `NetlistLoadError`. A rejected component aborts the
whole load and leaves the target circuit empty.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .circuit import Circuit
from .components.exceptions import ValidationError
from .errors import DiagnosableError, NetlistLoadError, format_diagnostic_report
from .parser.exceptions import ParsingError
from .parser.raw_data import ParsedNetlist
from .parser.text_format import parse_text_netlist
from .parser.yaml_format import NetlistParser
from .simulation.config import ConfigParsingError, parse_solver_config

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class CircuitBuilder:
    """Synthesizes `Circuit` objects from the parser's intermediate representation."""

    def build_circuit(self, parsed: ParsedNetlist) -> Circuit:
        """Creates a new circuit, with solver settings taken from the netlist."""
        try:
            solver_config = parse_solver_config(parsed.raw_solver_config)
        except ConfigParsingError as e:
            report = format_diagnostic_report(
                error_type="Solver Configuration Error",
                details=str(e),
                suggestion="The 'solver' block accepts a single key, 'epsilon', which must be a positive number.",
                context={'source_file': parsed.source_path}
            )
            raise NetlistLoadError(report) from e

        circuit = Circuit(name=parsed.circuit_name, solver_config=solver_config)
        self.populate(circuit, parsed)
        return circuit

    def populate(self, circuit: Circuit, parsed: ParsedNetlist) -> int:
        """
        Clears `circuit` and adds every parsed component in file order.

        Returns:
            The number of components added.

        Raises:
            NetlistLoadError: If any component is rejected; `circuit` is left empty.
        """
        logger.debug(f"Populating circuit '{circuit.name}' from {parsed.source_path or 'memory'}.")
        circuit.clear()
        for record in parsed.components:
            try:
                circuit.add(record.kind, record.name, record.node_a, record.node_b, record.raw_value)
            except ValidationError as e:
                circuit.clear()
                error = ParsingError(
                    details=f"{record.kind.display_name} '{record.name}' rejected: {e.details}",
                    file_path=parsed.source_path,
                    line_number=record.line_number,
                )
                raise NetlistLoadError(error.get_diagnostic_report()) from e

        count = len(parsed.components)
        logger.info(f"Loaded {count} components into circuit '{circuit.name}'.")
        return count


def read_netlist(file_path: Union[str, Path], parser: Optional[NetlistParser] = None) -> ParsedNetlist:
    """Parses a netlist, choosing the YAML reader for .yaml/.yml files and the text reader otherwise."""
    path = Path(file_path)
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return (parser or NetlistParser()).parse(path)
        return parse_text_netlist(path)
    except DiagnosableError as e:
        raise NetlistLoadError(e.get_diagnostic_report()) from e


def load_netlist(file_path: Union[str, Path]) -> Circuit:
    """Reads a netlist file into a new circuit."""
    return CircuitBuilder().build_circuit(read_netlist(file_path))


def load_into_circuit(circuit: Circuit, file_path: Union[str, Path]) -> int:
    """
    Replaces the contents of an existing circuit with a netlist file.
    Returns the number of components loaded.
    """
    return CircuitBuilder().populate(circuit, read_netlist(file_path))
