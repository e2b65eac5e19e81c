# src/dcsim_core/parser/text_format.py
"""
Reader and writer for the line-oriented text netlist format.

One record per line, whitespace-separated: `TYPE NAME NODE1 NODE2 VALUE`, where
TYPE is R, I or V in either case. Blank lines and lines starting with '#' or
'*' are ignored. Lines with an unknown type or that cannot be read are skipped
with a warning; they never abort a load. A unit may follow the value as a
separate field. Any further fields are ignored.

    V V1 A GND 10
    R R1 A B 10
    R R2 B 0 4.7kohm
    I I1 0 B 2 mA
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union, TYPE_CHECKING

from ..components.base import ComponentKind
from ..units import is_unit_name, parse_quantity
from .exceptions import FileIOError
from .raw_data import ParsedComponentRecord, ParsedNetlist

if TYPE_CHECKING:
    from ..circuit import Circuit

logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ("#", "*")
FIELD_COUNT = 5


def _parse_value_fields(value_fields: List[str], unit: str) -> Tuple[float, List[str]]:
    """
    Reads the value from the fields after NODE2 and returns it with the fields
    left unread. The unit may be a separate field ("4.7 kohm").
    """
    if len(value_fields) > 1 and is_unit_name(value_fields[1]):
        return parse_quantity(" ".join(value_fields[:2]), unit), value_fields[2:]
    return parse_quantity(value_fields[0], unit), value_fields[1:]


def parse_circuit_lines(
    lines: Iterable[str],
    source_path: Optional[Path] = None,
    circuit_name: str = "Circuit",
) -> ParsedNetlist:
    """Parses text netlist lines into the intermediate representation."""
    records: List[ParsedComponentRecord] = []
    skipped: List[int] = []
    where = f"{source_path}" if source_path else "<text>"

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        fields = line.split()
        if len(fields) < FIELD_COUNT:
            logger.warning(f"{where}:{line_number}: skipping malformed line: {line}")
            skipped.append(line_number)
            continue

        type_code, name, node_a, node_b = fields[:FIELD_COUNT - 1]
        try:
            kind = ComponentKind.from_type_code(type_code)
        except KeyError:
            logger.warning(f"{where}:{line_number}: skipping unrecognized component type '{type_code}': {line}")
            skipped.append(line_number)
            continue
        try:
            value, ignored = _parse_value_fields(fields[FIELD_COUNT - 1:], kind.unit)
        except ValueError as e:
            logger.warning(f"{where}:{line_number}: skipping malformed line ({e}): {line}")
            skipped.append(line_number)
            continue
        if ignored:
            logger.warning(f"{where}:{line_number}: ignoring trailing fields {ignored}")

        records.append(ParsedComponentRecord(
            kind=kind, name=name, node_a=node_a, node_b=node_b,
            raw_value=value, line_number=line_number,
        ))

    return ParsedNetlist(
        circuit_name=circuit_name,
        source_path=source_path,
        components=records,
        skipped_lines=skipped,
    )


def parse_text_netlist(file_path: Union[str, Path]) -> ParsedNetlist:
    """Reads and parses a text netlist file."""
    path = Path(file_path)
    try:
        with path.open("r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        raise FileIOError(details=f"Could not open file for reading: {e}", file_path=path) from e
    return parse_circuit_lines(lines, source_path=path, circuit_name=path.stem)


def format_circuit_lines(circuit: Circuit) -> List[str]:
    """
    One text record per component, in insertion order, using node names.

    Raises:
        ValueError: If a component or node name contains whitespace, which the
            format cannot represent.
    """
    registry = circuit.node_registry
    lines = []
    for comp in circuit.list_components():
        fields = [comp.name, registry.name_of(comp.node_a), registry.name_of(comp.node_b)]
        for field_text in fields:
            if any(ch.isspace() for ch in field_text):
                raise ValueError(
                    f"Cannot save {comp.kind.display_name} '{comp.name}': "
                    f"name '{field_text}' contains whitespace."
                )
        lines.append(f"{comp.kind.type_code} {' '.join(fields)} {comp.value!r}")
    return lines


def save_circuit_text(circuit: Circuit, file_path: Union[str, Path]) -> int:
    """
    Writes `circuit` as a text netlist. Returns the number of records written.
    Nothing is written if a name cannot be represented (see `format_circuit_lines`).
    """
    path = Path(file_path)
    lines = format_circuit_lines(circuit)
    try:
        with path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        raise FileIOError(details=f"Could not open file for writing: {e}", file_path=path) from e
    logger.info(f"Circuit '{circuit.name}' saved to {path} ({len(lines)} components).")
    return len(lines)
