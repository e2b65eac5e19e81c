# src/dcsim_core/parser/yaml_format.py
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import cerberus
import yaml

from ..components.base import ComponentKind
from .exceptions import FileIOError, ParsingError, SchemaValidationError
from .raw_data import ParsedComponentRecord, ParsedNetlist

logger = logging.getLogger(__name__)


def _normalize_type_code(value: Any) -> Any:
    return value.strip().upper() if isinstance(value, str) else value


def _normalize_node_name(value: Any) -> Any:
    # YAML reads a bare 0 (the ground alias) as an integer.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class NetlistValidator(cerberus.Validator):
    """Cerberus validator with the netlist-specific rules."""
    def _validate_distinct_items(self, constraint: bool, field: str, value: Any):
        """
        Validates that the items of a list are pairwise distinct.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if constraint and isinstance(value, list) and len(set(map(str, value))) != len(value):
            self._error(field, f"A component cannot connect a node to itself: {value}")


class NetlistParser:
    """
    Parses and validates YAML netlists into the intermediate representation.

        circuit_name: divider
        solver: {epsilon: 1.0e-12}
        components:
          - {type: V, name: V1, nodes: [A, GND], value: 10 V}
          - {type: R, name: R1, nodes: [A, B], value: 10 ohm}
          - {type: R, name: R2, nodes: [B, 0], value: 10}
    """
    _component_schema = {
        "type": {"type": "string", "required": True, "coerce": _normalize_type_code,
                 "allowed": [kind.type_code for kind in ComponentKind]},
        "name": {"type": "string", "required": True, "empty": False},
        "nodes": {
            "type": "list", "required": True, "minlength": 2, "maxlength": 2, "distinct_items": True,
            "schema": {"type": "string", "empty": False, "coerce": _normalize_node_name},
        },
        "value": {"type": ["string", "number"], "required": True},
    }

    _schema = {
        "circuit_name": {"type": "string", "required": False, "empty": False},
        "solver": {"type": "dict", "required": False, "schema": {
            "epsilon": {"type": "number", "required": False, "min": 0.0},
        }},
        "components": {"type": "list", "required": True, "minlength": 1,
                       "schema": {"type": "dict", "schema": _component_schema}},
    }

    def __init__(self):
        self._validator = NetlistValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("NetlistParser initialized.")

    def parse(self, yaml_path: Union[str, Path]) -> ParsedNetlist:
        """Parses one YAML netlist file."""
        path = Path(yaml_path)
        logger.debug(f"Parsing YAML netlist: {path}")
        content = self._load_yaml(path)
        return self.parse_mapping(content, source_path=path)

    def parse_mapping(self, content: Dict[str, Any], source_path: Union[str, Path, None] = None) -> ParsedNetlist:
        """Validates an already loaded netlist mapping."""
        path = Path(source_path) if source_path is not None else None
        if not isinstance(content, dict):
            raise ParsingError(details="A netlist must be a mapping at the top level.", file_path=path)
        if not self._validator.validate(content):
            raise SchemaValidationError(self._validator.errors, path)
        document = self._validator.document

        records: List[ParsedComponentRecord] = []
        for raw in document["components"]:
            node_a, node_b = raw["nodes"]
            records.append(ParsedComponentRecord(
                kind=ComponentKind.from_type_code(raw["type"]),
                name=raw["name"],
                node_a=node_a,
                node_b=node_b,
                raw_value=raw["value"],
            ))

        return ParsedNetlist(
            circuit_name=document.get("circuit_name", path.stem if path else "Circuit"),
            source_path=path,
            components=records,
            raw_solver_config=document.get("solver", {}),
        )

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML file."""
        if not source.is_file():
            raise FileIOError(details=f"Netlist file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise FileIOError(details=f"Could not open file for reading: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        if content is None:
            raise ParsingError(details="The YAML file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ParsingError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content
