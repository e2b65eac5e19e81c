# src/dcsim_core/parser/raw_data.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..components.base import ComponentKind

# The classes in this module are the intermediate representation shared by
# every netlist reader and the CircuitBuilder. Values stay raw (numbers or
# unit strings) until the component store validates them.

@dataclass(frozen=True)
class ParsedComponentRecord:
    """One component definition as read from a netlist."""
    kind: ComponentKind
    name: str
    node_a: str
    node_b: str
    raw_value: Union[str, float, int]
    line_number: Optional[int] = None

@dataclass(frozen=True)
class ParsedNetlist:
    """A whole netlist file, in file order."""
    circuit_name: str
    source_path: Optional[Path]
    components: List[ParsedComponentRecord]
    raw_solver_config: Dict[str, Any] = field(default_factory=dict)
    skipped_lines: List[int] = field(default_factory=list)
