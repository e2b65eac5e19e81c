# src/dcsim_core/components/base.py
"""
The component model: a closed, tagged set of two-terminal elements.

Every `Component` carries a `ComponentKind` discriminant plus a uniform payload
(name, two node identifiers and a value). Analysis code dispatches on the
discriminant rather than on a class hierarchy.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class ComponentKind(Enum):
    """
    Registry of supported component kinds.
    Each member's value is a tuple: (type_code, display_name, unit).
    """
    RESISTOR = ("R", "Resistor", "ohm")
    CURRENT_SOURCE = ("I", "Current Source", "ampere")
    VOLTAGE_SOURCE = ("V", "Voltage Source", "volt")

    @property
    def type_code(self) -> str:
        return self.value[0]

    @property
    def display_name(self) -> str:
        return self.value[1]

    @property
    def unit(self) -> str:
        return self.value[2]

    @property
    def unit_symbol(self) -> str:
        return {"ohm": "Ohm", "ampere": "A", "volt": "V"}[self.unit]

    @classmethod
    def from_type_code(cls, code: str) -> "ComponentKind":
        """Looks up a kind by its one-letter netlist code, case-insensitively."""
        normalized = code.strip().upper()
        for kind in cls:
            if kind.type_code == normalized:
                return kind
        raise KeyError(f"Unknown component type code '{code}'. Available codes: {[k.type_code for k in cls]}.")


@dataclass(frozen=True)
class Component:
    """
    An immutable, validated circuit element.

    For a current source, current flows from `node_a` to `node_b` through the
    source. For a voltage source, `node_a` is the positive terminal.
    Names are free-form and need not be unique.
    """
    kind: ComponentKind
    name: str
    node_a: int
    node_b: int
    value: float

    def __post_init__(self):
        if not isinstance(self.kind, ComponentKind):
            raise TypeError(f"kind must be a ComponentKind, got {type(self.kind).__name__}.")
        if self.node_a == self.node_b:
            raise ValidationError(
                details=f"{self.kind.display_name} cannot be connected to the same node at both terminals (node id {self.node_a}).",
                component_name=self.name,
            )
        if self.kind is ComponentKind.RESISTOR and self.value <= 0:
            raise ValidationError(
                details=f"Resistance must be positive, got {self.value} ohm.",
                component_name=self.name,
            )

    @property
    def nodes(self) -> Tuple[int, int]:
        return (self.node_a, self.node_b)

    def touches(self, node_id: int) -> bool:
        return node_id in (self.node_a, self.node_b)

    @property
    def conductance(self) -> float:
        """Conductance in siemens. Only meaningful for resistors."""
        if self.kind is not ComponentKind.RESISTOR:
            raise AttributeError(f"{self.kind.display_name} '{self.name}' has no conductance.")
        return 1.0 / self.value

    def __str__(self) -> str:
        return f"{self.kind.type_code} {self.name} {self.node_a}-{self.node_b} {self.value:g} {self.kind.unit_symbol}"
