# src/dcsim_core/components/store.py
from __future__ import annotations

import logging
from typing import Iterator, List, Tuple, Union, TYPE_CHECKING

from ..units import parse_quantity
from .base import Component, ComponentKind
from .exceptions import ValidationError

if TYPE_CHECKING:
    from ..nodes import NodeRegistry

logger = logging.getLogger(__name__)

RawValue = Union[float, int, str]


class ComponentStore:
    """
    Ordered collection of validated components.

    Each insertion resolves its node names through the shared `NodeRegistry`
    (registering new names as a side effect) and appends an immutable
    `Component`. A rejected insertion leaves the component list untouched.
    """

    def __init__(self, node_registry: NodeRegistry):
        self.node_registry = node_registry
        self._components: List[Component] = []

    def add(self, kind: ComponentKind, name: str, node_a: str, node_b: str, value: RawValue) -> Component:
        """
        Validates and appends a component of the given kind.

        Args:
            kind: The component discriminant.
            name: Free-form label; duplicates are allowed.
            node_a: First terminal (current-source origin, voltage-source positive terminal).
            node_b: Second terminal.
            value: Ohms, amperes or volts. Strings may carry a unit (e.g. "4.7 kohm").

        Returns:
            The stored component.

        Raises:
            ValidationError: For empty node names, equal terminals, a non-positive
                resistance or an unparseable value.
        """
        magnitude = self._parse_value(kind, name, value)

        # Reject what can be rejected before touching the registry.
        for node_name in (node_a, node_b):
            if isinstance(node_name, str) and not node_name.strip():
                raise ValidationError(details="Node name cannot be empty.", component_name=name, node_name=node_name)
        if self._same_node(node_a, node_b):
            raise ValidationError(
                details=f"{kind.display_name} cannot be connected to the same node at both terminals ('{node_a}').",
                component_name=name,
            )
        if kind is ComponentKind.RESISTOR and magnitude <= 0:
            raise ValidationError(details=f"Resistance must be positive, got {magnitude} ohm.", component_name=name)

        id_a = self.node_registry.resolve(node_a)
        id_b = self.node_registry.resolve(node_b)
        component = Component(kind=kind, name=name, node_a=id_a, node_b=id_b, value=magnitude)
        self._components.append(component)
        logger.debug(f"Added {kind.display_name} '{name}' between node {id_a} and node {id_b} ({magnitude:g} {kind.unit}).")
        return component

    def add_resistor(self, name: str, n1: str, n2: str, resistance: RawValue) -> Component:
        return self.add(ComponentKind.RESISTOR, name, n1, n2, resistance)

    def add_current_source(self, name: str, from_node: str, to_node: str, current: RawValue) -> Component:
        """Current flows from `from_node` through the source into `to_node`."""
        return self.add(ComponentKind.CURRENT_SOURCE, name, from_node, to_node, current)

    def add_voltage_source(self, name: str, pos: str, neg: str, voltage: RawValue) -> Component:
        return self.add(ComponentKind.VOLTAGE_SOURCE, name, pos, neg, voltage)

    def clear(self) -> None:
        self._components.clear()

    @property
    def components(self) -> Tuple[Component, ...]:
        """Read-only snapshot of the stored components in insertion order."""
        return tuple(self._components)

    def of_kind(self, kind: ComponentKind) -> List[Component]:
        return [comp for comp in self._components if comp.kind is kind]

    def incident_to(self, node_id: int) -> List[Component]:
        return [comp for comp in self._components if comp.touches(node_id)]

    def __iter__(self) -> Iterator[Component]:
        return iter(tuple(self._components))

    def __len__(self) -> int:
        return len(self._components)

    def __getitem__(self, index: int) -> Component:
        return self._components[index]

    def _same_node(self, node_a: str, node_b: str) -> bool:
        if not (isinstance(node_a, str) and isinstance(node_b, str)):
            return False
        if node_a == node_b:
            return True
        try:
            return self.node_registry.lookup(node_a) == self.node_registry.lookup(node_b)
        except KeyError:
            return False

    @staticmethod
    def _parse_value(kind: ComponentKind, name: str, value: RawValue) -> float:
        try:
            return parse_quantity(value, kind.unit)
        except ValueError as e:
            raise ValidationError(
                details=f"Invalid {kind.display_name.lower()} value: {e}",
                component_name=name,
            ) from e
