# src/dcsim_core/nodes.py
"""
Node identity management.

User-facing node names are mapped to dense integer identifiers in first-seen
order. Identifier 0 is reserved for the ground (reference) node, which can be
spelled "0", "GND" or "gnd" (in any letter case).
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from .components.exceptions import ValidationError

logger = logging.getLogger(__name__)

GROUND_NODE_ID: int = 0
GROUND_NODE_NAME: str = "GND"

#: Spellings pre-registered as ground whenever a registry is created or reset.
GROUND_ALIASES: Tuple[str, ...] = ("0", "GND", "gnd")

_NATURAL_SPLIT_RE = re.compile(r"(\d+)")


def is_ground_alias(name: str) -> bool:
    """True if `name` denotes the ground node, regardless of letter case."""
    return name.upper() in ("0", "GND")


def natural_node_sort_key(name: str) -> Tuple[Tuple[int, Union[int, str]], ...]:
    """
    Display-only sort key that orders embedded numbers numerically, so that
    node "2" sorts before node "10" and "N2" before "N10".

    Storage order is never derived from this key; registries iterate in
    creation order.
    """
    parts = []
    for chunk in _NATURAL_SPLIT_RE.split(name):
        if not chunk:
            continue
        if chunk.isdigit():
            parts.append((0, int(chunk)))
        else:
            parts.append((1, chunk.lower()))
    return tuple(parts)


@dataclass(frozen=True)
class Node:
    """An electrical connection point: its dense identifier and the name it was first registered under."""
    node_id: int
    name: str

    @property
    def is_ground(self) -> bool:
        return self.node_id == GROUND_NODE_ID


class NodeRegistry:
    """
    Maps node names to dense integer identifiers.

    Identifiers are append-only for the lifetime of a registry (until `reset`):
    there is no deletion. Iteration order is creation order.
    """

    def __init__(self):
        self._ids_by_name: Dict[str, int] = {}
        self._names_by_id: Dict[int, str] = {}
        self._node_count: int = 0
        self.reset()

    def reset(self) -> None:
        """Discards all nodes and re-seeds the ground aliases."""
        self._ids_by_name = {alias: GROUND_NODE_ID for alias in GROUND_ALIASES}
        self._names_by_id = {GROUND_NODE_ID: GROUND_NODE_NAME}
        self._node_count = 0

    @property
    def node_count(self) -> int:
        """Number of registered non-ground nodes."""
        return self._node_count

    def resolve(self, name: str) -> int:
        """
        Returns the identifier for `name`, registering it with the next unused
        positive identifier if it has not been seen before.

        Raises:
            ValidationError: If `name` is empty.
        """
        if not isinstance(name, str):
            raise TypeError(f"Node name must be a string, got {type(name).__name__}.")
        if not name.strip():
            raise ValidationError(details="Node name cannot be empty.", node_name=name)

        node_id = self._ids_by_name.get(name)
        if node_id is not None:
            return node_id

        if is_ground_alias(name):
            # Case variants such as "Gnd" alias ground without consuming an identifier.
            self._ids_by_name[name] = GROUND_NODE_ID
            return GROUND_NODE_ID

        self._node_count += 1
        node_id = self._node_count
        self._ids_by_name[name] = node_id
        self._names_by_id[node_id] = name
        logger.debug(f"Registered node '{name}' with id {node_id}.")
        return node_id

    def lookup(self, name: str) -> int:
        """Returns the identifier of an already registered name, without registering it."""
        try:
            return self._ids_by_name[name]
        except KeyError:
            if isinstance(name, str) and is_ground_alias(name):
                return GROUND_NODE_ID
            raise KeyError(f"Unknown node name '{name}'.") from None

    def name_of(self, node_id: int) -> str:
        """Returns the name a node identifier was first registered under."""
        try:
            return self._names_by_id[node_id]
        except KeyError:
            raise KeyError(f"Unknown node id {node_id}.") from None

    def __contains__(self, name: object) -> bool:
        return name in self._ids_by_name

    def __len__(self) -> int:
        return self._node_count

    def as_mapping(self) -> Dict[str, int]:
        """A copy of the name -> id mapping, ground aliases included, in creation order."""
        return dict(self._ids_by_name)

    def nodes(self, include_ground: bool = False) -> List[Node]:
        """Registered nodes in creation order, one entry per identifier."""
        return [
            Node(node_id=node_id, name=name)
            for node_id, name in self._names_by_id.items()
            if include_ground or node_id != GROUND_NODE_ID
        ]
