# src/dcsim_core/components/__init__.py
from .base import Component, ComponentKind
from .exceptions import ValidationError
from .store import ComponentStore

__all__ = [
    "Component",
    "ComponentKind",
    "ComponentStore",
    "ValidationError",
]
