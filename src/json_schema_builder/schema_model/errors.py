"""Schema construction errors."""

from __future__ import annotations

from .schema_nodes import SchemaKind


class SchemaError(Exception):
    """Base class for schema construction failures."""


class ModifierKindError(SchemaError):
    """Raised when a modifier is applied to a schema kind it does not support."""

    def __init__(self, modifier_name: str, kind: SchemaKind) -> None:
        self.modifier_name = modifier_name
        self.kind = kind
        super().__init__(f"Modifier '{modifier_name}' cannot be applied to a {kind.value} schema.")


class InvalidAttributeError(SchemaError, ValueError):
    """Raised when a modifier receives a value of the wrong type or range."""
