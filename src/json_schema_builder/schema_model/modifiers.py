"""Attribute modifiers.

A modifier is a named ``Schema -> Schema`` transformation that declares which
schema kinds it supports. Arguments are validated when the modifier is
created; kind-dependent coercion (integer versus float bounds and enum
values) happens when it is applied.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import InvalidAttributeError, ModifierKindError
from .schema_nodes import (
    ALL_KINDS,
    PropertyEntry,
    Schema,
    SchemaKind,
    StringFormat,
    is_schema,
)

_NUMERIC_KINDS = frozenset({SchemaKind.INTEGER, SchemaKind.NUMBER})
_ENUM_KINDS = frozenset({SchemaKind.STRING, SchemaKind.INTEGER, SchemaKind.NUMBER})


@dataclass(frozen=True)
class Modifier:
    """Named attribute setter restricted to a set of schema kinds."""

    name: str
    kinds: frozenset[SchemaKind]
    setter: Callable[[Any], Schema]

    def supports(self, kind: SchemaKind) -> bool:
        """Return True when the modifier may be applied to ``kind``."""
        return kind in self.kinds

    def __call__(self, schema: Schema) -> Schema:
        if not self.supports(schema.kind):
            raise ModifierKindError(self.name, schema.kind)
        return self.setter(schema)


def _set(name: str, kinds: Iterable[SchemaKind], **changes: Any) -> Modifier:
    return Modifier(
        name=name,
        kinds=frozenset(kinds),
        setter=lambda schema: dataclasses.replace(schema, **changes),
    )


def title(text: str) -> Modifier:
    """Set the schema title."""
    return _set("title", ALL_KINDS, title=_require_text(text, "title"))


def description(text: str) -> Modifier:
    """Set the schema description."""
    return _set("description", ALL_KINDS, description=_require_text(text, "description"))


def required(name: str, schema: Schema) -> PropertyEntry:
    """Declare a required object property."""
    return PropertyEntry(
        name=_require_text(name, "property name"),
        schema=_require_schema(schema, f"property '{name}'"),
        is_required=True,
    )


def optional(name: str, schema: Schema) -> PropertyEntry:
    """Declare an optional object property."""
    return PropertyEntry(
        name=_require_text(name, "property name"),
        schema=_require_schema(schema, f"property '{name}'"),
        is_required=False,
    )


def properties(entries: Sequence[PropertyEntry]) -> Modifier:
    """Set the ordered properties of an object schema."""
    normalized = tuple(entries)
    seen: set[str] = set()
    for entry in normalized:
        if not isinstance(entry, PropertyEntry):
            raise InvalidAttributeError(
                "properties entries must be created with required() or optional()."
            )
        if entry.name in seen:
            raise InvalidAttributeError(f"Duplicate property name: {entry.name}")
        seen.add(entry.name)
    return _set("properties", {SchemaKind.OBJECT}, properties=normalized)


def items(schema: Schema) -> Modifier:
    """Set the schema of array elements."""
    return _set("items", {SchemaKind.ARRAY}, items=_require_schema(schema, "items"))


def min_items(count: int) -> Modifier:
    return _set("minItems", {SchemaKind.ARRAY}, min_items=_require_count(count, "minItems"))


def max_items(count: int) -> Modifier:
    return _set("maxItems", {SchemaKind.ARRAY}, max_items=_require_count(count, "maxItems"))


def min_length(length: int) -> Modifier:
    return _set("minLength", {SchemaKind.STRING}, min_length=_require_count(length, "minLength"))


def max_length(length: int) -> Modifier:
    return _set("maxLength", {SchemaKind.STRING}, max_length=_require_count(length, "maxLength"))


def pattern(regex: str) -> Modifier:
    """Set the regular expression a string must match."""
    return _set("pattern", {SchemaKind.STRING}, pattern=_require_text(regex, "pattern"))


def format_(string_format: StringFormat | str) -> Modifier:
    """Set the string format; accepts a member or its wire text."""
    try:
        member = StringFormat(string_format)
    except ValueError as exc:
        raise InvalidAttributeError(f"Unknown string format: {string_format!r}") from exc
    return _set("format", {SchemaKind.STRING}, format=member)


def minimum(value: float) -> Modifier:
    """Set the inclusive lower bound of an integer or number schema."""
    return _bound("minimum", value)


def maximum(value: float) -> Modifier:
    """Set the inclusive upper bound of an integer or number schema."""
    return _bound("maximum", value)


def enum(values: Sequence[Any]) -> Modifier:
    """Restrict a string, integer or number schema to ``values``.

    The element type follows the schema kind the modifier is applied to: text
    for strings, ``int`` for integers and ``float`` for numbers.
    """
    if isinstance(values, str | bytes) or not isinstance(values, Sequence):
        raise InvalidAttributeError("enum values must be a sequence.")
    raw_values = tuple(values)

    def _apply(schema: Schema) -> Schema:
        coerced = tuple(_coerce_scalar(schema.kind, value, "enum") for value in raw_values)
        return dataclasses.replace(schema, enum=coerced)

    return Modifier(name="enum", kinds=_ENUM_KINDS, setter=_apply)


def _bound(name: str, value: Any) -> Modifier:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidAttributeError(f"{name} must be a number.")

    def _apply(schema: Schema) -> Schema:
        return dataclasses.replace(schema, **{name: _coerce_scalar(schema.kind, value, name)})

    return Modifier(name=name, kinds=_NUMERIC_KINDS, setter=_apply)


def _coerce_scalar(kind: SchemaKind, value: Any, label: str) -> str | int | float:
    if kind is SchemaKind.STRING:
        if not isinstance(value, str):
            raise InvalidAttributeError(f"{label} values of a string schema must be strings.")
        return value
    if isinstance(value, bool):
        raise InvalidAttributeError(f"{label} values of a {kind.value} schema must not be booleans.")
    if kind is SchemaKind.INTEGER:
        if not isinstance(value, int):
            raise InvalidAttributeError(f"{label} values of an integer schema must be integers.")
        return value
    if not isinstance(value, int | float):
        raise InvalidAttributeError(f"{label} values of a number schema must be numbers.")
    try:
        coerced = float(value)
    except OverflowError as exc:
        raise InvalidAttributeError(f"{label} is out of float range.") from exc
    if not math.isfinite(coerced):
        raise InvalidAttributeError(f"{label} values of a number schema must be finite.")
    return coerced


def _require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise InvalidAttributeError(f"{field_name} must be a string.")
    return value


def _require_count(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAttributeError(f"{field_name} must be an integer.")
    if value < 0:
        raise InvalidAttributeError(f"{field_name} must not be negative.")
    return value


def _require_schema(value: Any, field_name: str) -> Schema:
    if not is_schema(value):
        raise InvalidAttributeError(f"{field_name} must be a schema.")
    return value
