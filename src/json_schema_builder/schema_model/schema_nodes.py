"""Schema node entities.

Each schema kind is its own frozen dataclass carrying only the attributes that
kind supports, so a node can never hold an attribute that is invalid for it.
Sequences are stored as tuples and nodes are never mutated; modifiers derive
new nodes with :func:`dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias


class SchemaKind(str, Enum):
    """Variant tag of a schema node, valued with its JSON Schema keyword."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ONE_OF = "oneOf"
    ALL_OF = "allOf"
    ANY_OF = "anyOf"

    @property
    def is_composition(self) -> bool:
        """Return True for oneOf/allOf/anyOf kinds."""
        return self in COMPOSITION_KINDS


COMPOSITION_KINDS: frozenset[SchemaKind] = frozenset(
    {SchemaKind.ONE_OF, SchemaKind.ALL_OF, SchemaKind.ANY_OF}
)
ALL_KINDS: frozenset[SchemaKind] = frozenset(SchemaKind)


class StringFormat(str, Enum):
    """Supported values of the string ``format`` keyword."""

    DATE_TIME = "date-time"
    DATE = "date"
    TIME = "time"
    DURATION = "duration"
    EMAIL = "email"
    HOSTNAME = "hostname"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    URI = "uri"
    URI_REFERENCE = "uri-reference"
    UUID = "uuid"
    REGEX = "regex"


@dataclass(frozen=True, kw_only=True)
class _SchemaNode:
    title: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class PropertyEntry:
    """One named property of an object schema."""

    name: str
    schema: Schema
    is_required: bool


@dataclass(frozen=True, kw_only=True)
class ObjectSchema(_SchemaNode):
    """Object schema with ordered properties."""

    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT

    properties: tuple[PropertyEntry, ...] = ()

    @property
    def required(self) -> tuple[str, ...]:
        """Return required property names in declaration order."""
        return tuple(entry.name for entry in self.properties if entry.is_required)


@dataclass(frozen=True, kw_only=True)
class ArraySchema(_SchemaNode):
    """Array schema."""

    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY

    items: Schema | None = None
    min_items: int | None = None
    max_items: int | None = None


@dataclass(frozen=True, kw_only=True)
class StringSchema(_SchemaNode):
    """String schema."""

    kind: ClassVar[SchemaKind] = SchemaKind.STRING

    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: StringFormat | None = None
    enum: tuple[str, ...] | None = None


@dataclass(frozen=True, kw_only=True)
class IntegerSchema(_SchemaNode):
    """Integer schema."""

    kind: ClassVar[SchemaKind] = SchemaKind.INTEGER

    minimum: int | None = None
    maximum: int | None = None
    enum: tuple[int, ...] | None = None


@dataclass(frozen=True, kw_only=True)
class NumberSchema(_SchemaNode):
    """Number schema; bounds and enum values are always floats."""

    kind: ClassVar[SchemaKind] = SchemaKind.NUMBER

    minimum: float | None = None
    maximum: float | None = None
    enum: tuple[float, ...] | None = None


@dataclass(frozen=True, kw_only=True)
class BooleanSchema(_SchemaNode):
    """Boolean schema."""

    kind: ClassVar[SchemaKind] = SchemaKind.BOOLEAN


@dataclass(frozen=True, kw_only=True)
class NullSchema(_SchemaNode):
    """Null schema."""

    kind: ClassVar[SchemaKind] = SchemaKind.NULL


@dataclass(frozen=True, kw_only=True)
class CompositeSchema(_SchemaNode):
    """oneOf/allOf/anyOf composition of ordered subschemas."""

    kind: SchemaKind
    subschemas: tuple[Schema, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in COMPOSITION_KINDS:
            raise ValueError(f"{self.kind.value} is not a composition kind.")


Schema: TypeAlias = (
    ObjectSchema
    | ArraySchema
    | StringSchema
    | IntegerSchema
    | NumberSchema
    | BooleanSchema
    | NullSchema
    | CompositeSchema
)

SCHEMA_NODE_TYPES: tuple[type, ...] = (
    ObjectSchema,
    ArraySchema,
    StringSchema,
    IntegerSchema,
    NumberSchema,
    BooleanSchema,
    NullSchema,
    CompositeSchema,
)

_DEFAULT_NODES: dict[SchemaKind, Schema] = {
    SchemaKind.OBJECT: ObjectSchema(),
    SchemaKind.ARRAY: ArraySchema(),
    SchemaKind.STRING: StringSchema(),
    SchemaKind.INTEGER: IntegerSchema(),
    SchemaKind.NUMBER: NumberSchema(),
    SchemaKind.BOOLEAN: BooleanSchema(),
    SchemaKind.NULL: NullSchema(),
}


def default_node(kind: SchemaKind) -> Schema:
    """Return the attribute-free node of ``kind``."""
    if kind.is_composition:
        return CompositeSchema(kind=kind)
    return _DEFAULT_NODES[kind]


def is_schema(value: object) -> bool:
    """Return True when ``value`` is a schema node."""
    return isinstance(value, SCHEMA_NODE_TYPES)
