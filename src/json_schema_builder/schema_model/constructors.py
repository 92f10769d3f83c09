"""Schema kind constructors."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Sequence
from functools import reduce
from typing import cast

from .errors import InvalidAttributeError
from .modifiers import Modifier
from .schema_nodes import (
    ArraySchema,
    BooleanSchema,
    CompositeSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    SchemaKind,
    StringSchema,
    default_node,
    is_schema,
)

_LOGGER = logging.getLogger(__name__)


def build(kind: SchemaKind, modifiers: Iterable[Modifier]) -> Schema:
    """Fold ``modifiers`` left to right over the default node of ``kind``.

    Composition kinds need subschemas; use :func:`one_of`, :func:`all_of` or
    :func:`any_of` for them.
    """
    if kind.is_composition:
        raise InvalidAttributeError(
            f"{kind.value} schemas require subschemas; use one_of, all_of or any_of."
        )
    return _fold(kind, modifiers)


def _fold(kind: SchemaKind, modifiers: Iterable[Modifier]) -> Schema:
    applied = tuple(modifiers)
    for modifier in applied:
        if not isinstance(modifier, Modifier):
            raise InvalidAttributeError(f"Expected a modifier, got {type(modifier).__name__}.")
    schema = reduce(lambda node, modifier: modifier(node), applied, default_node(kind))
    _LOGGER.debug("Built %s schema with %d modifier(s)", kind.value, len(applied))
    return schema


def object_(*modifiers: Modifier) -> ObjectSchema:
    return cast(ObjectSchema, build(SchemaKind.OBJECT, modifiers))


def array(*modifiers: Modifier) -> ArraySchema:
    return cast(ArraySchema, build(SchemaKind.ARRAY, modifiers))


def string(*modifiers: Modifier) -> StringSchema:
    return cast(StringSchema, build(SchemaKind.STRING, modifiers))


def integer(*modifiers: Modifier) -> IntegerSchema:
    return cast(IntegerSchema, build(SchemaKind.INTEGER, modifiers))


def number(*modifiers: Modifier) -> NumberSchema:
    return cast(NumberSchema, build(SchemaKind.NUMBER, modifiers))


def boolean(*modifiers: Modifier) -> BooleanSchema:
    return cast(BooleanSchema, build(SchemaKind.BOOLEAN, modifiers))


def null(*modifiers: Modifier) -> NullSchema:
    return cast(NullSchema, build(SchemaKind.NULL, modifiers))


def one_of(modifiers: Sequence[Modifier], subschemas: Sequence[Schema]) -> CompositeSchema:
    """Schema matching exactly one of ``subschemas``."""
    return _compose(SchemaKind.ONE_OF, modifiers, subschemas)


def all_of(modifiers: Sequence[Modifier], subschemas: Sequence[Schema]) -> CompositeSchema:
    """Schema matching every one of ``subschemas``."""
    return _compose(SchemaKind.ALL_OF, modifiers, subschemas)


def any_of(modifiers: Sequence[Modifier], subschemas: Sequence[Schema]) -> CompositeSchema:
    """Schema matching at least one of ``subschemas``."""
    return _compose(SchemaKind.ANY_OF, modifiers, subschemas)


def _compose(
    kind: SchemaKind, modifiers: Sequence[Modifier], subschemas: Sequence[Schema]
) -> CompositeSchema:
    children = tuple(subschemas)
    for position, child in enumerate(children):
        if not is_schema(child):
            raise InvalidAttributeError(f"{kind.value}[{position}] must be a schema.")
    base = cast(CompositeSchema, _fold(kind, modifiers))
    return dataclasses.replace(base, subschemas=children)
