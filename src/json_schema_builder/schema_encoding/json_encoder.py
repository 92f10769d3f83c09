"""Schema to JSON value encoding."""

from __future__ import annotations

from typing import TypeAlias

from json_schema_builder.schema_model.schema_nodes import (
    ArraySchema,
    CompositeSchema,
    IntegerSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
)

JsonValue: TypeAlias = (
    dict[str, "JsonValue"] | list["JsonValue"] | str | int | float | bool | None
)
JsonObject: TypeAlias = dict[str, JsonValue]


def encode(schema: Schema) -> JsonObject:
    """Return the JSON Schema document describing ``schema``.

    Unset attributes are omitted and nested schemas are encoded recursively.
    Key order follows declaration order, so equal schemas always produce equal
    documents.
    """
    document: JsonObject = {}
    if isinstance(schema, CompositeSchema):
        _put(document, "title", schema.title)
        _put(document, "description", schema.description)
        document[schema.kind.value] = [encode(child) for child in schema.subschemas]
        return document

    document["type"] = schema.kind.value
    _put(document, "title", schema.title)
    _put(document, "description", schema.description)

    if isinstance(schema, ObjectSchema):
        _encode_object(schema, document)
    elif isinstance(schema, ArraySchema):
        _encode_array(schema, document)
    elif isinstance(schema, StringSchema):
        _encode_string(schema, document)
    elif isinstance(schema, IntegerSchema):
        _encode_integer(schema, document)
    elif isinstance(schema, NumberSchema):
        _encode_number(schema, document)
    return document


def _encode_object(schema: ObjectSchema, document: JsonObject) -> None:
    if schema.properties:
        document["properties"] = {entry.name: encode(entry.schema) for entry in schema.properties}
    required_names = schema.required
    if required_names:
        document["required"] = list(required_names)


def _encode_array(schema: ArraySchema, document: JsonObject) -> None:
    if schema.items is not None:
        document["items"] = encode(schema.items)
    _put(document, "minItems", schema.min_items)
    _put(document, "maxItems", schema.max_items)


def _encode_string(schema: StringSchema, document: JsonObject) -> None:
    _put(document, "minLength", schema.min_length)
    _put(document, "maxLength", schema.max_length)
    _put(document, "pattern", schema.pattern)
    if schema.format is not None:
        document["format"] = schema.format.value
    if schema.enum is not None:
        document["enum"] = list(schema.enum)


def _encode_integer(schema: IntegerSchema, document: JsonObject) -> None:
    _put(document, "minimum", schema.minimum)
    _put(document, "maximum", schema.maximum)
    if schema.enum is not None:
        document["enum"] = list(schema.enum)


def _encode_number(schema: NumberSchema, document: JsonObject) -> None:
    # Values stay floats so 2.0 is not emitted as the integer 2.
    if schema.minimum is not None:
        document["minimum"] = float(schema.minimum)
    if schema.maximum is not None:
        document["maximum"] = float(schema.maximum)
    if schema.enum is not None:
        document["enum"] = [float(value) for value in schema.enum]


def _put(document: JsonObject, key: str, value: JsonValue) -> None:
    if value is not None:
        document[key] = value
