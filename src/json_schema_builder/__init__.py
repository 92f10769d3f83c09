"""Composable JSON Schema builder."""

import logging

from .schema_encoding import encode, render_json, render_yaml
from .schema_model import (
    InvalidAttributeError,
    ModifierKindError,
    Schema,
    SchemaError,
    SchemaKind,
    StringFormat,
    all_of,
    any_of,
    array,
    boolean,
    description,
    enum,
    format_,
    integer,
    items,
    max_items,
    max_length,
    maximum,
    min_items,
    min_length,
    minimum,
    null,
    number,
    object_,
    one_of,
    optional,
    pattern,
    properties,
    required,
    string,
    title,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidAttributeError",
    "ModifierKindError",
    "Schema",
    "SchemaError",
    "SchemaKind",
    "StringFormat",
    "all_of",
    "any_of",
    "array",
    "boolean",
    "description",
    "encode",
    "enum",
    "format_",
    "integer",
    "items",
    "max_items",
    "max_length",
    "maximum",
    "min_items",
    "min_length",
    "minimum",
    "null",
    "number",
    "object_",
    "one_of",
    "optional",
    "pattern",
    "properties",
    "render_json",
    "render_yaml",
    "required",
    "string",
    "title",
]
