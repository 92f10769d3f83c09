"""Schema model exports."""

from .constructors import (
    all_of,
    any_of,
    array,
    boolean,
    build,
    integer,
    null,
    number,
    object_,
    one_of,
    string,
)
from .errors import InvalidAttributeError, ModifierKindError, SchemaError
from .modifiers import (
    Modifier,
    description,
    enum,
    format_,
    items,
    max_items,
    max_length,
    maximum,
    min_items,
    min_length,
    minimum,
    optional,
    pattern,
    properties,
    required,
    title,
)
from .schema_nodes import (
    ArraySchema,
    BooleanSchema,
    CompositeSchema,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    PropertyEntry,
    Schema,
    SchemaKind,
    StringFormat,
    StringSchema,
)

__all__ = [
    "ArraySchema",
    "BooleanSchema",
    "CompositeSchema",
    "IntegerSchema",
    "NullSchema",
    "NumberSchema",
    "ObjectSchema",
    "PropertyEntry",
    "Schema",
    "SchemaKind",
    "StringFormat",
    "StringSchema",
    "Modifier",
    "SchemaError",
    "ModifierKindError",
    "InvalidAttributeError",
    "build",
    "object_",
    "array",
    "string",
    "integer",
    "number",
    "boolean",
    "null",
    "one_of",
    "all_of",
    "any_of",
    "title",
    "description",
    "properties",
    "required",
    "optional",
    "items",
    "min_items",
    "max_items",
    "min_length",
    "max_length",
    "pattern",
    "format_",
    "minimum",
    "maximum",
    "enum",
]
