"""Modifier validation tests."""

from __future__ import annotations

import pytest
from json_schema_builder.schema_model import (
    InvalidAttributeError,
    ModifierKindError,
    SchemaError,
    SchemaKind,
    StringFormat,
    array,
    boolean,
    enum,
    format_,
    integer,
    items,
    max_items,
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


def test_string_only_modifier_on_integer_names_modifier_and_kind() -> None:
    with pytest.raises(ModifierKindError) as excinfo:
        integer(pattern("^x$"))

    assert excinfo.value.modifier_name == "pattern"
    assert excinfo.value.kind is SchemaKind.INTEGER
    assert "pattern" in str(excinfo.value)
    assert "integer" in str(excinfo.value)


@pytest.mark.parametrize(
    ("build_schema", "modifier_name"),
    [
        (lambda: string(items(null())), "items"),
        (lambda: array(min_length(1)), "minLength"),
        (lambda: boolean(minimum(1)), "minimum"),
        (lambda: object_(enum(["a"])), "enum"),
        (lambda: number(properties([])), "properties"),
        (lambda: integer(format_(StringFormat.EMAIL)), "format"),
        (lambda: one_of([max_items(2)], []), "maxItems"),
    ],
)
def test_modifiers_reject_unsupported_kinds(build_schema, modifier_name) -> None:
    with pytest.raises(ModifierKindError, match=f"'{modifier_name}'"):
        build_schema()


def test_title_is_accepted_by_every_kind() -> None:
    for schema in (object_(title("t")), null(title("t")), one_of([title("t")], [])):
        assert schema.title == "t"


@pytest.mark.parametrize("bad_count", [-1, True, 1.5, "3"])
def test_counts_must_be_non_negative_integers(bad_count) -> None:
    with pytest.raises(InvalidAttributeError):
        min_items(bad_count)


def test_number_bounds_and_enum_are_normalized_to_float() -> None:
    schema = number(minimum(1), maximum(2.5), enum([1, 3.4]))

    assert schema.minimum == 1.0
    assert isinstance(schema.minimum, float)
    assert schema.maximum == 2.5
    assert schema.enum == (1.0, 3.4)
    assert all(isinstance(value, float) for value in schema.enum)


def test_integer_schema_rejects_float_bounds_and_enum_values() -> None:
    with pytest.raises(InvalidAttributeError, match="integer"):
        integer(minimum(1.5))
    with pytest.raises(InvalidAttributeError, match="integer"):
        integer(enum([1, 2.0]))


def test_boolean_values_are_not_accepted_as_numbers() -> None:
    with pytest.raises(InvalidAttributeError):
        minimum(True)
    with pytest.raises(InvalidAttributeError):
        integer(enum([1, False]))


def test_string_enum_requires_text_values() -> None:
    with pytest.raises(InvalidAttributeError, match="strings"):
        string(enum(["a", 1]))


def test_enum_rejects_a_bare_string() -> None:
    with pytest.raises(InvalidAttributeError, match="sequence"):
        enum("ab")  # type: ignore[arg-type]


def test_format_accepts_wire_text_and_rejects_unknown_values() -> None:
    assert string(format_("date-time")).format is StringFormat.DATE_TIME

    with pytest.raises(InvalidAttributeError, match="Unknown string format"):
        format_("datetime")


def test_properties_reject_duplicate_names() -> None:
    with pytest.raises(InvalidAttributeError, match="Duplicate property name: id"):
        properties([required("id", string()), optional("id", integer())])


def test_property_entries_require_schemas() -> None:
    with pytest.raises(InvalidAttributeError, match="property 'id'"):
        required("id", "string")  # type: ignore[arg-type]


def test_modifier_reports_supported_kinds() -> None:
    modifier = enum([1])

    assert modifier.supports(SchemaKind.INTEGER)
    assert not modifier.supports(SchemaKind.ARRAY)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_number_schema_rejects_non_finite_values(value) -> None:
    with pytest.raises(InvalidAttributeError, match="finite"):
        number(minimum(value))
    with pytest.raises(InvalidAttributeError, match="finite"):
        number(enum([1.5, value]))


def test_number_schema_rejects_integers_beyond_float_range() -> None:
    with pytest.raises(InvalidAttributeError, match="out of float range"):
        number(maximum(10**400))
    with pytest.raises(SchemaError):
        number(enum([10**400]))


def test_integer_schema_keeps_large_integers_exactly() -> None:
    assert integer(maximum(10**400)).maximum == 10**400
