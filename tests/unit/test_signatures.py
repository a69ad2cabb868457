"""
Unit tests for type reference and field signature rendering.
"""

import pytest

from graphql_schema_diff import (
    ArgumentDefinition,
    FieldDefinition,
    InvalidArgumentError,
    TypeKind,
    TypeRef,
    parse_type_ref,
    render_field,
    render_type,
)
from graphql_schema_diff.model.signatures import render_arguments

pytestmark = pytest.mark.unit


def test_render_type_wraps_list_and_non_null_modifiers():
    ref = TypeRef.non_null(TypeRef.list_of(TypeRef.non_null(TypeRef.named("Pet"))))

    assert render_type(ref) == "[Pet!]!"
    assert ref.named_type == "Pet"
    assert ref.kind is TypeKind.NON_NULL


def test_render_type_of_bare_named_reference():
    assert render_type(TypeRef.named("String")) == "String"


def test_parse_type_ref_produces_equal_structure():
    parsed = parse_type_ref("[Pet!]!")

    assert parsed == TypeRef.non_null(TypeRef.list_of(TypeRef.non_null(TypeRef.named("Pet"))))
    assert render_type(parsed) == "[Pet!]!"


def test_render_field_includes_arguments_and_defaults():
    field = FieldDefinition(
        "pets",
        parse_type_ref("[Pet]"),
        args=[
            ArgumentDefinition("first", TypeRef.named("Int"), default_value="10"),
            ArgumentDefinition("owner", parse_type_ref("ID!")),
        ],
    )

    assert render_arguments(field) == "(first: Int = 10, owner: ID!)"
    assert render_field(field) == "pets(first: Int = 10, owner: ID!): [Pet]"


def test_render_field_without_arguments_has_no_parentheses():
    field = FieldDefinition("name", TypeRef.named("String"))

    assert render_arguments(field) == ""
    assert render_field(field) == "name: String"


def test_falsy_default_is_still_rendered():
    field = FieldDefinition(
        "pets", TypeRef.named("Pet"),
        args=[ArgumentDefinition("offset", TypeRef.named("Int"), default_value="0")],
    )

    assert render_field(field) == "pets(offset: Int = 0): Pet"


def test_invalid_type_refs_are_rejected():
    with pytest.raises(InvalidArgumentError):
        TypeRef()
    with pytest.raises(InvalidArgumentError):
        TypeRef(kind=TypeKind.LIST)
    with pytest.raises(InvalidArgumentError):
        TypeRef(name="Pet", kind=TypeKind.OBJECT)
