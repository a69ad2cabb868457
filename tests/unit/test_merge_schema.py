"""
Unit tests for schema merging.
"""

import dataclasses

import pytest

from graphql_schema_diff import (
    FieldDefinition,
    InvalidArgumentError,
    Schema,
    TypeDefinition,
    TypeKind,
    TypeMismatchError,
    TypeRef,
    diff_schema,
    merge_schema,
    merge_type,
    render_type,
)

pytestmark = pytest.mark.unit


BASE = """
type Query { pet(id: ID!): Pet }
interface Node { id: ID! }
type Pet implements Node {
    id: ID!
    name: String
    age: Int
}
"""

EXTENSION = """
type Query { pet(id: ID!): Pet owner: Owner }
interface Named { name: String! }
type Owner { name: String }
type Pet implements Named {
    name: String!
    owner: Owner
}
"""


def _field_signatures(type_def):
    return [(f.name, render_type(f.type)) for f in type_def.fields]


def test_merge_with_none_returns_equal_independent_schema(load):
    schema = load(BASE)

    merged = merge_schema(schema, None)

    assert merged == schema
    assert merged is not schema
    assert diff_schema(schema, merged) == []


def test_merge_identical_schemas_changes_nothing(load):
    assert merge_schema(load(BASE), load(BASE)) == load(BASE)


def test_types_only_in_other_are_added(load):
    merged = merge_schema(load(BASE), load(EXTENSION))

    assert "Owner" in merged
    assert "Named" in merged
    assert "Node" in merged


def test_fields_are_unioned_with_other_winning(load):
    base, extension = load(BASE), load(EXTENSION)

    pet = merge_schema(base, extension).get_type("Pet")

    assert _field_signatures(pet) == [
        ("id", "ID!"),
        ("name", "String!"),
        ("age", "Int"),
        ("owner", "Owner"),
    ]
    assert pet.get_field("name") is extension.get_type("Pet").get_field("name")
    assert pet.get_field("age") is base.get_type("Pet").get_field("age")


def test_other_field_replaces_arguments_wholesale(load):
    this = load("type Query { pets(first: Int, after: String): [String] }")
    other = load("type Query { pets(last: Int): [String!] }")

    field = merge_schema(this, other).get_type("Query").get_field("pets")

    assert [arg.name for arg in field.args] == ["last"]
    assert render_type(field.type) == "[String!]"


def test_object_interfaces_are_unioned(load):
    pet = merge_schema(load(BASE), load(EXTENSION)).get_type("Pet")

    assert pet.interfaces == ("Node", "Named")


def test_duplicate_interfaces_are_not_repeated(load):
    pet = merge_schema(load(BASE), load(BASE)).get_type("Pet")

    assert pet.interfaces == ("Node",)


def test_union_members_are_unioned_in_order(load):
    this = load("""
        type Query { pet: Pet }
        type Cat { name: String } type Dog { name: String }
        union Pet = Cat | Dog
    """)
    other = load("""
        type Query { pet: Pet }
        type Dog { name: String } type Fish { name: String }
        union Pet = Dog | Fish
    """)

    merged = merge_schema(this, other)

    assert merged.get_type("Pet").members == ("Cat", "Dog", "Fish")
    assert "Fish" in merged


def test_input_objects_merge_like_objects(load):
    this = load("""
        type Query { pets(filter: PetFilter): String }
        input PetFilter { name: String species: String }
    """)
    other = load("""
        type Query { pets(filter: PetFilter): String }
        input PetFilter { name: String! owner: ID }
    """)

    pet_filter = merge_schema(this, other).get_type("PetFilter")

    assert pet_filter.kind is TypeKind.INPUT_OBJECT
    assert _field_signatures(pet_filter) == [
        ("name", "String!"), ("species", "String"), ("owner", "ID")
    ]


def test_enums_and_scalars_are_overwritten(load):
    this = load('type Query { c: Color d: Date } enum Color { RED BLUE } "Local" scalar Date')
    other = load('type Query { c: Color d: Date } enum Color { GREEN } "ISO" scalar Date')

    merged = merge_schema(this, other)

    assert merged.get_type("Color") is other.get_type("Color")
    assert [v.name for v in merged.get_type("Color").values] == ["GREEN"]
    assert merged.get_type("Date").description == "ISO"


def test_scalar_is_overwritten_by_other_kind():
    this = Schema([TypeDefinition("Pet", TypeKind.SCALAR)])
    pet = TypeDefinition("Pet", TypeKind.OBJECT, fields=[
        FieldDefinition("name", TypeRef.named("String"))
    ])

    merged = merge_schema(this, Schema([pet]))

    assert merged.get_type("Pet") is pet


def test_object_kind_collision_raises_type_mismatch(load):
    this = load("type Query { pet: Pet } type Pet { name: String }")
    other = load("type Query { pet: Pet } interface Pet { name: String }")

    with pytest.raises(TypeMismatchError) as excinfo:
        merge_schema(this, other)

    assert excinfo.value.type_name == "Pet"
    assert excinfo.value.this_kind == "OBJECT"
    assert excinfo.value.other_kind == "INTERFACE"


def test_union_kind_collision_raises_type_mismatch():
    this = TypeDefinition("Pet", TypeKind.UNION, members=["Cat"])
    other = TypeDefinition("Pet", TypeKind.OBJECT)

    with pytest.raises(TypeMismatchError):
        merge_type(this, other)


def test_inputs_are_not_modified(load):
    base, extension = load(BASE), load(EXTENSION)
    base_before, extension_before = dict(base.type_map), dict(extension.type_map)

    merged = merge_schema(base, extension)

    assert dict(base.type_map) == base_before
    assert dict(extension.type_map) == extension_before
    assert merged.get_type("Pet") is not base.get_type("Pet")
    assert merged.get_type("Pet") != base.get_type("Pet")


def test_definitions_cannot_be_mutated_through_the_merge_result(load):
    merged = merge_schema(load(BASE), load(EXTENSION))

    with pytest.raises(dataclasses.FrozenInstanceError):
        merged.get_type("Pet").name = "Animal"
    with pytest.raises(TypeError):
        merged.type_map["Pet"] = None


def test_wrapper_references_are_overwritten():
    this = TypeRef.list_of(TypeRef.named("Pet"))
    other = TypeRef.non_null(TypeRef.named("Pet"))

    assert merge_type(this, other) is other
    assert merge_type(this, None) is this


@pytest.mark.parametrize("other", [{}, "type Query { a: String }", 42])
def test_merge_rejects_non_schema(load, other):
    with pytest.raises(InvalidArgumentError):
        merge_schema(load(BASE), other)


def test_merge_rejects_non_schema_receiver():
    with pytest.raises(InvalidArgumentError):
        merge_schema(None, None)


def test_merge_result_takes_other_definitions_where_both_define_them(load):
    base, extension = load(BASE), load(EXTENSION)

    merged = merge_schema(base, extension)

    for type_name in extension:
        other_type = extension.get_type(type_name)
        merged_type = merged.get_type(type_name)
        for field in other_type.fields:
            assert merged_type.get_field(field.name) == field
    for type_name in base:
        if type_name not in extension:
            assert merged.get_type(type_name) == base.get_type(type_name)
