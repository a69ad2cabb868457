"""
Build the immutable schema model from graphql-core or graphene schemas.

SDL parsing, validation and name resolution are left to graphql-core; this
module only walks the resolved type map.
"""

import logging
from typing import Any, Optional

import graphene
from graphql import (
    GraphQLNamedType,
    GraphQLSchema,
    build_schema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)
from graphql.language import ListTypeNode, NonNullTypeNode, TypeNode, parse_type, print_ast
from graphql.pyutils import Undefined
from graphql.utilities import ast_from_value

from ..conf import get_setting
from ..exceptions import InvalidArgumentError
from ..model import (
    ArgumentDefinition,
    EnumValueDefinition,
    FieldDefinition,
    Schema,
    TypeDefinition,
    TypeKind,
    TypeRef,
)

logger = logging.getLogger(__name__)


def type_ref_from_graphql(type_: Any) -> TypeRef:
    """Convert a graphql-core type (possibly wrapped) to a ``TypeRef``."""
    if is_non_null_type(type_):
        return TypeRef.non_null(type_ref_from_graphql(type_.of_type))
    if is_list_type(type_):
        return TypeRef.list_of(type_ref_from_graphql(type_.of_type))
    return TypeRef.named(type_.name)


def type_ref_from_ast(node: TypeNode) -> TypeRef:
    if isinstance(node, NonNullTypeNode):
        return TypeRef.non_null(type_ref_from_ast(node.type))
    if isinstance(node, ListTypeNode):
        return TypeRef.list_of(type_ref_from_ast(node.type))
    return TypeRef.named(node.name.value)


def parse_type_ref(source: str) -> TypeRef:
    """Parse GraphQL type syntax such as ``[Pet!]!``."""
    return type_ref_from_ast(parse_type(source))


def _print_default(value: Any, type_: Any) -> Optional[str]:
    if value is Undefined:
        return None
    node = ast_from_value(value, type_)
    return print_ast(node) if node is not None else None


class SchemaLoader:
    """
    Converts a graphql-core ``GraphQLSchema`` into a ``Schema``.
    """

    def __init__(self, include_introspection_types: Optional[bool] = None):
        if include_introspection_types is None:
            include_introspection_types = bool(
                get_setting("include_introspection_types", False)
            )
        self.include_introspection_types = include_introspection_types
        self.logger = logging.getLogger(__name__)

    def load(self, source: Any) -> Schema:
        """
        Load a schema from a ``GraphQLSchema``, a ``graphene.Schema`` or SDL text.
        """
        if isinstance(source, Schema):
            return source
        if isinstance(source, str):
            source = build_schema(source)
        elif isinstance(source, graphene.Schema):
            source = source.graphql_schema
        if not isinstance(source, GraphQLSchema):
            raise InvalidArgumentError(
                f"Cannot load a schema from {type(source).__name__}"
            )

        types = []
        for name, named_type in source.type_map.items():
            if is_introspection_type(named_type) and not self.include_introspection_types:
                continue
            types.append(self.convert_type(named_type))
        self.logger.debug(f"Loaded {len(types)} types")
        return Schema(types)

    def convert_type(self, named_type: GraphQLNamedType) -> TypeDefinition:
        name, description = named_type.name, named_type.description
        if is_scalar_type(named_type):
            return TypeDefinition(name, TypeKind.SCALAR, description)
        if is_object_type(named_type):
            return TypeDefinition(
                name, TypeKind.OBJECT, description,
                fields=self._convert_fields(named_type),
                interfaces=[interface.name for interface in named_type.interfaces],
            )
        if is_interface_type(named_type):
            return TypeDefinition(
                name, TypeKind.INTERFACE, description,
                fields=self._convert_fields(named_type),
            )
        if is_input_object_type(named_type):
            return TypeDefinition(
                name, TypeKind.INPUT_OBJECT, description,
                fields=[
                    FieldDefinition(
                        field_name, type_ref_from_graphql(input_field.type),
                        input_field.description,
                    )
                    for field_name, input_field in named_type.fields.items()
                ],
            )
        if is_enum_type(named_type):
            return TypeDefinition(
                name, TypeKind.ENUM, description,
                values=[
                    EnumValueDefinition(
                        value_name,
                        value=enum_value.value,
                        description=enum_value.description,
                        is_deprecated=enum_value.deprecation_reason is not None,
                        deprecation_reason=enum_value.deprecation_reason,
                    )
                    for value_name, enum_value in named_type.values.items()
                ],
            )
        if is_union_type(named_type):
            return TypeDefinition(
                name, TypeKind.UNION, description,
                members=[member.name for member in named_type.types],
            )
        raise InvalidArgumentError(f"Unsupported GraphQL type '{name}'", name)

    def _convert_fields(self, named_type: Any) -> list[FieldDefinition]:
        return [
            FieldDefinition(
                field_name,
                type_ref_from_graphql(field.type),
                field.description,
                args=[
                    ArgumentDefinition(
                        arg_name,
                        type_ref_from_graphql(arg.type),
                        arg.description,
                        _print_default(arg.default_value, arg.type),
                    )
                    for arg_name, arg in field.args.items()
                ],
            )
            for field_name, field in named_type.fields.items()
        ]


def load_schema(source: Any, include_introspection_types: Optional[bool] = None) -> Schema:
    """Shortcut for ``SchemaLoader(...).load(source)``."""
    return SchemaLoader(include_introspection_types).load(source)
