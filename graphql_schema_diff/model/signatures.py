"""
Canonical string rendering of type references and field signatures.

Two type references are considered equal when their renderings are equal,
so these strings double as comparison keys and as diff message fragments.
"""

from .types import ArgumentDefinition, FieldDefinition, TypeKind, TypeRef


def render_type(type_ref: TypeRef) -> str:
    """Render ``TypeRef`` as GraphQL type syntax, e.g. ``[Foo!]!``."""
    if type_ref.kind is TypeKind.NON_NULL:
        return f"{render_type(type_ref.of_type)}!"
    if type_ref.kind is TypeKind.LIST:
        return f"[{render_type(type_ref.of_type)}]"
    return type_ref.name


def render_argument(arg: ArgumentDefinition) -> str:
    rendered = f"{arg.name}: {render_type(arg.type)}"
    if arg.default_value is not None:
        rendered += f" = {arg.default_value}"
    return rendered


def render_arguments(field: FieldDefinition) -> str:
    """Render ``(a: T = d, b: U)``; empty string for a field without arguments."""
    if not field.args:
        return ""
    return "(" + ", ".join(render_argument(arg) for arg in field.args) + ")"


def render_field(field: FieldDefinition) -> str:
    """Render ``name(args): Type``."""
    return f"{field.name}{render_arguments(field)}: {render_type(field.type)}"
