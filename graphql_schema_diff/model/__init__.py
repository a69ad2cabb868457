"""
Schema model package.
"""

from .signatures import render_arguments, render_field, render_type
from .types import (
    OBJECT_LIKE_KINDS,
    ArgumentDefinition,
    EnumValueDefinition,
    FieldDefinition,
    Schema,
    TypeDefinition,
    TypeKind,
    TypeRef,
)

__all__ = [
    "OBJECT_LIKE_KINDS",
    "Schema",
    "TypeDefinition",
    "FieldDefinition",
    "ArgumentDefinition",
    "EnumValueDefinition",
    "TypeKind",
    "TypeRef",
    "render_type",
    "render_arguments",
    "render_field",
]
