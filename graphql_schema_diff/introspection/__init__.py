"""
Schema loading from graphql-core and graphene schemas.
"""

from .loader import SchemaLoader, load_schema, parse_type_ref, type_ref_from_graphql

__all__ = [
    "SchemaLoader",
    "load_schema",
    "parse_type_ref",
    "type_ref_from_graphql",
]
