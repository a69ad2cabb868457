"""
GraphQL schema diff and merge.

Compares two versions of a GraphQL type graph, classifying every difference
as backward compatible or breaking, and merges two type graphs with the
second one taking precedence on conflicts.
"""

from .comparison import (
    Diff,
    DiffType,
    SchemaComparator,
    SchemaDiffReport,
    build_report,
    diff_schema,
    diff_type,
)
from .conf import DiffOptions
from .defaults import LIBRARY_VERSION as __version__
from .documentation import render_markdown_report
from .exceptions import InvalidArgumentError, SchemaDiffError, TypeMismatchError
from .introspection import SchemaLoader, load_schema, parse_type_ref
from .merging import merge_schema, merge_type
from .model import (
    ArgumentDefinition,
    EnumValueDefinition,
    FieldDefinition,
    Schema,
    TypeDefinition,
    TypeKind,
    TypeRef,
    render_field,
    render_type,
)

__all__ = [
    'diff_schema',
    'diff_type',
    'merge_schema',
    'merge_type',
    'load_schema',
    'parse_type_ref',
    'SchemaLoader',
    'SchemaComparator',
    'SchemaDiffReport',
    'build_report',
    'render_markdown_report',
    'Diff',
    'DiffType',
    'DiffOptions',
    'Schema',
    'TypeDefinition',
    'FieldDefinition',
    'ArgumentDefinition',
    'EnumValueDefinition',
    'TypeKind',
    'TypeRef',
    'render_type',
    'render_field',
    'SchemaDiffError',
    'InvalidArgumentError',
    'TypeMismatchError',
]
