"""
Schema comparison package.
"""

from .comparator import SchemaComparator, diff_schema, diff_type
from .dispatch import KindDispatcher
from .types import Diff, DiffType, SchemaDiffReport, build_report, dedupe

__all__ = [
    "SchemaComparator",
    "SchemaDiffReport",
    "Diff",
    "DiffType",
    "KindDispatcher",
    "diff_schema",
    "diff_type",
    "build_report",
    "dedupe",
]
