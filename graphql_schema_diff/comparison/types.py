"""
Type definitions for schema comparison.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from ..model import FieldDefinition, TypeDefinition


class DiffType(str, Enum):
    """Kinds of differences reported between two schemas."""
    TYPE_MISSING = "TypeMissing"
    TYPE_NAME_DIFF = "TypeNameDiff"
    BASE_TYPE_DIFF = "BaseTypeDiff"
    TYPE_DESCRIPTION_DIFF = "TypeDescriptionDiff"
    FIELD_MISSING = "FieldMissing"
    FIELD_DIFF = "FieldDiff"
    FIELD_DESCRIPTION_DIFF = "FieldDescriptionDiff"
    ARG_DIFF = "ArgDiff"
    ARG_DESCRIPTION_DIFF = "ArgDescriptionDiff"
    ENUM_DIFF = "EnumDiff"
    UNION_TYPE_DIFF = "UnionTypeDiff"
    INTERFACE_DIFF = "InterfaceDiff"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class Diff:
    """
    A single difference between two schema elements.

    ``this_type`` and ``other_type`` are the two type definitions that were
    compared; either may be None when the type is missing on that side.
    Two diffs are equal when they share ``diff_type`` and ``description``.
    """
    this_type: Optional[TypeDefinition]
    other_type: Optional[TypeDefinition]
    diff_type: DiffType
    description: str
    backward_compatible: bool
    path: Optional[str] = None
    this_field: Optional[FieldDefinition] = None
    other_field: Optional[FieldDefinition] = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.diff_type.value, self.description)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diff):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f'[diffType={self.diff_type.value}, description="{self.description}"]'

    def to_dict(self) -> dict[str, Any]:
        return {
            'diff_type': self.diff_type.value,
            'path': self.path,
            'description': self.description,
            'backward_compatible': self.backward_compatible,
        }


def dedupe(diffs: list[Diff]) -> list[Diff]:
    """Drop repeated ``(diff_type, description)`` records, keeping first occurrences."""
    seen = set()
    unique = []
    for diff in diffs:
        if diff.key in seen:
            continue
        seen.add(diff.key)
        unique.append(diff)
    return unique


@dataclass
class SchemaDiffReport:
    """Result of comparing two schemas."""
    this_schema_name: str
    other_schema_name: str
    comparison_date: datetime = field(default_factory=datetime.now)
    diffs: list[Diff] = field(default_factory=list)

    @property
    def total_changes(self) -> int:
        return len(self.diffs)

    @property
    def breaking_changes(self) -> int:
        return len(self.get_breaking_changes())

    @property
    def non_breaking_changes(self) -> int:
        return self.total_changes - self.breaking_changes

    @property
    def is_backward_compatible(self) -> bool:
        return self.breaking_changes == 0

    @property
    def compatibility_score(self) -> float:
        """Share of non-breaking changes; 1.0 when nothing changed."""
        if not self.diffs:
            return 1.0
        return self.non_breaking_changes / self.total_changes

    def get_breaking_changes(self) -> list[Diff]:
        return [d for d in self.diffs if not d.backward_compatible]

    def get_changes_by_type(self, diff_type: DiffType) -> list[Diff]:
        return [d for d in self.diffs if d.diff_type == diff_type]

    def to_dict(self) -> dict[str, Any]:
        return {
            'this_schema_name': self.this_schema_name,
            'other_schema_name': self.other_schema_name,
            'comparison_date': self.comparison_date.isoformat(),
            'summary': {
                'total_changes': self.total_changes,
                'breaking_changes': self.breaking_changes,
                'non_breaking_changes': self.non_breaking_changes,
                'backward_compatible': self.is_backward_compatible,
                'compatibility_score': self.compatibility_score,
            },
            'changes': [d.to_dict() for d in self.diffs],
        }


def build_report(diffs: list[Diff], this_schema_name: str = "this schema",
                 other_schema_name: str = "other schema") -> SchemaDiffReport:
    return SchemaDiffReport(
        this_schema_name=this_schema_name,
        other_schema_name=other_schema_name,
        diffs=list(diffs),
    )
