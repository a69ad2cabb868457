"""
Custom exceptions for schema diffing and merging.

Only two failure modes reach callers: a malformed top-level call and a
merge between same-named types of incompatible kinds. Every other
irregularity is reported as a diff record or resolved by merge precedence.
"""

from typing import Optional


class SchemaDiffError(Exception):
    """Base exception for schema diff and merge errors."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        self.type_name = type_name
        super().__init__(message)


class InvalidArgumentError(SchemaDiffError, TypeError):
    """Raised when an operation receives an absent or wrong-typed argument."""


class TypeMismatchError(SchemaDiffError, TypeError):
    """Raised when two same-named types of different kinds are merged."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        this_kind: Optional[str] = None,
        other_kind: Optional[str] = None,
    ):
        self.this_kind = this_kind
        self.other_kind = other_kind
        super().__init__(message, type_name)
