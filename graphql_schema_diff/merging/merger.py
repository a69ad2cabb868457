"""
Schema merge engine.

``other`` takes precedence on every name both schemas define. Model objects
are immutable, so only the object-like and union types that are actually
combined get rebuilt; every other definition is shared with its source.
"""

import logging
from dataclasses import replace
from typing import Optional, Union

from ..comparison.dispatch import KindDispatcher
from ..exceptions import InvalidArgumentError, TypeMismatchError
from ..model import OBJECT_LIKE_KINDS, Schema, TypeDefinition, TypeKind, TypeRef

logger = logging.getLogger(__name__)

type_mergers = KindDispatcher("merge")

Mergeable = Union[TypeDefinition, TypeRef]


def merge_schema(this: Schema, other: Optional[Schema] = None) -> Schema:
    """
    Merge ``other`` into ``this`` and return a new schema.

    Neither input is modified. Types only found in ``other`` are added, types
    found in both are combined according to their kind.
    """
    if not isinstance(this, Schema):
        raise InvalidArgumentError("Cannot merge a None or non-Schema object.")
    if other is None:
        return Schema(this.type_map)
    if not isinstance(other, Schema):
        raise InvalidArgumentError("Cannot merge with a non-Schema object.")

    logger.info(f"Merging schemas: {len(this)} types <- {len(other)} types")
    merged = {}
    for name, this_type in this.type_map.items():
        merged[name] = merge_type(this_type, other.get_type(name))
    for name, other_type in other.type_map.items():
        if name not in this:
            merged[name] = other_type
    result = Schema(merged)
    logger.info(f"Schema merge completed: {len(result)} types")
    return result


def merge_type(this: Mergeable, other: Optional[Mergeable] = None) -> Mergeable:
    """Merge two definitions sharing a name; ``other`` may be None."""
    if other is not None and not isinstance(other, (TypeDefinition, TypeRef)):
        raise InvalidArgumentError(
            f"Cannot merge '{getattr(this, 'name', this)}' with a non-type object."
        )
    return type_mergers(this, other)


def _check_same_kind(this: TypeDefinition, other: Mergeable) -> None:
    if getattr(other, "kind", None) is not this.kind:
        other_kind = other.kind.value if isinstance(other.kind, TypeKind) else "NAMED"
        message = (
            f"Cannot merge with different base type. "
            f"this: {this.kind.value}, other: {other_kind}."
        )
        logger.error(f"Merge failed for type '{this.name}': {message}")
        raise TypeMismatchError(message, this.name, this.kind.value, other_kind)


@type_mergers.register(TypeKind.SCALAR, TypeKind.ENUM, TypeKind.LIST, TypeKind.NON_NULL)
def overwrite_type(this: Mergeable, other: Optional[Mergeable] = None) -> Mergeable:
    """Whole-definition replacement: ``other`` when present, else ``this``."""
    return other if other is not None else this


@type_mergers.register(*OBJECT_LIKE_KINDS)
def merge_object_types(this: TypeDefinition,
                       other: Optional[TypeDefinition] = None) -> TypeDefinition:
    """
    Union of both field sets, ``other``'s field winning wholesale on a name
    clash. Objects also get the union of implemented interfaces.
    """
    if other is None:
        return this
    _check_same_kind(this, other)

    fields = this.field_map
    for other_field in other.fields:
        fields[other_field.name] = other_field
    changes = {"fields": tuple(fields.values())}
    if this.kind is TypeKind.OBJECT:
        changes["interfaces"] = tuple(dict.fromkeys(this.interfaces + other.interfaces))
    return replace(this, **changes)


@type_mergers.register(TypeKind.UNION)
def merge_union_types(this: TypeDefinition,
                      other: Optional[TypeDefinition] = None) -> TypeDefinition:
    """``this``'s members followed by the members only ``other`` has."""
    if other is None:
        return this
    _check_same_kind(this, other)
    known = set(this.members)
    members = this.members + tuple(m for m in other.members if m not in known)
    return replace(this, members=members)
