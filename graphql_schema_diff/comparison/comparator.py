"""
Schema diff engine.

Every comparison reads "this" against "other": an element only present in
``this`` was removed (breaking), an element only present in ``other`` was
added (compatible, with the exceptions noted per kind).
"""

import logging
from typing import Optional

from ..conf import DiffOptions, OptionsLike, coerce_options
from ..exceptions import InvalidArgumentError
from ..model import (
    OBJECT_LIKE_KINDS,
    EnumValueDefinition,
    FieldDefinition,
    Schema,
    TypeDefinition,
    TypeKind,
    render_field,
    render_type,
)
from .dispatch import KindDispatcher
from .types import Diff, DiffType, SchemaDiffReport, build_report, dedupe

logger = logging.getLogger(__name__)

type_comparators = KindDispatcher("diff")


def _text(value: Optional[str]) -> str:
    return "null" if value is None else f'"{value}"'


def _description_diff(this: TypeDefinition, other: TypeDefinition,
                      options: DiffOptions) -> list[Diff]:
    if this.description == other.description:
        return []
    description = (
        f"Description diff on type {this.name}. "
        f"{options.label_for_this}: `{_text(this.description)}` vs. "
        f"{options.label_for_other}: `{_text(other.description)}`."
    )
    return [Diff(this, other, DiffType.TYPE_DESCRIPTION_DIFF, description, True, path=this.name)]


def diff_schema(this: Schema, other: Schema, options: OptionsLike = None) -> list[Diff]:
    """
    Report every difference between two schemas.

    Args:
        this: The schema clients were built against
        other: The schema being checked
        options: ``DiffOptions`` or a mapping of its fields

    Returns:
        The list of differences, empty for structurally identical schemas
    """
    if not isinstance(this, Schema) or not isinstance(other, Schema):
        raise InvalidArgumentError("Cannot diff with None or non-Schema object.")
    options = coerce_options(options).for_schema()
    logger.info(
        f"Diffing schemas: {options.label_for_this} ({len(this)} types) -> "
        f"{options.label_for_other} ({len(other)} types)"
    )

    diffs: list[Diff] = []
    for name, this_type in this.type_map.items():
        diffs.extend(diff_type(this_type, other.get_type(name), options))
    for name, other_type in other.type_map.items():
        if name not in this:
            description = f"Type missing from {options.label_for_this}: `{name}`."
            diffs.append(Diff(None, other_type, DiffType.TYPE_MISSING, description, True, path=name))

    if options.deduplicate:
        diffs = dedupe(diffs)
    logger.info(
        f"Schema diff completed: {len(diffs)} differences, "
        f"{sum(1 for d in diffs if not d.backward_compatible)} breaking"
    )
    return diffs


def diff_type(this: TypeDefinition, other: Optional[TypeDefinition],
              options: OptionsLike = None) -> list[Diff]:
    """Diff two type definitions, ``other`` may be None when it is missing."""
    if not isinstance(this, TypeDefinition):
        raise InvalidArgumentError("Cannot diff a None or non-TypeDefinition object.")
    if other is not None and not isinstance(other, TypeDefinition):
        raise InvalidArgumentError(
            f"Cannot diff type '{this.name}' with a non-TypeDefinition object.", this.name
        )
    options = coerce_options(options).for_type()
    common = common_type_diffs(this, other, options)
    if common is not None:
        return common
    return type_comparators(this, other, options)


def common_type_diffs(this: TypeDefinition, other: Optional[TypeDefinition],
                      options: DiffOptions) -> Optional[list[Diff]]:
    """Checks shared by every kind; a match ends the comparison of the pair."""
    if other is None:
        description = f"Type missing from {options.label_for_other}: `{this.name}`."
        return [Diff(this, None, DiffType.TYPE_MISSING, description, False, path=this.name)]
    if this.kind != other.kind:
        description = (
            f"Type mismatch: {options.label_for_this}: `{this.name}: {this.kind.value}` vs. "
            f"{options.label_for_other}: `{other.name}: {other.kind.value}`."
        )
        return [Diff(this, other, DiffType.BASE_TYPE_DIFF, description, True, path=this.name)]
    if this.name != other.name:
        description = (
            f"Type name difference. {options.label_for_this}: `{this.name}` vs. "
            f"{options.label_for_other}: `{other.name}`."
        )
        return [Diff(this, other, DiffType.TYPE_NAME_DIFF, description, True, path=this.name)]
    return None


@type_comparators.register(TypeKind.SCALAR)
def diff_scalar_types(this: TypeDefinition, other: TypeDefinition,
                      options: DiffOptions) -> list[Diff]:
    return _description_diff(this, other, options)


@type_comparators.register(TypeKind.ENUM)
def diff_enum_types(this: TypeDefinition, other: TypeDefinition,
                    options: DiffOptions) -> list[Diff]:
    diffs = diff_enum_values(this, other, options)
    diffs.extend(_description_diff(this, other, options))
    return dedupe(diffs)


def deprecation_status(value: EnumValueDefinition) -> str:
    if value.is_deprecated:
        return f"is deprecated ({value.deprecation_reason})"
    return "is not deprecated"


def diff_enum_values(this: TypeDefinition, other: TypeDefinition,
                     options: DiffOptions) -> list[Diff]:
    diffs = []
    this_values, other_values = this.value_map, other.value_map
    for name, this_value in this_values.items():
        path = f"{this.name}.{name}"
        other_value = other_values.get(name)
        if other_value is None:
            description = f"Enum value missing from {options.label_for_other}: `{path}`."
            diffs.append(Diff(this, other, DiffType.ENUM_DIFF, description, False, path=path))
            continue
        if this_value.description != other_value.description:
            description = (
                f"Description diff on enum value {path}. "
                f"{options.label_for_this}: `{_text(this_value.description)}` vs. "
                f"{options.label_for_other}: `{_text(other_value.description)}`."
            )
            diffs.append(Diff(this, other, DiffType.ENUM_DIFF, description, True, path=path))
        this_status, other_status = deprecation_status(this_value), deprecation_status(other_value)
        if this_status != other_status:
            description = (
                f"Deprecation diff on enum value {path}. "
                f"{options.label_for_this}: `{this_status}` vs. "
                f"{options.label_for_other}: `{other_status}`."
            )
            diffs.append(Diff(this, other, DiffType.ENUM_DIFF, description, True, path=path))
    for name in other_values:
        if name not in this_values:
            path = f"{this.name}.{name}"
            description = f"Enum value missing from {options.label_for_this}: `{path}`."
            diffs.append(Diff(this, other, DiffType.ENUM_DIFF, description, True, path=path))
    return diffs


@type_comparators.register(TypeKind.UNION)
def diff_union_types(this: TypeDefinition, other: TypeDefinition,
                     options: DiffOptions) -> list[Diff]:
    diffs = _description_diff(this, other, options)
    this_members = " | ".join(sorted(this.members))
    other_members = " | ".join(sorted(other.members))
    if this_members != other_members:
        # Growth that keeps the sorted member string intact counts as compatible
        backward_compatible = this_members in other_members
        description = (
            f"Difference in union type {this.name}. "
            f"{options.label_for_this}: `{this_members}` vs. "
            f"{options.label_for_other}: `{other_members}`."
        )
        diffs.append(Diff(this, other, DiffType.UNION_TYPE_DIFF, description,
                          backward_compatible, path=this.name))
    return diffs


@type_comparators.register(*OBJECT_LIKE_KINDS)
def diff_object_types(this: TypeDefinition, other: TypeDefinition,
                      options: DiffOptions) -> list[Diff]:
    diffs = diff_fields(this, other, options)
    diffs.extend(_description_diff(this, other, options))
    if this.kind is TypeKind.OBJECT:
        diffs.extend(diff_interfaces(this, other, options))
    return diffs


def diff_fields(this: TypeDefinition, other: TypeDefinition,
                options: DiffOptions) -> list[Diff]:
    diffs = []
    this_fields, other_fields = this.field_map, other.field_map
    for name, this_field in this_fields.items():
        path = f"{this.name}.{name}"
        other_field = other_fields.get(name)
        if other_field is None:
            description = (
                f"Field missing from {options.label_for_other}: "
                f"`{this.name}.{render_field(this_field)}`."
            )
            diffs.append(Diff(this, other, DiffType.FIELD_MISSING, description, False,
                              path=path, this_field=this_field))
            continue
        this_sig, other_sig = render_type(this_field.type), render_type(other_field.type)
        if this_sig != other_sig:
            # Only dropping non-null from the output type keeps clients working
            backward_compatible = this_sig == other_sig + "!"
            description = (
                f"Field type changed on field {path} from `\"{this_sig}\"` to `\"{other_sig}\"`."
            )
            diffs.append(Diff(this, other, DiffType.FIELD_DIFF, description, backward_compatible,
                              path=path, this_field=this_field, other_field=other_field))
        if this_field.description != other_field.description:
            description = (
                f"Description diff on field {path}. "
                f"{options.label_for_this}: `{_text(this_field.description)}` vs. "
                f"{options.label_for_other}: `{_text(other_field.description)}`."
            )
            diffs.append(Diff(this, other, DiffType.FIELD_DESCRIPTION_DIFF, description, True,
                              path=path, this_field=this_field, other_field=other_field))
        if this.kind is not TypeKind.INPUT_OBJECT:
            # Input fields take no arguments
            diffs.extend(diff_arguments(this, other, this_field, other_field, options))
            diffs.extend(diff_arg_descriptions(this, other, this_field, other_field, options))
    for name, other_field in other_fields.items():
        if name not in this_fields:
            description = (
                f"Field missing from {options.label_for_this}: "
                f"`{this.name}.{render_field(other_field)}`."
            )
            diffs.append(Diff(this, other, DiffType.FIELD_MISSING, description, True,
                              path=f"{this.name}.{name}", other_field=other_field))
    return diffs


def diff_arguments(this: TypeDefinition, other: TypeDefinition,
                   this_field: FieldDefinition, other_field: FieldDefinition,
                   options: DiffOptions) -> list[Diff]:
    diffs = []
    field_path = f"{this.name}.{this_field.name}"
    this_args = {arg.name: render_type(arg.type) for arg in this_field.args}
    other_args = {arg.name: render_type(arg.type) for arg in other_field.args}
    for name, this_sig in this_args.items():
        path = f"{field_path}({name})"
        if name not in other_args:
            description = (
                f"Argument missing from {options.label_for_other}: "
                f"`{field_path}({name}: {this_sig})`."
            )
            diffs.append(Diff(this, other, DiffType.ARG_DIFF, description, False, path=path,
                              this_field=this_field, other_field=other_field))
        elif other_args[name] != this_sig:
            description = (
                f"Argument type diff on field {field_path}. "
                f"{options.label_for_this}: `{name}: {this_sig}` vs. "
                f"{options.label_for_other}: `{name}: {other_args[name]}`."
            )
            diffs.append(Diff(this, other, DiffType.ARG_DIFF, description, False, path=path,
                              this_field=this_field, other_field=other_field))
    for name, other_sig in other_args.items():
        if name not in this_args:
            # TODO: classify a new non-null argument without a default as breaking
            description = (
                f"Argument missing from {options.label_for_this}: "
                f"`{field_path}({name}: {other_sig})`."
            )
            diffs.append(Diff(this, other, DiffType.ARG_DIFF, description, True,
                              path=f"{field_path}({name})",
                              this_field=this_field, other_field=other_field))
    return diffs


def diff_arg_descriptions(this: TypeDefinition, other: TypeDefinition,
                          this_field: FieldDefinition, other_field: FieldDefinition,
                          options: DiffOptions) -> list[Diff]:
    diffs = []
    this_args = this_field.arg_map
    for other_arg in other_field.args:
        this_arg = this_args.get(other_arg.name)
        if this_arg is None or this_arg.description == other_arg.description:
            continue
        path = f"{this.name}.{this_field.name}({other_arg.name})"
        description = (
            f"Description diff on argument {path}. "
            f"{options.label_for_this}: `{_text(this_arg.description)}` vs. "
            f"{options.label_for_other}: `{_text(other_arg.description)}`."
        )
        diffs.append(Diff(this, other, DiffType.ARG_DESCRIPTION_DIFF, description, True,
                          path=path, this_field=this_field, other_field=other_field))
    return diffs


def diff_interfaces(this: TypeDefinition, other: TypeDefinition,
                    options: DiffOptions) -> list[Diff]:
    """Compare implemented interfaces by name in both directions."""
    diffs = []
    for name in this.interfaces:
        if name not in other.interfaces:
            description = (
                f"Interface missing from {options.label_for_other}: "
                f"`{this.name} implements {name}`."
            )
            diffs.append(Diff(this, other, DiffType.INTERFACE_DIFF, description, False,
                              path=this.name))
    for name in other.interfaces:
        if name not in this.interfaces:
            description = (
                f"Interface missing from {options.label_for_this}: "
                f"`{this.name} implements {name}`."
            )
            diffs.append(Diff(this, other, DiffType.INTERFACE_DIFF, description, False,
                              path=this.name))
    return diffs


class SchemaComparator:
    """
    Diffs two schemas and wraps the result in a ``SchemaDiffReport``.
    """

    def __init__(self, options: OptionsLike = None):
        self.options = coerce_options(options)
        self.logger = logging.getLogger(__name__)

    def compare_schemas(self, this: Schema, other: Schema) -> SchemaDiffReport:
        options = self.options.for_schema()
        diffs = diff_schema(this, other, options)
        report = build_report(diffs, options.label_for_this, options.label_for_other)
        if not report.is_backward_compatible:
            self.logger.warning(
                f"{options.label_for_other} has {report.breaking_changes} breaking "
                f"change(s) against {options.label_for_this}"
            )
        return report
