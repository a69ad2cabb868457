"""
Configuration management for graphql-schema-diff.

Settings are resolved in the following order:
1. Explicit ``DiffOptions`` values passed to a call
2. The ``GRAPHQL_SCHEMA_DIFF`` dict in Django settings, when configured
3. Library defaults (``LIBRARY_DEFAULTS``)

Nothing here is mutated at runtime; resolved options are passed down the
call tree explicitly.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .defaults import LIBRARY_DEFAULTS, SETTINGS_NAME, merge_settings
from .exceptions import InvalidArgumentError


def _get_django_settings() -> dict[str, Any]:
    """Return the project-level overrides, or an empty dict outside Django."""
    try:
        value = getattr(settings, SETTINGS_NAME, None)
    except ImproperlyConfigured:
        return {}
    return dict(value) if isinstance(value, Mapping) else {}


def get_settings() -> dict[str, Any]:
    """Return library defaults merged with the Django overrides."""
    return merge_settings(LIBRARY_DEFAULTS, _get_django_settings())


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a single setting value with hierarchical resolution.

    Args:
        key: Setting key to retrieve
        default: Value returned when neither Django nor the library defines it

    Returns:
        The setting value from the highest priority source
    """
    value = get_settings().get(key)
    return default if value is None else value


@dataclass(frozen=True)
class DiffOptions:
    """Options recognized by the diff operations."""

    label_for_this: Optional[str] = None
    label_for_other: Optional[str] = None
    deduplicate: Optional[bool] = None

    def for_schema(self) -> "DiffOptions":
        """Fill unset values with the schema-level defaults."""
        return self._resolve("label_for_this_schema", "label_for_other_schema")

    def for_type(self) -> "DiffOptions":
        """Fill unset values with the type-level defaults."""
        return self._resolve("label_for_this_type", "label_for_other_type")

    def _resolve(self, this_key: str, other_key: str) -> "DiffOptions":
        configured = get_settings()
        deduplicate = self.deduplicate
        if deduplicate is None:
            deduplicate = bool(configured.get("deduplicate", True))
        return DiffOptions(
            label_for_this=self.label_for_this or configured.get(this_key) or LIBRARY_DEFAULTS[this_key],
            label_for_other=self.label_for_other or configured.get(other_key) or LIBRARY_DEFAULTS[other_key],
            deduplicate=deduplicate,
        )


OptionsLike = Union[DiffOptions, Mapping[str, Any], None]


def coerce_options(options: OptionsLike) -> DiffOptions:
    """Accept ``None``, a ``DiffOptions`` or a plain mapping of its fields."""
    if options is None:
        return DiffOptions()
    if isinstance(options, DiffOptions):
        return options
    if isinstance(options, Mapping):
        unknown = set(options) - set(DiffOptions.__dataclass_fields__)
        if unknown:
            raise InvalidArgumentError(
                f"Unknown diff option(s): {', '.join(sorted(unknown))}"
            )
        return DiffOptions(**options)
    raise InvalidArgumentError(
        f"Diff options must be a DiffOptions or a mapping, got {type(options).__name__}"
    )
