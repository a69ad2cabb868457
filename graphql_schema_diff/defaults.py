"""
Library default settings for graphql-schema-diff.

These values are the lowest priority layer of configuration. They are
overridden by the ``GRAPHQL_SCHEMA_DIFF`` Django setting and then by
explicit ``DiffOptions`` values passed to a call.
"""

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "graphql-schema-diff"

SETTINGS_NAME = "GRAPHQL_SCHEMA_DIFF"

LIBRARY_DEFAULTS: dict[str, Any] = {
    # Labels substituted into diff descriptions for root (schema) calls
    "label_for_this_schema": "this schema",
    "label_for_other_schema": "other schema",
    # Labels used when a single type pair is diffed directly
    "label_for_this_type": "this type",
    "label_for_other_type": "other type",
    # Drop records sharing (diff_type, description) from schema results
    "deduplicate": True,
    # Keep __Schema, __Type and friends when loading graphql-core schemas
    "include_introspection_types": False,
}


def get_default_settings() -> dict[str, Any]:
    """Return a shallow copy of the library defaults."""
    return LIBRARY_DEFAULTS.copy()


def merge_settings(*settings_dicts: dict[str, Any]) -> dict[str, Any]:
    """Merge settings dictionaries, later dictionaries override earlier ones."""
    result: dict[str, Any] = {}
    for settings_dict in settings_dicts:
        if settings_dict:
            result.update(settings_dict)
    return result
