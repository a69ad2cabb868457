"""
Unit tests for settings resolution.
"""

import pytest

from graphql_schema_diff import DiffOptions, InvalidArgumentError, diff_schema, load_schema
from graphql_schema_diff.conf import coerce_options, get_setting
from graphql_schema_diff.defaults import LIBRARY_DEFAULTS, get_default_settings

pytestmark = pytest.mark.unit


def test_library_defaults_apply_without_overrides():
    assert get_setting("label_for_this_schema") == "this schema"
    assert get_setting("missing_key", "fallback") == "fallback"
    assert get_default_settings() == LIBRARY_DEFAULTS
    assert get_default_settings() is not LIBRARY_DEFAULTS


def test_django_settings_override_defaults(settings):
    settings.GRAPHQL_SCHEMA_DIFF = {"label_for_this_schema": "production"}

    resolved = DiffOptions().for_schema()

    assert resolved.label_for_this == "production"
    assert resolved.label_for_other == "other schema"
    assert resolved.deduplicate is True


def test_explicit_options_override_django_settings(settings):
    settings.GRAPHQL_SCHEMA_DIFF = {"label_for_this_type": "left"}

    assert DiffOptions(label_for_this="mine").for_type().label_for_this == "mine"
    assert DiffOptions().for_type().label_for_this == "left"


def test_schema_labels_propagate_to_type_level():
    resolved = DiffOptions().for_schema().for_type()

    assert resolved.label_for_this == "this schema"
    assert resolved.label_for_other == "other schema"


def test_deduplicate_setting_is_honoured(settings):
    settings.GRAPHQL_SCHEMA_DIFF = {"deduplicate": False}

    assert DiffOptions().for_schema().deduplicate is False
    assert DiffOptions(deduplicate=True).for_schema().deduplicate is True


def test_labels_from_settings_reach_descriptions(settings):
    settings.GRAPHQL_SCHEMA_DIFF = {
        "label_for_this_schema": "v1",
        "label_for_other_schema": "v2",
    }

    diffs = diff_schema(
        load_schema("type Query { a: String b: String }"),
        load_schema("type Query { a: String }"),
    )

    assert [d.description for d in diffs] == ["Field missing from v2: `Query.b: String`."]


def test_include_introspection_types_setting(settings):
    settings.GRAPHQL_SCHEMA_DIFF = {"include_introspection_types": True}

    assert "__Schema" in load_schema("type Query { a: String }")


def test_non_mapping_setting_is_ignored(settings):
    settings.GRAPHQL_SCHEMA_DIFF = "not a dict"

    assert get_setting("label_for_other_type") == "other type"


def test_coerce_options_rejects_other_types():
    with pytest.raises(InvalidArgumentError):
        coerce_options(["label_for_this"])
