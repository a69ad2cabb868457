import pytest
from graphql import build_schema

from graphql_schema_diff import load_schema


@pytest.fixture
def load():
    """Build a ``Schema`` from SDL text through graphql-core."""

    def _load(sdl: str):
        return load_schema(build_schema(sdl))

    return _load
