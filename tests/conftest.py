"""Shared fixtures for tests."""

import asyncio
from pathlib import Path

import pytest

from strictref.schema.loader import parse_schema_from_string
from strictref.graph.builder import build_graph


class FakeModel:
    """Queryable model over a fixed set of ids that records every lookup."""

    def __init__(self, model_name, ids=(), fail_on=(), delays=None):
        self.model_name = model_name
        self.ids = set(ids)
        self.fail_on = set(fail_on)
        self.delays = delays or {}
        self.lookups = []

    async def find_by_id(self, identifier):
        self.lookups.append(identifier)
        await asyncio.sleep(self.delays.get(identifier, 0))
        if identifier in self.fail_on:
            raise ValueError(f"Cast to ObjectId failed for value {identifier!r}")
        return {"_id": identifier} if identifier in self.ids else None


@pytest.fixture
def make_model():
    """Return a factory for FakeModel instances."""
    return FakeModel


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def minimal_schema_yaml() -> str:
    """Return a minimal schema with one strict reference."""
    return """
models:
  Image:
    fields:
      url: string

  Profile:
    fields:
      username: string
      image: {ref: Image, strict: true}
"""


@pytest.fixture
def band_schema_yaml() -> str:
    """Return a schema with optional and strict array references."""
    return """
models:
  User:
    fields:
      role: string

  Band:
    fields:
      lead: {ref: User}
      members: [{ref: User, strict: true}]
"""


@pytest.fixture
def minimal_schema(minimal_schema_yaml):
    """Return the parsed minimal schema."""
    return parse_schema_from_string(minimal_schema_yaml)


@pytest.fixture
def band_schema(band_schema_yaml):
    """Return the parsed band schema."""
    return parse_schema_from_string(band_schema_yaml)


@pytest.fixture
def minimal_graph(minimal_schema):
    """Return a graph built from the minimal schema."""
    return build_graph(minimal_schema)
