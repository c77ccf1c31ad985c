"""Shared pytest fixtures and test helpers for gqlnno tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from graphql import GraphQLSchema, build_schema

SCHEMA_SDL = """\
directive @nonNullOptional on INPUT_FIELD_DEFINITION | ARGUMENT_DEFINITION

input Item {
  a: String @nonNullOptional
  b: String
}

input Inner {
  inner: String @nonNullOptional
  note: String
}

input Outer {
  outer: Inner
  label: String
}

input Node {
  value: String @nonNullOptional
  children: [Node!]
  parent: Node
}

input Plain {
  x: String
  self: Plain
}

type Thing {
  id: ID!
  echo: String
}

type Query {
  thing(id: ID!): Thing
  search(term: String @nonNullOptional, limit: Int): Thing
  plain(filter: Plain): Thing
}

type Mutation {
  setItem(item: Item): Thing
  setItems(items: [Item!]): Thing
  setInner(outer: Inner): Thing
  setOuter(wrapper: Outer): Thing
  setNode(node: Node!): Thing
}
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def schema() -> GraphQLSchema:
    """A freshly built SDL schema; preparation mutates it, so never share."""
    return build_schema(SCHEMA_SDL)


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    """The test schema written to a temporary ``.graphql`` file."""
    path = tmp_path / "schema.graphql"
    path.write_text(SCHEMA_SDL, encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory so no gqlnno.toml or env override leaks in."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GQLNNO_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class Recorder:
    """Root-value resolver that records the arguments it was called with."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def __call__(self, _info: Any, **args: Any) -> dict[str, Any]:
        self.calls.append(args)
        return {"id": str(len(self.calls)), "echo": repr(args)}
