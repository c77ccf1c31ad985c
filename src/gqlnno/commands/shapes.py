"""Command: list operation fields guarded by non-null-optional arguments."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from gqlnno.commands._base import GqlnnoCommand

if TYPE_CHECKING:
    from gqlnno.commands._context import AppContext


@click.command(
    cls=GqlnnoCommand,
    examples="""\
  gqlnno shapes schema.graphql
  gqlnno --json shapes schema.graphql
  gqlnno -v shapes schema.graphql""",
)
@click.argument("schema_path", type=click.Path(path_type=Path))
@click.pass_obj
def shapes(app: AppContext, schema_path: Path) -> None:
    """Compile argument shapes and list constrained paths per field."""
    from gqlnno.services.schema import SchemaService

    app.emit(SchemaService(app.settings).shapes(schema_path))
