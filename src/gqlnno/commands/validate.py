"""Command: check an argument payload against a field's constraints."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from gqlnno.commands._base import GqlnnoCommand

if TYPE_CHECKING:
    from gqlnno.commands._context import AppContext


@click.command(
    cls=GqlnnoCommand,
    examples="""\
  gqlnno validate schema.graphql Mutation.updateUser --args '{"input": {"name": null}}'
  gqlnno validate schema.graphql Mutation.updateUser --args-file payload.json
  gqlnno --json validate schema.graphql Query.search --args '{}'""",
)
@click.argument("schema_path", type=click.Path(path_type=Path))
@click.argument("coordinate")
@click.option("--args", "args_json", default=None, help="Arguments as a JSON object.")
@click.option(
    "--args-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read arguments from a JSON file.",
)
@click.pass_obj
def validate(
    app: AppContext,
    schema_path: Path,
    coordinate: str,
    args_json: str | None,
    args_file: Path | None,
) -> None:
    """Validate arguments for COORDINATE (Type.field) in SCHEMA_PATH."""
    from gqlnno.services.schema import SchemaService

    if args_json is not None and args_file is not None:
        raise click.UsageError("Use either --args or --args-file, not both.")
    raw = args_file.read_text(encoding="utf-8") if args_file else (args_json or "{}")
    try:
        args: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Invalid JSON: {exc}", param_hint="--args") from exc

    app.emit(SchemaService(app.settings).validate(schema_path, coordinate, args))
