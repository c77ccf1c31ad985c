"""Subcommand modules for gqlnno.

Provides register_commands() which uses deferred imports to keep
``gqlnno --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from gqlnno.commands.shapes import shapes
    from gqlnno.commands.validate import validate

    cli.add_command(shapes)
    cli.add_command(validate)
