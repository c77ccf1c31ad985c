"""Rich Console factory and theme for gqlnno output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GQLNNO_THEME = Theme(
    {
        "gqlnno.ok": "bold green",
        "gqlnno.error": "bold red",
        "gqlnno.op": "bold cyan",
        "gqlnno.key": "dim",
        "gqlnno.coordinate": "bold blue",
        "gqlnno.path": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=GQLNNO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
