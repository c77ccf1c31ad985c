"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). The formatter layer adapts ServiceResult to the requested mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from gqlnno.output.renderers import render_result

if TYPE_CHECKING:
    from gqlnno.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags forwarded from the CLI context."""

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=settings.verbose)
