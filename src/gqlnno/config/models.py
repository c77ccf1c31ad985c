"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gqlnno.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class EnforcementConfig(BaseModel):
    """[enforcement] section: how violations are reported."""

    model_config = {"frozen": True}

    root_segment: str = "args"
    error_message: str = "following arguments violated nonNullOptional constraint"
    error_code: str = "NON_NULL_OPTIONAL"


class DirectiveConfig(BaseModel):
    """[directive] section: SDL directive carrying the flag."""

    model_config = {"frozen": True}

    name: str = "nonNullOptional"
