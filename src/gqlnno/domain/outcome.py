"""Result types returned by argument validation.

Validation never raises: it returns either :class:`ArgumentsOk` carrying
the original arguments or :class:`ConstraintViolation` carrying every
violation found in one pass. The calling layer decides how to surface it.
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from gqlnno.domain.shapes import ViolationMap, iter_violation_paths


class ArgumentsOk(BaseModel):
    """Arguments satisfied every constraint; ``args`` is the untouched input."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    args: Any


class ConstraintViolation(BaseModel):
    """One or more fields supplied an explicit null where it is forbidden."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    violations: dict[str, Any]

    @property
    def paths(self) -> list[str]:
        """Dotted violation paths, e.g. ``["args.0.a"]``."""
        return iter_violation_paths(self.violations)

    def violations_json(self) -> str:
        """Compact JSON of the violation map, as embedded in error messages."""
        return json.dumps(self.violations, separators=(",", ":"))

    @classmethod
    def from_map(cls, violations: ViolationMap) -> ConstraintViolation:
        return cls(violations=violations)


type ArgumentsOutcome = ArgumentsOk | ConstraintViolation
