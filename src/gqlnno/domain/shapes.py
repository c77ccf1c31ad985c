"""Validation shapes: the precompiled description of constrained fields.

A shape only lists the fields that carry the non-null-optional flag or
lead to one further down. An empty shape means "nothing to check below
this point". Shapes for named types may reference each other cyclically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Nested path segment -> nested map, or None at the offending field.
type ViolationMap = dict[str, ViolationMap | None]

# Cycle marker in rendered shapes. GraphQL names cannot start with "$".
RECURSIVE_MARKER = "$recursive"


@dataclass(frozen=True)
class ValidationConfig:
    """Per-field constraint flags."""

    non_null_optional: bool = False


@dataclass(eq=False)
class ValidationShape:
    """Constrained fields of one type, keyed by field name.

    Compared by identity: shapes of recursive input types contain
    themselves, so structural equality would never terminate.
    """

    fields: dict[str, ValidationField] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.fields)

    def to_dict(self, _seen: frozenset[int] = frozenset()) -> dict[str, Any]:
        """Render the shape as plain data, cutting cycles with :data:`RECURSIVE_MARKER`."""
        if id(self) in _seen:
            return {RECURSIVE_MARKER: True}
        seen = _seen | {id(self)}
        return {
            name: {
                "non_null_optional": entry.config.non_null_optional,
                "fields": entry.shape.to_dict(seen) if entry.shape else {},
            }
            for name, entry in self.fields.items()
        }


@dataclass(eq=False)
class ValidationField:
    """A nested shape paired with this field's own flags."""

    shape: ValidationShape
    config: ValidationConfig = field(default_factory=ValidationConfig)


def set_violation(violations: ViolationMap, path: list[str]) -> None:
    """Record a terminal ``None`` at *path*, creating intermediate maps."""
    node = violations
    for segment in path[:-1]:
        child = node.get(segment)
        if child is None:
            child = {}
            node[segment] = child
        node = child
    node[path[-1]] = None


def iter_violation_paths(violations: ViolationMap, prefix: tuple[str, ...] = ()) -> list[str]:
    """Flatten a violation map into dotted paths (``"args.0.a"``)."""
    paths: list[str] = []
    for segment, child in violations.items():
        current = (*prefix, segment)
        if child is None:
            paths.append(".".join(current))
        else:
            paths.extend(iter_violation_paths(child, current))
    return paths


def iter_constrained_paths(
    shape: ValidationShape,
    prefix: tuple[str, ...] = (),
    _seen: frozenset[int] = frozenset(),
) -> list[str]:
    """List dotted paths of flagged fields, visiting each shape once per branch."""
    paths: list[str] = []
    seen = _seen | {id(shape)}
    for name, entry in shape.fields.items():
        current = (*prefix, name)
        if entry.config.non_null_optional:
            paths.append(".".join(current))
        if entry.shape and id(entry.shape) not in seen:
            paths.extend(iter_constrained_paths(entry.shape, current, seen))
    return paths
