"""Value validator: walk argument values against a validation shape.

The walk is driven by the shape: keys the shape does not describe are
never visited, so cost tracks constraint density rather than payload size.
Absence is never a violation; only an explicit ``None`` on a flagged field is.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gqlnno.domain.outcome import ArgumentsOk, ArgumentsOutcome, ConstraintViolation
from gqlnno.domain.shapes import ValidationShape, ViolationMap, set_violation
from gqlnno.domain.values import ValueKind, classify, keyed_items

DEFAULT_ROOT_SEGMENT = "args"


def validate(
    value: Any,
    shape: ValidationShape | None,
    path: list[str],
    violations: ViolationMap,
) -> None:
    """Accumulate violations found under *value* into *violations*.

    Never raises. The value tree is finite and acyclic, so the walk
    terminates even when *shape* is cyclic.
    """
    if not shape:
        return
    kind = classify(value)
    if kind is ValueKind.SEQUENCE:
        for index, item in enumerate(value):
            validate(item, shape, [*path, str(index)], violations)
    elif kind is ValueKind.KEYED:
        for key, sub_value in keyed_items(value).items():
            entry = shape.fields.get(key)
            if entry is None:
                continue
            sub_path = [*path, key]
            if sub_value is None and entry.config.non_null_optional:
                set_violation(violations, sub_path)
            validate(sub_value, entry.shape, sub_path, violations)


def check_arguments(
    args: Mapping[str, Any],
    shape: ValidationShape | None,
    *,
    root: str = DEFAULT_ROOT_SEGMENT,
) -> ArgumentsOutcome:
    """Validate an operation's arguments, rooted at the *root* path segment."""
    violations: ViolationMap = {}
    validate(args, shape, [root], violations)
    if violations:
        return ConstraintViolation.from_map(violations)
    return ArgumentsOk(args=args)
