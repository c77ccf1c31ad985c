"""Value classification for argument trees.

graphql-core coerces arguments into plain Python data: omitted keys are
missing from the dict (or carry ``Undefined``), an explicit ``null`` is
``None`` and lists are lists. Input objects are dicts, or instances of
the type's ``out_type`` when one is declared. Each node is classified
once so the validator dispatches on an explicit tag.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from graphql import Undefined


class ValueKind(StrEnum):
    """How the validator treats an argument value node."""

    ABSENT = "absent"
    SEQUENCE = "sequence"
    KEYED = "keyed"
    SCALAR = "scalar"


def classify(value: Any) -> ValueKind:
    """Return the kind of *value*. ``None`` is a scalar (the null marker)."""
    if value is Undefined:
        return ValueKind.ABSENT
    if isinstance(value, Mapping):
        return ValueKind.KEYED
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if hasattr(value, "__dict__"):
        return ValueKind.KEYED
    return ValueKind.SCALAR


def keyed_items(value: Any) -> Mapping[str, Any]:
    """Key view of a KEYED value: the mapping itself or the object's attributes."""
    if isinstance(value, Mapping):
        return value
    return vars(value)
