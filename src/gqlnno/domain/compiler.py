"""Shape compiler: derive validation shapes from graphql-core input types.

Shapes are memoized per named type inside a :class:`SchemaCompilationContext`.
The context belongs to the schema-build phase: it is populated while the
schema is prepared, then frozen and only read while requests execute, so
no locking is needed as long as preparation finishes before traffic starts.

Recursive input types are handled by inserting a type's (still empty)
shape into the cache before its fields are compiled. A field that leads
back into a type still being compiled is kept provisionally; when the
outermost ``compile`` call returns, provisional entries that never reach
a flagged field are pruned so every final shape stays minimal.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from graphql import (
    GraphQLArgument,
    GraphQLInputType,
    get_named_type,
    is_input_object_type,
)

from gqlnno.domain.marking import is_non_null_optional
from gqlnno.domain.shapes import ValidationConfig, ValidationField, ValidationShape

logger = logging.getLogger(__name__)


class ContextFrozenError(RuntimeError):
    """Raised when a frozen context is asked to compile an unseen type."""


@dataclass
class CompilationStats:
    """Counters for one compilation context."""

    compiled: int = 0
    hits: int = 0


class SchemaCompilationContext:
    """Owns the per-named-type shape cache for one schema build.

    Usage::

        ctx = SchemaCompilationContext()
        shape = ctx.compile_argument_shape(field.args)
        ...
        ctx.freeze()
    """

    def __init__(self) -> None:
        self._cache: dict[str, ValidationShape] = {}
        self._in_progress: set[str] = set()
        self._pending: list[ValidationShape] = []
        self._frozen = False
        self.stats = CompilationStats()

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def shapes(self) -> Mapping[str, ValidationShape]:
        """Read-only view of the compiled shapes keyed by type name."""
        return MappingProxyType(self._cache)

    def freeze(self) -> None:
        """End the build phase. Later cache misses raise ContextFrozenError."""
        self._frozen = True
        logger.debug(
            "Froze compilation context: %d types compiled, %d cache hits",
            self.stats.compiled,
            self.stats.hits,
        )

    def compile(self, type_: GraphQLInputType) -> ValidationShape:
        """Return the validation shape of *type_*.

        List and non-null wrappers are unwrapped first, so the result is
        the cached shape of the innermost named type. Compiling the same
        named type twice returns the identical object.
        """
        try:
            return self._compile(type_)
        finally:
            if not self._in_progress:
                self._prune()

    def compile_argument_shape(
        self, args: Mapping[str, GraphQLArgument] | None
    ) -> ValidationShape | None:
        """Build the shape of an operation's argument set.

        Returns None when no argument leads to a constrained field, which
        tells the caller to skip validation for the operation entirely.
        """
        if not args:
            return None
        fields: dict[str, ValidationField] = {}
        for name, arg in args.items():
            nested = self.compile(arg.type)
            flagged = is_non_null_optional(arg)
            if flagged or nested:
                fields[arg.out_name or name] = ValidationField(
                    shape=nested, config=ValidationConfig(non_null_optional=flagged)
                )
        if not fields:
            return None
        return ValidationShape(fields=fields)

    def _compile(self, type_: GraphQLInputType) -> ValidationShape:
        named = get_named_type(type_)
        cached = self._cache.get(named.name)
        if cached is not None:
            self.stats.hits += 1
            return cached
        if self._frozen:
            msg = f"Cannot compile {named.name!r}: compilation context is frozen"
            raise ContextFrozenError(msg)

        shape = ValidationShape()
        self._cache[named.name] = shape
        self.stats.compiled += 1
        if not is_input_object_type(named):
            return shape

        self._in_progress.add(named.name)
        self._pending.append(shape)
        try:
            for field_name, field in named.fields.items():
                nested = self._compile(field.type)
                flagged = is_non_null_optional(field)
                recursing = get_named_type(field.type).name in self._in_progress
                if flagged or nested or recursing:
                    shape.fields[field.out_name or field_name] = ValidationField(
                        shape=nested, config=ValidationConfig(non_null_optional=flagged)
                    )
        finally:
            self._in_progress.discard(named.name)
        return shape

    def _prune(self) -> None:
        """Drop provisional entries that never reach a flagged field."""
        if not self._pending:
            return
        pending_ids = {id(shape) for shape in self._pending}
        live: set[int] = set()

        def is_live(shape: ValidationShape) -> bool:
            if id(shape) in pending_ids:
                return id(shape) in live
            return bool(shape)

        changed = True
        while changed:
            changed = False
            for shape in self._pending:
                if id(shape) in live:
                    continue
                if any(
                    entry.config.non_null_optional or is_live(entry.shape)
                    for entry in shape.fields.values()
                ):
                    live.add(id(shape))
                    changed = True

        for shape in self._pending:
            shape.fields = {
                name: entry
                for name, entry in shape.fields.items()
                if entry.config.non_null_optional or is_live(entry.shape)
            }
        self._pending.clear()
