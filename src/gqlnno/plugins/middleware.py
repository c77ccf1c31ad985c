"""graphql-core middleware alternative to resolver wrapping.

Use when the schema's resolvers must stay untouched::

    mw = NonNullOptionalMiddleware(schema)
    graphql_sync(schema, source, middleware=[mw])

Argument shapes for every object field are compiled on construction.
"""

from __future__ import annotations

import logging
from typing import Any

from graphql import (
    GraphQLFieldResolver,
    GraphQLResolveInfo,
    GraphQLSchema,
    is_object_type,
)

from gqlnno.config.models import DirectiveConfig, EnforcementConfig
from gqlnno.domain.compiler import SchemaCompilationContext
from gqlnno.domain.marking import apply_directive_marks
from gqlnno.plugins.guard import ArgumentGuard

logger = logging.getLogger(__name__)


class NonNullOptionalMiddleware:
    """Reject explicit nulls on non-null-optional fields before resolving."""

    def __init__(
        self,
        schema: GraphQLSchema,
        enforcement: EnforcementConfig | None = None,
        directive: DirectiveConfig | None = None,
        *,
        apply_directives: bool = True,
    ) -> None:
        enforcement = enforcement or EnforcementConfig()
        if apply_directives:
            apply_directive_marks(schema, (directive or DirectiveConfig()).name)
        self.context = SchemaCompilationContext()
        self._guards: dict[tuple[str, str], ArgumentGuard] = {}
        for type_name, named_type in schema.type_map.items():
            if type_name.startswith("__") or not is_object_type(named_type):
                continue
            for field_name, field in named_type.fields.items():
                shape = self.context.compile_argument_shape(field.args)
                if shape is not None:
                    self._guards[(type_name, field_name)] = ArgumentGuard(shape, enforcement)
        self.context.freeze()
        logger.debug("Middleware guarding %d fields", len(self._guards))

    def guard_for(self, type_name: str, field_name: str) -> ArgumentGuard | None:
        return self._guards.get((type_name, field_name))

    def resolve(
        self,
        next_: GraphQLFieldResolver,
        root: Any,
        info: GraphQLResolveInfo,
        /,
        **args: Any,
    ) -> Any:
        guard = self._guards.get((info.parent_type.name, info.field_name))
        if guard is None:
            return next_(root, info, **args)
        return guard(next_, root, info, **args)
