"""Built-in plugin enforcing non-null-optional input fields.

Schema phase: copies ``@nonNullOptional`` directive usage into field
extensions, then compiles one argument shape per object field. Fields
whose arguments reach no flagged field get no middleware at all.
Each schema gets its own compilation context, frozen once preparation ends.
Execution phase: an :class:`ArgumentGuard` rejects explicit nulls before
the real resolver runs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pluggy
from graphql import GraphQLField, GraphQLSchema

from gqlnno.config.models import DirectiveConfig, EnforcementConfig
from gqlnno.domain.compiler import SchemaCompilationContext
from gqlnno.domain.marking import apply_directive_marks
from gqlnno.domain.shapes import ValidationShape
from gqlnno.plugins.guard import ArgumentGuard

if TYPE_CHECKING:
    from gqlnno.config.settings import GqlnnoSettings

hookimpl = pluggy.HookimplMarker("gqlnno")

logger = logging.getLogger(__name__)


class NonNullOptionalPlugin:
    """Add option to enforce non null values on optional fields."""

    name = "non-null-optional-field"

    def __init__(
        self,
        enforcement: EnforcementConfig | None = None,
        directive: DirectiveConfig | None = None,
    ) -> None:
        self.enforcement = enforcement or EnforcementConfig()
        self.directive = directive or DirectiveConfig()
        self.context = SchemaCompilationContext()
        self.shapes: dict[tuple[str, str], ValidationShape] = {}

    @classmethod
    def from_settings(cls, settings: GqlnnoSettings | None) -> NonNullOptionalPlugin:
        if settings is None:
            return cls()
        return cls(enforcement=settings.enforcement, directive=settings.directive)

    @hookimpl
    def prepare_schema(self, schema: GraphQLSchema) -> None:
        self.context = SchemaCompilationContext()
        self.shapes = {}
        marked = apply_directive_marks(schema, self.directive.name)
        logger.debug("Marked %d definitions from @%s", marked, self.directive.name)

    @hookimpl
    def create_field_middleware(
        self,
        type_name: str,
        field_name: str,
        field: GraphQLField,
    ) -> ArgumentGuard | None:
        shape = self.context.compile_argument_shape(field.args)
        if shape is None:
            return None
        self.shapes[(type_name, field_name)] = shape
        return ArgumentGuard(shape, self.enforcement)

    @hookimpl
    def schema_prepared(self, schema: GraphQLSchema) -> None:
        self.context.freeze()
        logger.debug("Guarding %d fields", len(self.shapes))
