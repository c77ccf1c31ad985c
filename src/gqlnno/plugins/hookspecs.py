"""Pluggy hook specifications for schema preparation.

Hooks run in three phases while :meth:`PluginManager.apply` prepares a
graphql-core schema: ``prepare_schema`` (write field metadata),
``create_field_middleware`` (once per object field), ``schema_prepared``
(end of the build phase).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pluggy
from graphql import GraphQLField, GraphQLSchema

hookspec = pluggy.HookspecMarker("gqlnno")

# (next_, source, info, /, **args) -> result. Fixed parameters are
# positional-only; field arguments arrive as keywords under any name.
type FieldMiddleware = Callable[..., Any]


class GqlnnoHookSpec:
    """Hook specifications for the gqlnno plugin system."""

    @hookspec
    def prepare_schema(self, schema: GraphQLSchema) -> None:
        """Called first; plugins attach metadata to input fields and arguments."""

    @hookspec
    def create_field_middleware(
        self,
        type_name: str,
        field_name: str,
        field: GraphQLField,
    ) -> FieldMiddleware | None:
        """Return a middleware to run before *field*'s resolver, or None."""

    @hookspec
    def schema_prepared(self, schema: GraphQLSchema) -> None:
        """Called after every resolver has been wrapped."""
