"""Plugin discovery, loading, and schema preparation.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
The built-in non-null-optional plugin is registered on construction.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import pluggy
from graphql import (
    GraphQLFieldResolver,
    GraphQLResolveInfo,
    GraphQLSchema,
    default_field_resolver,
    is_object_type,
)

from gqlnno.plugins.hookspecs import FieldMiddleware, GqlnnoHookSpec

if TYPE_CHECKING:
    from gqlnno.config.settings import GqlnnoSettings

PROJECT_NAME = "gqlnno"
ENTRY_POINT_GROUP = "gqlnno.plugins"

logger = logging.getLogger(__name__)


def compose_resolver(
    middlewares: Sequence[FieldMiddleware],
    resolve: GraphQLFieldResolver,
) -> GraphQLFieldResolver:
    """Wrap *resolve* so *middlewares* run first, outermost first."""
    for middleware in reversed(middlewares):
        resolve = _bind(middleware, resolve)
    return resolve


def _bind(middleware: FieldMiddleware, next_: GraphQLFieldResolver) -> GraphQLFieldResolver:
    def resolver(source: Any, info: GraphQLResolveInfo, /, **args: Any) -> Any:
        return middleware(next_, source, info, **args)

    return resolver


class PluginManager:
    """Manages plugin discovery, loading, and schema preparation."""

    def __init__(
        self,
        settings: GqlnnoSettings | None = None,
        *,
        register_builtins: bool = True,
    ) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(GqlnnoHookSpec)
        self._settings = settings
        self._loaded: bool = False
        if register_builtins:
            self._register_builtins()

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``gqlnno.plugins`` entry point group.

        Returns a list of registered plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugin(self, name: str) -> object | None:
        return self._pm.get_plugin(name)

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Schema preparation
    # ------------------------------------------------------------------

    def apply(self, schema: GraphQLSchema) -> GraphQLSchema:
        """Run every plugin over *schema* and wrap field resolvers in place.

        Introspection types are skipped. Fields without middleware keep
        their original resolver untouched.
        """
        self.hook.prepare_schema(schema=schema)
        wrapped = 0
        for type_name, named_type in schema.type_map.items():
            if type_name.startswith("__") or not is_object_type(named_type):
                continue
            for field_name, field in named_type.fields.items():
                # pluggy calls the last registered plugin first
                middlewares = self.hook.create_field_middleware(
                    type_name=type_name,
                    field_name=field_name,
                    field=field,
                )
                if not middlewares:
                    continue
                field.resolve = compose_resolver(
                    list(reversed(middlewares)),
                    field.resolve or default_field_resolver,
                )
                wrapped += 1
        self.hook.schema_prepared(schema=schema)
        logger.debug("Prepared schema: %d field resolvers wrapped", wrapped)
        return schema

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _register_builtins(self) -> None:
        from gqlnno.plugins.builtins.non_null_optional import NonNullOptionalPlugin

        plugin = NonNullOptionalPlugin.from_settings(self._settings)
        self.register_plugin(plugin, name=NonNullOptionalPlugin.name)

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("gqlnno")`` sets a ``gqlnno_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "gqlnno_impl", None):
                return True
        return False
