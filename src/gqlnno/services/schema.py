"""SchemaService: inspect SDL schemas and check argument payloads.

Backs the ``shapes`` and ``validate`` commands. Schemas are prepared with
the same :class:`PluginManager` an application would use, so the CLI
reports exactly what the runtime guard enforces.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from graphql import GraphQLError, GraphQLSchema, build_schema, is_object_type

from gqlnno.config.settings import GqlnnoSettings
from gqlnno.domain.outcome import ConstraintViolation
from gqlnno.domain.shapes import iter_constrained_paths
from gqlnno.domain.validator import check_arguments
from gqlnno.plugins.builtins.non_null_optional import NonNullOptionalPlugin
from gqlnno.plugins.manager import PluginManager
from gqlnno.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class SchemaLoadError(Exception):
    """Raised when an SDL file cannot be read or built."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class SchemaService:
    """Operations over a single SDL schema file."""

    def __init__(self, settings: GqlnnoSettings | None = None) -> None:
        self._settings = settings or GqlnnoSettings()

    def load_schema(self, path: Path) -> GraphQLSchema:
        """Build a schema from *path*, declaring the directive if the SDL omits it."""
        if not path.is_file():
            raise SchemaLoadError("SCHEMA_NOT_FOUND", f"Schema file not found: {path}")
        name = self._settings.directive.name
        try:
            sdl = path.read_text(encoding="utf-8")
            if not re.search(rf"directive\s+@{re.escape(name)}\b", sdl):
                sdl = f"directive @{name} on INPUT_FIELD_DEFINITION | ARGUMENT_DEFINITION\n\n{sdl}"
            return build_schema(sdl)
        except (GraphQLError, TypeError, UnicodeDecodeError) as exc:
            raise SchemaLoadError("INVALID_SCHEMA", f"Invalid schema {path}: {exc}") from exc

    def prepare(self, schema: GraphQLSchema) -> NonNullOptionalPlugin:
        """Run the plugin manager over *schema*; return the built-in plugin."""
        manager = PluginManager(self._settings)
        manager.apply(schema)
        plugin = manager.get_plugin(NonNullOptionalPlugin.name)
        assert isinstance(plugin, NonNullOptionalPlugin)
        return plugin

    def shapes(self, path: Path) -> ServiceResult:
        """List every operation field whose arguments carry a constraint."""
        try:
            schema = self.load_schema(path)
        except SchemaLoadError as exc:
            return _failure("shapes", exc.code, exc.message)

        plugin = self.prepare(schema)
        root = self._settings.enforcement.root_segment
        items: list[dict[str, Any]] = []
        for (type_name, field_name), shape in sorted(plugin.shapes.items()):
            items.append(
                {
                    "coordinate": f"{type_name}.{field_name}",
                    "paths": iter_constrained_paths(shape, (root,)),
                    "shape": shape.to_dict(),
                }
            )
        return ServiceResult(
            ok=True,
            op="shapes",
            data={"count": len(items), "items": items},
            meta={
                "types_compiled": plugin.context.stats.compiled,
                "cache_hits": plugin.context.stats.hits,
            },
        )

    def validate(self, path: Path, coordinate: str, args: Any) -> ServiceResult:
        """Check an argument payload for the field at *coordinate* (``Type.field``)."""
        try:
            schema = self.load_schema(path)
        except SchemaLoadError as exc:
            return _failure("validate", exc.code, exc.message)

        type_name, _, field_name = coordinate.partition(".")
        named_type = schema.get_type(type_name)
        if (
            not field_name
            or not is_object_type(named_type)
            or field_name not in named_type.fields
        ):
            return _failure("validate", "FIELD_NOT_FOUND", f"No such field: {coordinate}")
        if not isinstance(args, dict):
            return _failure("validate", "INVALID_ARGS", "Arguments must be a JSON object")

        plugin = self.prepare(schema)
        shape = plugin.shapes.get((type_name, field_name))
        if shape is None:
            return ServiceResult(
                ok=True,
                op="validate",
                data={"coordinate": coordinate, "checked": False},
            )

        enforcement = self._settings.enforcement
        outcome = check_arguments(args, shape, root=enforcement.root_segment)
        if isinstance(outcome, ConstraintViolation):
            logger.debug("Payload for %s violates %s", coordinate, outcome.paths)
            return _failure(
                "validate",
                enforcement.error_code,
                f"{enforcement.error_message}: {outcome.violations_json()}",
                detail={"violations": outcome.violations, "paths": outcome.paths},
            )
        return ServiceResult(
            ok=True,
            op="validate",
            data={"coordinate": coordinate, "checked": True},
        )


def _failure(
    op: str, code: str, message: str, *, detail: dict[str, Any] | None = None
) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail or {}),
    )
