"""gqlnno: optional GraphQL input fields that must never be explicit null.

Mark input fields at schema-build time, enforce at execution time::

    from gqlnno import PluginManager

    schema = build_schema(sdl)
    PluginManager().apply(schema)
"""

from gqlnno.domain.compiler import SchemaCompilationContext
from gqlnno.domain.marking import (
    NON_NULL_OPTIONAL_DIRECTIVE,
    mark_non_null_optional,
    non_null_optional_argument,
    non_null_optional_field,
)
from gqlnno.domain.outcome import ArgumentsOk, ConstraintViolation
from gqlnno.domain.validator import check_arguments, validate
from gqlnno.plugins import NonNullOptionalError, PluginManager
from gqlnno.plugins.middleware import NonNullOptionalMiddleware

__version__ = "0.1.0"

__all__ = [
    "NON_NULL_OPTIONAL_DIRECTIVE",
    "ArgumentsOk",
    "ConstraintViolation",
    "NonNullOptionalError",
    "NonNullOptionalMiddleware",
    "PluginManager",
    "SchemaCompilationContext",
    "__version__",
    "check_arguments",
    "mark_non_null_optional",
    "non_null_optional_argument",
    "non_null_optional_field",
    "validate",
]
