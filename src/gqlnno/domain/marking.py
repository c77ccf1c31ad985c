"""Constraint flag storage on graphql-core field definitions.

The flag lives in the field's ``extensions`` mapping so it survives into
the finalized schema. SDL-first schemas declare it with the
``@nonNullOptional`` directive instead; :func:`apply_directive_marks`
copies directive usage into extensions after ``build_schema``.
"""

from __future__ import annotations

from typing import Any

from graphql import (
    DirectiveLocation,
    GraphQLArgument,
    GraphQLDirective,
    GraphQLInputField,
    GraphQLInputType,
    GraphQLSchema,
    is_input_object_type,
    is_interface_type,
    is_object_type,
)

EXTENSION_KEY = "non_null_optional"
DIRECTIVE_NAME = "nonNullOptional"

NON_NULL_OPTIONAL_DIRECTIVE = GraphQLDirective(
    name=DIRECTIVE_NAME,
    locations=[
        DirectiveLocation.INPUT_FIELD_DEFINITION,
        DirectiveLocation.ARGUMENT_DEFINITION,
    ],
    description="Enforce to be non null value but optional (undefined)",
)

NON_NULL_OPTIONAL_SDL = (
    f"directive @{DIRECTIVE_NAME} on INPUT_FIELD_DEFINITION | ARGUMENT_DEFINITION"
)

type Markable = GraphQLInputField | GraphQLArgument


def is_non_null_optional(field: Markable) -> bool:
    """Whether *field* carries the non-null-optional flag."""
    extensions = field.extensions or {}
    return bool(extensions.get(EXTENSION_KEY))


def mark_non_null_optional[F: (GraphQLInputField, GraphQLArgument)](
    field: F, value: bool = True
) -> F:
    """Write the flag into *field*'s extensions and return the field.

    Existing extension entries are preserved; the mapping is replaced
    rather than mutated because graphql-core may share it between copies.
    """
    field.extensions = {**(field.extensions or {}), EXTENSION_KEY: value}
    return field


def non_null_optional_field(
    type_: GraphQLInputType,
    *,
    description: str | None = None,
    extensions: dict[str, Any] | None = None,
    **kwargs: Any,
) -> GraphQLInputField:
    """Construct an input field that may be omitted but never be ``null``."""
    return GraphQLInputField(
        type_,
        description=description,
        extensions={**(extensions or {}), EXTENSION_KEY: True},
        **kwargs,
    )


def non_null_optional_argument(
    type_: GraphQLInputType,
    *,
    description: str | None = None,
    extensions: dict[str, Any] | None = None,
    **kwargs: Any,
) -> GraphQLArgument:
    """Construct an argument that may be omitted but never be ``null``."""
    return GraphQLArgument(
        type_,
        description=description,
        extensions={**(extensions or {}), EXTENSION_KEY: True},
        **kwargs,
    )


def _has_directive(field: Markable, directive_name: str) -> bool:
    node = field.ast_node
    if node is None or not node.directives:
        return False
    return any(directive.name.value == directive_name for directive in node.directives)


def apply_directive_marks(schema: GraphQLSchema, directive_name: str = DIRECTIVE_NAME) -> int:
    """Mark every input field and argument annotated with *directive_name*.

    Returns the number of definitions marked.
    """
    marked = 0
    for named_type in schema.type_map.values():
        if is_input_object_type(named_type):
            for field in named_type.fields.values():
                if _has_directive(field, directive_name):
                    mark_non_null_optional(field)
                    marked += 1
        elif is_object_type(named_type) or is_interface_type(named_type):
            for field in named_type.fields.values():
                for arg in field.args.values():
                    if _has_directive(arg, directive_name):
                        mark_non_null_optional(arg)
                        marked += 1
    return marked
