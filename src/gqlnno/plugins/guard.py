"""Argument guard: the resolver middleware enforcing one field's shape."""

from __future__ import annotations

import logging
from typing import Any

from graphql import GraphQLFieldResolver, GraphQLResolveInfo

from gqlnno.config.models import EnforcementConfig
from gqlnno.domain.outcome import ConstraintViolation
from gqlnno.domain.shapes import ValidationShape
from gqlnno.domain.validator import check_arguments
from gqlnno.plugins.errors import NonNullOptionalError

logger = logging.getLogger(__name__)


class ArgumentGuard:
    """Runs before a field's resolver and rejects forbidden nulls.

    Follows graphql-core's middleware calling convention
    ``(next_, source, info, /, **args)`` so it can be composed around a
    resolver or invoked from a middleware object.
    """

    def __init__(self, shape: ValidationShape, config: EnforcementConfig | None = None) -> None:
        self.shape = shape
        self.config = config or EnforcementConfig()

    def __call__(
        self,
        next_: GraphQLFieldResolver,
        source: Any,
        info: GraphQLResolveInfo,
        /,
        **args: Any,
    ) -> Any:
        outcome = check_arguments(args, self.shape, root=self.config.root_segment)
        if isinstance(outcome, ConstraintViolation):
            logger.debug(
                "Rejected %s.%s: null on non-null-optional %s",
                info.parent_type.name,
                info.field_name,
                ", ".join(outcome.paths),
            )
            raise NonNullOptionalError(
                outcome,
                message=self.config.error_message,
                code=self.config.error_code,
            )
        return next_(source, info, **args)
