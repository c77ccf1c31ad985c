"""The single request-facing error kind raised by argument enforcement."""

from __future__ import annotations

from typing import Any

from graphql import GraphQLError

from gqlnno.domain.outcome import ConstraintViolation


class NonNullOptionalError(GraphQLError):
    """An operation received explicit nulls on non-null-optional fields.

    The message embeds the JSON violation map; the same map is exposed
    under ``extensions["violations"]`` for structured clients.
    """

    def __init__(
        self,
        violation: ConstraintViolation,
        *,
        message: str,
        code: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{message}: {violation.violations_json()}",
            extensions={"code": code, "violations": violation.violations},
            **kwargs,
        )
        self.violation = violation
