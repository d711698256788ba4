"""Typed errors raised by the resolution layer and the persistence adapters.

Each error carries an ``extensions`` dict. graphql-core copies the
``extensions`` of the original exception onto the GraphQL error it reports,
so clients receive ``extensions.code`` (and ``extensions.fields`` where the
error concerns specific arguments) without any extra wiring.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class RosterError(Exception):
    """Base class for all expected, client-visible failures."""

    code = "INTERNAL"

    def __init__(self, message: str, fields: Sequence[str] | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else []

    @property
    def extensions(self) -> dict[str, Any]:
        extensions: dict[str, Any] = {"code": self.code}
        if self.fields:
            extensions["fields"] = list(self.fields)
        return extensions


class InvalidArgument(RosterError):
    """Client-supplied data failed a validation rule."""

    code = "INVALID_ARGUMENT"

    def __init__(self, message: str, fields: Sequence[str]):
        super().__init__(message, fields)


class NotFound(RosterError):
    """A lookup by identifier found nothing where absence is an error."""

    code = "NOT_FOUND"


class AlreadyExists(RosterError):
    """A uniqueness constraint would be violated."""

    code = "ALREADY_EXISTS"


class InvalidCredential(RosterError):
    """The supplied password does not match the stored hash."""

    code = "INVALID_CREDENTIAL"


class AdapterUnavailable(RosterError):
    """The persistence layer is unreachable or failed."""

    code = "ADAPTER_UNAVAILABLE"
