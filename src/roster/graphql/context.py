"""Access to the per-request GraphQL context."""

from __future__ import annotations

from typing import Any

import strawberry

from ..security import PasswordHasher
from ..store import Store


def get_store(info: strawberry.Info) -> Store:
    """Return the store handle the app placed in the GraphQL context."""
    context: dict[str, Any] = info.context
    return context["store"]


def get_hasher(info: strawberry.Info) -> PasswordHasher:
    """Return the password hasher the app placed in the GraphQL context."""
    context: dict[str, Any] = info.context
    return context["hasher"]
