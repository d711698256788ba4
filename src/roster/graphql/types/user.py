"""
User GraphQL type definitions
"""

from datetime import datetime

import strawberry


@strawberry.type
class User:
    """User type for GraphQL API.

    The stored password hash is intentionally not part of this type.
    """

    username: str
    email: str
    created_at: datetime | None
    updated_at: datetime | None
