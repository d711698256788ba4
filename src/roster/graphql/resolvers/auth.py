from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from ...errors import AlreadyExists, InvalidArgument, InvalidCredential, NotFound
from ...logging import bind_username, get_logger
from ...security import PasswordHasher
from ...store import Document, Store
from ...store.base import or_predicate
from ..validators import is_absent, require_email, require_non_empty, require_password

if TYPE_CHECKING:
    from ..types.user import User

logger = get_logger(__name__)


def _to_user(document: Document) -> User:
    from ..types.user import User as UserType

    return UserType(
        username=document["username"],
        email=document["email"],
        created_at=document.get("created_at"),
        updated_at=document.get("updated_at"),
    )


async def login(
    store: Store,
    hasher: PasswordHasher,
    username: str | None,
    email: str | None,
    password: str | None,
) -> User:
    """
    Authenticate a user by username or email and password.

    Only the identifiers actually supplied take part in the lookup.
    """
    if is_absent(username) and is_absent(email):
        raise InvalidArgument("Either username or email is required", ["username", "email"])
    if not password:
        raise InvalidArgument("password is required", ["password"])

    predicate = or_predicate(
        username=None if is_absent(username) else username.strip(),
        email=None if is_absent(email) else email.strip(),
    )
    user = await store.users.find_one(predicate)
    if user is None:
        logger.info("Login for unknown user", username=username, email=email)
        raise NotFound("User not found")

    if not await asyncio.to_thread(hasher.verify, password, user["password"]):
        logger.info("Login with invalid credentials", username=user["username"])
        raise InvalidCredential("Invalid credentials")

    bind_username(user["username"])
    logger.info("User logged in", username=user["username"])
    return _to_user(user)


async def signup(
    store: Store,
    hasher: PasswordHasher,
    username: str | None,
    email: str | None,
    password: str | None,
) -> User:
    """
    Register a new user.

    Validation stops at the first failing field, checked in the order
    username, email, email format, password length. Username and email are
    stored with surrounding whitespace removed.
    """
    username = require_non_empty(username, "username")
    email = require_email(email, "email")
    password = require_password(password, "password")

    existing = await store.users.find_one(or_predicate(username=username, email=email))
    if existing is not None:
        clashes = [
            field for field, value in (("username", username), ("email", email)) if existing.get(field) == value
        ]
        logger.info("Signup for existing user", fields=clashes)
        raise AlreadyExists("User already exists", clashes)

    hashed = await asyncio.to_thread(hasher.hash, password)
    user = await store.users.insert({"username": username, "email": email, "password": hashed})

    bind_username(user["username"])
    logger.info("User signed up", username=user["username"])
    return _to_user(user)
