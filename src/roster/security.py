"""Password hashing capability."""

from __future__ import annotations

from typing import Protocol

import bcrypt

from .logging import get_logger

logger = get_logger(__name__)

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class PasswordHasher(Protocol):
    """One-way password hashing interface."""

    def hash(self, plain: str) -> str:
        """Return a salted one-way hash of ``plain``."""
        ...

    def verify(self, plain: str, hashed: str) -> bool:
        """Return True if ``plain`` matches ``hashed``."""
        ...


class BcryptHasher:
    """bcrypt implementation of :class:`PasswordHasher`."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    @staticmethod
    def _encode(plain: str) -> bytes:
        return plain.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, plain: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(plain), salt).decode("utf-8")

    def verify(self, plain: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(plain), hashed.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False
