"""In-process store for tests and local development."""

from __future__ import annotations

import copy
from datetime import UTC, datetime

from bson import ObjectId

from ..errors import AlreadyExists
from ..logging import get_logger
from .base import USER_UNIQUE_FIELDS, Document, Predicate, matches

logger = get_logger(__name__)


class MemoryCollection:
    """Dict-backed collection that mirrors the MongoDB adapter's behaviour."""

    def __init__(self, name: str, unique_fields: tuple[str, ...] = ()):
        self.name = name
        self.unique_fields = unique_fields
        self._documents: dict[str, Document] = {}

    async def find_one(self, predicate: Predicate) -> Document | None:
        for document in self._documents.values():
            if matches(document, predicate):
                return copy.deepcopy(document)
        return None

    async def find_by_id(self, id: str) -> Document | None:
        document = self._documents.get(id)
        return copy.deepcopy(document) if document is not None else None

    async def find(self, predicate: Predicate | None = None) -> list[Document]:
        return [
            copy.deepcopy(document)
            for document in self._documents.values()
            if matches(document, predicate)
        ]

    async def insert(self, document: Document) -> Document:
        collisions = [
            field
            for field in self.unique_fields
            if any(existing.get(field) == document.get(field) for existing in self._documents.values())
        ]
        if collisions:
            raise AlreadyExists(f"Duplicate value in {self.name}", collisions)

        now = datetime.now(UTC)
        stored = copy.deepcopy(document)
        stored["_id"] = str(ObjectId())
        stored.setdefault("created_at", now)
        stored.setdefault("updated_at", now)
        self._documents[stored["_id"]] = stored

        logger.debug("Inserted document", collection=self.name, id=stored["_id"])
        return copy.deepcopy(stored)

    async def update_by_id(self, id: str, fields: Document) -> Document | None:
        stored = self._documents.get(id)
        if stored is None:
            return None

        stored.update(copy.deepcopy(fields))
        stored["updated_at"] = datetime.now(UTC)
        return copy.deepcopy(stored)

    async def delete_by_id(self, id: str) -> bool:
        return self._documents.pop(id, None) is not None


class MemoryStore:
    """Store whose collections live in process memory."""

    def __init__(self):
        self.users = MemoryCollection("users", unique_fields=USER_UNIQUE_FIELDS)
        self.employees = MemoryCollection("employees")

    async def connect(self) -> None:
        logger.info("Using in-memory store")

    async def close(self) -> None:
        pass

    async def ping(self) -> tuple[bool, str | None]:
        return True, None
