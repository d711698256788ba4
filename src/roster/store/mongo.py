"""MongoDB store built on the pymongo async client."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, date, datetime, time
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import AsyncMongoClient, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..errors import AdapterUnavailable, AlreadyExists
from ..logging import get_logger
from .base import USER_UNIQUE_FIELDS, Document, Predicate

logger = get_logger(__name__)


def _object_id(id: str) -> ObjectId | None:
    try:
        return ObjectId(id)
    except (InvalidId, TypeError):
        return None


def _encode_value(value: Any) -> Any:
    # BSON has no date-only type
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=UTC)
    return value


def _encode(document: Document) -> Document:
    return {key: _encode_value(value) for key, value in document.items()}


def _decode(document: Document | None) -> Document | None:
    if document is None:
        return None
    decoded = dict(document)
    decoded["_id"] = str(decoded["_id"])
    return decoded


@contextmanager
def _translate_errors(collection: str, operation: str) -> Iterator[None]:
    """Map driver failures onto the adapter's error taxonomy."""
    try:
        yield
    except DuplicateKeyError as e:
        fields = list((e.details or {}).get("keyValue", {})) or list(USER_UNIQUE_FIELDS)
        logger.info("Duplicate key rejected", collection=collection, fields=fields)
        raise AlreadyExists(f"Duplicate value in {collection}", fields) from e
    except PyMongoError as e:
        logger.error(
            "MongoDB operation failed",
            collection=collection,
            operation=operation,
            error=str(e),
        )
        raise AdapterUnavailable(f"Persistence layer unavailable: {e}") from e


class MongoCollection:
    """Adapter over a single MongoDB collection."""

    def __init__(self, collection: Any):
        self._collection = collection
        self.name = collection.name

    async def find_one(self, predicate: Predicate) -> Document | None:
        with _translate_errors(self.name, "find_one"):
            return _decode(await self._collection.find_one(_encode(predicate)))

    async def find_by_id(self, id: str) -> Document | None:
        oid = _object_id(id)
        if oid is None:
            return None
        with _translate_errors(self.name, "find_by_id"):
            return _decode(await self._collection.find_one({"_id": oid}))

    async def find(self, predicate: Predicate | None = None) -> list[Document]:
        with _translate_errors(self.name, "find"):
            cursor = self._collection.find(_encode(predicate or {}))
            documents = await cursor.to_list(length=None)
        return [_decode(document) for document in documents]

    async def insert(self, document: Document) -> Document:
        now = datetime.now(UTC)
        stored = _encode(document)
        stored.setdefault("created_at", now)
        stored.setdefault("updated_at", now)

        with _translate_errors(self.name, "insert"):
            result = await self._collection.insert_one(stored)

        stored["_id"] = result.inserted_id
        logger.debug("Inserted document", collection=self.name, id=str(result.inserted_id))
        return _decode(stored)

    async def update_by_id(self, id: str, fields: Document) -> Document | None:
        oid = _object_id(id)
        if oid is None:
            return None

        changes = _encode(fields)
        changes["updated_at"] = datetime.now(UTC)
        with _translate_errors(self.name, "update_by_id"):
            updated = await self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        return _decode(updated)

    async def delete_by_id(self, id: str) -> bool:
        oid = _object_id(id)
        if oid is None:
            return False
        with _translate_errors(self.name, "delete_by_id"):
            result = await self._collection.delete_one({"_id": oid})
        return result.deleted_count > 0


class MongoStore:
    """Store backed by a MongoDB database."""

    def __init__(
        self,
        uri: str,
        database: str | None = None,
        timeout_ms: int = 5000,
        client: Any | None = None,
    ):
        self._client = client or AsyncMongoClient(
            uri,
            tz_aware=True,
            serverSelectionTimeoutMS=timeout_ms,
        )
        self._db = self._client.get_default_database(default=database)
        self.users = MongoCollection(self._db["users"])
        self.employees = MongoCollection(self._db["employees"])

    async def connect(self) -> None:
        """Ensure the unique indexes backing user signup exist."""
        with _translate_errors("users", "create_index"):
            for field in USER_UNIQUE_FIELDS:
                await self._db["users"].create_index(field, unique=True)
        logger.info("MongoDB connected", database=self._db.name)

    async def close(self) -> None:
        await self._client.close()

    async def ping(self) -> tuple[bool, str | None]:
        """Test the MongoDB connection and return a helpful error message."""
        try:
            await self._client.admin.command("ping")
            return True, None
        except PyMongoError as e:
            error_str = str(e)
            error_type = type(e).__name__

            if "Authentication failed" in error_str:
                return False, (
                    f"MongoDB authentication failed: {error_str}\n"
                    f"Please check the credentials in your connection string."
                )
            elif "timed out" in error_str or "Connection refused" in error_str:
                return False, (
                    f"Cannot connect to MongoDB server: {error_str}\n"
                    f"The server appears to be down or unreachable.\n"
                    f"Please check that MongoDB is running and ROSTER_MONGODB_URI is correct."
                )
            return False, f"MongoDB connection error ({error_type}): {error_str}"
