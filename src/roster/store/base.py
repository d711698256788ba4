"""Core persistence interfaces."""

from __future__ import annotations

from typing import Any, Protocol

# A stored entity as a plain document; the identifier lives under "_id"
Document = dict[str, Any]

# MongoDB-style filter: field equality, optionally wrapped in a top-level "$or"
Predicate = dict[str, Any]

USER_UNIQUE_FIELDS = ("username", "email")


class Collection(Protocol):
    """Per-entity persistence adapter.

    Every method may raise ``AdapterUnavailable`` when the backing store is
    unreachable or fails. Identifiers are opaque strings; a malformed
    identifier is treated the same as one that matches nothing.
    """

    async def find_one(self, predicate: Predicate) -> Document | None:
        """Return the first document matching ``predicate``, or None."""
        ...

    async def find_by_id(self, id: str) -> Document | None:
        """Return the document with identifier ``id``, or None."""
        ...

    async def find(self, predicate: Predicate | None = None) -> list[Document]:
        """Return every document matching ``predicate`` in storage order."""
        ...

    async def insert(self, document: Document) -> Document:
        """Persist a new document and return it with ``_id`` and timestamps.

        Raises:
            AlreadyExists: If a unique field collides with an existing document
        """
        ...

    async def update_by_id(self, id: str, fields: Document) -> Document | None:
        """Set ``fields`` on the document ``id`` and return the updated document.

        Returns None when no document has that identifier.
        """
        ...

    async def delete_by_id(self, id: str) -> bool:
        """Remove the document ``id``; return whether one was removed."""
        ...


class Store(Protocol):
    """Handle on the whole persistence backend."""

    users: Collection
    employees: Collection

    async def connect(self) -> None:
        """Open connections and ensure unique indexes exist."""
        ...

    async def close(self) -> None:
        """Release connections."""
        ...

    async def ping(self) -> tuple[bool, str | None]:
        """Check reachability; return (success, error_message)."""
        ...


def matches(document: Document, predicate: Predicate | None) -> bool:
    """Evaluate a filter document against ``document`` in process."""
    if not predicate:
        return True

    for key, expected in predicate.items():
        if key == "$or":
            if not any(matches(document, clause) for clause in expected):
                return False
        elif document.get(key) != expected:
            return False

    return True


def or_predicate(**fields: Any) -> Predicate:
    """Build ``{"$or": [...]}`` over the given fields, skipping None values."""
    return {"$or": [{name: value} for name, value in fields.items() if value is not None]}
