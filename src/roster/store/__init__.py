"""Persistence adapters for Roster.

This module provides the storage boundary the resolvers call through:
- MongoStore: MongoDB via the pymongo async client
- MemoryStore: in-process storage for tests and local development

Main components:
- Store: a handle exposing the ``users`` and ``employees`` collections
- Collection: the per-entity adapter interface
- create_store: build the store selected by settings
"""

from .base import Collection, Document, Predicate, Store
from .factory import create_store
from .memory import MemoryStore
from .mongo import MongoStore

__all__ = [
    "Collection",
    "Document",
    "MemoryStore",
    "MongoStore",
    "Predicate",
    "Store",
    "create_store",
]
