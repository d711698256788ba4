"""Factory for creating the configured store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import get_logger
from .base import Store
from .memory import MemoryStore
from .mongo import MongoStore

if TYPE_CHECKING:
    from ..config import Settings

logger = get_logger(__name__)


def create_store(settings: Settings | None = None) -> Store:
    """Create the store selected by ``settings.store_backend``."""
    if settings is None:
        from ..config import settings as default_settings

        settings = default_settings

    backend = settings.store_backend.lower()

    if backend == "memory":
        return MemoryStore()

    elif backend == "mongodb":
        logger.info("Creating MongoDB store", database=settings.mongodb_database)
        return MongoStore(
            settings.mongodb_uri,
            database=settings.mongodb_database,
            timeout_ms=settings.mongodb_timeout_ms,
        )

    raise ValueError(f"Unknown store backend: {settings.store_backend!r} (expected 'mongodb' or 'memory')")
