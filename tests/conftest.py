"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from roster.security import BcryptHasher
from roster.store import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    """Provide an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def hasher() -> BcryptHasher:
    """Provide a bcrypt hasher at the minimum cost so tests stay fast."""
    return BcryptHasher(rounds=4)


@pytest.fixture
def mock_info(store: MemoryStore, hasher: BcryptHasher) -> Any:
    """Create a mock GraphQL info object carrying the store and hasher."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {
        "request": MagicMock(headers=MagicMock(get=MagicMock(return_value=None))),
        "store": store,
        "hasher": hasher,
    }
    return info


@pytest.fixture
def employee_fields() -> dict[str, Any]:
    """Valid arguments for creating an employee."""
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "designation": "Eng",
        "salary": 5000.0,
        "date_of_joining": "2024-01-01",
        "department": "R&D",
        "email": "ada@example.com",
        "gender": "Female",
    }


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
