"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

# Settings are read at import time, so configure them before importing the package
os.environ.setdefault("SOCIALGRAPH_STORE_BACKEND", "memory")
os.environ.setdefault("SOCIALGRAPH_PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("SOCIALGRAPH_DEBUG", "false")

from socialgraph.store.connection import init_store, reset_store  # noqa: E402
from socialgraph.store.memory import InMemoryEntityStore  # noqa: E402


@pytest.fixture
def store() -> Generator[InMemoryEntityStore, None, None]:
    """A fresh in-memory store installed as the shared store."""
    store = InMemoryEntityStore()
    init_store(store)
    yield store
    reset_store()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
