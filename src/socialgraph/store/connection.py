"""
Document store connection management
"""

import threading

from ..config import settings
from ..errors import ConfigurationError
from ..logging import get_logger
from .base import EntityStore
from .memory import InMemoryEntityStore
from .mongo import MongoEntityStore

logger = get_logger(__name__)

# Process-wide shared store, acquired once and reused by all requests
_store: EntityStore | None = None
_init_lock = threading.Lock()


def create_store(
    backend: str | None = None,
    mongo_url: str | None = None,
    mongo_database: str | None = None,
) -> EntityStore:
    """Create an entity store for the given backend, defaulting to settings."""
    backend = (backend or settings.store_backend).lower()

    if backend == "memory":
        return InMemoryEntityStore()

    if backend == "mongo":
        url = mongo_url or settings.mongo_url
        if not url:
            raise ConfigurationError(
                "Please provide a MongoDB URL (SOCIALGRAPH_MONGO_URL) or set "
                "SOCIALGRAPH_STORE_BACKEND=memory"
            )
        return MongoEntityStore.from_url(url, mongo_database or settings.mongo_database)

    raise ConfigurationError(f"Unknown store backend: {backend}")


def init_store(store: EntityStore | None = None, force_reinit: bool = False) -> EntityStore:
    """Initialize the shared entity store.

    Thread-safe; a no-op when already initialized unless ``store`` is given or
    ``force_reinit`` is set.
    """
    global _store

    if _store is not None and store is None and not force_reinit:
        return _store

    with _init_lock:
        if _store is not None and store is None and not force_reinit:
            return _store

        _store = store or create_store()
        logger.info("Entity store initialized", store=type(_store).__name__)
        return _store


def get_store() -> EntityStore:
    """Get the shared entity store, initializing it on first use."""
    if _store is None:
        return init_store()
    return _store


def reset_store() -> None:
    """Forget the shared store without closing it (for tests)."""
    global _store
    _store = None


async def close_store() -> None:
    """Close and forget the shared store."""
    global _store
    if _store is None:
        return
    store, _store = _store, None
    await store.close()


async def check_store_connection() -> tuple[bool, str | None]:
    """
    Check the store connection and return a helpful error message.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _store is None:
        return False, "Entity store not initialized"

    try:
        await _store.ping()
        return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "Authentication failed" in error_str:
            return False, (
                f"MongoDB authentication failed: {error_str}\n"
                f"Please check the credentials in SOCIALGRAPH_MONGO_URL."
            )
        if "Connection refused" in error_str or "ServerSelectionTimeoutError" in error_type:
            return False, (
                f"Cannot connect to MongoDB: {error_str}\n"
                f"The server appears to be down or unreachable."
            )
        return False, f"Store connection error ({error_type}): {error_str}"
