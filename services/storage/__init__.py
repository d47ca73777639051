"""
Storage gateways for persisting the item collection.

Supported backends:
- browser: the viewer's localStorage (default)
- database: a SQLAlchemy key-value table
- memory: in-process dict (development, tests)
"""

from typing import Optional

from config.settings import Settings, get_settings
from services.storage.base import StorageError, StorageGateway, StorageNotReady
from services.storage.memory import MemoryStorage


def get_storage(settings: Optional[Settings] = None) -> StorageGateway:
    """
    Build the storage gateway selected by STORAGE_BACKEND.

    Backends are imported on demand so the memory backend works without
    the browser component or a database driver installed.

    Raises:
        ValueError: if the backend name is unknown
    """
    settings = settings or get_settings()
    backend = settings.storage_backend.lower()

    if backend == "browser":
        from services.storage.browser import BrowserLocalStorage
        return BrowserLocalStorage()
    if backend == "database":
        from services.storage.database import DatabaseStorage
        return DatabaseStorage()
    if backend == "memory":
        return MemoryStorage()

    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


__all__ = [
    "StorageError",
    "StorageNotReady",
    "StorageGateway",
    "MemoryStorage",
    "get_storage",
]
