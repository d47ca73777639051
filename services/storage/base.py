"""
Base class for key-value storage gateways.

The checklist persists its whole item collection under one key. Any
backend that can get and set a JSON-compatible value by key can serve
as the gateway.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class StorageError(Exception):
    """A storage backend failed to read or write a value."""


class StorageNotReady(StorageError):
    """The backend has not delivered its data yet; try again on a later run."""


class StorageGateway(ABC):
    """Abstract base class for async key-value storage."""

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Return the backend name (e.g., 'browser', 'database')."""
        pass

    def refresh(self) -> None:
        """
        Called at the start of every script run, before any read or write.

        Backends that talk to the browser use it to pick up values that
        arrived since the previous run.
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            The decoded value, or None if nothing is stored

        Raises:
            StorageNotReady: if the backend has not answered yet
            StorageError: if the backend could not be read
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """
        Store a JSON-compatible value under a key, replacing any previous one.

        Raises:
            StorageError: if the backend could not be written
        """
        pass
