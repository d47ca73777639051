"""
In-process storage backend.

Values live only as long as the Python process. Useful for local
development and tests.
"""

import copy
from typing import Any, Optional

from services.storage.base import StorageGateway


class MemoryStorage(StorageGateway):
    """Dict-backed storage. Values are deep-copied on the way in and out."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._values: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    @property
    def backend_name(self) -> str:
        return "memory"

    async def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._values.get(key))

    async def set(self, key: str, value: Any) -> None:
        self._values[key] = copy.deepcopy(value)
