"""
Item Store - authoritative state for the storage checklist.

Holds the item collection and the active sort/filter mode, and keeps the
storage gateway in sync:
- Every collection mutation saves the full collection under one key
- On startup, one successful read hydrates the collection
- Storage failures are logged and reported, never raised or retried

This service is pure Python with no Streamlit dependencies.
"""

import asyncio
import logging
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from models.item import Item, SortMode, items_from_payload, items_to_payload
from services.storage.base import StorageGateway, StorageNotReady

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "guardaCoisas"

ErrorCallback = Callable[[str], None]


class ItemStore:
    """In-memory item collection with write-through persistence."""

    def __init__(
        self,
        storage: StorageGateway,
        key: str = DEFAULT_STORAGE_KEY,
        on_error: Optional[ErrorCallback] = None,
    ):
        """
        Args:
            storage: Gateway used to load and save the collection
            key: Storage key holding the whole collection
            on_error: Called with a user-facing message when storage fails
        """
        self.storage = storage
        self.key = key
        self.on_error = on_error
        self._items: list[Item] = []
        self._mode = SortMode.NEWEST
        self._loaded = False
        self._waiting_for_storage = False  # Last load attempt found the backend not ready
        self._unsaved_changes = False  # Changes made while waiting
        self._pending_saves: set[asyncio.Task] = set()

    # ==========================================
    # State
    # ==========================================

    @property
    def items(self) -> list[Item]:
        """The full collection in insertion order (a copy)."""
        return list(self._items)

    @property
    def mode(self) -> SortMode:
        return self._mode

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def set_mode(self, mode: Union[SortMode, str]) -> None:
        """
        Change how derived_view() presents the collection. Not persisted.

        Raises:
            ValueError: if mode is not one of the SortMode values
        """
        self._mode = SortMode(mode)

    def derived_view(self) -> list[Item]:
        """Items to display for the current mode, as a new list."""
        if self._mode == SortMode.STORED:
            return [item for item in self._items if item.stored]
        if self._mode == SortMode.ALPHABETICALLY:
            # Code point comparison, stable for equal names
            return sorted(self._items, key=lambda item: item.name)
        return list(self._items)

    # ==========================================
    # Mutations
    # ==========================================

    def add(self, name: str, quantity: int) -> Item:
        """Append a new, not yet stored item and save."""
        item = Item(name=name, quantity=quantity)
        self._items.append(item)
        self._save()
        return item

    def remove(self, item_id: str) -> None:
        """Remove the item with this id (no-op if absent) and save."""
        self._items = [item for item in self._items if item.id != item_id]
        self._save()

    def toggle_stored(self, item_id: str) -> None:
        """Flip the stored flag of the item with this id (no-op if absent) and save."""
        self._items = [
            item.with_stored_toggled() if item.id == item_id else item
            for item in self._items
        ]
        self._save()

    def clear(self) -> None:
        """Empty the collection and save."""
        self._items = []
        self._save()

    # ==========================================
    # Persistence
    # ==========================================

    async def load(self) -> None:
        """
        Hydrate the collection from storage. Only one read succeeds.

        A missing or empty value leaves the collection empty. A read
        failure or a value that is not a list of items is reported and
        also leaves the collection empty. If the backend has not answered
        yet, nothing is marked loaded and saves wait until a later call
        gets through; items added meanwhile are kept after the saved ones.
        """
        if self._loaded:
            return

        try:
            value = await self.storage.get(self.key)
        except StorageNotReady:
            self._waiting_for_storage = True
            logger.debug(f"{self.storage.backend_name} storage not ready, load postponed")
            return
        except Exception as e:
            logger.error(f"Failed to load items from {self.storage.backend_name} storage: {e}")
            self._report(f"Não foi possível carregar a lista: {e}")
            self._finish_load()
            return

        saved: list[Item] = []
        if not value:
            logger.info("No saved items found, starting with an empty list")
        else:
            try:
                saved = items_from_payload(value)
                logger.info(f"Loaded {len(saved)} items from {self.storage.backend_name} storage")
            except ValidationError as e:
                logger.warning(f"Ignoring malformed saved items under '{self.key}': {e}")
                self._report("Os itens salvos estão corrompidos e foram ignorados.")

        self._items = saved + self._items
        self._finish_load()

    def _finish_load(self) -> None:
        """Mark the store loaded and write any changes made while waiting."""
        self._loaded = True
        self._waiting_for_storage = False
        if self._unsaved_changes:
            self._unsaved_changes = False
            self._save()

    async def wait_for_saves(self) -> None:
        """Wait for saves scheduled on a running event loop to finish."""
        while self._pending_saves:
            await asyncio.gather(*list(self._pending_saves))

    def _save(self) -> Optional[asyncio.Task]:
        """
        Write a snapshot of the collection.

        Inside a running event loop the write becomes a background task;
        otherwise it runs to completion before returning. While the
        backend has not answered a load, nothing is written.
        """
        if self._waiting_for_storage:
            self._unsaved_changes = True
            return None

        snapshot = items_to_payload(self._items)
        write = self._write(snapshot)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(write)
            return None

        task = loop.create_task(write)
        self._pending_saves.add(task)
        task.add_done_callback(self._pending_saves.discard)
        return task

    async def _write(self, snapshot: list[dict[str, Any]]) -> None:
        try:
            await self.storage.set(self.key, snapshot)
            logger.debug(f"Saved {len(snapshot)} items to {self.storage.backend_name} storage")
        except Exception as e:
            logger.error(f"Failed to save items to {self.storage.backend_name} storage: {e}")
            self._report(f"Não foi possível salvar a lista: {e}")

    def _report(self, message: str) -> None:
        if self.on_error:
            self.on_error(message)
