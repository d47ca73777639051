"""
Checklist Controller - manages the storage checklist and its session state.

This controller handles:
- Creating one ItemStore per browser session
- Hydrating the list from storage once per session
- Adding, removing, toggling and clearing items
- Collecting storage errors for the view to display
"""

import asyncio
import logging

import streamlit as st

from config.settings import get_settings
from models.item import Item, SortMode
from services.item_store import ItemStore
from services.stats_service import ItemStats, compute_stats
from services.storage import get_storage

logger = logging.getLogger(__name__)


class ChecklistController:
    """Controller for the storage checklist."""

    def __init__(self):
        self.settings = get_settings()
        self._init_session_state()
        # Browser-backed storage picks up values delivered since the last run
        self.store.storage.refresh()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "checklist" not in st.session_state:
            errors: list[str] = []
            store = ItemStore(
                storage=get_storage(self.settings),
                key=self.settings.storage_key,
                on_error=errors.append,
            )
            st.session_state.checklist = {
                "store": store,
                "errors": errors,  # Storage failures not yet shown to the user
            }
            logger.info(f"New checklist session using {store.storage.backend_name} storage")

    @property
    def store(self) -> ItemStore:
        return st.session_state.checklist["store"]

    def ensure_loaded(self):
        """Read the saved list once per session (retried while storage is not ready)."""
        if not self.store.is_loaded:
            asyncio.run(self.store.load())

    # ==========================================
    # Queries
    # ==========================================

    def get_visible_items(self) -> list[Item]:
        """Items for the current sort/filter mode."""
        return self.store.derived_view()

    def is_loading(self) -> bool:
        """True while the saved list has not arrived from storage."""
        return not self.store.is_loaded

    def get_mode(self) -> SortMode:
        return self.store.mode

    def get_stats(self) -> ItemStats:
        """Stats always cover the whole list, not just the visible items."""
        return compute_stats(self.store.items)

    def get_quantity_options(self) -> list[int]:
        return list(range(1, self.settings.max_quantity + 1))

    def pop_errors(self) -> list[str]:
        """Return pending storage errors and forget them."""
        errors = st.session_state.checklist["errors"]
        pending = list(errors)
        errors.clear()
        return pending

    # ==========================================
    # Item Operations
    # ==========================================

    def add_item(self, name: str, quantity: int) -> Item:
        return self.store.add(name, quantity)

    def remove_item(self, item_id: str):
        self.store.remove(item_id)

    def toggle_item(self, item_id: str):
        self.store.toggle_stored(item_id)

    def clear_items(self):
        self.store.clear()

    def set_mode(self, mode: SortMode):
        self.store.set_mode(mode)
