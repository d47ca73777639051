"""
Services layer - business logic and storage gateways.

ItemStore and the stats helpers have no Streamlit dependencies; only the
browser storage backend needs a running Streamlit script.
"""

from services.item_store import ItemStore
from services.stats_service import ItemStats, compute_stats, format_stats_message
from services.storage import StorageError, StorageGateway, MemoryStorage, get_storage

__all__ = [
    "ItemStore",
    "ItemStats",
    "compute_stats",
    "format_stats_message",
    "StorageError",
    "StorageGateway",
    "MemoryStorage",
    "get_storage",
]
