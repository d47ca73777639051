"""
Models layer - checklist domain models and ORM entities.
"""

from models.item import (
    Item,
    SortMode,
    SORT_MODE_LABELS,
    items_from_payload,
    items_to_payload,
)
from models.entities import StoredValue

__all__ = [
    "Item",
    "SortMode",
    "SORT_MODE_LABELS",
    "items_from_payload",
    "items_to_payload",
    "StoredValue",
]
