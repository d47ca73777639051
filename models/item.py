"""
Checklist item model and sort/filter modes.

Items are stored as a JSON array under a single storage key. The pydantic
model validates that payload on load and produces it on save.
"""

import uuid
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class SortMode(str, Enum):
    """How the list is presented. Never persisted."""
    NEWEST = "newest"  # Insertion order, no filtering
    STORED = "stored"  # Only stored items, insertion order
    ALPHABETICALLY = "alphabetically"  # Everything, sorted by name


SORT_MODE_LABELS = {
    SortMode.NEWEST: "Ordenar por mais recentes",
    SortMode.STORED: "Mostrar guardados",
    SortMode.ALPHABETICALLY: "Ordem alfabética",
}


def new_item_id() -> str:
    return str(uuid.uuid4())


class Item(BaseModel):
    """
    A single checklist entry.

    Frozen: toggling "stored" replaces the item with an updated copy.
    Name is free text and may be empty.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_item_id)
    quantity: int = Field(ge=1)
    name: str = ""
    stored: bool = False

    def with_stored_toggled(self) -> "Item":
        return self.model_copy(update={"stored": not self.stored})


_collection_adapter = TypeAdapter(list[Item])


def items_to_payload(items: list[Item]) -> list[dict[str, Any]]:
    """Serialize the collection into the JSON-compatible stored shape."""
    return [item.model_dump() for item in items]


def items_from_payload(payload: Any) -> list[Item]:
    """
    Parse a persisted payload into items.

    Raises:
        ValidationError: if the payload is not a list of item records
    """
    return _collection_adapter.validate_python(payload)


__all__ = [
    "Item",
    "SortMode",
    "SORT_MODE_LABELS",
    "items_from_payload",
    "items_to_payload",
    "new_item_id",
]
