"""
Checklist statistics - counts shown in the page footer.
"""

from dataclasses import dataclass

from models.item import Item


@dataclass
class ItemStats:
    """Summary of the item collection."""
    total: int
    stored: int
    percentage: int  # 0..100, rounded half up


def compute_stats(items: list[Item]) -> ItemStats:
    """Count items and stored items. An empty list is 0%."""
    total = len(items)
    stored = sum(1 for item in items if item.stored)

    if total == 0:
        return ItemStats(total=0, stored=0, percentage=0)

    # Integer round-half-up of stored / total * 100
    percentage = (stored * 200 + total) // (2 * total)
    return ItemStats(total=total, stored=stored, percentage=percentage)


def format_stats_message(stats: ItemStats) -> str:
    """Footer sentence, e.g. 'Você tem 2 itens na lista e já guardou 1 (50%)'."""
    noun = "item" if stats.total == 1 else "itens"
    message = f"Você tem {stats.total} {noun} na lista"
    if stats.total > 0:
        message += f" e já guardou {stats.stored} ({stats.percentage}%)"
    return message
