"""
Checklist item components.
"""

import streamlit as st
from typing import Callable

from models.item import Item


def render_item_row(
    item: Item,
    on_toggle: Callable[[str], None],
    on_delete: Callable[[str], None],
):
    """
    Render a single item: stored checkbox, label and delete button.

    Args:
        item: The item to render
        on_toggle: Callback with the item id when the checkbox changes
        on_delete: Callback with the item id when deleted
    """
    col_check, col_label, col_delete = st.columns([0.5, 6, 0.7])

    with col_check:
        stored = st.checkbox(
            "guardado",
            value=item.stored,
            key=f"stored_{item.id}",
            label_visibility="collapsed"
        )
        if stored != item.stored:
            on_toggle(item.id)
            st.rerun()

    with col_label:
        label = f"{item.quantity} {item.name}"
        if item.stored:
            st.markdown(f"~~{label}~~")
        else:
            st.markdown(label)

    with col_delete:
        if st.button("❌", key=f"delete_{item.id}", help="Remover item"):
            on_delete(item.id)
            st.rerun()


def render_item_list(
    items: list[Item],
    on_toggle: Callable[[str], None],
    on_delete: Callable[[str], None],
):
    """
    Render the visible items in the given order.

    Args:
        items: Items already sorted/filtered for display
        on_toggle: Callback with an item id to flip its stored flag
        on_delete: Callback with an item id to remove it
    """
    for item in items:
        render_item_row(item, on_toggle, on_delete)
