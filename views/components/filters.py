"""
Sort/filter controls and the clear-list button.
"""

import streamlit as st
from typing import Callable

from models.item import SortMode, SORT_MODE_LABELS


def render_filters(
    mode: SortMode,
    on_change_mode: Callable[[SortMode], None],
    on_clear: Callable[[], None],
):
    """
    Render the sort/filter select and the clear button.

    Args:
        mode: Currently active mode
        on_change_mode: Callback with the newly selected mode
        on_clear: Callback to empty the whole list
    """
    options = list(SortMode)

    col_mode, col_clear = st.columns([3, 1])

    with col_mode:
        selected = st.selectbox(
            "Ordenação",
            options,
            index=options.index(mode),
            format_func=lambda m: SORT_MODE_LABELS[m],
            key="sort_mode",
            label_visibility="collapsed"
        )
        if selected != mode:
            on_change_mode(selected)
            st.rerun()

    with col_clear:
        if st.button("Limpar lista"):
            on_clear()
            st.rerun()
