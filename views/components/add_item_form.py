"""
Add item form component.
"""

import streamlit as st
from typing import Callable


def render_add_item_form(
    quantity_options: list[int],
    on_submit: Callable[[str, int], None],
):
    """
    Render the form for adding an item.

    The form resets to quantity 1 and an empty name after each submit.
    Names are not validated; an empty name is accepted.

    Args:
        quantity_options: Quantities offered in the selector (first is the default)
        on_submit: Callback with (name, quantity) when the form is submitted
    """
    with st.form("add_item_form", clear_on_submit=True):
        st.markdown("### O que você precisa guardar?")

        col_qty, col_name, col_button = st.columns([1, 4, 1.5])

        with col_qty:
            quantity = st.selectbox(
                "Quantidade",
                quantity_options,
                index=0,
                key="new_item_quantity",
                label_visibility="collapsed"
            )

        with col_name:
            name = st.text_input(
                "Item",
                placeholder="Manda aqui",
                key="new_item_name",
                label_visibility="collapsed"
            )

        with col_button:
            submitted = st.form_submit_button("Adicionar")

    if submitted:
        on_submit(name, int(quantity))
