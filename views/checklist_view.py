"""
Checklist View - UI for the storage checklist.

This view handles:
- Adding items with a quantity
- Marking items as stored and deleting them
- Sorting/filtering the list and clearing it
- Showing totals and storage errors
"""

import streamlit as st

from controllers.checklist_controller import ChecklistController
from views.components import (
    render_header,
    render_add_item_form,
    render_item_list,
    render_filters,
    render_stats_footer,
)


class ChecklistView:
    """View for the checklist page."""

    def __init__(self):
        self.controller = ChecklistController()

    def render(self) -> None:
        """Main render method."""
        self.controller.ensure_loaded()

        render_header()

        # Filled last so errors from this run's saves are shown too
        alerts = st.container()

        render_add_item_form(
            quantity_options=self.controller.get_quantity_options(),
            on_submit=self.controller.add_item,
        )

        self._render_list()

        render_stats_footer(self.controller.get_stats())

        with alerts:
            self._render_errors()

    def _render_list(self) -> None:
        """Render the items and the list controls."""
        items = self.controller.get_visible_items()

        if items:
            render_item_list(
                items=items,
                on_toggle=self.controller.toggle_item,
                on_delete=self.controller.remove_item,
            )
        elif self.controller.is_loading():
            st.caption("Carregando lista salva...")
        else:
            st.caption("Nada por aqui.")

        render_filters(
            mode=self.controller.get_mode(),
            on_change_mode=self.controller.set_mode,
            on_clear=self.controller.clear_items,
        )

    def _render_errors(self) -> None:
        """Show storage failures; the list keeps working in memory."""
        for message in self.controller.pop_errors():
            st.error(message)
