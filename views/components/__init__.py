"""
Reusable UI components.
"""

from views.components.header import render_header
from views.components.add_item_form import render_add_item_form
from views.components.item_list import render_item_list, render_item_row
from views.components.filters import render_filters
from views.components.stats_footer import render_stats_footer

__all__ = [
    "render_header",
    "render_add_item_form",
    "render_item_list",
    "render_item_row",
    "render_filters",
    "render_stats_footer",
]
