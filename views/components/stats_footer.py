"""
Checklist statistics footer.
"""

import streamlit as st

from services.stats_service import ItemStats, format_stats_message


def render_stats_footer(stats: ItemStats):
    """
    Render the footer sentence and a progress bar of stored items.

    Args:
        stats: Counts for the whole list
    """
    st.markdown("---")
    st.markdown(format_stats_message(stats))
    if stats.total > 0:
        st.progress(stats.percentage / 100)
