"""
Page header component.
"""

import streamlit as st


def render_header(title: str = "Espaço Mulher"):
    """Render the page title."""
    st.title(title)
    st.markdown("---")
