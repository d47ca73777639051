"""
Guarda Coisas - storage checklist

Add what you need to store, tick items off as they are stored, and
keep the list between visits.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Espaço Mulher - Guarda Coisas",
    page_icon="📦",
    layout="centered"
)

from config.logging_setup import setup_logging
from views.checklist_view import ChecklistView

setup_logging()

view = ChecklistView()
view.render()
