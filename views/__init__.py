"""
Views layer - UI presentation components.
"""

from views.checklist_view import ChecklistView

__all__ = ["ChecklistView"]
