"""
Controllers layer - orchestration and session state management.
"""

from controllers.checklist_controller import ChecklistController

__all__ = ["ChecklistController"]
