# ============================================================================
# PROJECT FORM CONTROLLER
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Service - Add-project form state
# PURPOSE: Add/cancel toggle, draft editing, gated submission
# CREATED: 19 OCT 2026
# ============================================================================
"""
Project Form Controller

Holds the add-project form between user edits:
  - toggle() opens or cancels the form (cancel keeps the typed draft)
  - update() replaces draft fields
  - submit() hands the draft to the ProjectStore. Success closes the form and
    resets the draft to defaults; rejection keeps the form open with errors.
"""

from typing import Any, List, Optional

from core.logging import ComponentType, get_logger
from core.models import ProjectDraft, ProjectFormState
from services.project_store import AddResult, ProjectStore, Rejected

logger = get_logger(__name__, ComponentType.CONTROLLER)


class ProjectFormController:
    """State of the add-project form."""

    def __init__(self, store: ProjectStore):
        self.store = store
        self.visible = False
        self.draft = ProjectDraft()
        self.errors: List[str] = []

    @property
    def can_submit(self) -> bool:
        return self.draft.is_submittable

    def state(self) -> ProjectFormState:
        return ProjectFormState(
            visible=self.visible,
            draft=self.draft,
            can_submit=self.can_submit,
            errors=list(self.errors),
        )

    def toggle(self) -> ProjectFormState:
        """Open the form, or cancel it if already open."""
        self.visible = not self.visible
        self.errors = []
        logger.debug(f"Project form {'opened' if self.visible else 'cancelled'}")
        return self.state()

    def update(self, **fields: Any) -> ProjectFormState:
        """
        Replace draft fields.

        Raises:
            pydantic.ValidationError: a field value is invalid
                (e.g. latitude outside [-90, 90] or unknown category)
        """
        data = self.draft.model_dump()
        data.update({key: value for key, value in fields.items() if value is not None})
        self.draft = ProjectDraft.model_validate(data)
        self.errors = []
        return self.state()

    def reset(self) -> None:
        self.draft = ProjectDraft()
        self.errors = []

    def submit(self, project_id: Optional[int] = None) -> AddResult:
        """Submit the current draft to the store."""
        result = self.store.add(self.draft, project_id=project_id)
        if isinstance(result, Rejected):
            self.errors = list(result.errors)
            return result

        self.visible = False
        self.reset()
        return result


__all__ = ["ProjectFormController"]
