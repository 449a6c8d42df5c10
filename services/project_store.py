# ============================================================================
# PROJECT STORE
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Service - Project entity lifecycle
# PURPOSE: Own the ordered project collection; create, delete, list
# CREATED: 19 OCT 2026
# ============================================================================
"""
Project Store

In-memory, insertion-ordered collection of projects. Nothing is persisted.

Identity:
  - Ids are time-derived (epoch milliseconds) and strictly increasing, so a
    burst of submissions within the same millisecond still gets distinct ids.
  - A caller may supply an id; it is rejected if it was ever issued before.
  - Ids are never reused, including after deletion.

Validation follows the pre-flight pattern: problems are collected into a
result object, never raised. Only a blank name or district is rejected.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Set, Union

from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.models import Project, ProjectDraft

logger = get_logger(__name__, ComponentType.SERVICE)


# ============================================================================
# RESULT
# ============================================================================

@dataclass
class Rejected:
    """
    A draft the store refused.

    Collects every problem so the form can show them all at once.
    """
    draft: ProjectDraft
    errors: List[str] = field(default_factory=list)


AddResult = Union[Project, Rejected]


def validate_draft(draft: ProjectDraft) -> List[str]:
    """Return the reasons a draft cannot be stored (empty when valid)."""
    errors = []
    if not draft.name.strip():
        errors.append("Project name is required")
    if not draft.district.strip():
        errors.append("District is required")
    return errors


def _epoch_millis() -> int:
    return int(time.time() * 1000)


# ============================================================================
# STORE
# ============================================================================

class ProjectStore:
    """Ordered, in-memory project collection."""

    def __init__(self, clock: Callable[[], int] = _epoch_millis):
        """
        Args:
            clock: Source of time-derived ids (milliseconds)
        """
        self._clock = clock
        self._projects: List[Project] = []
        self._issued: Set[int] = set()
        self._last_id = 0

    def _next_id(self) -> int:
        candidate = max(self._clock(), self._last_id + 1)
        while candidate in self._issued:
            candidate += 1
        return candidate

    def add(self, draft: ProjectDraft, project_id: Optional[int] = None) -> AddResult:
        """
        Store a new project built from a draft.

        Args:
            draft: Form data
            project_id: Optional caller-supplied id

        Returns:
            The stored Project, or Rejected with the reasons.
        """
        errors = validate_draft(draft)
        if project_id is not None and project_id in self._issued:
            errors.append(f"Project id {project_id} has already been used")

        if errors:
            logger.info(f"Rejected project draft: {'; '.join(errors)}")
            return Rejected(draft=draft, errors=errors)

        if project_id is None:
            project_id = self._next_id()

        project = Project.from_draft(project_id, draft)
        self._projects.append(project)
        self._issued.add(project_id)
        self._last_id = max(self._last_id, project_id)

        with log_context(project_id=project_id):
            log_checkpoint(
                "project_added",
                {"name": project.name, "category": project.category.value},
                logger=logger,
            )
        return project

    def remove(self, project_id: int) -> bool:
        """
        Delete a project by id.

        Returns:
            True if a project was removed, False if none had that id.
        """
        for index, project in enumerate(self._projects):
            if project.id == project_id:
                del self._projects[index]
                with log_context(project_id=project_id):
                    log_checkpoint("project_deleted", logger=logger)
                return True
        logger.debug(f"Delete ignored, no project with id {project_id}")
        return False

    def get(self, project_id: int) -> Optional[Project]:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def list(self) -> List[Project]:
        """Snapshot of all projects in insertion order."""
        return list(self._projects)

    def __len__(self) -> int:
        return len(self._projects)

    def __contains__(self, project_id: object) -> bool:
        return any(project.id == project_id for project in self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(self.list())


__all__ = ["ProjectStore", "Rejected", "AddResult", "validate_draft"]
