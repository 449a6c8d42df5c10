# ============================================================================
# PROJECT MODEL
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Domain model - Point-of-interest records
# PURPOSE: Project entity and the draft submitted by the creation form
# CREATED: 19 OCT 2026
# ============================================================================
"""
Project Model

A Project is a user-created point of interest shown as a marker.
Projects are immutable: an edit replaces the record wholesale.

ProjectDraft is what the form submits. It carries no id - identity is
assigned by the ProjectStore.
"""

from typing import Optional

from pydantic import BaseModel, Field

from core.contracts import ProjectCategory
from core.models.geo import LatLng

# Form starts out pointing at Kathmandu
DEFAULT_DRAFT_LOCATION = LatLng(lat=27.7172, lng=85.324)


class ProjectDraft(BaseModel):
    """Unvalidated project data as entered in the creation form."""

    name: str = Field(default="")
    description: str = Field(default="")
    district: str = Field(default="")
    location: LatLng = Field(default=DEFAULT_DRAFT_LOCATION)
    category: ProjectCategory = Field(default=ProjectCategory.OTHER)

    model_config = {"frozen": True}

    @property
    def is_submittable(self) -> bool:
        """Name and district must both be non-blank."""
        return bool(self.name.strip()) and bool(self.district.strip())


class Project(BaseModel):
    """
    A project marker on the map.
    Owned by ProjectStore; everything else sees snapshots.
    """

    id: int = Field(..., description="Unique for the lifetime of the store, never reused")
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    district: str = Field(..., min_length=1)
    location: LatLng
    category: ProjectCategory = Field(default=ProjectCategory.OTHER)

    model_config = {"frozen": True}

    @classmethod
    def from_draft(cls, project_id: int, draft: ProjectDraft) -> "Project":
        return cls(
            id=project_id,
            name=draft.name.strip(),
            description=draft.description,
            district=draft.district.strip(),
            location=draft.location,
            category=draft.category,
        )

    @property
    def lat(self) -> float:
        return self.location.lat

    @property
    def lng(self) -> float:
        return self.location.lng


def draft_of(
    name: str,
    district: str,
    lat: float,
    lng: float,
    category: ProjectCategory = ProjectCategory.OTHER,
    description: Optional[str] = None,
) -> ProjectDraft:
    """Shorthand for building a draft from flat values."""
    return ProjectDraft(
        name=name,
        district=district,
        location=LatLng(lat=lat, lng=lng),
        category=category,
        description=description or "",
    )


__all__ = ["Project", "ProjectDraft", "DEFAULT_DRAFT_LOCATION", "draft_of"]
