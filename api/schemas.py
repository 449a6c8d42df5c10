# ============================================================================
# API SCHEMAS
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Core - Request/Response schemas
# PURPOSE: Pydantic models for API validation
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Schemas

Request and response models for the API. Domain models (Project, Viewport,
MapView, StylePatch) are returned as-is; only envelopes live here.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from core.contracts import HoverPhase, LayerType, ProjectCategory
from core.models import BoundaryFeature, LatLng, PopupLine, ProjectDraft


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================

class LayerSelect(BaseModel):
    """Request to switch the boundary layer."""
    layer: LayerType

    model_config = {
        "json_schema_extra": {"examples": [{"layer": "provinces"}]}
    }


class ViewportUpdate(BaseModel):
    """Pan and/or zoom. Out-of-range values are clamped, not rejected."""
    center: Optional[LatLng] = None
    zoom: Optional[float] = None


class ProjectCreate(ProjectDraft):
    """Request to add a project directly (bypassing the form state)."""
    id: Optional[int] = Field(None, description="Optional caller-supplied id")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Clinic",
                    "district": "Pokhara",
                    "category": "health",
                    "location": {"lat": 28.2, "lng": 83.9},
                    "description": "Primary health post",
                }
            ]
        },
    }

    def to_draft(self) -> ProjectDraft:
        return ProjectDraft.model_validate(self.model_dump(exclude={"id"}))


class FormUpdate(BaseModel):
    """Partial update of the add-project form draft."""
    name: Optional[str] = None
    description: Optional[str] = None
    district: Optional[str] = None
    location: Optional[LatLng] = None
    category: Optional[ProjectCategory] = None


class FeatureHover(BaseModel):
    """Pointer entered or left a boundary feature."""
    feature: BoundaryFeature
    phase: HoverPhase


class FeaturePopupRequest(BaseModel):
    """Request popup content for a boundary feature."""
    feature: BoundaryFeature


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================

class ProjectDeleted(BaseModel):
    """Result of a delete. removed=False means no such project (not an error)."""
    project_id: int
    removed: bool


class FeaturePopup(BaseModel):
    """Popup lines; html is None when the popup must not be shown."""
    lines: List[PopupLine] = Field(default_factory=list)
    html: Optional[str] = None


class LayerOption(BaseModel):
    """One choice of the layer selector."""
    value: LayerType
    label: str
    resource: str
    selected: bool = False


class CategoryOption(BaseModel):
    """One choice of the category selector."""
    value: ProjectCategory
    label: str
    color: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
    errors: List[str] = Field(default_factory=list)
