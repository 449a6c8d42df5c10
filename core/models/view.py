# ============================================================================
# MAP VIEW MODELS
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Domain model - Derived read-only view for the rendering layer
# PURPOSE: Everything the browser needs to draw one frame of the map
# CREATED: 19 OCT 2026
# ============================================================================
"""
Map View Models

MapView is recomputed by MapOrchestrator after every owned-state change and
handed to subscribers. It is a snapshot - mutating the orchestrator never
changes a MapView already handed out.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from core.contracts import LayerType, LoadStatus
from core.models.feature import BoundaryDocument, PopupLine, StylePatch
from core.models.icon import IconDescriptor
from core.models.project import Project, ProjectDraft
from core.models.viewport import Viewport


class LayerState(BaseModel):
    """Snapshot of the boundary loader."""

    layer: Optional[LayerType] = None
    status: LoadStatus = LoadStatus.IDLE
    generation: int = 0
    resource: Optional[str] = None
    error: Optional[str] = None

    model_config = {"frozen": True}


class MarkerView(BaseModel):
    """A project marker with its precomputed iconography and popup content."""

    project: Project
    icon: IconDescriptor
    icon_html: str
    tooltip_html: str
    popup_lines: List[PopupLine] = Field(default_factory=list)
    list_label: str
    coordinates_label: str

    model_config = {"frozen": True}


class ProjectFormState(BaseModel):
    """The add-project form: visibility, current draft, submit availability."""

    visible: bool = False
    draft: ProjectDraft = Field(default_factory=ProjectDraft)
    can_submit: bool = False
    errors: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class MapView(BaseModel):
    """
    Read-only derived view.

    show_base_layer is true whenever no boundary document is available
    (still loading, or the load failed) - the renderer then shows plain
    tile imagery instead of the overlay.
    """

    revision: int = 0
    layer: LayerState
    boundary: Optional[BoundaryDocument] = None
    show_base_layer: bool = True
    base_style: StylePatch
    tile_url: str
    tile_attribution: str
    viewport: Viewport
    selected_project_id: Optional[int] = None
    markers: List[MarkerView] = Field(default_factory=list)
    project_count: int = 0
    form: ProjectFormState = Field(default_factory=ProjectFormState)

    model_config = {"frozen": True}


__all__ = ["LayerState", "MarkerView", "ProjectFormState", "MapView"]
