# ============================================================================
# MODELS MODULE
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# CREATED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

All Pydantic models for the locator. Domain records (Project, Viewport)
are frozen; controllers replace them rather than mutate them.
"""

from core.models.geo import LatLng, Bounds
from core.models.project import Project, ProjectDraft, DEFAULT_DRAFT_LOCATION, draft_of
from core.models.viewport import Viewport
from core.models.feature import BoundaryFeature, BoundaryDocument, StylePatch, PopupLine
from core.models.icon import IconShape, IconDescriptor
from core.models.view import LayerState, MarkerView, ProjectFormState, MapView

__all__ = [
    # Geo
    "LatLng",
    "Bounds",
    # Project
    "Project",
    "ProjectDraft",
    "DEFAULT_DRAFT_LOCATION",
    "draft_of",
    # Viewport
    "Viewport",
    # Boundary features
    "BoundaryFeature",
    "BoundaryDocument",
    "StylePatch",
    "PopupLine",
    # Icons
    "IconShape",
    "IconDescriptor",
    # Views
    "LayerState",
    "MarkerView",
    "ProjectFormState",
    "MapView",
]
