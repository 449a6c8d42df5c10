# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Core module initialization
# PURPOSE: Export core contracts, errors and models
# CREATED: 19 OCT 2026
# ============================================================================

from core.contracts import ProjectCategory, LayerType, LoadStatus, HoverPhase
from core.errors import LocatorError, BoundaryLoadError
from core.models import (
    LatLng,
    Bounds,
    Project,
    ProjectDraft,
    Viewport,
    BoundaryFeature,
    BoundaryDocument,
    StylePatch,
    PopupLine,
    IconDescriptor,
    MapView,
)

__all__ = [
    # Enums
    "ProjectCategory",
    "LayerType",
    "LoadStatus",
    "HoverPhase",
    # Errors
    "LocatorError",
    "BoundaryLoadError",
    # Models
    "LatLng",
    "Bounds",
    "Project",
    "ProjectDraft",
    "Viewport",
    "BoundaryFeature",
    "BoundaryDocument",
    "StylePatch",
    "PopupLine",
    "IconDescriptor",
    "MapView",
]
