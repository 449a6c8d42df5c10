# ============================================================================
# SERVICES MODULE
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Core - Map state logic layer
# PURPOSE: Controllers for projects, viewport, layers and feature interaction
# CREATED: 19 OCT 2026
# ============================================================================
"""
Services Module

Map state logic for the locator. Each controller is independently testable;
MapOrchestrator composes them.

Usage:
    from services import MapOrchestrator
    from infrastructure.boundary_source import HttpBoundarySource

    orchestrator = MapOrchestrator(HttpBoundarySource())
    await orchestrator.load_initial_layer()
"""

from .feature_interaction import FeatureInteractionController
from .project_store import ProjectStore, Rejected
from .project_form import ProjectFormController
from .viewport_controller import ViewportController
from .layer_loader import LayerLoader
from .map_orchestrator import MapOrchestrator

__all__ = [
    "FeatureInteractionController",
    "ProjectStore",
    "Rejected",
    "ProjectFormController",
    "ViewportController",
    "LayerLoader",
    "MapOrchestrator",
]
