# ============================================================================
# API MODULE
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Core - FastAPI routes
# PURPOSE: HTTP API for the browser map
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Module

FastAPI routes for the locator.
"""

from .routes import router, set_services
from .schemas import (
    LayerSelect,
    ViewportUpdate,
    ProjectCreate,
    FormUpdate,
    FeatureHover,
)

__all__ = [
    "router",
    "set_services",
    "LayerSelect",
    "ViewportUpdate",
    "ProjectCreate",
    "FormUpdate",
    "FeatureHover",
]
