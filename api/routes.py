# ============================================================================
# API ROUTES
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Core - FastAPI route definitions
# PURPOSE: HTTP endpoints the browser map uses to read state and post intents
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Routes

The browser is the rendering boundary. It reads the derived MapView and
posts user intents (layer pick, list click, form edits, hover) back here.

Endpoints:
- GET    /api/v1/map                     - Current MapView
- GET    /api/v1/map/layers              - Layer selector choices
- PUT    /api/v1/map/layer               - Switch layer (waits for load)
- PUT    /api/v1/map/viewport            - Pan/zoom (clamped)
- POST   /api/v1/map/viewport/reset      - Back to overview
- GET    /api/v1/projects                - Project list
- POST   /api/v1/projects                - Add project
- DELETE /api/v1/projects/{id}           - Delete project (idempotent)
- POST   /api/v1/projects/{id}/select    - Focus viewport on project
- GET    /api/v1/categories              - Category selector choices
- GET    /api/v1/form                    - Add-project form state
- POST   /api/v1/form/toggle             - Open/cancel the form
- PATCH  /api/v1/form                    - Edit the draft
- POST   /api/v1/form/submit             - Submit the draft
- POST   /api/v1/features/hover          - Style patch for hover enter/exit
- POST   /api/v1/features/popup          - Popup content for a feature
"""

from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from core.logging import ComponentType, get_logger
from core.models import MapView, Project, ProjectFormState, StylePatch, Viewport
from services import icon_factory
from services.project_store import Rejected
from .schemas import (
    CategoryOption,
    FeatureHover,
    FeaturePopup,
    FeaturePopupRequest,
    FormUpdate,
    LayerOption,
    LayerSelect,
    ProjectCreate,
    ProjectDeleted,
    ViewportUpdate,
)

logger = get_logger(__name__, ComponentType.API)

router = APIRouter()


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================
# Set by the main app at startup

_orchestrator = None


def set_services(orchestrator):
    """Set the map orchestrator used by all routes."""
    global _orchestrator
    _orchestrator = orchestrator


def get_orchestrator():
    if _orchestrator is None:
        raise HTTPException(503, "Map orchestrator not initialized")
    return _orchestrator


def _rejected(result: Rejected) -> HTTPException:
    logger.info(f"Project rejected: {'; '.join(result.errors)}")
    return HTTPException(
        status_code=422,
        detail={"error": "Project rejected", "errors": result.errors},
    )


# ============================================================================
# MAP
# ============================================================================

@router.get("/map", response_model=MapView, tags=["Map"])
async def get_map():
    """Current derived map view (markers, viewport, boundary or fallback)."""
    return get_orchestrator().view()


@router.get("/map/layers", response_model=List[LayerOption], tags=["Map"])
async def list_layers():
    orchestrator = get_orchestrator()
    layers = orchestrator.defaults.layers
    return [
        LayerOption(
            value=layer,
            label=layers.labels.get(layer, layer.value),
            resource=resource,
            selected=layer == orchestrator.selected_layer,
        )
        for layer, resource in layers.resources.items()
    ]


@router.put("/map/layer", response_model=MapView, tags=["Map"])
async def select_layer(request: LayerSelect):
    """
    Switch the boundary layer.

    Responds once this selection has settled. A load failure is not an
    error response: the view comes back with show_base_layer=true.
    """
    orchestrator = get_orchestrator()
    await orchestrator.select_layer(request.layer)
    return orchestrator.view()


@router.put("/map/viewport", response_model=Viewport, tags=["Map"])
async def update_viewport(request: ViewportUpdate):
    return get_orchestrator().set_view(center=request.center, zoom=request.zoom)


@router.post("/map/viewport/reset", response_model=Viewport, tags=["Map"])
async def reset_viewport():
    return get_orchestrator().reset_viewport()


# ============================================================================
# PROJECTS
# ============================================================================

@router.get("/projects", response_model=List[Project], tags=["Projects"])
async def list_projects():
    return get_orchestrator().projects()


@router.post("/projects", response_model=Project, status_code=201, tags=["Projects"])
async def create_project(request: ProjectCreate):
    result = get_orchestrator().add_project(request.to_draft(), project_id=request.id)
    if isinstance(result, Rejected):
        raise _rejected(result)
    return result


@router.delete("/projects/{project_id}", response_model=ProjectDeleted, tags=["Projects"])
async def delete_project(project_id: int):
    removed = get_orchestrator().delete_project(project_id)
    return ProjectDeleted(project_id=project_id, removed=removed)


@router.post("/projects/{project_id}/select", response_model=Viewport, tags=["Projects"])
async def select_project(project_id: int):
    viewport = get_orchestrator().select_project(project_id)
    if viewport is None:
        raise HTTPException(404, f"Project not found: {project_id}")
    return viewport


@router.get("/categories", response_model=List[CategoryOption], tags=["Projects"])
async def list_categories():
    return [CategoryOption(**option) for option in icon_factory.category_options()]


# ============================================================================
# FORM
# ============================================================================

@router.get("/form", response_model=ProjectFormState, tags=["Form"])
async def get_form():
    return get_orchestrator().form.state()


@router.post("/form/toggle", response_model=ProjectFormState, tags=["Form"])
async def toggle_form():
    return get_orchestrator().toggle_form()


@router.patch("/form", response_model=ProjectFormState, tags=["Form"])
async def update_form(request: FormUpdate):
    try:
        return get_orchestrator().update_form(**request.model_dump(exclude_none=True))
    except ValidationError as e:
        raise HTTPException(422, f"Invalid form value: {e}")


@router.post("/form/submit", response_model=Project, status_code=201, tags=["Form"])
async def submit_form():
    result = get_orchestrator().submit_form()
    if isinstance(result, Rejected):
        raise _rejected(result)
    return result


# ============================================================================
# BOUNDARY FEATURES
# ============================================================================

@router.post("/features/hover", response_model=StylePatch, tags=["Features"])
async def hover_feature(request: FeatureHover):
    """Style the renderer should apply to the hovered feature."""
    return get_orchestrator().hover_feature(request.feature, request.phase)


@router.post("/features/popup", response_model=FeaturePopup, tags=["Features"])
async def feature_popup(request: FeaturePopupRequest):
    orchestrator = get_orchestrator()
    return FeaturePopup(
        lines=orchestrator.feature_popup(request.feature),
        html=orchestrator.feature_popup_html(request.feature),
    )
