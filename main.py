# ============================================================================
# PROJECT LOCATOR - MAIN APPLICATION
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Core - FastAPI application entry point
# PURPOSE: Main application wiring the map orchestrator to HTTP
# CREATED: 19 OCT 2026
# ============================================================================
"""
Project Locator Main Application

FastAPI application that:
1. Builds the map orchestrator and its boundary source
2. Loads the default boundary layer at startup
3. Serves boundary GeoJSON files and the map API

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import asyncio
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from __version__ import __version__, BUILD_DATE, EPOCH
from api.routes import router, set_services
from core.config import get_defaults
from core.contracts import ProjectCategory
from core.logging import ComponentType, configure_logging, get_logger
from core.models import draft_of
from infrastructure.boundary_source import HttpBoundarySource
from services import MapOrchestrator

configure_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
)
logger = get_logger(__name__, ComponentType.API)

# Sample projects shown when SEED_DEMO_PROJECTS is enabled
DEMO_PROJECTS = [
    draft_of(
        name="Hydro Project A",
        district="Kathmandu",
        lat=27.7172,
        lng=85.324,
        category=ProjectCategory.HYDRO,
        description="Renewable energy",
    ),
    draft_of(
        name="School Building",
        district="Pokhara",
        lat=28.2096,
        lng=83.9856,
        category=ProjectCategory.EDUCATION,
        description="Education infrastructure",
    ),
]

# Global instances
_orchestrator: Optional[MapOrchestrator] = None


async def _load_initial_layer(orchestrator: MapOrchestrator) -> None:
    """Load the default layer. Failures degrade to base imagery."""
    state = await orchestrator.load_initial_layer()
    logger.info(f"Initial boundary layer '{state.layer.value}': {state.status.value}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Initializes the orchestrator on startup, closes the HTTP client on shutdown.
    """
    global _orchestrator

    logger.info(f"Starting Project Locator v{__version__} (Epoch {EPOCH}, Build {BUILD_DATE})")

    defaults = get_defaults()
    source = HttpBoundarySource(base_url=defaults.layers.base_url, http_config=defaults.http)
    _orchestrator = MapOrchestrator(source, defaults)

    if defaults.layers.seed_demo_projects:
        for draft in DEMO_PROJECTS:
            _orchestrator.add_project(draft)
        logger.info(f"Seeded {len(DEMO_PROJECTS)} demo projects")

    set_services(orchestrator=_orchestrator)

    # Runs in the background: boundary files may be served by this same app,
    # which only accepts requests once startup finishes.
    initial_load = asyncio.create_task(_load_initial_layer(_orchestrator))

    yield

    logger.info("Shutting down Project Locator...")
    if not initial_load.done():
        initial_load.cancel()
    await source.aclose()
    logger.info("Project Locator stopped")


# Create FastAPI app
app = FastAPI(
    title="Project Locator",
    description="Boundary map with project markers and synchronized viewport",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Boundary GeoJSON files, fetched back through BOUNDARY_BASE_URL
app.mount(
    "/boundaries",
    StaticFiles(directory=get_defaults().layers.data_dir, check_dir=False),
    name="boundaries",
)

# Include API routes
app.include_router(router, prefix="/api/v1")


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "Project Locator",
        "version": __version__,
        "epoch": EPOCH,
        "build_date": BUILD_DATE,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/livez")
async def livez():
    """Liveness probe."""
    return {"status": "ok"}


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=os.environ.get("RELOAD", "false").lower() == "true",
    )
