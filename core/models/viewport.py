# ============================================================================
# VIEWPORT MODEL
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Domain model - Map center and zoom
# PURPOSE: Immutable viewport snapshot handed to the rendering layer
# CREATED: 19 OCT 2026
# ============================================================================
"""
Viewport Model

A snapshot of the map view. ViewportController produces a new instance
on every change; nothing mutates one in place.
"""

from pydantic import BaseModel, Field

from core.models.geo import Bounds, LatLng


class Viewport(BaseModel):
    """Center, zoom and the fixed pan bounds."""

    center: LatLng
    zoom: float = Field(..., ge=0)
    min_zoom: float = Field(..., ge=0)
    max_zoom: float = Field(..., ge=0)
    bounds: Bounds

    model_config = {"frozen": True}

    def is_within_limits(self) -> bool:
        return (
            self.min_zoom <= self.zoom <= self.max_zoom
            and self.bounds.contains(self.center)
        )


__all__ = ["Viewport"]
