# ============================================================================
# VIEWPORT CONTROLLER
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Service - Map center/zoom state machine
# PURPOSE: Own the viewport; focus projects, reset, clamp gestures
# CREATED: 19 OCT 2026
# ============================================================================
"""
Viewport Controller

Owns the single current Viewport. Every change goes through _apply(), which
clamps zoom into [min_zoom, max_zoom] and the center into the pan bounds,
so no out-of-range view is ever handed to the renderer.

Out-of-range requests are clamped, never rejected - the same thing a drag
or pinch gesture does at the edge of the map.
"""

from typing import Optional

from core.config import MapDefaults
from core.logging import ComponentType, get_logger
from core.models import Bounds, LatLng, Project, Viewport

logger = get_logger(__name__, ComponentType.CONTROLLER)


class ViewportController:
    """Current map center and zoom."""

    def __init__(self, config: Optional[MapDefaults] = None):
        self.config = config or MapDefaults()
        if self.config.min_zoom > self.config.max_zoom:
            raise ValueError(
                f"min_zoom {self.config.min_zoom} exceeds max_zoom {self.config.max_zoom}"
            )
        self.bounds = Bounds.of(self.config.bounds)
        self.overview_center = LatLng.of(self.config.default_center)
        self._viewport = self._build(self.overview_center, self.config.default_zoom)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def focus_zoom(self) -> float:
        return self.clamp_zoom(self.config.focus_zoom)

    def clamp_zoom(self, zoom: float) -> float:
        return max(self.config.min_zoom, min(self.config.max_zoom, float(zoom)))

    def _build(self, center: LatLng, zoom: float) -> Viewport:
        return Viewport(
            center=self.bounds.clamp(center),
            zoom=self.clamp_zoom(zoom),
            min_zoom=self.config.min_zoom,
            max_zoom=self.config.max_zoom,
            bounds=self.bounds,
        )

    def _apply(self, center: LatLng, zoom: float) -> Viewport:
        viewport = self._build(center, zoom)
        if viewport.center != center or viewport.zoom != zoom:
            logger.debug(
                f"Viewport clamped: requested ({center.lat}, {center.lng}) z{zoom}, "
                f"applied ({viewport.center.lat}, {viewport.center.lng}) z{viewport.zoom}"
            )
        self._viewport = viewport
        return viewport

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def focus(self, project: Project) -> Viewport:
        """Center on a project at the focused zoom level."""
        return self._apply(project.location, self.config.focus_zoom)

    def reset_to_overview(self) -> Viewport:
        """Back to the configured country-wide view."""
        return self._apply(self.overview_center, self.config.default_zoom)

    def set_zoom(self, zoom: float) -> Viewport:
        return self._apply(self._viewport.center, zoom)

    def set_center(self, center: LatLng) -> Viewport:
        return self._apply(center, self._viewport.zoom)

    def set_view(self, center: LatLng, zoom: float) -> Viewport:
        """Apply a combined pan and zoom in one step."""
        return self._apply(center, zoom)


__all__ = ["ViewportController"]
