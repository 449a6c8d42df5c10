# ============================================================================
# MAP ORCHESTRATOR
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Service - Composition root for map state
# PURPOSE: Own layer/project selection, wire controllers, publish MapView
# CREATED: 19 OCT 2026
# ============================================================================
"""
Map Orchestrator

Single source of truth for the map screen. Owns independently testable
controllers and couples them:

    list click      -> ViewportController.focus
    layer selector  -> LayerLoader.select (optionally resetting the view)
    form submit     -> ProjectStore.add (via ProjectFormController)
    marker delete   -> ProjectStore.remove (viewport left alone)

After every owned-state change the orchestrator recomputes a MapView and
hands it to subscribers. Subscribers never reach into controllers.

All mutation happens on the event loop thread, one event at a time, so no
locking is needed. The only suspension point is the boundary fetch inside
select_layer().
"""

from typing import Any, Callable, List, Optional

from core.config import Defaults, get_defaults
from core.contracts import HoverPhase, LayerType
from core.logging import ComponentType, get_logger, log_context
from core.models import (
    BoundaryFeature,
    LatLng,
    LayerState,
    MapView,
    MarkerView,
    PopupLine,
    Project,
    ProjectDraft,
    ProjectFormState,
    StylePatch,
    Viewport,
)
from infrastructure.boundary_source import BoundarySource
from services import icon_factory
from services.feature_interaction import FeatureInteractionController
from services.layer_loader import LayerLoader
from services.project_form import ProjectFormController
from services.project_store import AddResult, ProjectStore, Rejected
from services.viewport_controller import ViewportController

logger = get_logger(__name__, ComponentType.SERVICE)

ViewListener = Callable[[MapView], None]


def build_marker(project: Project) -> MarkerView:
    """Derive the marker view (icon, tooltip, popup, labels) for a project."""
    icon = icon_factory.icon_for(project.category)
    return MarkerView(
        project=project,
        icon=icon,
        icon_html=icon_factory.icon_html(icon),
        tooltip_html=icon_factory.tooltip_html(project),
        popup_lines=icon_factory.popup_lines(project),
        list_label=icon_factory.list_label(project),
        coordinates_label=icon_factory.coordinates_label(project),
    )


class MapOrchestrator:
    """Composes store, form, viewport, layer loader and feature interaction."""

    def __init__(
        self,
        source: BoundarySource,
        defaults: Optional[Defaults] = None,
        store: Optional[ProjectStore] = None,
    ):
        """
        Args:
            source: Boundary document source for the layer loader
            defaults: Configuration (global defaults if omitted)
            store: Project store (empty store if omitted)
        """
        self.defaults = defaults or get_defaults()
        self.store = store or ProjectStore()
        self.form = ProjectFormController(self.store)
        self.viewport = ViewportController(self.defaults.map)
        self.features = FeatureInteractionController()
        self.loader = LayerLoader(source, self.defaults.layers, on_change=self._on_layer_change)

        self.selected_layer: LayerType = self.defaults.layers.default_layer
        self.selected_project_id: Optional[int] = None

        self._listeners: List[ViewListener] = []
        self._revision = 0

    # =========================================================================
    # SUBSCRIPTIONS
    # =========================================================================

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """
        Register a listener for MapView updates.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        self._revision += 1
        if not self._listeners:
            return
        view = self.view()
        for listener in list(self._listeners):
            try:
                listener(view)
            except Exception as e:
                # One broken subscriber must not starve the others
                logger.warning(f"Map view listener {listener!r} failed: {e}")

    def _on_layer_change(self, state: LayerState) -> None:
        self._changed()

    # =========================================================================
    # DERIVED VIEW
    # =========================================================================

    @property
    def revision(self) -> int:
        return self._revision

    def markers(self) -> List[MarkerView]:
        return [build_marker(project) for project in self.store.list()]

    def view(self) -> MapView:
        """Current read-only view for the rendering layer."""
        boundary = self.loader.document
        layers = self.defaults.layers
        return MapView(
            revision=self._revision,
            layer=self.loader.state,
            boundary=boundary,
            show_base_layer=boundary is None,
            base_style=self.features.base_style,
            tile_url=layers.tile_url,
            tile_attribution=layers.tile_attribution,
            viewport=self.viewport.viewport,
            selected_project_id=self.selected_project_id,
            markers=self.markers(),
            project_count=len(self.store),
            form=self.form.state(),
        )

    # =========================================================================
    # LAYER
    # =========================================================================

    async def select_layer(self, layer: LayerType) -> LayerState:
        """
        Switch the boundary layer and load its document.

        A superseded selection's result is discarded by the loader; the
        returned state is whatever is current when this call settles.
        """
        self.selected_layer = LayerType(layer)
        if self.defaults.map.reset_on_layer_change:
            self.viewport.reset_to_overview()
        return await self.loader.select(self.selected_layer)

    async def load_initial_layer(self) -> LayerState:
        """Startup: overview viewport and the configured default layer."""
        self.viewport.reset_to_overview()
        return await self.loader.select(self.selected_layer)

    # =========================================================================
    # PROJECTS
    # =========================================================================

    def projects(self) -> List[Project]:
        return self.store.list()

    def add_project(self, draft: ProjectDraft, project_id: Optional[int] = None) -> AddResult:
        result = self.store.add(draft, project_id=project_id)
        if not isinstance(result, Rejected):
            self._changed()
        return result

    def delete_project(self, project_id: int) -> bool:
        """
        Remove a project. The viewport is left where it is.

        Returns:
            Whether a project was removed.
        """
        removed = self.store.remove(project_id)
        if removed:
            if self.selected_project_id == project_id:
                self.selected_project_id = None
            self._changed()
        return removed

    def select_project(self, project_id: int) -> Optional[Viewport]:
        """
        List-item click: focus the viewport on a project.

        Returns:
            The new viewport, or None if no project has that id.
        """
        project = self.store.get(project_id)
        if project is None:
            logger.debug(f"Select ignored, no project with id {project_id}")
            return None

        with log_context(project_id=project_id):
            self.selected_project_id = project_id
            viewport = self.viewport.focus(project)
            logger.info(
                f"Focused project '{project.name}' at ({viewport.center.lat}, {viewport.center.lng})"
            )
        self._changed()
        return viewport

    # =========================================================================
    # FORM
    # =========================================================================

    def toggle_form(self) -> ProjectFormState:
        state = self.form.toggle()
        self._changed()
        return state

    def update_form(self, **fields: Any) -> ProjectFormState:
        state = self.form.update(**fields)
        self._changed()
        return state

    def submit_form(self) -> AddResult:
        result = self.form.submit()
        self._changed()
        return result

    # =========================================================================
    # VIEWPORT
    # =========================================================================

    def set_zoom(self, zoom: float) -> Viewport:
        viewport = self.viewport.set_zoom(zoom)
        self._changed()
        return viewport

    def set_center(self, center: LatLng) -> Viewport:
        viewport = self.viewport.set_center(center)
        self._changed()
        return viewport

    def set_view(self, center: Optional[LatLng] = None, zoom: Optional[float] = None) -> Viewport:
        current = self.viewport.viewport
        viewport = self.viewport.set_view(
            center if center is not None else current.center,
            zoom if zoom is not None else current.zoom,
        )
        self._changed()
        return viewport

    def reset_viewport(self) -> Viewport:
        viewport = self.viewport.reset_to_overview()
        self._changed()
        return viewport

    # =========================================================================
    # BOUNDARY FEATURES
    # =========================================================================

    def hover_feature(self, feature: BoundaryFeature, phase: HoverPhase) -> StylePatch:
        """Style patch for a hover transition. Does not change owned state."""
        return self.features.on_hover(feature, HoverPhase(phase))

    def feature_popup(self, feature: BoundaryFeature) -> List[PopupLine]:
        return self.features.popup_content_for(feature)

    def feature_popup_html(self, feature: BoundaryFeature) -> Optional[str]:
        return self.features.popup_html(feature)


__all__ = ["MapOrchestrator", "ViewListener", "build_marker"]
