# ============================================================================
# MAP ORCHESTRATOR TESTS
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Tests - Controller composition and derived view
# PURPOSE: Verify selection/viewport coupling, fallback view, notifications
# CREATED: 19 OCT 2026
# ============================================================================
"""
Map Orchestrator Tests

Covers:
1. End-to-end: add, select (focus), delete (viewport untouched)
2. Layer selection drives the loader; null document -> base layer fallback
3. Optional viewport reset on layer change
4. Subscriber notifications and listener isolation
5. Derived marker views

Run with:
    pytest tests/test_map_orchestrator.py -v
"""

import asyncio
from dataclasses import replace

import pytest

from core.config import Defaults, MapDefaults
from core.contracts import HoverPhase, LayerType, LoadStatus, ProjectCategory
from core.models import BoundaryFeature, LatLng, Project, draft_of
from services.map_orchestrator import MapOrchestrator
from services.project_store import ProjectStore, Rejected
from tests.fakes import DISTRICTS, PROVINCES, GatedSource, StaticSource, default_results


# ============================================================================
# HELPERS
# ============================================================================

def _orchestrator(source=None, defaults=None):
    return MapOrchestrator(
        source or StaticSource(default_results()),
        defaults=defaults or Defaults(),
        store=ProjectStore(clock=lambda: 1_000),
    )


def _clinic():
    return draft_of(
        name="Clinic",
        district="Pokhara",
        lat=28.2,
        lng=83.9,
        category=ProjectCategory.HEALTH,
    )


# ============================================================================
# END-TO-END
# ============================================================================

class TestEndToEnd:

    def test_add_select_delete(self):
        orchestrator = _orchestrator()
        assert orchestrator.view().project_count == 0

        project = orchestrator.add_project(_clinic())
        assert isinstance(project, Project)
        assert orchestrator.view().project_count == 1

        viewport = orchestrator.select_project(project.id)
        assert viewport.center == LatLng(lat=28.2, lng=83.9)
        assert viewport.zoom == 12
        assert orchestrator.view().selected_project_id == project.id

        assert orchestrator.delete_project(project.id) is True
        view = orchestrator.view()
        assert view.project_count == 0
        assert view.markers == []
        assert view.selected_project_id is None
        # No auto-reset on delete
        assert view.viewport == viewport

    def test_form_flow(self):
        orchestrator = _orchestrator()
        orchestrator.toggle_form()
        orchestrator.update_form(name="School", district="Kaski", category=ProjectCategory.EDUCATION)

        result = orchestrator.submit_form()

        assert isinstance(result, Project)
        view = orchestrator.view()
        assert view.project_count == 1
        assert view.form.visible is False
        assert view.markers[0].icon.color == "#f59e0b"


# ============================================================================
# PROJECTS
# ============================================================================

class TestProjects:

    def test_rejected_add_does_not_notify(self):
        orchestrator = _orchestrator()
        views = []
        orchestrator.subscribe(views.append)

        result = orchestrator.add_project(draft_of(name="", district="Pokhara", lat=28.2, lng=83.9))

        assert isinstance(result, Rejected)
        assert views == []
        assert orchestrator.view().project_count == 0

    def test_select_unknown_project(self):
        orchestrator = _orchestrator()
        before = orchestrator.view().viewport
        assert orchestrator.select_project(999) is None
        assert orchestrator.view().viewport == before

    def test_delete_other_project_keeps_selection(self):
        orchestrator = _orchestrator()
        first = orchestrator.add_project(_clinic())
        second = orchestrator.add_project(_clinic())
        orchestrator.select_project(first.id)

        orchestrator.delete_project(second.id)

        assert orchestrator.view().selected_project_id == first.id

    def test_delete_unknown_is_idempotent(self):
        orchestrator = _orchestrator()
        orchestrator.add_project(_clinic())
        revision = orchestrator.revision

        assert orchestrator.delete_project(424242) is False
        assert orchestrator.revision == revision

    def test_markers_follow_insertion_order(self):
        orchestrator = _orchestrator()
        orchestrator.add_project(draft_of(name="B", district="X", lat=28, lng=84, category=ProjectCategory.HYDRO))
        orchestrator.add_project(draft_of(name="A", district="Y", lat=27, lng=85))

        markers = orchestrator.view().markers

        assert [m.project.name for m in markers] == ["B", "A"]
        assert markers[0].icon.glyph == "\u26a1"
        assert markers[1].icon.category == ProjectCategory.OTHER
        assert "B" in markers[0].tooltip_html


# ============================================================================
# LAYERS
# ============================================================================

class TestLayers:

    def test_initial_view_shows_base_layer(self):
        view = _orchestrator().view()
        assert view.layer.status == LoadStatus.IDLE
        assert view.boundary is None
        assert view.show_base_layer is True

    def test_initial_layer_load(self):
        orchestrator = _orchestrator()
        state = asyncio.run(orchestrator.load_initial_layer())

        view = orchestrator.view()
        assert state.layer == LayerType.DISTRICTS
        assert view.boundary is not None
        assert view.show_base_layer is False
        assert view.base_style.fill_color == "#93c5fd"

    def test_select_layer_loads_its_own_resource(self):
        source = StaticSource(default_results())
        orchestrator = _orchestrator(source)

        asyncio.run(orchestrator.select_layer(LayerType.PROVINCES))

        assert source.calls == [PROVINCES]
        assert orchestrator.selected_layer == LayerType.PROVINCES
        assert orchestrator.view().layer.resource == PROVINCES

    def test_failed_layer_falls_back_to_base(self):
        orchestrator = _orchestrator(StaticSource(default_results(failing=PROVINCES)))
        orchestrator.add_project(_clinic())

        asyncio.run(orchestrator.select_layer(LayerType.PROVINCES))

        view = orchestrator.view()
        assert view.layer.status == LoadStatus.FAILED
        assert view.boundary is None
        assert view.show_base_layer is True
        # Markers and viewport keep working in degraded mode
        assert view.project_count == 1
        assert orchestrator.select_project(view.markers[0].project.id) is not None

    def test_stale_layer_result_not_published(self):
        results = default_results()

        async def scenario():
            source = GatedSource(results)
            orchestrator = _orchestrator(source)

            slow = asyncio.create_task(orchestrator.select_layer(LayerType.PROVINCES))
            await asyncio.sleep(0)
            fast = asyncio.create_task(orchestrator.select_layer(LayerType.DISTRICTS))
            await asyncio.sleep(0)

            source.release(DISTRICTS)
            await fast
            source.release(PROVINCES)
            await slow
            return orchestrator

        orchestrator = asyncio.run(scenario())

        view = orchestrator.view()
        assert view.boundary == results[DISTRICTS]
        assert view.layer.layer == LayerType.DISTRICTS

    def test_layer_change_keeps_viewport_by_default(self):
        orchestrator = _orchestrator()
        project = orchestrator.add_project(_clinic())
        focused = orchestrator.select_project(project.id)

        asyncio.run(orchestrator.select_layer(LayerType.BASIC))

        assert orchestrator.view().viewport == focused

    def test_layer_change_resets_viewport_when_configured(self):
        defaults = Defaults(map=replace(MapDefaults(), reset_on_layer_change=True))
        orchestrator = _orchestrator(defaults=defaults)
        project = orchestrator.add_project(_clinic())
        orchestrator.select_project(project.id)

        asyncio.run(orchestrator.select_layer(LayerType.BASIC))

        viewport = orchestrator.view().viewport
        assert viewport.center == LatLng(lat=28.3949, lng=84.124)
        assert viewport.zoom == 7.5


# ============================================================================
# VIEWPORT
# ============================================================================

class TestViewport:

    def test_set_view_partial(self):
        orchestrator = _orchestrator()
        viewport = orchestrator.set_view(zoom=99)
        assert viewport.zoom == 13
        assert viewport.center == LatLng(lat=28.3949, lng=84.124)

    def test_reset(self):
        orchestrator = _orchestrator()
        orchestrator.set_center(LatLng(lat=27.0, lng=86.0))
        orchestrator.set_zoom(11)
        viewport = orchestrator.reset_viewport()
        assert viewport.zoom == 7.5


# ============================================================================
# FEATURES
# ============================================================================

class TestFeatures:

    def test_hover_does_not_change_revision(self):
        orchestrator = _orchestrator()
        feature = BoundaryFeature(properties={"DISTRICT": "KASKI"})
        revision = orchestrator.revision

        enter = orchestrator.hover_feature(feature, HoverPhase.ENTER)
        exit_ = orchestrator.hover_feature(feature, HoverPhase.EXIT)

        assert enter.weight == 3
        assert exit_.weight == 2
        assert orchestrator.revision == revision

    def test_feature_popup(self):
        orchestrator = _orchestrator()
        feature = BoundaryFeature(properties={"a": 1, "b": 2})
        assert [line.key for line in orchestrator.feature_popup(feature)] == ["a", "b"]
        assert orchestrator.feature_popup_html(BoundaryFeature()) is None


# ============================================================================
# SUBSCRIPTIONS
# ============================================================================

class TestSubscriptions:

    def test_listener_receives_views(self):
        orchestrator = _orchestrator()
        views = []
        orchestrator.subscribe(views.append)

        project = orchestrator.add_project(_clinic())
        orchestrator.select_project(project.id)

        assert len(views) == 2
        assert views[0].project_count == 1
        assert views[1].selected_project_id == project.id
        assert views[1].revision > views[0].revision

    def test_layer_load_notifies_loading_then_loaded(self):
        orchestrator = _orchestrator()
        views = []
        orchestrator.subscribe(views.append)

        asyncio.run(orchestrator.select_layer(LayerType.DISTRICTS))

        assert [v.layer.status for v in views] == [LoadStatus.LOADING, LoadStatus.LOADED]
        assert views[0].show_base_layer is True
        assert views[1].show_base_layer is False

    def test_unsubscribe(self):
        orchestrator = _orchestrator()
        views = []
        unsubscribe = orchestrator.subscribe(views.append)
        unsubscribe()
        unsubscribe()

        orchestrator.add_project(_clinic())

        assert views == []

    def test_failing_listener_isolated(self):
        orchestrator = _orchestrator()
        views = []

        def broken(view):
            raise RuntimeError("renderer crashed")

        orchestrator.subscribe(broken)
        orchestrator.subscribe(views.append)

        orchestrator.add_project(_clinic())

        assert len(views) == 1

    def test_views_are_snapshots(self):
        orchestrator = _orchestrator()
        before = orchestrator.view()
        orchestrator.add_project(_clinic())
        assert before.project_count == 0
        assert before.markers == []
