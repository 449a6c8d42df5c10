# ============================================================================
# API ROUTES TESTS
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Tests - HTTP surface over the map orchestrator
# PURPOSE: Verify endpoints, status codes and payload shapes
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Routes Tests

Uses FastAPI TestClient against a real MapOrchestrator backed by an
in-memory boundary source.

Run with:
    pytest tests/test_routes.py -v
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import router, set_services
from core.config import Defaults
from services.map_orchestrator import MapOrchestrator
from tests.fakes import PROVINCES, StaticSource, default_results


# ============================================================================
# FIXTURES
# ============================================================================

def _make_test_app(orchestrator):
    """Create a test FastAPI app with the map routes wired to an orchestrator."""
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    set_services(orchestrator=orchestrator)
    return app


@pytest.fixture
def orchestrator():
    return MapOrchestrator(StaticSource(default_results(failing=PROVINCES)), defaults=Defaults())


@pytest.fixture
def client(orchestrator):
    yield TestClient(_make_test_app(orchestrator))
    set_services(orchestrator=None)


CLINIC = {
    "name": "Clinic",
    "district": "Pokhara",
    "category": "health",
    "location": {"lat": 28.2, "lng": 83.9},
}


# ============================================================================
# WIRING
# ============================================================================

class TestWiring:

    def test_503_when_not_initialized(self):
        app = FastAPI()
        app.include_router(router, prefix="/api/v1")
        set_services(orchestrator=None)

        response = TestClient(app).get("/api/v1/map")

        assert response.status_code == 503


# ============================================================================
# MAP
# ============================================================================

class TestMap:

    def test_initial_view(self, client):
        response = client.get("/api/v1/map")

        assert response.status_code == 200
        data = response.json()
        assert data["project_count"] == 0
        assert data["show_base_layer"] is True
        assert data["boundary"] is None
        assert data["viewport"]["zoom"] == 7.5

    def test_layers(self, client):
        data = client.get("/api/v1/map/layers").json()

        assert [option["value"] for option in data] == ["basic", "districts", "provinces"]
        selected = [option["value"] for option in data if option["selected"]]
        assert selected == ["districts"]

    def test_select_layer_loaded(self, client):
        response = client.put("/api/v1/map/layer", json={"layer": "basic"})

        assert response.status_code == 200
        data = response.json()
        assert data["layer"]["status"] == "loaded"
        assert data["show_base_layer"] is False
        assert data["boundary"]["type"] == "FeatureCollection"

    def test_select_layer_failure_is_not_an_error(self, client):
        response = client.put("/api/v1/map/layer", json={"layer": "provinces"})

        assert response.status_code == 200
        data = response.json()
        assert data["layer"]["status"] == "failed"
        assert data["boundary"] is None
        assert data["show_base_layer"] is True

    def test_select_unknown_layer(self, client):
        response = client.put("/api/v1/map/layer", json={"layer": "rivers"})
        assert response.status_code == 422

    def test_viewport_clamped(self, client):
        response = client.put(
            "/api/v1/map/viewport",
            json={"center": {"lat": 10.0, "lng": 84.0}, "zoom": 20},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["zoom"] == 13
        assert data["center"]["lat"] == 26.3

    @pytest.mark.parametrize("zoom,expected", [(30, 13), (1000, 13), (-5, 7.5), (0, 7.5)])
    def test_out_of_range_zoom_clamped(self, client, zoom, expected):
        response = client.put("/api/v1/map/viewport", json={"zoom": zoom})

        assert response.status_code == 200
        assert response.json()["zoom"] == expected

    def test_viewport_reset(self, client):
        client.put("/api/v1/map/viewport", json={"zoom": 10})

        data = client.post("/api/v1/map/viewport/reset").json()

        assert data["zoom"] == 7.5
        assert data["center"] == {"lat": 28.3949, "lng": 84.124}


# ============================================================================
# PROJECTS
# ============================================================================

class TestProjects:

    def test_create_and_list(self, client):
        response = client.post("/api/v1/projects", json=CLINIC)

        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Clinic"
        assert created["category"] == "health"

        listed = client.get("/api/v1/projects").json()
        assert [p["id"] for p in listed] == [created["id"]]

    def test_create_rejects_blank_name(self, client):
        response = client.post("/api/v1/projects", json={**CLINIC, "name": "   "})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert "Project name is required" in detail["errors"]
        assert client.get("/api/v1/projects").json() == []

    def test_create_accepts_long_name(self, client):
        response = client.post("/api/v1/projects", json={**CLINIC, "name": "x" * 300})

        assert response.status_code == 201
        assert response.json()["name"] == "x" * 300

    def test_form_accepts_long_district(self, client):
        response = client.patch("/api/v1/form", json={"district": "d" * 300})

        assert response.status_code == 200
        assert response.json()["draft"]["district"] == "d" * 300

    def test_create_rejects_out_of_range_latitude(self, client):
        response = client.post(
            "/api/v1/projects",
            json={**CLINIC, "location": {"lat": 91, "lng": 83.9}},
        )
        assert response.status_code == 422

    def test_create_with_id_reuse_rejected(self, client):
        assert client.post("/api/v1/projects", json={**CLINIC, "id": 7}).status_code == 201
        client.delete("/api/v1/projects/7")

        response = client.post("/api/v1/projects", json={**CLINIC, "id": 7})

        assert response.status_code == 422

    def test_delete_is_idempotent(self, client):
        project_id = client.post("/api/v1/projects", json=CLINIC).json()["id"]

        first = client.delete(f"/api/v1/projects/{project_id}").json()
        second = client.delete(f"/api/v1/projects/{project_id}").json()

        assert first == {"project_id": project_id, "removed": True}
        assert second == {"project_id": project_id, "removed": False}

    def test_select_focuses_viewport(self, client):
        project_id = client.post("/api/v1/projects", json=CLINIC).json()["id"]

        response = client.post(f"/api/v1/projects/{project_id}/select")

        assert response.status_code == 200
        data = response.json()
        assert data["center"] == {"lat": 28.2, "lng": 83.9}
        assert data["zoom"] == 12
        assert client.get("/api/v1/map").json()["selected_project_id"] == project_id

    def test_select_unknown(self, client):
        assert client.post("/api/v1/projects/12345/select").status_code == 404

    def test_categories(self, client):
        data = client.get("/api/v1/categories").json()

        by_value = {option["value"]: option for option in data}
        assert by_value["hydro"]["color"] == "#3b82f6"
        assert by_value["other"]["label"].endswith("Other")
        assert len(data) == 5


# ============================================================================
# FORM
# ============================================================================

class TestForm:

    def test_toggle_edit_submit(self, client):
        assert client.get("/api/v1/form").json()["visible"] is False
        assert client.post("/api/v1/form/toggle").json()["visible"] is True

        state = client.patch("/api/v1/form", json={"name": "Dam"}).json()
        assert state["can_submit"] is False

        state = client.patch("/api/v1/form", json={"district": "Dolakha", "category": "hydro"}).json()
        assert state["can_submit"] is True

        response = client.post("/api/v1/form/submit")
        assert response.status_code == 201
        assert response.json()["category"] == "hydro"

        form = client.get("/api/v1/form").json()
        assert form["visible"] is False
        assert form["draft"]["name"] == ""

    def test_submit_incomplete(self, client):
        client.post("/api/v1/form/toggle")

        response = client.post("/api/v1/form/submit")

        assert response.status_code == 422
        form = client.get("/api/v1/form").json()
        assert form["visible"] is True
        assert "District is required" in form["errors"]

    def test_patch_invalid_category(self, client):
        response = client.patch("/api/v1/form", json={"category": "mining"})
        assert response.status_code == 422


# ============================================================================
# FEATURES
# ============================================================================

class TestFeatures:

    def test_hover_enter_uses_wire_names(self, client):
        response = client.post(
            "/api/v1/features/hover",
            json={"feature": {"type": "Feature", "properties": {"DISTRICT": "KASKI"}}, "phase": "enter"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["weight"] == 3
        assert data["fillOpacity"] == 0.7

    def test_popup(self, client):
        response = client.post(
            "/api/v1/features/popup",
            json={"feature": {"type": "Feature", "properties": {"DISTRICT": "KASKI", "AREA": 2017.0}}},
        )

        data = response.json()
        assert data["lines"] == [
            {"key": "DISTRICT", "value": "KASKI"},
            {"key": "AREA", "value": "2017"},
        ]
        assert "<strong>DISTRICT:</strong> KASKI" in data["html"]

    def test_popup_suppressed_for_empty_properties(self, client):
        response = client.post(
            "/api/v1/features/popup",
            json={"feature": {"type": "Feature", "properties": {}}},
        )

        assert response.json() == {"lines": [], "html": None}
