"""Tests for the FastAPI server."""
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from label_creator.api import server


ROOT = Path(__file__).resolve().parent.parent
DEFAULT_PRESETS = str(ROOT / "data" / "presets" / "default_presets.json")


@pytest.fixture
def client(monkeypatch, tmp_path):
    """Create a test client reading the bundled presets."""
    monkeypatch.setattr(server, "presets_path", DEFAULT_PRESETS)
    monkeypatch.setattr(server, "business_path", str(tmp_path / "missing.yaml"))
    return TestClient(server.app)


class TestServer:
    """Tests for the API endpoints."""

    def test_list_presets(self, client):
        """Test listing every preset."""
        response = client.get("/api/presets")
        assert response.status_code == 200
        assert len(response.json()) == 6

    def test_search_presets(self, client):
        """Test searching presets."""
        response = client.get("/api/presets/search", params={"q": "nut"})
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Spices", "Nuts & Seeds"]

    def test_get_preset_by_either_id(self, client):
        """Test preset lookup under both id schemes."""
        by_key = client.get("/api/presets/65f0a1b2c3d4e5f601234503").json()
        by_legacy = client.get("/api/presets/default-3").json()
        assert by_key == by_legacy
        assert by_key["name"] == "Dairy"

    def test_get_preset_not_found(self, client):
        """Test 404 for an unknown preset."""
        response = client.get("/api/presets/unknown")
        assert response.status_code == 404
        assert response.json()["detail"]["error_code"] == "PRESET_NOT_FOUND"

    def test_compose(self, client):
        """Test ingredient composition."""
        response = client.post("/api/labels/compose", json={
            "selectedPresetIds": ["default-6"],
            "additionalIngredientsText": "Sugar",
        })
        assert response.status_code == 200
        assert response.json()["canonical_expression"] == (
            "Fruits (Blueberries, Strawberries, Bananas, Apples, Lemons), Sugar"
        )

    def test_build_label(self, client):
        """Test building and rendering a preset label."""
        response = client.post("/api/labels/build", json={
            "label": {
                "name": "Berry Muffins",
                "creationMode": "preset",
                "selectedPresetIds": ["default-6"],
                "netQuantity": "4",
                "allergens": ["Wheat"],
            },
            "business": {"businessName": "Farm", "businessState": "vt"},
        })
        assert response.status_code == 200
        data = response.json()
        assert data["label"]["businessState"] == "VT"
        assert data["business_complete"] is False
        assert data["rendered"]["plain_text"].splitlines()[0] == "Berry Muffins"
        assert "<strong>Fruits</strong>" in data["rendered"]["rich_markup"]

    def test_build_label_complete_business(self, client):
        """Test the completeness flag when every required field is set."""
        response = client.post("/api/labels/build", json={
            "label": {"name": "Jam", "text": "Berries, Sugar"},
            "business": {
                "businessName": "Farm",
                "businessAddress": "1 Main St",
                "businessCity": "Rome",
                "businessState": "ny",
                "businessZip": "13440",
            },
        })
        assert response.status_code == 200
        assert response.json()["business_complete"] is True

    def test_build_preset(self, client):
        """Test building a preset record from form input."""
        response = client.post("/api/presets/build", json={
            "name": " Spices ",
            "ingredientsText": "Cinnamon, , Nutmeg",
            "brandName": "Acme",
        })
        assert response.status_code == 200
        preset = response.json()
        assert preset["name"] == "Spices"
        assert preset["ingredients"] == ["Cinnamon", "Nutmeg"]
        assert preset["brandName"] == "Acme"
        assert len(preset["id"]) == 24

    def test_build_preset_requires_name(self, client):
        """Test 422 for a preset without a name."""
        response = client.post("/api/presets/build", json={"name": "  "})
        assert response.status_code == 422
        assert response.json()["detail"]["context"]["errors"][0]["field"] == "name"

    def test_render_label_numeric_fields(self, client):
        """Test rendering a stored record with unquoted numbers."""
        response = client.post("/api/labels/render", json={
            "name": "Jam",
            "businessName": "Farm",
            "businessZip": 62701,
        })
        assert response.status_code == 200
        assert response.json()["rendered"]["plain_text"] == "Jam\nFarm, 62701"

    def test_build_label_validation_error(self, client):
        """Test 422 with every validation error."""
        response = client.post("/api/labels/build", json={
            "label": {"name": "B", "creationMode": "preset"},
        })
        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["error_code"] == "VALIDATION_FAILURE"
        assert len(detail["context"]["errors"]) == 2

    def test_render_label(self, client):
        """Test rendering a stored label record."""
        response = client.post("/api/labels/render", json={
            "id": "abc",
            "name": "Jam",
            "text": "Berries, Sugar",
            "includeCottageDisclaimer": True,
        })
        assert response.status_code == 200
        rendered = response.json()["rendered"]
        assert rendered["storage_text"] == "Berries, Sugar"
        assert rendered["plain_text"].endswith("INSPECTION")
