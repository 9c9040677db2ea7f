"""Tests for the analyze endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tests.conftest import LONG_DESCRIPTION, PROFILES, SHORT_DESCRIPTION, SHORT_TITLE, ExplodingMetrics

from metapixel.dependencies import get_analyzer
from metapixel.engine.analyzer import MetaFieldAnalyzer
from metapixel.main import app


def test_get_title(client: TestClient):
    response = client.get("/api/analyze", params={"title": SHORT_TITLE})
    assert response.status_code == 200
    data = response.json()
    assert "description" not in data
    title = data["title"]
    assert title["pixelWidth"] == 150
    assert title["characterCount"] == 15
    assert title["isTruncated"] is False
    assert title["truncatedText"] == SHORT_TITLE
    assert title["isOptimal"] is True
    assert title["recommendedMaxChars"] == 60
    assert title["maxPixels"] == 600
    assert "minPixels" not in title
    assert "isTooShort" not in title


def test_post_both_fields(client: TestClient):
    response = client.post(
        "/api/analyze",
        json={"title": SHORT_TITLE, "description": LONG_DESCRIPTION},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"]["isOptimal"] is True

    description = data["description"]
    assert description["isTruncated"] is True
    assert description["truncatedText"].endswith("...")
    assert description["minPixels"] == 430
    assert description["isTooShort"] is False
    assert description["isOptimal"] is False


def test_short_description(client: TestClient):
    response = client.get("/api/analyze", params={"description": SHORT_DESCRIPTION})
    assert response.status_code == 200
    description = response.json()["description"]
    assert description["isTooShort"] is True
    assert description["isOptimal"] is False
    assert description["isTruncated"] is False


def test_fields_are_trimmed(client: TestClient):
    response = client.post("/api/analyze", json={"title": "   Hello  "})
    assert response.status_code == 200
    assert response.json()["title"]["characterCount"] == 5
    assert response.json()["title"]["truncatedText"] == "Hello"


def test_missing_both_fields(client: TestClient):
    for response in (client.get("/api/analyze"), client.post("/api/analyze", json={})):
        assert response.status_code == 400
        assert response.json() == {
            "error": "Please provide either a title or description parameter"
        }


def test_post_without_body(client: TestClient):
    response = client.post("/api/analyze")
    assert response.status_code == 400
    assert "error" in response.json()


def test_blank_title_rejected(client: TestClient):
    response = client.get("/api/analyze", params={"title": "   "})
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert errors == [{"field": "title", "message": "Title must be a non-empty string"}]


def test_non_string_description_rejected(client: TestClient):
    response = client.post("/api/analyze", json={"title": "ok", "description": 42})
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert errors[0]["field"] == "description"
    assert errors[0]["message"] == "Description must be a non-empty string"


def test_batch_partial_failure(client: TestClient):
    response = client.post(
        "/api/analyze/batch",
        json={"items": [{"id": "home", "title": SHORT_TITLE}, {"id": "broken"}]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert "completedAt" in data

    ok, bad = data["results"]
    assert ok["id"] == "home"
    assert "error" not in ok
    assert ok["title"]["pixelWidth"] == 150
    assert bad["id"] == "broken"
    assert bad["error"] == "Item must have a title or a description"
    assert "title" not in bad


def test_batch_requires_items_list(client: TestClient):
    response = client.post("/api/analyze/batch", json={"things": []})
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "items"


def test_measurement_failure_is_500():
    app.dependency_overrides[get_analyzer] = lambda: MetaFieldAnalyzer(
        metrics=ExplodingMetrics(), profiles=PROFILES
    )
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            response = c.get("/api/analyze", params={"title": "boom"})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Internal Server Error"
    assert "cannot render" in data["message"]


def test_real_font_metrics():
    """Default analyzer (Pillow) end to end, no override."""
    client = TestClient(app)
    response = client.get("/api/analyze", params={"title": SHORT_TITLE})
    assert response.status_code == 200
    title = response.json()["title"]
    assert 0 < title["pixelWidth"] < 600
    assert title["isTruncated"] is False
    assert title["recommendedMaxChars"] > 15


def test_post_form_encoded(client: TestClient):
    response = client.post(
        "/api/analyze",
        data={"title": SHORT_TITLE, "description": SHORT_DESCRIPTION},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"]["pixelWidth"] == 150
    assert data["title"]["truncatedText"] == SHORT_TITLE
    assert data["description"]["isTooShort"] is True


def test_post_form_encoded_blank_title(client: TestClient):
    response = client.post("/api/analyze", data={"title": "  "})
    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"field": "title", "message": "Title must be a non-empty string"}
    ]


def test_post_invalid_json(client: TestClient):
    response = client.post(
        "/api/analyze",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "request"


def test_batch_bare_array(client: TestClient):
    response = client.post(
        "/api/analyze/batch",
        json=[{"id": 1, "title": SHORT_TITLE}, "not an object"],
    )
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    ok, bad = data["results"]
    assert ok["id"] == 1
    assert ok["title"]["characterCount"] == 15
    assert bad["error"] == "Item must be an object"


def test_pixel_budgets_are_integers(client: TestClient):
    response = client.post(
        "/api/analyze",
        json={"title": SHORT_TITLE, "description": SHORT_DESCRIPTION},
    )
    data = response.json()
    assert isinstance(data["title"]["maxPixels"], int)
    assert isinstance(data["description"]["maxPixels"], int)
    assert isinstance(data["description"]["minPixels"], int)
    assert '"maxPixels":600,' in response.text


def test_root_describes_endpoints(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Meta Pixel Calculator API"
    assert set(data["endpoints"]["/api/analyze"]["methods"]) == {"GET", "POST"}
    assert "/api/analyze/batch" in data["endpoints"]
