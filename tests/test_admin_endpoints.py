"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from recipe_planner.api.app import create_app
from tests.conftest import USER_ID

ADMIN = {"X-Admin-Token": "admin-token"}


def test_admin_requires_token(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/admin/health").status_code == 401
    assert (
        client.get("/admin/health", headers={"X-Admin-Token": "wrong"}).status_code
        == 401
    )
    assert client.get("/admin/health", headers=ADMIN).json() == {"status": "ok"}


def test_admin_events_endpoint(container) -> None:
    client = TestClient(create_app(container))
    container.analytics_service.track_recipe_view(USER_ID, "recipe-1", "Pasta")
    container.analytics_service.track_pantry_edit(USER_ID, "add", "garlic")

    response = client.get(
        "/admin/events",
        params={"user_id": str(USER_ID), "event_type": "recipe_view"},
        headers=ADMIN,
    )

    assert response.status_code == 200
    events = response.json()["events"]
    assert len(events) == 1
    assert events[0]["event_data"]["recipeId"] == "recipe-1"


def test_admin_nutrition_stats_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/nutrition-stats", headers=ADMIN)

    assert response.status_code == 200
    data = response.json()
    assert data["total_recipes"] == 5
    assert data["recipes_with_nutrition"] == 5
    assert data["average_calories"] == 377
    assert container.nutrition_service.client.calls == []
