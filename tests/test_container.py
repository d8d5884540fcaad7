"""Tests for container wiring."""

import asyncio

from recipe_planner.adapters.spoonacular_client import HttpxSpoonacularClient
from recipe_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.discovery_service.pantry_service is container.pantry_service
    assert container.meal_plan_service.grocery_service is container.grocery_service
    assert isinstance(container.nutrition_service.client, HttpxSpoonacularClient)
    assert container.nutrition_service.ttl_seconds == 86400
    asyncio.run(container.close_resources())
