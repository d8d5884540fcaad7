"""Tests for the nutrition service."""

import asyncio
from dataclasses import replace

import pytest

from recipe_planner.catalog import SAMPLE_RECIPES
from recipe_planner.domain.recipes import Ingredient, NutritionInfo
from recipe_planner.services.cache import InMemoryCache
from recipe_planner.services.nutrition import (
    NutritionService,
    NutritionUnavailable,
    cache_key_for,
    format_nutrition,
    macro_percentages,
    nutrition_stats,
)
from tests.conftest import FakeSpoonacularClient, nutrient_payload

INGREDIENTS = [
    Ingredient("chicken breast", "1 lb", "lb"),
    Ingredient("broccoli", "2 cups", "cups"),
]


def test_calculate_divides_by_servings(nutrition_service, spoonacular_client) -> None:
    nutrition = asyncio.run(nutrition_service.calculate(INGREDIENTS, servings=4))

    assert nutrition == NutritionInfo(calories=200, protein=10, carbs=25, fat=5)
    ingredient_list, servings = spoonacular_client.calls[0]
    assert ingredient_list == "1 lb chicken breast\n2 cups broccoli"
    assert servings == 4


def test_calculate_uses_cache(nutrition_service, spoonacular_client) -> None:
    first = asyncio.run(nutrition_service.calculate(INGREDIENTS, servings=2))
    reordered = list(reversed(INGREDIENTS))
    second = asyncio.run(nutrition_service.calculate(reordered, servings=2))

    assert first == second
    assert len(spoonacular_client.calls) == 1


def test_calculate_empty_ingredients_returns_none(
    nutrition_service, spoonacular_client
) -> None:
    assert asyncio.run(nutrition_service.calculate([], servings=2)) is None
    assert spoonacular_client.calls == []


def test_calculate_failure_raises_unavailable(nutrition_service, spoonacular_client) -> None:
    spoonacular_client.fail = True

    with pytest.raises(NutritionUnavailable):
        asyncio.run(nutrition_service.calculate(INGREDIENTS))


def test_calculate_rejects_negative_values(nutrition_service, spoonacular_client) -> None:
    spoonacular_client.payload = nutrient_payload(-10, 1, 1, 1)

    with pytest.raises(NutritionUnavailable):
        asyncio.run(nutrition_service.calculate(INGREDIENTS))


def test_calculate_retries_once() -> None:
    class FlakyClient(FakeSpoonacularClient):
        async def parse_ingredients(self, ingredient_list: str, servings: int):
            self.calls.append((ingredient_list, servings))
            if len(self.calls) == 1:
                raise RuntimeError("temporary")
            return self.payload

    client = FlakyClient()
    service = NutritionService(
        client=client, cache=InMemoryCache(), retry_attempts=1, retry_delay_seconds=0
    )

    nutrition = asyncio.run(service.calculate(INGREDIENTS))

    assert nutrition is not None
    assert len(client.calls) == 2


def test_refresh_bypasses_cache(nutrition_service, spoonacular_client) -> None:
    recipe = replace(SAMPLE_RECIPES[1], nutrition=None)
    asyncio.run(nutrition_service.calculate(recipe.ingredients, recipe.servings))

    spoonacular_client.payload = nutrient_payload(300, 30, 30, 3)
    refreshed = asyncio.run(nutrition_service.refresh(recipe))

    assert refreshed == NutritionInfo(calories=100, protein=10, carbs=10, fat=1)
    assert len(spoonacular_client.calls) == 2


def test_enhance_fills_missing_and_keeps_complete(
    nutrition_service, spoonacular_client
) -> None:
    complete = SAMPLE_RECIPES[0]
    missing = replace(SAMPLE_RECIPES[3], nutrition=None)

    enhanced = asyncio.run(nutrition_service.enhance_recipes([complete, missing]))

    assert enhanced[0] is complete
    assert enhanced[1].nutrition == NutritionInfo(
        calories=400, protein=20, carbs=50, fat=10
    )
    assert len(spoonacular_client.calls) == 1


def test_enhance_leaves_recipe_unchanged_on_failure(
    nutrition_service, spoonacular_client
) -> None:
    spoonacular_client.fail = True
    missing = replace(SAMPLE_RECIPES[3], nutrition=None)

    enhanced = asyncio.run(nutrition_service.enhance_recipes([missing]))

    assert enhanced == [missing]


def test_cache_key_is_order_independent() -> None:
    forward = cache_key_for(INGREDIENTS, 2)

    assert forward == cache_key_for(list(reversed(INGREDIENTS)), 2)
    assert forward != cache_key_for(INGREDIENTS, 3)
    assert forward.startswith("nutrition:")


def test_nutrition_stats_over_catalog() -> None:
    recipes = [*SAMPLE_RECIPES, replace(SAMPLE_RECIPES[0], nutrition=None)]

    stats = nutrition_stats(recipes)

    assert stats.total_recipes == 6
    assert stats.recipes_with_nutrition == 5
    assert stats.average_calories == 377
    assert stats.average_protein == 21


def test_nutrition_stats_without_data() -> None:
    stats = nutrition_stats([])

    assert stats.recipes_with_nutrition == 0
    assert stats.average_calories == 0


def test_macro_percentages_and_labels() -> None:
    nutrition = NutritionInfo(calories=400, protein=25, carbs=50, fat=0, fiber=5)

    assert macro_percentages(nutrition) == {"protein": 33, "carbs": 67, "fat": 0}
    assert macro_percentages(NutritionInfo(0, 0, 0, 0)) == {
        "protein": 0,
        "carbs": 0,
        "fat": 0,
    }
    assert format_nutrition(nutrition) == {
        "calories": "400 cal",
        "protein": "25g",
        "carbs": "50g",
        "fat": "0g",
        "fiber": "5g",
    }


def test_in_memory_cache_expires_entries() -> None:
    cache = InMemoryCache()
    cache.set("fresh", 1, ttl_seconds=60)
    cache.set("stale", 2, ttl_seconds=0)

    assert cache.get("fresh") == 1
    assert cache.get("stale") is None

    cache.delete("fresh")
    assert cache.get("fresh") is None
