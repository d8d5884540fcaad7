"""Tests for weekly meal planning."""

from dataclasses import replace
from datetime import UTC, date, datetime

import pytest

from recipe_planner.domain.meal_plans import DAYS_OF_WEEK, WeeklyMeals
from recipe_planner.errors import NotFoundError, ValidationError
from recipe_planner.services.meal_plans import assigned_recipes, current_week_start


def test_current_week_start_is_monday() -> None:
    assert current_week_start(date(2026, 10, 18)) == date(2026, 10, 12)
    assert current_week_start(date(2026, 10, 12)) == date(2026, 10, 12)
    assert current_week_start(date(2026, 10, 14)) == date(2026, 10, 12)


def test_get_current_plan_creates_once(meal_plan_service, user_id) -> None:
    first = meal_plan_service.get_current_plan(user_id)
    second = meal_plan_service.get_current_plan(user_id)

    assert first.id == second.id
    assert first.week_start == current_week_start(datetime.now(tz=UTC).date())
    assert first.meals.recipe_ids() == []


def test_assign_and_remove_recipe(meal_plan_service, user_id) -> None:
    plan = meal_plan_service.assign_recipe(user_id, "monday", "dinner", "recipe-1")
    assert plan.meals.get("monday", "dinner") == "recipe-1"

    replaced = meal_plan_service.assign_recipe(user_id, "monday", "dinner", "recipe-2")
    assert replaced.meals.get("monday", "dinner") == "recipe-2"

    cleared = meal_plan_service.remove_recipe(user_id, "monday", "dinner")
    assert cleared.meals.get("monday", "dinner") is None
    assert meal_plan_service.get_current_plan(user_id).meals.recipe_ids() == []


def test_assign_rejects_unknown_recipe_and_slot(meal_plan_service, user_id) -> None:
    with pytest.raises(NotFoundError):
        meal_plan_service.assign_recipe(user_id, "monday", "lunch", "recipe-99")
    with pytest.raises(ValidationError):
        meal_plan_service.assign_recipe(user_id, "funday", "lunch", "recipe-1")
    with pytest.raises(ValidationError):
        meal_plan_service.assign_recipe(user_id, "monday", "brunch", "recipe-1")


def test_swap_exchanges_slots(meal_plan_service, user_id) -> None:
    meal_plan_service.assign_recipe(user_id, "monday", "lunch", "recipe-1")
    meal_plan_service.assign_recipe(user_id, "friday", "dinner", "recipe-5")

    plan = meal_plan_service.swap_recipes(
        user_id, "monday", "lunch", "friday", "dinner"
    )

    assert plan.meals.get("monday", "lunch") == "recipe-5"
    assert plan.meals.get("friday", "dinner") == "recipe-1"


def test_swap_with_empty_slot_moves_recipe(meal_plan_service, user_id) -> None:
    meal_plan_service.assign_recipe(user_id, "tuesday", "breakfast", "recipe-3")

    plan = meal_plan_service.swap_recipes(
        user_id, "tuesday", "breakfast", "sunday", "lunch"
    )

    assert plan.meals.get("tuesday", "breakfast") is None
    assert plan.meals.get("sunday", "lunch") == "recipe-3"


def test_assigned_recipes_are_distinct_in_grid_order(meal_plan_service, user_id) -> None:
    meal_plan_service.assign_recipe(user_id, "wednesday", "dinner", "recipe-1")
    meal_plan_service.assign_recipe(user_id, "monday", "breakfast", "recipe-4")
    plan = meal_plan_service.assign_recipe(user_id, "monday", "dinner", "recipe-1")
    plan = replace(plan, meals=plan.meals.with_slot("friday", "lunch", "missing"))

    assert [recipe.id for recipe in assigned_recipes(plan)] == ["recipe-4", "recipe-1"]


def test_generate_grocery_list_uses_plan_and_pantry(
    meal_plan_service, pantry_service, user_id
) -> None:
    pantry_service.add_ingredient(user_id, "Garlic")
    meal_plan_service.assign_recipe(user_id, "monday", "dinner", "recipe-1")
    meal_plan_service.assign_recipe(user_id, "thursday", "dinner", "recipe-1")
    meal_plan_service.assign_recipe(user_id, "friday", "dinner", "recipe-2")

    items = meal_plan_service.generate_grocery_list(user_id)

    assert len(items) == 10
    assert all(item.ingredient != "garlic" for item in items)
    assert {item.recipe_id for item in items} == {"recipe-1", "recipe-2"}


def test_generate_grocery_list_requires_recipes(meal_plan_service, user_id) -> None:
    with pytest.raises(ValidationError):
        meal_plan_service.generate_grocery_list(user_id)


def test_weekly_meals_json_roundtrip_ignores_unknown_keys() -> None:
    meals = WeeklyMeals.from_json(
        {
            "monday": {"breakfast": "recipe-1", "brunch": "recipe-2"},
            "someday": {"dinner": "recipe-3"},
            "friday": {"dinner": ""},
        }
    )

    payload = meals.to_json()

    assert list(payload) == list(DAYS_OF_WEEK)
    assert payload["monday"] == {"breakfast": "recipe-1"}
    assert payload["friday"] == {}
