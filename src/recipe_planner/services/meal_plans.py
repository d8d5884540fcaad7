"""Weekly meal plan service."""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from recipe_planner.catalog import get_recipe
from recipe_planner.domain.meal_plans import (
    DAYS_OF_WEEK,
    MEAL_TYPES,
    GroceryListItem,
    MealPlan,
    WeeklyMeals,
)
from recipe_planner.domain.recipes import Recipe
from recipe_planner.errors import NotFoundError, ValidationError
from recipe_planner.services.grocery import GroceryListService
from recipe_planner.services.pantry import PantryService


class MealPlanRepository(Protocol):
    """Persistence interface for meal plans."""

    def get_plan(self, user_id: UUID, week_start: date) -> MealPlan | None:
        """Return the user's plan for a week, if present."""

    def create_plan(self, user_id: UUID, week_start: date) -> MealPlan:
        """Create an empty plan and return it."""

    def update_meals(
        self, plan_id: UUID, meals: WeeklyMeals, updated_at: datetime
    ) -> None:
        """Persist the plan grid."""


def current_week_start(today: date) -> date:
    """Return the Monday of the week containing ``today``."""
    return today - timedelta(days=today.weekday())


def _validate_slot(day: str, meal: str) -> None:
    if day not in DAYS_OF_WEEK:
        raise ValidationError(f"Unknown day: {day}")
    if meal not in MEAL_TYPES:
        raise ValidationError(f"Unknown meal: {meal}")


@dataclass
class MealPlanService:
    """Application service for planning a week of meals."""

    repository: MealPlanRepository
    pantry_service: PantryService
    grocery_service: GroceryListService

    def get_current_plan(self, user_id: UUID) -> MealPlan:
        """Return this week's plan, creating an empty one if needed."""
        week_start = current_week_start(datetime.now(tz=UTC).date())
        existing = self.repository.get_plan(user_id, week_start)
        if existing:
            return existing
        return self.repository.create_plan(user_id, week_start)

    def assign_recipe(
        self, user_id: UUID, day: str, meal: str, recipe_id: str
    ) -> MealPlan:
        """Put a recipe in a slot, replacing whatever was there."""
        _validate_slot(day, meal)
        if get_recipe(recipe_id) is None:
            raise NotFoundError(f"Unknown recipe: {recipe_id}")
        plan = self.get_current_plan(user_id)
        return self._save(plan, plan.meals.with_slot(day, meal, recipe_id))

    def remove_recipe(self, user_id: UUID, day: str, meal: str) -> MealPlan:
        """Clear a slot."""
        _validate_slot(day, meal)
        plan = self.get_current_plan(user_id)
        return self._save(plan, plan.meals.with_slot(day, meal, None))

    def swap_recipes(  # noqa: PLR0913
        self,
        user_id: UUID,
        from_day: str,
        from_meal: str,
        to_day: str,
        to_meal: str,
    ) -> MealPlan:
        """Exchange the contents of two slots; empty slots swap too."""
        _validate_slot(from_day, from_meal)
        _validate_slot(to_day, to_meal)
        plan = self.get_current_plan(user_id)
        source = plan.meals.get(from_day, from_meal)
        target = plan.meals.get(to_day, to_meal)
        meals = plan.meals.with_slot(to_day, to_meal, source)
        meals = meals.with_slot(from_day, from_meal, target)
        return self._save(plan, meals)

    def generate_grocery_list(self, user_id: UUID) -> list[GroceryListItem]:
        """Rebuild the grocery list from this week's plan and the pantry."""
        plan = self.get_current_plan(user_id)
        return self.grocery_service.generate(
            user_id=user_id,
            week_start=plan.week_start,
            recipes=assigned_recipes(plan),
            pantry=self.pantry_service.ingredients(user_id),
        )

    def _save(self, plan: MealPlan, meals: WeeklyMeals) -> MealPlan:
        updated_at = datetime.now(tz=UTC)
        self.repository.update_meals(plan.id, meals, updated_at)
        return replace(plan, meals=meals, updated_at=updated_at)


def assigned_recipes(plan: MealPlan) -> list[Recipe]:
    """Return the distinct recipes assigned anywhere in the plan."""
    recipes = []
    for recipe_id in plan.meals.recipe_ids():
        recipe = get_recipe(recipe_id)
        if recipe is not None:
            recipes.append(recipe)
    return recipes
