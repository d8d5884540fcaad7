"""Domain models for weekly meal plans and grocery lists."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

DAYS_OF_WEEK = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
MEAL_TYPES = ("breakfast", "lunch", "dinner")

CUSTOM_RECIPE_ID = "custom"
CUSTOM_RECIPE_NAME = "Custom Item"


@dataclass(frozen=True)
class WeeklyMeals:
    """Day x meal grid of assigned recipe ids."""

    slots: dict[tuple[str, str], str] = field(default_factory=dict)

    def get(self, day: str, meal: str) -> str | None:
        """Return the recipe id in a slot, if any."""
        return self.slots.get((day, meal))

    def with_slot(self, day: str, meal: str, recipe_id: str | None) -> "WeeklyMeals":
        """Return a copy with one slot set or cleared."""
        slots = dict(self.slots)
        if recipe_id is None:
            slots.pop((day, meal), None)
        else:
            slots[(day, meal)] = recipe_id
        return WeeklyMeals(slots=slots)

    def recipe_ids(self) -> list[str]:
        """Return assigned recipe ids in grid order, without duplicates."""
        seen: list[str] = []
        for day in DAYS_OF_WEEK:
            for meal in MEAL_TYPES:
                recipe_id = self.slots.get((day, meal))
                if recipe_id and recipe_id not in seen:
                    seen.append(recipe_id)
        return seen

    def to_json(self) -> dict[str, dict[str, str]]:
        """Serialise to the nested day -> meal -> recipe id mapping."""
        payload: dict[str, dict[str, str]] = {day: {} for day in DAYS_OF_WEEK}
        for (day, meal), recipe_id in self.slots.items():
            payload[day][meal] = recipe_id
        return payload

    @classmethod
    def from_json(cls, payload: dict[str, object] | None) -> "WeeklyMeals":
        """Parse the nested mapping, ignoring unknown days and meals."""
        slots: dict[tuple[str, str], str] = {}
        for day, meals in (payload or {}).items():
            if day not in DAYS_OF_WEEK or not isinstance(meals, dict):
                continue
            for meal, recipe_id in meals.items():
                if meal in MEAL_TYPES and isinstance(recipe_id, str) and recipe_id:
                    slots[(day, meal)] = recipe_id
        return cls(slots=slots)


@dataclass(frozen=True)
class MealPlan:
    """A user's meal plan for one week."""

    id: UUID
    user_id: UUID
    week_start: date
    meals: WeeklyMeals
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class GroceryListItem:
    """A line on the user's grocery list."""

    id: UUID
    user_id: UUID
    ingredient: str
    amount: str
    unit: str
    recipe_id: str
    recipe_name: str
    is_checked: bool
    added_at: datetime


@dataclass(frozen=True)
class GeneratedGroceryList:
    """Marker noting a grocery list was generated for a week."""

    id: UUID
    user_id: UUID
    week_start: date
    generated_at: datetime
