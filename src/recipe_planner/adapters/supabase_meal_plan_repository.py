"""Supabase repositories for meal plans and grocery lists."""

import json
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from recipe_planner.domain.meal_plans import (
    GeneratedGroceryList,
    GroceryListItem,
    MealPlan,
    WeeklyMeals,
)
from recipe_planner.services.grocery import GroceryRepository
from recipe_planner.services.meal_plans import MealPlanRepository


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase-backed repository for weekly meal plans."""

    client: Client

    def get_plan(self, user_id: UUID, week_start: date) -> MealPlan | None:
        """Return the plan for a user and week, if present."""
        response = (
            self.client.table("meal_plans")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("week_start_date", week_start.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def create_plan(self, user_id: UUID, week_start: date) -> MealPlan:
        """Create an empty plan and return it."""
        response = (
            self.client.table("meal_plans")
            .insert(
                {
                    "user_id": str(user_id),
                    "week_start_date": week_start.isoformat(),
                    "meals": WeeklyMeals().to_json(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal plan")
        return _parse_plan(response.data[0])

    def update_meals(
        self, plan_id: UUID, meals: WeeklyMeals, updated_at: datetime
    ) -> None:
        """Persist the plan grid."""
        self.client.table("meal_plans").update(
            {"meals": meals.to_json(), "updated_at": updated_at.isoformat()}
        ).eq("id", str(plan_id)).execute()


@dataclass
class SupabaseGroceryRepository(GroceryRepository):
    """Supabase-backed repository for grocery list items."""

    client: Client

    def list_items(self, user_id: UUID) -> list[GroceryListItem]:
        """Return grocery items for a user, newest first."""
        response = (
            self.client.table("grocery_list_items")
            .select("*")
            .eq("user_id", str(user_id))
            .order("added_at", desc=True)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def create_item(self, item: GroceryListItem) -> None:
        """Insert a grocery item."""
        response = (
            self.client.table("grocery_list_items")
            .insert(
                {
                    "id": str(item.id),
                    "user_id": str(item.user_id),
                    "ingredient": item.ingredient,
                    "amount": item.amount,
                    "unit": item.unit,
                    "recipe_id": item.recipe_id,
                    "recipe_name": item.recipe_name,
                    "is_checked": item.is_checked,
                    "added_at": item.added_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create grocery item")

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete one of the user's grocery items."""
        self.client.table("grocery_list_items").delete().eq("id", str(item_id)).eq(
            "user_id", str(user_id)
        ).execute()

    def set_checked(
        self, user_id: UUID, item_id: UUID, is_checked: bool
    ) -> GroceryListItem | None:
        """Update the checked flag and return the updated row."""
        response = (
            self.client.table("grocery_list_items")
            .update({"is_checked": is_checked})
            .eq("id", str(item_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create_generated_list(self, marker: GeneratedGroceryList) -> None:
        """Record the generation marker."""
        self.client.table("generated_grocery_lists").insert(
            {
                "id": str(marker.id),
                "user_id": str(marker.user_id),
                "week_start_date": marker.week_start.isoformat(),
                "generated_at": marker.generated_at.isoformat(),
            }
        ).execute()


def _parse_plan(row: dict[str, object]) -> MealPlan:
    meals_raw = row.get("meals")
    if isinstance(meals_raw, str):
        meals_raw = json.loads(meals_raw)
    return MealPlan(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        week_start=date.fromisoformat(row["week_start_date"]),
        meals=WeeklyMeals.from_json(meals_raw),
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )


def _parse_item(row: dict[str, object]) -> GroceryListItem:
    return GroceryListItem(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        ingredient=str(row.get("ingredient", "")),
        amount=str(row.get("amount") or ""),
        unit=str(row.get("unit") or ""),
        recipe_id=str(row.get("recipe_id", "")),
        recipe_name=str(row.get("recipe_name", "")),
        is_checked=bool(row.get("is_checked", False)),
        added_at=datetime.fromisoformat(row["added_at"]),
    )
