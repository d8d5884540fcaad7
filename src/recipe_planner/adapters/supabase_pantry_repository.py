"""Supabase repositories for pantry items and favorites."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from recipe_planner.domain.pantry import FavoriteRecipe, PantryItem
from recipe_planner.services.favorites import FavoritesRepository
from recipe_planner.services.pantry import PantryRepository


@dataclass
class SupabasePantryRepository(PantryRepository):
    """Supabase-backed repository for pantry items."""

    client: Client

    def list_items(self, user_id: UUID) -> list[PantryItem]:
        """Return pantry items for a user, newest first."""
        response = (
            self.client.table("pantry_items")
            .select("*")
            .eq("user_id", str(user_id))
            .order("added_at", desc=True)
            .execute()
        )
        return [_parse_pantry_item(row) for row in response.data or []]

    def create_item(self, user_id: UUID, ingredient: str) -> PantryItem:
        """Create a pantry item and return it."""
        response = (
            self.client.table("pantry_items")
            .insert({"user_id": str(user_id), "ingredient": ingredient})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create pantry item")
        return _parse_pantry_item(response.data[0])

    def delete_item(self, item_id: UUID) -> None:
        """Delete a pantry item by id."""
        self.client.table("pantry_items").delete().eq("id", str(item_id)).execute()


@dataclass
class SupabaseFavoritesRepository(FavoritesRepository):
    """Supabase-backed repository for saved recipes."""

    client: Client

    def list_favorites(self, user_id: UUID) -> list[FavoriteRecipe]:
        """Return favorites, most recently saved first."""
        response = (
            self.client.table("favorite_recipes")
            .select("*")
            .eq("user_id", str(user_id))
            .order("saved_at", desc=True)
            .execute()
        )
        return [_parse_favorite(row) for row in response.data or []]

    def create_favorite(self, user_id: UUID, recipe_id: str) -> FavoriteRecipe:
        """Create a favorite and return it."""
        response = (
            self.client.table("favorite_recipes")
            .insert({"user_id": str(user_id), "recipe_id": recipe_id})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save favorite recipe")
        return _parse_favorite(response.data[0])

    def delete_favorite(self, favorite_id: UUID) -> None:
        """Delete a favorite by id."""
        self.client.table("favorite_recipes").delete().eq(
            "id", str(favorite_id)
        ).execute()


def _parse_pantry_item(row: dict[str, object]) -> PantryItem:
    return PantryItem(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        ingredient=str(row.get("ingredient", "")),
        added_at=datetime.fromisoformat(row["added_at"]),
    )


def _parse_favorite(row: dict[str, object]) -> FavoriteRecipe:
    return FavoriteRecipe(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        recipe_id=str(row.get("recipe_id", "")),
        saved_at=datetime.fromisoformat(row["saved_at"]),
    )
