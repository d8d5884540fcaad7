"""Favorite recipes service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_planner.catalog import get_recipe
from recipe_planner.domain.pantry import FavoriteRecipe
from recipe_planner.errors import NotFoundError


class FavoritesRepository(Protocol):
    """Persistence interface for saved recipes."""

    def list_favorites(self, user_id: UUID) -> list[FavoriteRecipe]:
        """Return a user's favorites, most recently saved first."""

    def create_favorite(self, user_id: UUID, recipe_id: str) -> FavoriteRecipe:
        """Create a favorite and return it."""

    def delete_favorite(self, favorite_id: UUID) -> None:
        """Delete a favorite by id."""


@dataclass
class FavoritesService:
    """Application service for saving recipes."""

    repository: FavoritesRepository

    def favorite_recipe_ids(self, user_id: UUID) -> list[str]:
        """Return saved recipe ids, most recent first."""
        return [fav.recipe_id for fav in self.repository.list_favorites(user_id)]

    def is_favorite(self, user_id: UUID, recipe_id: str) -> bool:
        """Return True when the recipe is saved."""
        return recipe_id in self.favorite_recipe_ids(user_id)

    def add(self, user_id: UUID, recipe_id: str) -> FavoriteRecipe:
        """Save a recipe; saving twice returns the existing favorite."""
        if get_recipe(recipe_id) is None:
            raise NotFoundError(f"Unknown recipe: {recipe_id}")
        for favorite in self.repository.list_favorites(user_id):
            if favorite.recipe_id == recipe_id:
                return favorite
        return self.repository.create_favorite(user_id, recipe_id)

    def remove(self, user_id: UUID, recipe_id: str) -> bool:
        """Unsave a recipe; return False when it was not saved."""
        for favorite in self.repository.list_favorites(user_id):
            if favorite.recipe_id == recipe_id:
                self.repository.delete_favorite(favorite.id)
                return True
        return False

    def toggle(self, user_id: UUID, recipe_id: str) -> bool:
        """Flip the saved state and return the new state."""
        if self.remove(user_id, recipe_id):
            return False
        self.add(user_id, recipe_id)
        return True
