"""Pantry management service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_planner.domain.pantry import PantryItem
from recipe_planner.errors import ValidationError


class PantryRepository(Protocol):
    """Persistence interface for pantry items."""

    def list_items(self, user_id: UUID) -> list[PantryItem]:
        """Return pantry items for a user, newest first."""

    def create_item(self, user_id: UUID, ingredient: str) -> PantryItem:
        """Create a pantry item and return it."""

    def delete_item(self, item_id: UUID) -> None:
        """Delete a pantry item by id."""


def normalize_ingredient(value: str) -> str:
    """Trim and lowercase an ingredient name."""
    return value.strip().lower()


@dataclass
class PantryService:
    """Application service for a user's pantry."""

    repository: PantryRepository

    def list_items(self, user_id: UUID) -> list[PantryItem]:
        """Return the user's pantry items."""
        return self.repository.list_items(user_id)

    def ingredients(self, user_id: UUID) -> list[str]:
        """Return the normalized ingredient names in the pantry."""
        return [item.ingredient for item in self.repository.list_items(user_id)]

    def add_ingredient(self, user_id: UUID, ingredient: str) -> PantryItem:
        """Add an ingredient, returning the existing item for duplicates."""
        normalized = normalize_ingredient(ingredient)
        if not normalized:
            raise ValidationError("Ingredient name is required.")
        for item in self.repository.list_items(user_id):
            if item.ingredient == normalized:
                return item
        return self.repository.create_item(user_id, normalized)

    def remove_ingredient(self, user_id: UUID, ingredient: str) -> bool:
        """Remove an ingredient; return False when it was not present."""
        normalized = normalize_ingredient(ingredient)
        for item in self.repository.list_items(user_id):
            if item.ingredient == normalized:
                self.repository.delete_item(item.id)
                return True
        return False

    def clear(self, user_id: UUID) -> int:
        """Remove every pantry item and return how many were removed."""
        items = self.repository.list_items(user_id)
        for item in items:
            self.repository.delete_item(item.id)
        return len(items)
