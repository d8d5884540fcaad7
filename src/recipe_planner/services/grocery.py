"""Grocery list derivation and management."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID, uuid4

from recipe_planner.domain.meal_plans import (
    CUSTOM_RECIPE_ID,
    CUSTOM_RECIPE_NAME,
    GeneratedGroceryList,
    GroceryListItem,
)
from recipe_planner.domain.recipes import Recipe
from recipe_planner.errors import NotFoundError, ValidationError
from recipe_planner.rounding import round_half_up

CUSTOM_GROUP = "Custom Items"


class GroceryRepository(Protocol):
    """Persistence interface for grocery list items."""

    def list_items(self, user_id: UUID) -> list[GroceryListItem]:
        """Return all grocery items for a user, newest first."""

    def create_item(self, item: GroceryListItem) -> None:
        """Persist a grocery item."""

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete one of the user's grocery items."""

    def set_checked(
        self, user_id: UUID, item_id: UUID, is_checked: bool
    ) -> GroceryListItem | None:
        """Update the checked flag and return the item, if the user owns it."""

    def create_generated_list(self, marker: GeneratedGroceryList) -> None:
        """Record that a list was generated for a week."""


@dataclass(frozen=True)
class GroceryProgress:
    """Shopping completion summary."""

    total: int
    checked: int
    completion_percent: int


def derive_grocery_items(
    user_id: UUID, recipes: Iterable[Recipe], pantry: Iterable[str]
) -> list[GroceryListItem]:
    """Return one unchecked item per ingredient missing from the pantry.

    Duplicate recipes collapse to one instance. Ingredients shared by two
    recipes stay as two items, each attributed to its own recipe.
    """
    pantry_set = {entry.strip().lower() for entry in pantry}
    seen: set[str] = set()
    items: list[GroceryListItem] = []
    for recipe in recipes:
        if recipe.id in seen:
            continue
        seen.add(recipe.id)
        for ingredient in recipe.ingredients:
            if ingredient.name.strip().lower() in pantry_set:
                continue
            items.append(
                GroceryListItem(
                    id=uuid4(),
                    user_id=user_id,
                    ingredient=ingredient.name,
                    amount=ingredient.amount,
                    unit=ingredient.unit or "",
                    recipe_id=recipe.id,
                    recipe_name=recipe.title,
                    is_checked=False,
                    added_at=datetime.now(tz=UTC),
                )
            )
    return items


def group_by_recipe(
    items: Iterable[GroceryListItem],
) -> dict[str, list[GroceryListItem]]:
    """Group items by recipe name, with custom items under one heading."""
    groups: dict[str, list[GroceryListItem]] = {}
    for item in items:
        key = CUSTOM_GROUP if item.recipe_id == CUSTOM_RECIPE_ID else item.recipe_name
        groups.setdefault(key, []).append(item)
    return groups


def progress(items: Sequence[GroceryListItem]) -> GroceryProgress:
    """Return how much of the list has been checked off."""
    total = len(items)
    checked = sum(1 for item in items if item.is_checked)
    percent = round_half_up(checked / total * 100) if total else 0
    return GroceryProgress(total=total, checked=checked, completion_percent=percent)


@dataclass
class GroceryListService:
    """Application service for grocery lists."""

    repository: GroceryRepository

    def list_items(self, user_id: UUID) -> list[GroceryListItem]:
        """Return the user's grocery list."""
        return self.repository.list_items(user_id)

    def generate(
        self,
        user_id: UUID,
        week_start: date,
        recipes: Sequence[Recipe],
        pantry: Sequence[str],
    ) -> list[GroceryListItem]:
        """Replace the user's list with items derived from the recipes."""
        if not recipes:
            raise ValidationError(
                "Please assign some recipes to your meal plan first."
            )
        items = derive_grocery_items(user_id, recipes, pantry)
        previous = self.repository.list_items(user_id)
        created: list[GroceryListItem] = []
        try:
            for item in items:
                self.repository.create_item(item)
                created.append(item)
        except Exception:
            for item in created:
                self.repository.delete_item(user_id, item.id)
            raise
        for existing in previous:
            self.repository.delete_item(user_id, existing.id)
        self.repository.create_generated_list(
            GeneratedGroceryList(
                id=uuid4(),
                user_id=user_id,
                week_start=week_start,
                generated_at=datetime.now(tz=UTC),
            )
        )
        return items

    def add_custom_item(
        self, user_id: UUID, name: str, amount: str | None = None
    ) -> GroceryListItem:
        """Add a hand-entered item to the list."""
        cleaned = name.strip()
        if not cleaned:
            raise ValidationError("Item name is required.")
        item = GroceryListItem(
            id=uuid4(),
            user_id=user_id,
            ingredient=cleaned,
            amount=(amount or "").strip() or "1",
            unit="",
            recipe_id=CUSTOM_RECIPE_ID,
            recipe_name=CUSTOM_RECIPE_NAME,
            is_checked=False,
            added_at=datetime.now(tz=UTC),
        )
        self.repository.create_item(item)
        return item

    def toggle_item(
        self, user_id: UUID, item_id: UUID, is_checked: bool
    ) -> GroceryListItem:
        """Set the checked flag on one of the user's items."""
        self._require_item(user_id, item_id)
        updated = self.repository.set_checked(user_id, item_id, is_checked)
        if updated is None:
            raise NotFoundError(f"Unknown grocery item: {item_id}")
        return updated

    def remove_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete one of the user's items."""
        self._require_item(user_id, item_id)
        self.repository.delete_item(user_id, item_id)

    def clear_checked(self, user_id: UUID) -> int:
        """Delete checked items and return how many were removed."""
        checked = [
            item for item in self.repository.list_items(user_id) if item.is_checked
        ]
        for item in checked:
            self.repository.delete_item(user_id, item.id)
        return len(checked)

    def clear_all(self, user_id: UUID) -> int:
        """Delete every item and return how many were removed."""
        items = self.repository.list_items(user_id)
        for item in items:
            self.repository.delete_item(user_id, item.id)
        return len(items)

    def _require_item(self, user_id: UUID, item_id: UUID) -> GroceryListItem:
        for item in self.repository.list_items(user_id):
            if item.id == item_id:
                return item
        raise NotFoundError(f"Unknown grocery item: {item_id}")
