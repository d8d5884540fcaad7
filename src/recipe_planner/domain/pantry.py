"""Domain models for pantries and favorites."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class PantryItem:
    """An ingredient the user has on hand."""

    id: UUID
    user_id: UUID
    ingredient: str
    added_at: datetime


@dataclass(frozen=True)
class FavoriteRecipe:
    """A recipe saved by a user."""

    id: UUID
    user_id: UUID
    recipe_id: str
    saved_at: datetime
