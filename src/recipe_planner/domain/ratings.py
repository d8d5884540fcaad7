"""Domain models for ratings and reviews."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RatingStats:
    """Aggregate rating for a recipe."""

    average_rating: float
    total_ratings: int


@dataclass(frozen=True)
class RecipeRating:
    """A single user's star rating."""

    id: UUID
    user_id: UUID
    recipe_id: str
    rating: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class RecipeReview:
    """A free-text review."""

    id: UUID
    user_id: UUID
    recipe_id: str
    review_text: str
    created_at: datetime
    updated_at: datetime
