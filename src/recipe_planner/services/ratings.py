"""Ratings and reviews service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_planner.domain.ratings import RatingStats, RecipeRating, RecipeReview
from recipe_planner.errors import ValidationError
from recipe_planner.rounding import round_half_up_1

MIN_RATING = 1
MAX_RATING = 5

_logger = logging.getLogger(__name__)


class RatingRepository(Protocol):
    """Persistence interface for ratings and reviews."""

    def list_ratings(self, recipe_id: str) -> list[RecipeRating]:
        """Return every rating for a recipe."""

    def get_user_rating(self, user_id: UUID, recipe_id: str) -> RecipeRating | None:
        """Return a user's rating for a recipe, if any."""

    def create_rating(self, user_id: UUID, recipe_id: str, rating: int) -> RecipeRating:
        """Create a rating and return it."""

    def update_rating(self, rating_id: UUID, rating: int) -> None:
        """Update an existing rating."""

    def list_reviews(self, recipe_id: str, limit: int) -> list[RecipeReview]:
        """Return reviews for a recipe, newest first."""

    def create_review(
        self, user_id: UUID, recipe_id: str, review_text: str
    ) -> RecipeReview:
        """Create a review and return it."""


@dataclass
class RatingService:
    """Service for recipe ratings and reviews."""

    repository: RatingRepository

    def get_rating_stats(self, recipe_id: str) -> RatingStats:
        """Return the rounded average and count, or zeros when unavailable."""
        if not recipe_id:
            return RatingStats(average_rating=0.0, total_ratings=0)
        try:
            ratings = self.repository.list_ratings(recipe_id)
        except Exception:
            _logger.exception(
                "Failed to fetch rating stats", extra={"recipe_id": recipe_id}
            )
            return RatingStats(average_rating=0.0, total_ratings=0)
        if not ratings:
            return RatingStats(average_rating=0.0, total_ratings=0)
        average = sum(rating.rating for rating in ratings) / len(ratings)
        return RatingStats(
            average_rating=round_half_up_1(average), total_ratings=len(ratings)
        )

    def get_user_rating(self, user_id: UUID, recipe_id: str) -> int:
        """Return the user's rating for a recipe, or 0."""
        if not recipe_id:
            return 0
        try:
            existing = self.repository.get_user_rating(user_id, recipe_id)
        except Exception:
            _logger.exception(
                "Failed to fetch user rating", extra={"recipe_id": recipe_id}
            )
            return 0
        return existing.rating if existing else 0

    def submit_rating(self, user_id: UUID, recipe_id: str, rating: int) -> None:
        """Create or update the user's rating."""
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise ValidationError("Rating must be a whole number of stars.")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}."
            )
        existing = self.repository.get_user_rating(user_id, recipe_id)
        if existing:
            self.repository.update_rating(existing.id, rating)
            return
        self.repository.create_rating(user_id, recipe_id, rating)

    def get_reviews(self, recipe_id: str, limit: int = 50) -> list[RecipeReview]:
        """Return recent reviews, or an empty list when unavailable."""
        if not recipe_id:
            return []
        try:
            return self.repository.list_reviews(recipe_id, limit)
        except Exception:
            _logger.exception("Failed to fetch reviews", extra={"recipe_id": recipe_id})
            return []

    def submit_review(
        self, user_id: UUID, recipe_id: str, review_text: str
    ) -> RecipeReview:
        """Persist a non-empty review."""
        cleaned = review_text.strip()
        if not cleaned:
            raise ValidationError("Please write a review before submitting.")
        return self.repository.create_review(user_id, recipe_id, cleaned)
