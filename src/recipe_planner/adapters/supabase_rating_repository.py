"""Supabase repository for recipe ratings and reviews."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from recipe_planner.domain.ratings import RecipeRating, RecipeReview
from recipe_planner.services.ratings import RatingRepository


@dataclass
class SupabaseRatingRepository(RatingRepository):
    """Supabase-backed ratings and reviews."""

    client: Client

    def list_ratings(self, recipe_id: str) -> list[RecipeRating]:
        """Return every rating for a recipe."""
        response = (
            self.client.table("recipe_ratings")
            .select("*")
            .eq("recipe_id", recipe_id)
            .execute()
        )
        return [_parse_rating(row) for row in response.data or []]

    def get_user_rating(self, user_id: UUID, recipe_id: str) -> RecipeRating | None:
        """Return the user's rating for a recipe, if any."""
        response = (
            self.client.table("recipe_ratings")
            .select("*")
            .eq("recipe_id", recipe_id)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_rating(response.data[0])

    def create_rating(self, user_id: UUID, recipe_id: str, rating: int) -> RecipeRating:
        """Create a rating row."""
        response = (
            self.client.table("recipe_ratings")
            .insert({"user_id": str(user_id), "recipe_id": recipe_id, "rating": rating})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create rating")
        return _parse_rating(response.data[0])

    def update_rating(self, rating_id: UUID, rating: int) -> None:
        """Update a rating row."""
        self.client.table("recipe_ratings").update(
            {"rating": rating, "updated_at": datetime.now(tz=UTC).isoformat()}
        ).eq("id", str(rating_id)).execute()

    def list_reviews(self, recipe_id: str, limit: int) -> list[RecipeReview]:
        """Return recent reviews for a recipe."""
        response = (
            self.client.table("recipe_reviews")
            .select("*")
            .eq("recipe_id", recipe_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_review(row) for row in response.data or []]

    def create_review(
        self, user_id: UUID, recipe_id: str, review_text: str
    ) -> RecipeReview:
        """Create a review row."""
        response = (
            self.client.table("recipe_reviews")
            .insert(
                {
                    "user_id": str(user_id),
                    "recipe_id": recipe_id,
                    "review_text": review_text,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create review")
        return _parse_review(response.data[0])


def _parse_rating(row: dict[str, object]) -> RecipeRating:
    return RecipeRating(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        recipe_id=str(row.get("recipe_id", "")),
        rating=int(row.get("rating") or 0),
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )


def _parse_review(row: dict[str, object]) -> RecipeReview:
    return RecipeReview(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        recipe_id=str(row.get("recipe_id", "")),
        review_text=str(row.get("review_text", "")),
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )
