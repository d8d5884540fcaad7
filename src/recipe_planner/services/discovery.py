"""Recipe discovery: pantry matching, filtering and ranking."""

import asyncio
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from uuid import UUID

from recipe_planner.catalog import SAMPLE_RECIPES
from recipe_planner.domain.recipes import (
    Ingredient,
    RatedRecipe,
    Recipe,
    RecipeFilters,
)
from recipe_planner.domain.ratings import RatingStats
from recipe_planner.services.favorites import FavoritesService
from recipe_planner.services.pantry import PantryService
from recipe_planner.services.ratings import RatingService

_logger = logging.getLogger(__name__)


def matches_pantry(recipe: Recipe, pantry: Iterable[str]) -> bool:
    """Return True when any required ingredient overlaps a pantry entry.

    Overlap is a case-insensitive substring test in either direction, so
    "mushroom" in the pantry matches a recipe that needs "mushrooms".
    """
    entries = [entry.lower() for entry in pantry]
    for required in recipe.required_ingredients:
        required_lower = required.lower()
        for entry in entries:
            if entry in required_lower or required_lower in entry:
                return True
    return False


def pantry_match_count(recipe: Recipe, pantry: Iterable[str]) -> int:
    """Count required ingredients that contain some pantry entry."""
    entries = [entry.lower() for entry in pantry]
    return sum(
        1
        for required in recipe.required_ingredients
        if any(entry in required.lower() for entry in entries)
    )


def filter_recipes(
    recipes: Sequence[RatedRecipe],
    pantry: Sequence[str],
    filters: RecipeFilters,
) -> list[RatedRecipe]:
    """Filter and rank rated recipes for display.

    Rules narrow the candidates in a fixed order: pantry overlap, time
    ceiling, budget, dietary tags (any of), difficulty. Survivors are sorted
    by pantry match count then average rating, or by rating alone when the
    pantry is empty. ``sorted`` is stable, so ties keep catalog order.
    """
    candidates = list(recipes)

    if pantry:
        candidates = [item for item in candidates if matches_pantry(item.recipe, pantry)]

    if filters.max_time is not None:
        candidates = [
            item for item in candidates if item.recipe.total_time <= filters.max_time
        ]

    if filters.budget is not None:
        candidates = [
            item for item in candidates if item.recipe.budget_level == filters.budget
        ]

    if filters.dietary:
        candidates = [
            item
            for item in candidates
            if filters.dietary.intersection(item.recipe.dietary_tags)
        ]

    if filters.difficulty is not None:
        candidates = [
            item
            for item in candidates
            if item.recipe.difficulty == filters.difficulty
        ]

    if pantry:
        return sorted(
            candidates,
            key=lambda item: (
                pantry_match_count(item.recipe, pantry),
                item.average_rating or 0.0,
            ),
            reverse=True,
        )
    return sorted(
        candidates, key=lambda item: item.average_rating or 0.0, reverse=True
    )


def missing_ingredients(recipe: Recipe, pantry: Sequence[str]) -> list[Ingredient]:
    """Return recipe ingredients that no pantry entry covers."""
    entries = [entry.lower() for entry in pantry]
    return [
        ingredient
        for ingredient in recipe.ingredients
        if not any(entry in ingredient.name.lower() for entry in entries)
    ]


def search_recipes(recipes: Sequence[RatedRecipe], query: str) -> list[RatedRecipe]:
    """Filter by a free-text query over title, description and tags."""
    needle = query.strip().lower()
    if not needle:
        return list(recipes)
    return [
        item
        for item in recipes
        if needle in item.recipe.title.lower()
        or needle in item.recipe.description.lower()
        or any(needle in tag.lower() for tag in item.recipe.dietary_tags)
    ]


@dataclass
class DiscoveryService:
    """Service that assembles rated catalog views for a user."""

    rating_service: RatingService
    pantry_service: PantryService
    favorites_service: FavoritesService
    catalog: Sequence[Recipe] = field(default=SAMPLE_RECIPES)

    async def rate(self, recipes: Sequence[Recipe]) -> list[RatedRecipe]:
        """Annotate recipes with rating stats fetched concurrently."""
        results = await asyncio.gather(
            *(
                asyncio.to_thread(self.rating_service.get_rating_stats, recipe.id)
                for recipe in recipes
            ),
            return_exceptions=True,
        )
        rated = []
        for recipe, stats in zip(recipes, results, strict=True):
            if not isinstance(stats, RatingStats):
                _logger.warning(
                    "Rating lookup failed for %s: %s", recipe.id, stats
                )
                stats = RatingStats(average_rating=0.0, total_ratings=0)
            rated.append(
                RatedRecipe(
                    recipe=recipe,
                    average_rating=stats.average_rating,
                    total_ratings=stats.total_ratings,
                )
            )
        return rated

    async def load_rated_recipes(self) -> list[RatedRecipe]:
        """Return the whole catalog annotated with ratings."""
        return await self.rate(self.catalog)

    async def discover(self, user_id: UUID, filters: RecipeFilters) -> list[RatedRecipe]:
        """Return the user's filtered and ranked recipe list."""
        pantry = self.pantry_service.ingredients(user_id)
        rated = await self.load_rated_recipes()
        return filter_recipes(rated, pantry, filters)

    async def saved_recipes(self, user_id: UUID, query: str = "") -> list[RatedRecipe]:
        """Return the user's favorite recipes, optionally searched."""
        favorite_ids = set(self.favorites_service.favorite_recipe_ids(user_id))
        favorites = [recipe for recipe in self.catalog if recipe.id in favorite_ids]
        if not favorites:
            return []
        return search_recipes(await self.rate(favorites), query)
