"""Nutrition service integrating the Spoonacular API."""

import asyncio
import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from recipe_planner.adapters.spoonacular_client import SpoonacularClient
from recipe_planner.domain.recipes import Ingredient, NutritionInfo, Recipe
from recipe_planner.rounding import round_half_up
from recipe_planner.services.cache import Cache

_NUTRIENT_NAMES = {
    "calories": "calories",
    "protein": "protein",
    "fat": "fat",
    "carbohydrates": "carbs",
    "fiber": "fiber",
    "sugar": "sugar",
}

_AMOUNT_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)\s*(.*)$")

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


class NutritionUnavailable(RuntimeError):
    """Raised when nutrition cannot be computed for a recipe."""


@dataclass(frozen=True)
class NutritionStats:
    """Average nutrition over a set of recipes."""

    total_recipes: int
    recipes_with_nutrition: int
    average_calories: int
    average_protein: int
    average_carbs: int
    average_fat: int


@dataclass
class NutritionService:
    """Service for per-serving nutrition lookups with caching."""

    client: SpoonacularClient
    cache: Cache
    ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def calculate(
        self, ingredients: Sequence[Ingredient], servings: int = 1
    ) -> NutritionInfo | None:
        """Return nutrition per serving, or None for an empty ingredient list."""
        if not ingredients:
            return None
        servings = max(servings, 1)
        cache_key = cache_key_for(ingredients, servings)
        cached = self.cache.get(cache_key)
        if isinstance(cached, NutritionInfo):
            return cached

        ingredient_list = "\n".join(_format_ingredient(item) for item in ingredients)
        try:
            payload = await self._call_with_retry(
                lambda: self.client.parse_ingredients(ingredient_list, servings),
                action="parse_ingredients",
            )
        except Exception as exc:
            raise NutritionUnavailable("Nutrition lookup failed") from exc

        nutrition = _per_serving(_sum_nutrients(payload), servings)
        if not is_valid(nutrition):
            raise NutritionUnavailable("Invalid nutrition data received")
        self.cache.set(cache_key, nutrition, ttl_seconds=self.ttl_seconds)
        if self.debug:
            _logger.info("Nutrition calculated: key=%s", cache_key)
        return nutrition

    async def refresh(self, recipe: Recipe) -> NutritionInfo | None:
        """Drop the cached value for a recipe and recalculate it."""
        self.cache.delete(cache_key_for(recipe.ingredients, max(recipe.servings, 1)))
        return await self.calculate(recipe.ingredients, recipe.servings)

    async def enhance_recipes(self, recipes: Sequence[Recipe]) -> list[Recipe]:
        """Fill in missing nutrition; recipes that fail are returned unchanged."""
        return list(await asyncio.gather(*(self._enhance(r) for r in recipes)))

    async def _enhance(self, recipe: Recipe) -> Recipe:
        current = recipe.nutrition
        if current and current.calories > 0 and current.protein > 0:
            return recipe
        try:
            nutrition = await self.calculate(recipe.ingredients, recipe.servings)
        except NutritionUnavailable:
            _logger.warning("Could not enhance %s with nutrition", recipe.id)
            return recipe
        return replace(recipe, nutrition=nutrition)

    async def _call_with_retry(
        self,
        func: "Callable[[], Awaitable[list[dict[str, object]]]]",
        *,
        action: str,
    ) -> list[dict[str, object]]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                if self.debug:
                    _logger.warning(
                        "Nutrition %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        status_code,
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def cache_key_for(ingredients: Sequence[Ingredient], servings: int) -> str:
    """Build an order-independent key from ingredient names, amounts and servings."""
    signature = "|".join(
        sorted(f"{item.name.strip().lower()}-{item.amount.strip()}" for item in ingredients)
    )
    return f"nutrition:{signature}-{servings}"


def is_valid(nutrition: NutritionInfo) -> bool:
    """Return True when all core values are non-negative."""
    return (
        nutrition.calories >= 0
        and nutrition.protein >= 0
        and nutrition.carbs >= 0
        and nutrition.fat >= 0
    )


def nutrition_stats(recipes: Sequence[Recipe]) -> NutritionStats:
    """Average nutrition across recipes that have it."""
    with_nutrition = [r.nutrition for r in recipes if r.nutrition is not None]
    count = len(with_nutrition)
    if not count:
        return NutritionStats(len(recipes), 0, 0, 0, 0, 0)

    def average(values: Iterable[float]) -> int:
        return round_half_up(sum(values) / count)

    return NutritionStats(
        total_recipes=len(recipes),
        recipes_with_nutrition=count,
        average_calories=average(n.calories for n in with_nutrition),
        average_protein=average(n.protein for n in with_nutrition),
        average_carbs=average(n.carbs for n in with_nutrition),
        average_fat=average(n.fat for n in with_nutrition),
    )


def macro_percentages(nutrition: NutritionInfo) -> dict[str, int]:
    """Share of calories from protein, carbs and fat."""
    total = nutrition.protein * 4 + nutrition.carbs * 4 + nutrition.fat * 9
    if total <= 0:
        return {"protein": 0, "carbs": 0, "fat": 0}
    return {
        "protein": round_half_up(nutrition.protein * 4 / total * 100),
        "carbs": round_half_up(nutrition.carbs * 4 / total * 100),
        "fat": round_half_up(nutrition.fat * 9 / total * 100),
    }


def format_nutrition(nutrition: NutritionInfo) -> dict[str, str]:
    """Human-readable nutrition labels."""
    labels = {
        "calories": f"{nutrition.calories:g} cal",
        "protein": f"{nutrition.protein:g}g",
        "carbs": f"{nutrition.carbs:g}g",
        "fat": f"{nutrition.fat:g}g",
    }
    if nutrition.fiber:
        labels["fiber"] = f"{nutrition.fiber:g}g"
    if nutrition.sugar:
        labels["sugar"] = f"{nutrition.sugar:g}g"
    return labels


def _format_ingredient(ingredient: Ingredient) -> str:
    match = _AMOUNT_PATTERN.match(ingredient.amount.strip())
    if match:
        amount, unit = match.group(1), match.group(2).strip()
    else:
        amount, unit = "1", ingredient.unit or ""
    return " ".join(part for part in (amount, unit, ingredient.name) if part)


def _sum_nutrients(payload: list[dict[str, object]]) -> dict[str, float]:
    """Add up the tracked nutrients across parsed ingredients."""
    totals = {name: 0.0 for name in _NUTRIENT_NAMES.values()}
    for ingredient in payload or []:
        nutrition = ingredient.get("nutrition") or {}
        for nutrient in nutrition.get("nutrients", []):
            key = _NUTRIENT_NAMES.get(str(nutrient.get("name", "")).lower())
            amount = nutrient.get("amount")
            if key and amount is not None:
                totals[key] += float(amount)
    return totals


def _per_serving(totals: dict[str, float], servings: int) -> NutritionInfo:
    fiber = round_half_up(totals["fiber"] / servings)
    sugar = round_half_up(totals["sugar"] / servings)
    return NutritionInfo(
        calories=round_half_up(totals["calories"] / servings),
        protein=round_half_up(totals["protein"] / servings),
        carbs=round_half_up(totals["carbs"] / servings),
        fat=round_half_up(totals["fat"] / servings),
        fiber=fiber or None,
        sugar=sugar or None,
    )


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
