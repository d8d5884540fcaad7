"""Domain models for the recipe catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ingredient:
    """A structured recipe ingredient."""

    name: str
    amount: str
    unit: str | None = None


@dataclass(frozen=True)
class NutritionInfo:
    """Nutrition facts per serving."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None


@dataclass(frozen=True)
class Recipe:
    """Immutable catalog recipe."""

    id: str
    title: str
    description: str
    prep_time: int
    cook_time: int
    total_time: int
    servings: int
    difficulty: str
    budget_level: str
    dietary_tags: tuple[str, ...]
    required_ingredients: tuple[str, ...]
    ingredients: tuple[Ingredient, ...]
    instructions: tuple[str, ...]
    nutrition: NutritionInfo | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class RatedRecipe:
    """A recipe annotated with its rating aggregate."""

    recipe: Recipe
    average_rating: float = 0.0
    total_ratings: int = 0


@dataclass(frozen=True)
class RecipeFilters:
    """Discovery filters; None or empty means any."""

    max_time: int | None = None
    budget: str | None = None
    dietary: frozenset[str] = frozenset()
    difficulty: str | None = None
