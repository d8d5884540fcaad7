"""Pydantic models for API request bodies."""

from pydantic import BaseModel, Field


class PantryIngredientIn(BaseModel):
    """Ingredient to add to the pantry."""

    ingredient: str


class AssignRecipeIn(BaseModel):
    """Recipe to place in a meal plan slot."""

    recipe_id: str


class SwapSlotsIn(BaseModel):
    """Two meal plan slots to exchange."""

    from_day: str
    from_meal: str
    to_day: str
    to_meal: str


class GroceryItemIn(BaseModel):
    """Custom grocery item."""

    name: str
    amount: str | None = None


class GroceryItemPatch(BaseModel):
    """Checked state update for a grocery item."""

    is_checked: bool


class RatingIn(BaseModel):
    """Star rating submission."""

    rating: int


class ReviewIn(BaseModel):
    """Review submission."""

    review_text: str


class FeedbackIn(BaseModel):
    """Helpful / not helpful feedback."""

    feedback: str = Field(pattern="^(helpful|not_helpful)$")


class IngredientIn(BaseModel):
    """Ingredient line for nutrition lookups."""

    name: str
    amount: str
    unit: str | None = None


class NutritionRequest(BaseModel):
    """Ingredients and servings for a nutrition lookup."""

    ingredients: list[IngredientIn]
    servings: int = Field(default=1, ge=1)
