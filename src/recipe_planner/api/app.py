"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import Depends, FastAPI, Header, HTTPException, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recipe_planner.api.admin import router as admin_router
from recipe_planner.api.models import (
    AssignRecipeIn,
    FeedbackIn,
    GroceryItemIn,
    GroceryItemPatch,
    NutritionRequest,
    PantryIngredientIn,
    RatingIn,
    ReviewIn,
    SwapSlotsIn,
)
from recipe_planner.app_logging import configure_logging
from recipe_planner.catalog import (
    BUDGET_LEVELS,
    COMMON_INGREDIENTS,
    DIETARY_OPTIONS,
    DIFFICULTY_LEVELS,
    get_recipe,
)
from recipe_planner.config import parse_allowed_origins
from recipe_planner.containers import AppContainer
from recipe_planner.domain.meal_plans import GroceryListItem, MealPlan
from recipe_planner.domain.pantry import PantryItem
from recipe_planner.domain.ratings import RecipeReview
from recipe_planner.domain.recipes import (
    Ingredient,
    NutritionInfo,
    RatedRecipe,
    Recipe,
    RecipeFilters,
)
from recipe_planner.errors import NotFoundError, ValidationError
from recipe_planner.services.discovery import missing_ingredients
from recipe_planner.services.grocery import group_by_recipe, progress
from recipe_planner.services.nutrition import (
    NutritionUnavailable,
    format_nutrition,
    macro_percentages,
)

_ANY = "any"


async def current_user_id(x_user_id: str | None = Header(default=None)) -> UUID:
    """Resolve the authenticated user id forwarded by the auth layer."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        return UUID(x_user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from exc


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    origins = parse_allowed_origins(container.settings.cors_allowed_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(admin_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    def _failed(message: str) -> HTTPException:
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=message)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/catalog/options")
    async def catalog_options() -> dict[str, object]:
        """Return the filter choices and pantry suggestions."""
        return {
            "dietary": list(DIETARY_OPTIONS),
            "budget": list(BUDGET_LEVELS),
            "difficulty": list(DIFFICULTY_LEVELS),
            "common_ingredients": list(COMMON_INGREDIENTS),
        }

    @app.get("/recipes")
    async def list_recipes(  # noqa: PLR0913
        request: Request,
        user_id: UUID = Depends(current_user_id),
        max_time: str = _ANY,
        budget: str = _ANY,
        dietary: list[str] = Query(default=[]),
        difficulty: str = _ANY,
    ) -> dict[str, object]:
        """Return the user's filtered, ranked recipe list."""
        state_container: AppContainer = request.app.state.container
        filters = _parse_filters(max_time, budget, dietary, difficulty)
        try:
            ranked = await state_container.discovery_service.discover(
                user_id, filters
            )
        except Exception as exc:
            logger.exception("Failed to load recipes", extra={"user_id": user_id})
            raise _failed("Failed to load your pantry.") from exc
        return {"recipes": [_serialize_rated(item) for item in ranked]}

    @app.get("/recipes/{recipe_id}")
    async def recipe_detail(
        recipe_id: str, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Return one recipe with ratings; records a view."""
        state_container: AppContainer = request.app.state.container
        recipe = _require_recipe(recipe_id)
        rated = await state_container.discovery_service.rate([recipe])
        state_container.analytics_service.track_recipe_view(
            user_id, recipe.id, recipe.title
        )
        return {
            **_serialize_rated(rated[0]),
            "user_rating": state_container.rating_service.get_user_rating(
                user_id, recipe.id
            ),
            "is_favorite": state_container.favorites_service.is_favorite(
                user_id, recipe.id
            ),
        }

    @app.get("/recipes/{recipe_id}/missing-ingredients")
    async def recipe_missing_ingredients(
        recipe_id: str, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Return the recipe ingredients not covered by the pantry."""
        state_container: AppContainer = request.app.state.container
        recipe = _require_recipe(recipe_id)
        pantry = state_container.pantry_service.ingredients(user_id)
        missing = missing_ingredients(recipe, pantry)
        return {"missing": [_serialize_ingredient(item) for item in missing]}

    @app.get("/pantry")
    async def get_pantry(
        request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Return the user's pantry."""
        state_container: AppContainer = request.app.state.container
        items = state_container.pantry_service.list_items(user_id)
        return {"items": [_serialize_pantry_item(item) for item in items]}

    @app.post("/pantry", status_code=status.HTTP_201_CREATED)
    async def add_pantry_ingredient(
        body: PantryIngredientIn,
        request: Request,
        user_id: UUID = Depends(current_user_id),
    ) -> dict[str, object]:
        """Add an ingredient to the pantry."""
        state_container: AppContainer = request.app.state.container
        try:
            item = state_container.pantry_service.add_ingredient(
                user_id, body.ingredient
            )
        except ValidationError:
            raise
        except Exception as exc:
            logger.exception("Failed to add ingredient", extra={"user_id": user_id})
            raise _failed("Failed to add ingredient. Please try again.") from exc
        state_container.analytics_service.track_pantry_edit(
            user_id, "add", item.ingredient
        )
        return _serialize_pantry_item(item)

    @app.delete("/pantry/{ingredient}")
    async def remove_pantry_ingredient(
        ingredient: str, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Remove an ingredient from the pantry."""
        state_container: AppContainer = request.app.state.container
        try:
            removed = state_container.pantry_service.remove_ingredient(
                user_id, ingredient
            )
        except Exception as exc:
            logger.exception("Failed to remove ingredient", extra={"user_id": user_id})
            raise _failed("Failed to remove ingredient. Please try again.") from exc
        if removed:
            state_container.analytics_service.track_pantry_edit(
                user_id, "remove", ingredient
            )
        return {"removed": removed}

    @app.delete("/pantry")
    async def clear_pantry(
        request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Remove every pantry ingredient."""
        state_container: AppContainer = request.app.state.container
        try:
            removed = state_container.pantry_service.clear(user_id)
        except Exception as exc:
            logger.exception("Failed to clear pantry", extra={"user_id": user_id})
            raise _failed("Failed to clear pantry.") from exc
        return {"removed": removed}

    @app.get("/favorites")
    async def list_favorites(
        request: Request,
        user_id: UUID = Depends(current_user_id),
        q: str = "",
    ) -> dict[str, object]:
        """Return saved recipes, optionally searched."""
        state_container: AppContainer = request.app.state.container
        recipes = await state_container.discovery_service.saved_recipes(user_id, q)
        return {"recipes": [_serialize_rated(item) for item in recipes]}

    @app.put("/favorites/{recipe_id}")
    async def add_favorite(
        recipe_id: str, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Save a recipe."""
        state_container: AppContainer = request.app.state.container
        recipe = _require_recipe(recipe_id)
        try:
            state_container.favorites_service.add(user_id, recipe_id)
        except Exception as exc:
            logger.exception("Failed to save favorite", extra={"user_id": user_id})
            raise _failed("Failed to update favorites. Please try again.") from exc
        state_container.analytics_service.track_recipe_favorite(
            user_id, "add", recipe.id, recipe.title
        )
        return {"recipe_id": recipe_id, "is_favorite": True}

    @app.delete("/favorites/{recipe_id}")
    async def remove_favorite(
        recipe_id: str, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Unsave a recipe."""
        state_container: AppContainer = request.app.state.container
        recipe = _require_recipe(recipe_id)
        try:
            removed = state_container.favorites_service.remove(user_id, recipe_id)
        except Exception as exc:
            logger.exception("Failed to remove favorite", extra={"user_id": user_id})
            raise _failed("Failed to update favorites. Please try again.") from exc
        if removed:
            state_container.analytics_service.track_recipe_favorite(
                user_id, "remove", recipe.id, recipe.title
            )
        return {"recipe_id": recipe_id, "is_favorite": False}

    @app.post("/favorites/{recipe_id}/toggle")
    async def toggle_favorite(
        recipe_id: str, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Flip a recipe's saved state."""
        state_container: AppContainer = request.app.state.container
        recipe = _require_recipe(recipe_id)
        try:
            is_favorite = state_container.favorites_service.toggle(user_id, recipe_id)
        except Exception as exc:
            logger.exception("Failed to toggle favorite", extra={"user_id": user_id})
            raise _failed("Failed to update favorites. Please try again.") from exc
        state_container.analytics_service.track_recipe_favorite(
            user_id, "add" if is_favorite else "remove", recipe.id, recipe.title
        )
        return {"recipe_id": recipe_id, "is_favorite": is_favorite}

    @app.get("/meal-plan")
    async def get_meal_plan(
        request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Return this week's meal plan."""
        state_container: AppContainer = request.app.state.container
        try:
            plan = state_container.meal_plan_service.get_current_plan(user_id)
        except Exception as exc:
            logger.exception("Failed to load meal plan", extra={"user_id": user_id})
            raise _failed("Failed to load meal plan.") from exc
        return _serialize_plan(plan)

    @app.put("/meal-plan/{day}/{meal}")
    async def assign_meal(  # noqa: PLR0913
        day: str,
        meal: str,
        body: AssignRecipeIn,
        request: Request,
        user_id: UUID = Depends(current_user_id),
    ) -> dict[str, object]:
        """Assign a recipe to a slot."""
        state_container: AppContainer = request.app.state.container
        try:
            plan = state_container.meal_plan_service.assign_recipe(
                user_id, day, meal, body.recipe_id
            )
        except (ValidationError, NotFoundError):
            raise
        except Exception as exc:
            logger.exception("Failed to assign recipe", extra={"user_id": user_id})
            raise _failed("Failed to assign recipe.") from exc
        recipe = get_recipe(body.recipe_id)
        state_container.analytics_service.track_meal_plan_change(
            user_id,
            {
                "action": "assign_recipe",
                "day": day,
                "meal": meal,
                "recipeId": body.recipe_id,
                "recipeTitle": recipe.title if recipe else "",
            },
        )
        return _serialize_plan(plan)

    @app.delete("/meal-plan/{day}/{meal}")
    async def clear_meal(
        day: str, meal: str, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Clear a slot."""
        state_container: AppContainer = request.app.state.container
        try:
            plan = state_container.meal_plan_service.remove_recipe(user_id, day, meal)
        except ValidationError:
            raise
        except Exception as exc:
            logger.exception("Failed to remove recipe", extra={"user_id": user_id})
            raise _failed("Failed to remove recipe.") from exc
        return _serialize_plan(plan)

    @app.post("/meal-plan/swap")
    async def swap_meals(
        body: SwapSlotsIn, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Exchange two slots."""
        state_container: AppContainer = request.app.state.container
        try:
            plan = state_container.meal_plan_service.swap_recipes(
                user_id, body.from_day, body.from_meal, body.to_day, body.to_meal
            )
        except ValidationError:
            raise
        except Exception as exc:
            logger.exception("Failed to swap recipes", extra={"user_id": user_id})
            raise _failed("Failed to swap recipes.") from exc
        return _serialize_plan(plan)

    @app.post("/meal-plan/grocery-list")
    async def generate_grocery_list(
        request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Replace the grocery list with items from this week's plan."""
        state_container: AppContainer = request.app.state.container
        try:
            items = state_container.meal_plan_service.generate_grocery_list(user_id)
        except ValidationError:
            raise
        except Exception as exc:
            logger.exception(
                "Failed to generate grocery list", extra={"user_id": user_id}
            )
            raise _failed("Failed to generate grocery list.") from exc
        return _serialize_grocery_list(items)

    @app.get("/grocery-list")
    async def get_grocery_list(
        request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Return the grocery list grouped by recipe."""
        state_container: AppContainer = request.app.state.container
        try:
            items = state_container.grocery_service.list_items(user_id)
        except Exception as exc:
            logger.exception("Failed to load grocery list", extra={"user_id": user_id})
            raise _failed("Failed to load grocery list.") from exc
        return _serialize_grocery_list(items)

    @app.post("/grocery-list/items", status_code=status.HTTP_201_CREATED)
    async def add_grocery_item(
        body: GroceryItemIn, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Add a custom item."""
        state_container: AppContainer = request.app.state.container
        try:
            item = state_container.grocery_service.add_custom_item(
                user_id, body.name, body.amount
            )
        except ValidationError:
            raise
        except Exception as exc:
            logger.exception("Failed to add grocery item", extra={"user_id": user_id})
            raise _failed("Failed to add item.") from exc
        return _serialize_grocery_item(item)

    @app.patch("/grocery-list/items/{item_id}")
    async def update_grocery_item(
        item_id: UUID,
        body: GroceryItemPatch,
        request: Request,
        user_id: UUID = Depends(current_user_id),
    ) -> dict[str, object]:
        """Check or uncheck an item."""
        state_container: AppContainer = request.app.state.container
        try:
            item = state_container.grocery_service.toggle_item(
                user_id, item_id, body.is_checked
            )
        except NotFoundError:
            raise
        except Exception as exc:
            logger.exception("Failed to update grocery item", extra={"user_id": user_id})
            raise _failed("Failed to update item.") from exc
        return _serialize_grocery_item(item)

    @app.delete("/grocery-list/items/{item_id}")
    async def delete_grocery_item(
        item_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, str]:
        """Remove one item."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.grocery_service.remove_item(user_id, item_id)
        except NotFoundError:
            raise
        except Exception as exc:
            logger.exception("Failed to remove grocery item", extra={"user_id": user_id})
            raise _failed("Failed to remove item.") from exc
        return {"status": "ok"}

    @app.post("/grocery-list/clear-checked")
    async def clear_checked_items(
        request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Remove checked items."""
        state_container: AppContainer = request.app.state.container
        try:
            removed = state_container.grocery_service.clear_checked(user_id)
        except Exception as exc:
            logger.exception("Failed to clear checked items", extra={"user_id": user_id})
            raise _failed("Failed to clear completed items.") from exc
        return {"removed": removed}

    @app.delete("/grocery-list")
    async def clear_grocery_list(
        request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Remove every item."""
        state_container: AppContainer = request.app.state.container
        try:
            removed = state_container.grocery_service.clear_all(user_id)
        except Exception as exc:
            logger.exception("Failed to clear grocery list", extra={"user_id": user_id})
            raise _failed("Failed to clear grocery list.") from exc
        return {"removed": removed}

    @app.get("/recipes/{recipe_id}/ratings")
    async def recipe_ratings(
        recipe_id: str, request: Request, user_id: UUID = Depends(current_user_id)
    ) -> dict[str, object]:
        """Return rating stats and the caller's rating."""
        state_container: AppContainer = request.app.state.container
        _require_recipe(recipe_id)
        stats = state_container.rating_service.get_rating_stats(recipe_id)
        return {
            "average_rating": stats.average_rating,
            "total_ratings": stats.total_ratings,
            "user_rating": state_container.rating_service.get_user_rating(
                user_id, recipe_id
            ),
        }

    @app.put("/recipes/{recipe_id}/rating")
    async def submit_rating(
        recipe_id: str,
        body: RatingIn,
        request: Request,
        user_id: UUID = Depends(current_user_id),
    ) -> dict[str, object]:
        """Create or update the caller's rating."""
        state_container: AppContainer = request.app.state.container
        _require_recipe(recipe_id)
        try:
            state_container.rating_service.submit_rating(user_id, recipe_id, body.rating)
        except ValidationError:
            raise
        except Exception as exc:
            logger.exception("Failed to submit rating", extra={"user_id": user_id})
            raise _failed("Failed to submit rating. Please try again.") from exc
        stats = state_container.rating_service.get_rating_stats(recipe_id)
        return {
            "average_rating": stats.average_rating,
            "total_ratings": stats.total_ratings,
            "user_rating": body.rating,
        }

    @app.get("/recipes/{recipe_id}/reviews")
    async def list_reviews(
        recipe_id: str, request: Request, limit: int = Query(default=50, ge=1, le=50)
    ) -> dict[str, object]:
        """Return recent reviews."""
        state_container: AppContainer = request.app.state.container
        _require_recipe(recipe_id)
        reviews = state_container.rating_service.get_reviews(recipe_id, limit)
        return {"reviews": [_serialize_review(review) for review in reviews]}

    @app.post("/recipes/{recipe_id}/reviews", status_code=status.HTTP_201_CREATED)
    async def submit_review(
        recipe_id: str,
        body: ReviewIn,
        request: Request,
        user_id: UUID = Depends(current_user_id),
    ) -> dict[str, object]:
        """Post a review."""
        state_container: AppContainer = request.app.state.container
        _require_recipe(recipe_id)
        try:
            review = state_container.rating_service.submit_review(
                user_id, recipe_id, body.review_text
            )
        except ValidationError:
            raise
        except Exception as exc:
            logger.exception("Failed to submit review", extra={"user_id": user_id})
            raise _failed("Failed to submit review. Please try again.") from exc
        return _serialize_review(review)

    @app.post("/recipes/{recipe_id}/feedback")
    async def recipe_feedback(
        recipe_id: str,
        body: FeedbackIn,
        request: Request,
        user_id: UUID = Depends(current_user_id),
    ) -> dict[str, object]:
        """Record whether a recipe suggestion was helpful."""
        state_container: AppContainer = request.app.state.container
        recipe = _require_recipe(recipe_id)
        recorded = state_container.analytics_service.track_recipe_feedback(
            user_id, recipe.id, recipe.title, body.feedback
        )
        return {"recorded": recorded}

    @app.post("/nutrition/calculate")
    async def calculate_nutrition(
        body: NutritionRequest, request: Request
    ) -> dict[str, object]:
        """Compute per-serving nutrition for a list of ingredients."""
        state_container: AppContainer = request.app.state.container
        ingredients = [
            Ingredient(name=item.name, amount=item.amount, unit=item.unit)
            for item in body.ingredients
        ]
        try:
            nutrition = await state_container.nutrition_service.calculate(
                ingredients, body.servings
            )
        except NutritionUnavailable as exc:
            logger.warning("Nutrition lookup unavailable: %s", exc)
            raise _failed("Nutrition information is unavailable right now.") from exc
        return {"nutrition": _serialize_nutrition(nutrition)}

    return app


def _parse_filters(
    max_time: str, budget: str, dietary: list[str], difficulty: str
) -> RecipeFilters:
    """Translate query parameters, where "any" disables a rule."""
    parsed_time = None
    if max_time and max_time != _ANY:
        try:
            parsed_time = int(max_time)
        except ValueError as exc:
            raise ValidationError("max_time must be a number of minutes.") from exc
    return RecipeFilters(
        max_time=parsed_time,
        budget=budget if budget and budget != _ANY else None,
        dietary=frozenset(tag for tag in dietary if tag),
        difficulty=difficulty if difficulty and difficulty != _ANY else None,
    )


def _require_recipe(recipe_id: str) -> Recipe:
    recipe = get_recipe(recipe_id)
    if recipe is None:
        raise NotFoundError(f"Unknown recipe: {recipe_id}")
    return recipe


def _serialize_ingredient(ingredient: Ingredient) -> dict[str, object]:
    return {
        "name": ingredient.name,
        "amount": ingredient.amount,
        "unit": ingredient.unit,
    }


def _serialize_nutrition(nutrition: NutritionInfo | None) -> dict[str, object] | None:
    if nutrition is None:
        return None
    return {
        "calories": nutrition.calories,
        "protein": nutrition.protein,
        "carbs": nutrition.carbs,
        "fat": nutrition.fat,
        "fiber": nutrition.fiber,
        "sugar": nutrition.sugar,
        "labels": format_nutrition(nutrition),
        "macro_percentages": macro_percentages(nutrition),
    }


def _serialize_rated(item: RatedRecipe) -> dict[str, object]:
    recipe = item.recipe
    return {
        "id": recipe.id,
        "title": recipe.title,
        "description": recipe.description,
        "image_url": recipe.image_url,
        "prep_time": recipe.prep_time,
        "cook_time": recipe.cook_time,
        "total_time": recipe.total_time,
        "servings": recipe.servings,
        "difficulty": recipe.difficulty,
        "budget_level": recipe.budget_level,
        "dietary_tags": list(recipe.dietary_tags),
        "required_ingredients": list(recipe.required_ingredients),
        "ingredients": [_serialize_ingredient(i) for i in recipe.ingredients],
        "instructions": list(recipe.instructions),
        "nutrition": _serialize_nutrition(recipe.nutrition),
        "average_rating": item.average_rating,
        "total_ratings": item.total_ratings,
    }


def _serialize_pantry_item(item: PantryItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "ingredient": item.ingredient,
        "added_at": item.added_at.isoformat(),
    }


def _serialize_plan(plan: MealPlan) -> dict[str, object]:
    return {
        "id": str(plan.id),
        "week_start": plan.week_start.isoformat(),
        "meals": plan.meals.to_json(),
        "updated_at": plan.updated_at.isoformat(),
    }


def _serialize_grocery_item(item: GroceryListItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "ingredient": item.ingredient,
        "amount": item.amount,
        "unit": item.unit,
        "recipe_id": item.recipe_id,
        "recipe_name": item.recipe_name,
        "is_checked": item.is_checked,
        "added_at": item.added_at.isoformat(),
    }


def _serialize_grocery_list(items: list[GroceryListItem]) -> dict[str, object]:
    summary = progress(items)
    return {
        "items": [_serialize_grocery_item(item) for item in items],
        "groups": {
            name: [str(item.id) for item in group]
            for name, group in group_by_recipe(items).items()
        },
        "progress": {
            "total": summary.total,
            "checked": summary.checked,
            "completion_percent": summary.completion_percent,
        },
    }


def _serialize_review(review: RecipeReview) -> dict[str, object]:
    return {
        "id": str(review.id),
        "user_id": str(review.user_id),
        "review_text": review.review_text,
        "created_at": review.created_at.isoformat(),
    }
