"""Static sample recipe catalog."""

from recipe_planner.domain.recipes import Ingredient, NutritionInfo, Recipe

DIETARY_OPTIONS = ("vegetarian", "vegan", "gluten-free", "keto", "high-protein")
BUDGET_LEVELS = ("low", "medium", "high")
DIFFICULTY_LEVELS = ("easy", "medium", "hard")

COMMON_INGREDIENTS = (
    "chicken",
    "beef",
    "pork",
    "fish",
    "eggs",
    "pasta",
    "rice",
    "quinoa",
    "bread",
    "potatoes",
    "tomatoes",
    "onions",
    "garlic",
    "bell peppers",
    "mushrooms",
    "spinach",
    "broccoli",
    "carrots",
    "lettuce",
    "cucumber",
    "cheese",
    "milk",
    "butter",
    "cream",
    "yogurt",
    "olive oil",
    "salt",
    "pepper",
    "herbs",
    "spices",
)

SAMPLE_RECIPES: tuple[Recipe, ...] = (
    Recipe(
        id="recipe-1",
        title="Creamy Mushroom Pasta",
        description=(
            "A rich and creamy pasta dish with sautéed mushrooms and garlic, "
            "perfect for a quick weeknight dinner."
        ),
        image_url="https://images.unsplash.com/photo-1621996346565-e3dbc353d2e5?w=400&h=300&fit=crop",
        prep_time=10,
        cook_time=15,
        total_time=25,
        servings=4,
        difficulty="easy",
        budget_level="medium",
        dietary_tags=("vegetarian",),
        required_ingredients=("pasta", "mushrooms", "cream", "garlic"),
        ingredients=(
            Ingredient("pasta", "12 oz", "oz"),
            Ingredient("mushrooms", "8 oz", "oz"),
            Ingredient("heavy cream", "1 cup", "cup"),
            Ingredient("garlic", "3 cloves", "cloves"),
            Ingredient("butter", "2 tbsp", "tbsp"),
            Ingredient("parmesan cheese", "1/2 cup", "cup"),
        ),
        instructions=(
            "Cook pasta according to package directions until al dente.",
            "While pasta cooks, slice mushrooms and mince garlic.",
            "In a large skillet, melt butter over medium-high heat.",
            "Add mushrooms and cook until golden brown, about 5 minutes.",
            "Add garlic and cook for 1 minute until fragrant.",
            "Pour in cream and simmer for 3-4 minutes until slightly thickened.",
            "Drain pasta and add to the skillet with mushroom cream sauce.",
            "Toss to combine and add parmesan cheese.",
            "Season with salt and pepper to taste and serve immediately.",
        ),
        nutrition=NutritionInfo(calories=485, protein=18, carbs=52, fat=24),
    ),
    Recipe(
        id="recipe-2",
        title="Chicken Stir Fry",
        description=(
            "Quick and healthy chicken stir fry with fresh vegetables "
            "and a savory sauce."
        ),
        image_url="https://images.unsplash.com/photo-1603133872878-684f208fb84b?w=400&h=300&fit=crop",
        prep_time=10,
        cook_time=10,
        total_time=20,
        servings=3,
        difficulty="medium",
        budget_level="medium",
        dietary_tags=("high-protein", "gluten-free"),
        required_ingredients=("chicken", "vegetables", "soy sauce", "garlic"),
        ingredients=(
            Ingredient("chicken breast", "1 lb", "lb"),
            Ingredient("bell peppers", "2", "pieces"),
            Ingredient("broccoli", "2 cups", "cups"),
            Ingredient("soy sauce", "3 tbsp", "tbsp"),
            Ingredient("garlic", "2 cloves", "cloves"),
            Ingredient("vegetable oil", "2 tbsp", "tbsp"),
        ),
        instructions=(
            "Cut chicken into bite-sized pieces and season with salt and pepper.",
            "Heat oil in a wok or large skillet over high heat.",
            "Add chicken and stir-fry until cooked through, about 5 minutes.",
            "Remove chicken and set aside.",
            "Add vegetables to the same pan and stir-fry for 3-4 minutes.",
            "Add garlic and cook for 30 seconds.",
            "Return chicken to pan and add soy sauce.",
            "Stir everything together and cook for 1 more minute.",
            "Serve immediately over rice or noodles.",
        ),
        nutrition=NutritionInfo(calories=320, protein=35, carbs=12, fat=14),
    ),
    Recipe(
        id="recipe-3",
        title="Tomato Basil Soup",
        description=(
            "Comforting homemade tomato soup with fresh basil and a touch of cream."
        ),
        image_url="https://images.unsplash.com/photo-1547592166-23ac45744acd?w=400&h=300&fit=crop",
        prep_time=10,
        cook_time=25,
        total_time=35,
        servings=4,
        difficulty="easy",
        budget_level="low",
        dietary_tags=("vegetarian", "gluten-free"),
        required_ingredients=("tomatoes", "basil", "onion", "cream"),
        ingredients=(
            Ingredient("canned tomatoes", "28 oz", "oz"),
            Ingredient("fresh basil", "1/4 cup", "cup"),
            Ingredient("onion", "1 medium", "piece"),
            Ingredient("heavy cream", "1/2 cup", "cup"),
            Ingredient("vegetable broth", "2 cups", "cups"),
            Ingredient("olive oil", "2 tbsp", "tbsp"),
        ),
        instructions=(
            "Heat olive oil in a large pot over medium heat.",
            "Add diced onion and cook until translucent, about 5 minutes.",
            "Add canned tomatoes and vegetable broth.",
            "Bring to a boil, then reduce heat and simmer for 20 minutes.",
            "Remove from heat and blend until smooth using an immersion blender.",
            "Stir in cream and fresh basil.",
            "Season with salt and pepper to taste.",
            "Serve hot with crusty bread.",
        ),
        nutrition=NutritionInfo(calories=180, protein=4, carbs=16, fat=12),
    ),
    Recipe(
        id="recipe-4",
        title="Quinoa Buddha Bowl",
        description=(
            "Nutritious and colorful bowl with quinoa, roasted vegetables, "
            "and tahini dressing."
        ),
        image_url="https://images.unsplash.com/photo-1512621776951-a57141f2eefd?w=400&h=300&fit=crop",
        prep_time=15,
        cook_time=25,
        total_time=40,
        servings=2,
        difficulty="medium",
        budget_level="medium",
        dietary_tags=("vegan", "gluten-free", "high-protein"),
        required_ingredients=("quinoa", "sweet potato", "chickpeas", "spinach"),
        ingredients=(
            Ingredient("quinoa", "1 cup", "cup"),
            Ingredient("sweet potato", "1 large", "piece"),
            Ingredient("chickpeas", "1 can", "can"),
            Ingredient("fresh spinach", "2 cups", "cups"),
            Ingredient("tahini", "3 tbsp", "tbsp"),
            Ingredient("lemon juice", "2 tbsp", "tbsp"),
        ),
        instructions=(
            "Preheat oven to 400°F (200°C).",
            "Cook quinoa according to package instructions.",
            "Cube sweet potato and roast for 25 minutes until tender.",
            "Drain and rinse chickpeas, then roast for 15 minutes.",
            "Whisk together tahini, lemon juice, and water for dressing.",
            "Arrange quinoa, roasted vegetables, and spinach in bowls.",
            "Drizzle with tahini dressing and serve.",
        ),
        nutrition=NutritionInfo(calories=520, protein=20, carbs=78, fat=16),
    ),
    Recipe(
        id="recipe-5",
        title="Beef Tacos",
        description=(
            "Flavorful ground beef tacos with fresh toppings and homemade salsa."
        ),
        image_url="https://images.unsplash.com/photo-1565299624946-b28f40a0ca4b?w=400&h=300&fit=crop",
        prep_time=15,
        cook_time=15,
        total_time=30,
        servings=4,
        difficulty="easy",
        budget_level="medium",
        dietary_tags=("high-protein",),
        required_ingredients=("ground beef", "tortillas", "tomatoes", "onion"),
        ingredients=(
            Ingredient("ground beef", "1 lb", "lb"),
            Ingredient("corn tortillas", "8", "pieces"),
            Ingredient("tomatoes", "2 medium", "pieces"),
            Ingredient("white onion", "1 small", "piece"),
            Ingredient("lettuce", "2 cups", "cups"),
            Ingredient("cheese", "1 cup", "cup"),
        ),
        instructions=(
            "Brown ground beef in a large skillet over medium-high heat.",
            "Season with cumin, chili powder, salt, and pepper.",
            "Warm tortillas in a dry skillet or microwave.",
            "Dice tomatoes and onion for fresh salsa.",
            "Shred lettuce and grate cheese.",
            "Assemble tacos with beef and desired toppings.",
            "Serve with lime wedges and hot sauce.",
        ),
        nutrition=NutritionInfo(calories=380, protein=28, carbs=24, fat=20),
    ),
)

_BY_ID = {recipe.id: recipe for recipe in SAMPLE_RECIPES}


def get_recipe(recipe_id: str) -> Recipe | None:
    """Return a catalog recipe by id, if present."""
    return _BY_ID.get(recipe_id)
