"""Sample catalog for local development."""

from flavorhub.domain.recipes import Recipe
from flavorhub.services.recipes import RecipeRepository

SAMPLE_RECIPES: tuple[dict[str, object], ...] = (
    {
        "name": "Pasta Carbonara",
        "description": "Classic Italian pasta dish",
        "prep_time": 10,
        "cook_time": 15,
        "servings": 4,
        "difficulty_level": "Easy",
        "cuisine_type": "Italian",
    },
    {
        "name": "Pad Thai",
        "description": "Thai stir-fried noodles",
        "prep_time": 15,
        "cook_time": 10,
        "servings": 2,
        "difficulty_level": "Medium",
        "cuisine_type": "Thai",
    },
    {
        "name": "Spaghetti Bolognese",
        "description": "Slow-cooked meat sauce over spaghetti",
        "prep_time": 20,
        "cook_time": 30,
        "servings": 6,
        "difficulty_level": "Easy",
        "cuisine_type": "Italian",
    },
    {
        "name": "Chicken Tikka Masala",
        "description": "Grilled chicken in a creamy spiced tomato sauce",
        "prep_time": 30,
        "cook_time": 40,
        "servings": 4,
        "difficulty_level": "Medium",
        "cuisine_type": "Indian",
    },
    {
        "name": "Beef Wellington",
        "description": "Beef tenderloin wrapped in mushroom duxelles and pastry",
        "prep_time": 60,
        "cook_time": 45,
        "servings": 6,
        "difficulty_level": "Hard",
        "cuisine_type": "British",
    },
)


def seed_recipes(repository: RecipeRepository) -> list[Recipe]:
    """Insert the sample recipes into an empty catalog."""
    if repository.list_recipes():
        return []
    return [repository.create_recipe(dict(payload)) for payload in SAMPLE_RECIPES]
