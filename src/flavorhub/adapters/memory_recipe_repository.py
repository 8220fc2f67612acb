"""In-memory recipe catalog."""

import threading
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from flavorhub.domain.recipes import Recipe
from flavorhub.services.recipes import RecipeRepository


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """Thread-safe recipe repository keeping insertion order."""

    recipes: dict[UUID, Recipe] = field(default_factory=dict)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def list_recipes(self) -> list[Recipe]:
        """Return a snapshot of all recipes."""
        with self._lock:
            return list(self.recipes.values())

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        with self._lock:
            return self.recipes.get(recipe_id)

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe with a fresh id."""
        recipe = _build_recipe(uuid4(), payload)
        with self._lock:
            self.recipes[recipe.id] = recipe
        return recipe

    def update_recipe(
        self, recipe_id: UUID, payload: dict[str, object]
    ) -> Recipe | None:
        """Update a recipe in place, keeping its catalog position."""
        with self._lock:
            current = self.recipes.get(recipe_id)
            if current is None:
                return None
            updated = _build_recipe(recipe_id, payload, current)
            self.recipes[recipe_id] = updated
            return updated

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe if present."""
        with self._lock:
            self.recipes.pop(recipe_id, None)


def _build_recipe(
    recipe_id: UUID, payload: dict[str, object], current: Recipe | None = None
) -> Recipe:
    def pick(key: str, default: object) -> object:
        if current is not None and key not in payload:
            return getattr(current, key)
        return payload.get(key, default)

    description = pick("description", None)
    return Recipe(
        id=recipe_id,
        name=str(pick("name", "")),
        description=str(description) if description is not None else None,
        prep_time=int(pick("prep_time", 0)),
        cook_time=int(pick("cook_time", 0)),
        servings=int(pick("servings", 1)),
        difficulty_level=str(pick("difficulty_level", "")),
        cuisine_type=str(pick("cuisine_type", "")),
    )
