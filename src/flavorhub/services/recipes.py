"""Recipe catalog queries and management."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from flavorhub.domain.recipes import Recipe
from flavorhub.services.enrichment import RecipeEnricher
from flavorhub.services.ratings import RatingRepository


class RecipeRepository(Protocol):
    """Persistence interface for the recipe catalog."""

    def list_recipes(self) -> list[Recipe]:
        """Return every recipe in a stable order."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe and return it."""

    def update_recipe(
        self, recipe_id: UUID, payload: dict[str, object]
    ) -> Recipe | None:
        """Update a recipe, returning None when it does not exist."""

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe; missing ids are ignored."""


@dataclass
class RecipeCatalog:
    """Application service for catalog reads and writes.

    Every recipe handed back to callers has been passed through the enricher,
    so the rating fields always reflect the current rating store.
    """

    repository: RecipeRepository
    rating_repository: RatingRepository
    enricher: RecipeEnricher

    def find_all(self) -> list[Recipe]:
        """Return all recipes."""
        return self.enricher.enrich_all(self.repository.list_recipes())

    def find_by_id(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        return self.enricher.enrich(self.repository.get_recipe(recipe_id))

    def filter_by_difficulty(self, level: str) -> list[Recipe]:
        """Return recipes with the given difficulty, ignoring case."""
        recipes = _match_difficulty(self.repository.list_recipes(), level)
        return self.enricher.enrich_all(recipes)

    def filter_by_cuisine(self, cuisine_type: str) -> list[Recipe]:
        """Return recipes of the given cuisine, ignoring case."""
        recipes = _match_cuisine(self.repository.list_recipes(), cuisine_type)
        return self.enricher.enrich_all(recipes)

    def search(self, term: str) -> list[Recipe]:
        """Return recipes whose name or description contains the term."""
        recipes = _match_search(self.repository.list_recipes(), term)
        return self.enricher.enrich_all(recipes)

    def list_recipes(
        self,
        difficulty: str | None = None,
        cuisine: str | None = None,
        search: str | None = None,
    ) -> list[Recipe]:
        """Return recipes matching every provided filter.

        Empty or missing filters are skipped rather than matching nothing.
        """
        recipes = self.repository.list_recipes()
        if difficulty:
            recipes = _match_difficulty(recipes, difficulty)
        if cuisine:
            recipes = _match_cuisine(recipes, cuisine)
        if search:
            recipes = _match_search(recipes, search)
        return self.enricher.enrich_all(recipes)

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Add a recipe to the catalog."""
        return self.enricher.enrich(self.repository.create_recipe(payload))

    def update_recipe(
        self, recipe_id: UUID, payload: dict[str, object]
    ) -> Recipe | None:
        """Replace a recipe's fields, returning None when it does not exist."""
        return self.enricher.enrich(self.repository.update_recipe(recipe_id, payload))

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Remove a recipe from the catalog together with its ratings."""
        self.repository.delete_recipe(recipe_id)
        self.rating_repository.delete_by_recipe(recipe_id)


def _match_difficulty(recipes: list[Recipe], level: str) -> list[Recipe]:
    wanted = level.casefold()
    return [r for r in recipes if r.difficulty_level.casefold() == wanted]


def _match_cuisine(recipes: list[Recipe], cuisine_type: str) -> list[Recipe]:
    wanted = cuisine_type.casefold()
    return [r for r in recipes if r.cuisine_type.casefold() == wanted]


def _match_search(recipes: list[Recipe], term: str) -> list[Recipe]:
    needle = term.casefold()
    return [
        recipe
        for recipe in recipes
        if needle in recipe.name.casefold()
        or (recipe.description is not None and needle in recipe.description.casefold())
    ]
