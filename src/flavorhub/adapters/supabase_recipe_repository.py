"""Supabase implementation of the recipe catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from flavorhub.adapters.supabase_paging import fetch_all_rows
from flavorhub.domain.recipes import Recipe
from flavorhub.services.recipes import RecipeRepository

_RECIPE_COLUMNS = (
    "id, name, description, prep_time, cook_time, servings, "
    "difficulty_level, cuisine_type"
)


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes."""

    client: Client

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes ordered by creation time."""
        rows = fetch_all_rows(
            lambda: self.client.table("recipes")
            .select(_RECIPE_COLUMNS, count="exact")
            .order("created_at", desc=False)
            .order("id", desc=False)
        )
        return [_parse_recipe(row) for row in rows]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select(_RECIPE_COLUMNS)
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Insert a recipe row and return it."""
        response = self.client.table("recipes").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return _parse_recipe(response.data[0])

    def update_recipe(
        self, recipe_id: UUID, payload: dict[str, object]
    ) -> Recipe | None:
        """Update a recipe row, returning None when no row matched."""
        response = (
            self.client.table("recipes")
            .update(payload)
            .eq("id", str(recipe_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe row if present."""
        self.client.table("recipes").delete().eq("id", str(recipe_id)).execute()


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    description = row.get("description")
    return Recipe(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        description=str(description) if description is not None else None,
        prep_time=int(row.get("prep_time") or 0),
        cook_time=int(row.get("cook_time") or 0),
        servings=int(row.get("servings") or 1),
        difficulty_level=str(row.get("difficulty_level", "")),
        cuisine_type=str(row.get("cuisine_type", "")),
    )
