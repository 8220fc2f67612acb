"""Recipe catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, Response, status

from flavorhub.api.schemas import RecipeOut, RecipePayload

if TYPE_CHECKING:
    from flavorhub.containers import AppContainer

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
async def list_recipes(
    request: Request,
    difficulty: str | None = None,
    cuisine: str | None = None,
    search: str | None = None,
) -> list[RecipeOut]:
    """Return recipes matching all provided filters."""
    container: AppContainer = request.app.state.container
    recipes = container.recipe_catalog.list_recipes(
        difficulty=difficulty, cuisine=cuisine, search=search
    )
    return [RecipeOut.from_domain(recipe) for recipe in recipes]


@router.get("/search")
async def search_recipes(request: Request, query: str) -> list[RecipeOut]:
    """Search recipes by name or description."""
    container: AppContainer = request.app.state.container
    recipes = container.recipe_catalog.search(query)
    return [RecipeOut.from_domain(recipe) for recipe in recipes]


@router.get("/difficulty/{level}")
async def recipes_by_difficulty(level: str, request: Request) -> list[RecipeOut]:
    """Return recipes with the given difficulty level."""
    container: AppContainer = request.app.state.container
    recipes = container.recipe_catalog.filter_by_difficulty(level)
    return [RecipeOut.from_domain(recipe) for recipe in recipes]


@router.get("/cuisine/{cuisine_type}")
async def recipes_by_cuisine(cuisine_type: str, request: Request) -> list[RecipeOut]:
    """Return recipes of the given cuisine."""
    container: AppContainer = request.app.state.container
    recipes = container.recipe_catalog.filter_by_cuisine(cuisine_type)
    return [RecipeOut.from_domain(recipe) for recipe in recipes]


@router.get("/recipe-of-the-day")
async def recipe_of_the_day(request: Request) -> RecipeOut:
    """Return today's featured recipe."""
    container: AppContainer = request.app.state.container
    recipe = container.daily_selector.pick_of_the_day()
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return RecipeOut.from_domain(recipe)


@router.get("/{recipe_id}")
async def get_recipe(recipe_id: UUID, request: Request) -> RecipeOut:
    """Return a single recipe."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_catalog.find_by_id(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return RecipeOut.from_domain(recipe)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(payload: RecipePayload, request: Request) -> RecipeOut:
    """Add a recipe to the catalog."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_catalog.create_recipe(payload.model_dump())
    return RecipeOut.from_domain(recipe)


@router.put("/{recipe_id}")
async def update_recipe(
    recipe_id: UUID, payload: RecipePayload, request: Request
) -> RecipeOut:
    """Replace an existing recipe."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_catalog.update_recipe(recipe_id, payload.model_dump())
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return RecipeOut.from_domain(recipe)


@router.delete(
    "/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_recipe(recipe_id: UUID, request: Request) -> Response:
    """Remove a recipe; unknown ids are ignored."""
    container: AppContainer = request.app.state.container
    container.recipe_catalog.delete_recipe(recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
