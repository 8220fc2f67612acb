"""Tests for recipe enrichment."""

import pytest

from flavorhub.adapters.memory_recipe_repository import InMemoryRecipeRepository
from flavorhub.services.enrichment import RecipeEnricher
from flavorhub.services.ratings import RatingService
from tests.conftest import BOLOGNESE, CARBONARA, PAD_THAI, add_recipes


def test_enrich_sets_live_stats(
    enricher: RecipeEnricher,
    rating_service: RatingService,
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    (recipe,) = add_recipes(recipe_repository, CARBONARA)
    rating_service.submit(recipe.id, "user-1", 3)
    rating_service.submit(recipe.id, "user-2", 4)

    enriched = enricher.enrich(recipe)

    assert enriched is not None
    assert enriched.id == recipe.id
    assert enriched.name == recipe.name
    assert enriched.average_rating == pytest.approx(3.5)
    assert enriched.rating_count == 2


def test_enrich_unrated_recipe(
    enricher: RecipeEnricher, recipe_repository: InMemoryRecipeRepository
) -> None:
    (recipe,) = add_recipes(recipe_repository, CARBONARA)

    enriched = enricher.enrich(recipe)

    assert enriched is not None
    assert enriched.average_rating is None
    assert enriched.rating_count == 0


def test_enrich_absent_recipe(enricher: RecipeEnricher) -> None:
    assert enricher.enrich(None) is None


def test_enrich_is_idempotent(
    enricher: RecipeEnricher,
    rating_service: RatingService,
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    (recipe,) = add_recipes(recipe_repository, CARBONARA)
    rating_service.submit(recipe.id, "user-1", 5)

    once = enricher.enrich(recipe)
    twice = enricher.enrich(once)

    assert once == twice


def test_enrich_overwrites_stale_stats(
    enricher: RecipeEnricher,
    rating_service: RatingService,
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    (recipe,) = add_recipes(recipe_repository, CARBONARA)
    rating = rating_service.submit(recipe.id, "user-1", 5)
    stale = enricher.enrich(recipe)

    rating_service.delete(rating.id)
    fresh = enricher.enrich(stale)

    assert fresh is not None
    assert fresh.average_rating is None
    assert fresh.rating_count == 0


def test_enrich_all_preserves_order_and_size(
    enricher: RecipeEnricher,
    rating_service: RatingService,
    recipe_repository: InMemoryRecipeRepository,
) -> None:
    recipes = add_recipes(recipe_repository, CARBONARA, PAD_THAI, BOLOGNESE)
    rating_service.submit(recipes[1].id, "user-1", 2)

    enriched = enricher.enrich_all(recipes)

    assert [r.id for r in enriched] == [r.id for r in recipes]
    assert [r.rating_count for r in enriched] == [0, 1, 0]
    assert enricher.enrich_all([]) == []
