"""Tests for concurrent rating submissions."""

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from flavorhub.adapters.memory_recipe_repository import InMemoryRecipeRepository
from flavorhub.domain.errors import DuplicateRatingError
from flavorhub.domain.ratings import Rating
from flavorhub.services.ratings import RatingService
from tests.conftest import CARBONARA, add_recipes

WORKERS = 16


def _race(submit: Callable[[int], Rating]) -> list[object]:
    barrier = threading.Barrier(WORKERS)

    def attempt(index: int) -> object:
        barrier.wait()
        try:
            return submit(index)
        except DuplicateRatingError as exc:
            return exc

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        return list(pool.map(attempt, range(WORKERS)))


def test_concurrent_submits_for_same_pair_yield_one_rating(
    rating_service: RatingService, recipe_repository: InMemoryRecipeRepository
) -> None:
    (recipe,) = add_recipes(recipe_repository, CARBONARA)

    results = _race(
        lambda index: rating_service.submit(recipe.id, "user-1", 1 + index % 5),
    )

    created = [r for r in results if isinstance(r, Rating)]
    rejected = [r for r in results if isinstance(r, DuplicateRatingError)]
    assert len(created) == 1
    assert len(rejected) == WORKERS - 1
    assert rating_service.find_by_recipe(recipe.id) == created


def test_concurrent_submits_for_different_users_all_succeed(
    rating_service: RatingService, recipe_repository: InMemoryRecipeRepository
) -> None:
    (recipe,) = add_recipes(recipe_repository, CARBONARA)

    results = _race(
        lambda index: rating_service.submit(recipe.id, f"user-{index}", 4),
    )

    assert all(isinstance(r, Rating) for r in results)
    assert rating_service.count_by_recipe(recipe.id) == WORKERS
    assert rating_service.average_by_recipe(recipe.id) == 4.0
