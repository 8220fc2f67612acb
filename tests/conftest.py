"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

import pytest

from flavorhub.adapters.memory_rating_repository import InMemoryRatingRepository
from flavorhub.adapters.memory_recipe_repository import InMemoryRecipeRepository
from flavorhub.config import Settings
from flavorhub.containers import AppContainer
from flavorhub.domain.recipes import Recipe
from flavorhub.services.daily import DailySelector
from flavorhub.services.enrichment import RecipeEnricher
from flavorhub.services.ratings import RatingAggregator, RatingService
from flavorhub.services.recipes import RecipeCatalog

FIXED_DAY = date(2026, 3, 15)

CARBONARA = {
    "name": "Pasta Carbonara",
    "description": "Classic Italian pasta dish",
    "prep_time": 10,
    "cook_time": 15,
    "servings": 4,
    "difficulty_level": "Easy",
    "cuisine_type": "Italian",
}
PAD_THAI = {
    "name": "Pad Thai",
    "description": "Thai stir-fried noodles",
    "prep_time": 15,
    "cook_time": 10,
    "servings": 2,
    "difficulty_level": "Medium",
    "cuisine_type": "Thai",
}
BOLOGNESE = {
    "name": "Spaghetti Bolognese",
    "description": "Slow-cooked meat sauce over spaghetti",
    "prep_time": 20,
    "cook_time": 30,
    "servings": 6,
    "difficulty_level": "Easy",
    "cuisine_type": "Italian",
}


@dataclass
class SteppingClock:
    """Clock returning a fixed start time advanced by ``step`` on each call."""

    current: datetime = field(
        default_factory=lambda: datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    )
    step: timedelta = timedelta(minutes=1)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


def add_recipes(
    repository: InMemoryRecipeRepository, *payloads: dict[str, object]
) -> list[Recipe]:
    """Insert recipes and return them in insertion order."""
    return [repository.create_recipe(dict(payload)) for payload in payloads]


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", seed_sample_recipes=False)


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def rating_repository() -> InMemoryRatingRepository:
    return InMemoryRatingRepository()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def rating_service(
    rating_repository: InMemoryRatingRepository,
    recipe_repository: InMemoryRecipeRepository,
    clock: SteppingClock,
) -> RatingService:
    return RatingService(
        repository=rating_repository,
        recipe_repository=recipe_repository,
        clock=clock,
    )


@pytest.fixture
def aggregator(rating_repository: InMemoryRatingRepository) -> RatingAggregator:
    return RatingAggregator(rating_repository)


@pytest.fixture
def enricher(aggregator: RatingAggregator) -> RecipeEnricher:
    return RecipeEnricher(aggregator)


@pytest.fixture
def catalog(
    recipe_repository: InMemoryRecipeRepository,
    rating_repository: InMemoryRatingRepository,
    enricher: RecipeEnricher,
) -> RecipeCatalog:
    return RecipeCatalog(
        repository=recipe_repository,
        rating_repository=rating_repository,
        enricher=enricher,
    )


@pytest.fixture
def daily_selector(
    recipe_repository: InMemoryRecipeRepository, enricher: RecipeEnricher
) -> DailySelector:
    return DailySelector(
        repository=recipe_repository, enricher=enricher, today=lambda: FIXED_DAY
    )


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    catalog: RecipeCatalog,
    rating_service: RatingService,
    aggregator: RatingAggregator,
    daily_selector: DailySelector,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        recipe_catalog=catalog,
        rating_service=rating_service,
        rating_aggregator=aggregator,
        daily_selector=daily_selector,
        close_resources=close_resources,
    )
