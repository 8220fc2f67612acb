"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from flavorhub.adapters.memory_rating_repository import InMemoryRatingRepository
from flavorhub.adapters.memory_recipe_repository import InMemoryRecipeRepository
from flavorhub.adapters.supabase_rating_repository import SupabaseRatingRepository
from flavorhub.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from flavorhub.config import Settings, parse_storage_backend
from flavorhub.sample_data import seed_recipes
from flavorhub.services.daily import DailySelector, local_today, zoned_today
from flavorhub.services.enrichment import RecipeEnricher
from flavorhub.services.ratings import (
    RatingAggregator,
    RatingRepository,
    RatingService,
)
from flavorhub.services.recipes import RecipeCatalog, RecipeRepository

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_catalog: RecipeCatalog
    rating_service: RatingService
    rating_aggregator: RatingAggregator
    daily_selector: DailySelector
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    recipe_repository, rating_repository = _build_repositories(resolved_settings)
    if resolved_settings.seed_sample_recipes:
        seeded = seed_recipes(recipe_repository)
        _logger.info("Seeded %s sample recipes", len(seeded))

    rating_aggregator = RatingAggregator(rating_repository)
    enricher = RecipeEnricher(rating_aggregator)
    today = (
        zoned_today(resolved_settings.daily_pick_timezone)
        if resolved_settings.daily_pick_timezone
        else local_today
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        recipe_catalog=RecipeCatalog(
            repository=recipe_repository,
            rating_repository=rating_repository,
            enricher=enricher,
        ),
        rating_service=RatingService(
            repository=rating_repository,
            recipe_repository=recipe_repository,
        ),
        rating_aggregator=rating_aggregator,
        daily_selector=DailySelector(
            repository=recipe_repository, enricher=enricher, today=today
        ),
        close_resources=close_resources,
    )


def _build_repositories(
    settings: Settings,
) -> tuple[RecipeRepository, RatingRepository]:
    backend = parse_storage_backend(settings.storage_backend)
    _logger.info("Using %s storage backend", backend)
    if backend == "memory":
        return InMemoryRecipeRepository(), InMemoryRatingRepository()
    if not settings.supabase_url or not settings.supabase_service_key:
        raise ValueError("Supabase storage requires supabase_url and service key")
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return SupabaseRecipeRepository(client), SupabaseRatingRepository(client)
