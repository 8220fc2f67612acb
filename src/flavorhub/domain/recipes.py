"""Domain models for the recipe catalog."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Recipe:
    """Represents a recipe in the catalog.

    ``average_rating`` and ``rating_count`` are computed at read time from the
    rating store and are never persisted.
    """

    id: UUID
    name: str
    description: str | None
    prep_time: int
    cook_time: int
    servings: int
    difficulty_level: str
    cuisine_type: str
    average_rating: float | None = None
    rating_count: int = 0
