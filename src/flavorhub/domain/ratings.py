"""Domain models for recipe ratings."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Rating:
    """A single user's score and optional review for one recipe."""

    id: UUID
    recipe_id: UUID
    user_id: str
    value: int
    review: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class RatingStats:
    """Live average and count for a recipe."""

    average: float | None
    count: int
