"""Rating submission, lookup and aggregation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from flavorhub.domain.errors import (
    InvalidRatingValueError,
    RatingNotFoundError,
    RecipeNotFoundError,
)
from flavorhub.domain.ratings import MAX_RATING, MIN_RATING, Rating, RatingStats

if TYPE_CHECKING:
    from collections.abc import Callable
    from uuid import UUID

    from flavorhub.services.recipes import RecipeRepository


class RatingRepository(Protocol):
    """Persistence interface for recipe ratings."""

    def create_rating(  # noqa: PLR0913
        self,
        recipe_id: UUID,
        user_id: str,
        value: int,
        review: str | None,
        created_at: datetime,
    ) -> Rating:
        """Insert a rating, raising DuplicateRatingError if the pair exists.

        The existence check and the insert must happen as one atomic step.
        """

    def get_rating(self, rating_id: UUID) -> Rating | None:
        """Return a rating by id, if present."""

    def update_rating(
        self, rating_id: UUID, value: int, review: str | None, updated_at: datetime
    ) -> Rating | None:
        """Overwrite value and review, returning None when the rating is gone."""

    def delete_rating(self, rating_id: UUID) -> None:
        """Delete a rating; missing ids are ignored."""

    def delete_by_recipe(self, recipe_id: UUID) -> None:
        """Delete every rating of a recipe."""

    def list_by_recipe(self, recipe_id: UUID) -> list[Rating]:
        """Return all ratings for a recipe."""

    def get_by_recipe_and_user(self, recipe_id: UUID, user_id: str) -> Rating | None:
        """Return a user's rating for a recipe, if present."""

    def count_by_recipe(self, recipe_id: UUID) -> int:
        """Return the number of ratings for a recipe."""

    def average_by_recipe(self, recipe_id: UUID) -> float | None:
        """Return the mean rating value, or None when unrated."""

    def stats_by_recipe(self, recipe_id: UUID) -> RatingStats:
        """Return average and count read from the same snapshot."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class RatingService:
    """Application service owning rating records."""

    repository: RatingRepository
    recipe_repository: RecipeRepository
    clock: Callable[[], datetime] = field(default_factory=lambda: _utcnow)

    def submit(
        self, recipe_id: UUID, user_id: str, value: int, review: str | None = None
    ) -> Rating:
        """Create the first rating a user gives a recipe."""
        if self.recipe_repository.get_recipe(recipe_id) is None:
            raise RecipeNotFoundError(recipe_id)
        _validate_value(value)
        return self.repository.create_rating(
            recipe_id=recipe_id,
            user_id=user_id,
            value=value,
            review=review,
            created_at=self.clock(),
        )

    def update(self, rating_id: UUID, value: int, review: str | None = None) -> Rating:
        """Replace the value and review of an existing rating."""
        current = self.repository.get_rating(rating_id)
        if current is None:
            raise RatingNotFoundError(rating_id)
        _validate_value(value)
        updated = self.repository.update_rating(
            rating_id,
            value=value,
            review=review,
            updated_at=max(self.clock(), current.created_at),
        )
        if updated is None:
            raise RatingNotFoundError(rating_id)
        return updated

    def delete(self, rating_id: UUID) -> None:
        """Delete a rating if it exists."""
        self.repository.delete_rating(rating_id)

    def get(self, rating_id: UUID) -> Rating | None:
        """Return a rating by id."""
        return self.repository.get_rating(rating_id)

    def find_by_recipe(self, recipe_id: UUID) -> list[Rating]:
        """Return all ratings for a recipe."""
        return self.repository.list_by_recipe(recipe_id)

    def find_by_recipe_and_user(self, recipe_id: UUID, user_id: str) -> Rating | None:
        """Return the user's rating for a recipe, if any."""
        return self.repository.get_by_recipe_and_user(recipe_id, user_id)

    def count_by_recipe(self, recipe_id: UUID) -> int:
        """Return the number of ratings for a recipe."""
        return self.repository.count_by_recipe(recipe_id)

    def average_by_recipe(self, recipe_id: UUID) -> float | None:
        """Return the average rating for a recipe, or None when unrated."""
        return self.repository.average_by_recipe(recipe_id)


@dataclass
class RatingAggregator:
    """Read-through view of live rating statistics."""

    repository: RatingRepository

    def average(self, recipe_id: UUID) -> float | None:
        """Return the mean of all current ratings, or None when unrated."""
        return self.repository.average_by_recipe(recipe_id)

    def count(self, recipe_id: UUID) -> int:
        """Return the current number of ratings."""
        return self.repository.count_by_recipe(recipe_id)

    def stats(self, recipe_id: UUID) -> RatingStats:
        """Return average and count taken together."""
        return self.repository.stats_by_recipe(recipe_id)


def _validate_value(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRatingValueError(value)
    if not MIN_RATING <= value <= MAX_RATING:
        raise InvalidRatingValueError(value)
