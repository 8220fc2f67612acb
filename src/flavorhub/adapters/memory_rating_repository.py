"""In-memory rating store with a unique (recipe, user) index."""

import threading
from dataclasses import dataclass, field, replace
from datetime import datetime
from uuid import UUID, uuid4

from flavorhub.domain.errors import DuplicateRatingError
from flavorhub.domain.ratings import Rating, RatingStats
from flavorhub.services.ratings import RatingRepository


@dataclass
class InMemoryRatingRepository(RatingRepository):
    """Thread-safe rating repository.

    ``by_pair`` maps ``(recipe_id, user_id)`` to a rating id and ``by_recipe``
    maps a recipe id to its rating ids in insertion order. Both indexes are
    only touched while holding the lock, which makes ``create_rating`` an
    atomic insert-or-reject.
    """

    ratings: dict[UUID, Rating] = field(default_factory=dict)
    by_pair: dict[tuple[UUID, str], UUID] = field(default_factory=dict)
    by_recipe: dict[UUID, list[UUID]] = field(default_factory=dict)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def create_rating(  # noqa: PLR0913
        self,
        recipe_id: UUID,
        user_id: str,
        value: int,
        review: str | None,
        created_at: datetime,
    ) -> Rating:
        """Insert a rating unless the user already rated the recipe."""
        key = (recipe_id, user_id)
        with self._lock:
            if key in self.by_pair:
                raise DuplicateRatingError(recipe_id, user_id)
            rating = Rating(
                id=uuid4(),
                recipe_id=recipe_id,
                user_id=user_id,
                value=value,
                review=review,
                created_at=created_at,
                updated_at=created_at,
            )
            self.ratings[rating.id] = rating
            self.by_pair[key] = rating.id
            self.by_recipe.setdefault(recipe_id, []).append(rating.id)
            return rating

    def get_rating(self, rating_id: UUID) -> Rating | None:
        """Return a rating by id, if present."""
        with self._lock:
            return self.ratings.get(rating_id)

    def update_rating(
        self, rating_id: UUID, value: int, review: str | None, updated_at: datetime
    ) -> Rating | None:
        """Overwrite value and review of a rating."""
        with self._lock:
            current = self.ratings.get(rating_id)
            if current is None:
                return None
            updated = replace(
                current, value=value, review=review, updated_at=updated_at
            )
            self.ratings[rating_id] = updated
            return updated

    def delete_rating(self, rating_id: UUID) -> None:
        """Delete a rating and free its (recipe, user) slot."""
        with self._lock:
            rating = self.ratings.pop(rating_id, None)
            if rating is None:
                return
            self.by_pair.pop((rating.recipe_id, rating.user_id), None)
            rating_ids = self.by_recipe.get(rating.recipe_id, [])
            if rating_id in rating_ids:
                rating_ids.remove(rating_id)
            if not rating_ids:
                self.by_recipe.pop(rating.recipe_id, None)

    def delete_by_recipe(self, recipe_id: UUID) -> None:
        """Delete every rating of a recipe."""
        with self._lock:
            for rating_id in self.by_recipe.pop(recipe_id, []):
                rating = self.ratings.pop(rating_id, None)
                if rating is not None:
                    self.by_pair.pop((rating.recipe_id, rating.user_id), None)

    def list_by_recipe(self, recipe_id: UUID) -> list[Rating]:
        """Return ratings for a recipe in insertion order."""
        with self._lock:
            return [
                self.ratings[rating_id]
                for rating_id in self.by_recipe.get(recipe_id, [])
            ]

    def get_by_recipe_and_user(self, recipe_id: UUID, user_id: str) -> Rating | None:
        """Return the user's rating for a recipe via the unique index."""
        with self._lock:
            rating_id = self.by_pair.get((recipe_id, user_id))
            return self.ratings.get(rating_id) if rating_id is not None else None

    def count_by_recipe(self, recipe_id: UUID) -> int:
        """Return the number of ratings for a recipe."""
        with self._lock:
            return len(self.by_recipe.get(recipe_id, []))

    def average_by_recipe(self, recipe_id: UUID) -> float | None:
        """Return the mean rating for a recipe."""
        return self.stats_by_recipe(recipe_id).average

    def stats_by_recipe(self, recipe_id: UUID) -> RatingStats:
        """Return average and count from one locked snapshot."""
        values = [rating.value for rating in self.list_by_recipe(recipe_id)]
        return _stats(values)


def _stats(values: list[int]) -> RatingStats:
    if not values:
        return RatingStats(average=None, count=0)
    return RatingStats(average=sum(values) / len(values), count=len(values))
