"""Supabase implementation of the rating store.

The ``recipe_ratings`` table carries a unique constraint on
``(recipe_id, user_id)``; the database rejects the second of two racing
inserts and the rejection is surfaced as ``DuplicateRatingError``.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from flavorhub.adapters.supabase_paging import fetch_all_rows
from flavorhub.domain.errors import DuplicateRatingError
from flavorhub.domain.ratings import Rating, RatingStats
from flavorhub.services.ratings import RatingRepository

UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseRatingRepository(RatingRepository):
    """Supabase-backed repository for recipe ratings."""

    client: Client

    def create_rating(  # noqa: PLR0913
        self,
        recipe_id: UUID,
        user_id: str,
        value: int,
        review: str | None,
        created_at: datetime,
    ) -> Rating:
        """Insert a rating row, relying on the unique constraint."""
        try:
            response = (
                self.client.table("recipe_ratings")
                .insert(
                    {
                        "recipe_id": str(recipe_id),
                        "user_id": user_id,
                        "rating": value,
                        "review": review,
                        "created_at": created_at.isoformat(),
                        "updated_at": created_at.isoformat(),
                    }
                )
                .execute()
            )
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise DuplicateRatingError(recipe_id, user_id) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create rating")
        return _parse_rating(response.data[0])

    def get_rating(self, rating_id: UUID) -> Rating | None:
        """Return a rating by id, if present."""
        response = (
            self.client.table("recipe_ratings")
            .select("*")
            .eq("id", str(rating_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_rating(response.data[0])

    def update_rating(
        self, rating_id: UUID, value: int, review: str | None, updated_at: datetime
    ) -> Rating | None:
        """Update value and review, returning None when no row matched."""
        response = (
            self.client.table("recipe_ratings")
            .update(
                {
                    "rating": value,
                    "review": review,
                    "updated_at": updated_at.isoformat(),
                }
            )
            .eq("id", str(rating_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_rating(response.data[0])

    def delete_rating(self, rating_id: UUID) -> None:
        """Delete a rating row if present."""
        self.client.table("recipe_ratings").delete().eq("id", str(rating_id)).execute()

    def delete_by_recipe(self, recipe_id: UUID) -> None:
        """Delete every rating row of a recipe."""
        (
            self.client.table("recipe_ratings")
            .delete()
            .eq("recipe_id", str(recipe_id))
            .execute()
        )

    def list_by_recipe(self, recipe_id: UUID) -> list[Rating]:
        """Return ratings for a recipe, oldest first."""
        rows = fetch_all_rows(
            lambda: self.client.table("recipe_ratings")
            .select("*", count="exact")
            .eq("recipe_id", str(recipe_id))
            .order("created_at", desc=False)
            .order("id", desc=False)
        )
        return [_parse_rating(row) for row in rows]

    def get_by_recipe_and_user(self, recipe_id: UUID, user_id: str) -> Rating | None:
        """Return a user's rating for a recipe, if present."""
        response = (
            self.client.table("recipe_ratings")
            .select("*")
            .eq("recipe_id", str(recipe_id))
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_rating(response.data[0])

    def count_by_recipe(self, recipe_id: UUID) -> int:
        """Return the number of ratings for a recipe."""
        return self.stats_by_recipe(recipe_id).count

    def average_by_recipe(self, recipe_id: UUID) -> float | None:
        """Return the mean rating for a recipe."""
        return self.stats_by_recipe(recipe_id).average

    def stats_by_recipe(self, recipe_id: UUID) -> RatingStats:
        """Return average and count over every rating of a recipe."""
        rows = fetch_all_rows(
            lambda: self.client.table("recipe_ratings")
            .select("rating", count="exact")
            .eq("recipe_id", str(recipe_id))
            .order("id", desc=False)
        )
        values = [int(row["rating"]) for row in rows]
        if not values:
            return RatingStats(average=None, count=0)
        return RatingStats(average=sum(values) / len(values), count=len(values))


def _parse_rating(row: dict[str, object]) -> Rating:
    """Parse a rating row into a domain model."""
    created_at = datetime.fromisoformat(str(row["created_at"]))
    updated_raw = row.get("updated_at")
    updated_at = (
        datetime.fromisoformat(updated_raw)
        if isinstance(updated_raw, str) and updated_raw
        else created_at
    )
    review = row.get("review")
    return Rating(
        id=UUID(str(row["id"])),
        recipe_id=UUID(str(row["recipe_id"])),
        user_id=str(row["user_id"]),
        value=int(row["rating"]),
        review=str(review) if review is not None else None,
        created_at=created_at,
        updated_at=updated_at,
    )
