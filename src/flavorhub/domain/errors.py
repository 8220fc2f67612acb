"""Errors raised by the rating and catalog services."""

from uuid import UUID

from flavorhub.domain.ratings import MAX_RATING, MIN_RATING


class RatingError(Exception):
    """Base class for recoverable rating errors."""


class RecipeNotFoundError(RatingError):
    """The referenced recipe does not exist."""

    def __init__(self, recipe_id: UUID) -> None:
        super().__init__(f"Recipe not found with id: {recipe_id}")
        self.recipe_id = recipe_id


class DuplicateRatingError(RatingError):
    """The user already rated the recipe."""

    def __init__(self, recipe_id: UUID, user_id: str) -> None:
        super().__init__("User has already rated this recipe. Use update instead.")
        self.recipe_id = recipe_id
        self.user_id = user_id


class RatingNotFoundError(RatingError):
    """The referenced rating does not exist."""

    def __init__(self, rating_id: UUID) -> None:
        super().__init__(f"Rating not found with id: {rating_id}")
        self.rating_id = rating_id


class InvalidRatingValueError(RatingError):
    """The rating value is outside the allowed range."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {value!r}"
        )
        self.value = value
