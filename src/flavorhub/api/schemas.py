"""Pydantic request and response models for the HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from flavorhub.domain.ratings import Rating
from flavorhub.domain.recipes import Recipe


class ApiModel(BaseModel):
    """Base model emitting camelCase JSON and accepting either casing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecipePayload(ApiModel):
    """Recipe fields accepted on create and update."""

    name: str = Field(min_length=1)
    description: str | None = None
    prep_time: int = Field(ge=0)
    cook_time: int = Field(ge=0)
    servings: int = Field(gt=0)
    difficulty_level: str = Field(min_length=1)
    cuisine_type: str = Field(min_length=1)


class RecipeOut(ApiModel):
    """Recipe with live rating statistics."""

    id: UUID
    name: str
    description: str | None
    prep_time: int
    cook_time: int
    servings: int
    difficulty_level: str
    cuisine_type: str
    average_rating: float | None
    rating_count: int

    @classmethod
    def from_domain(cls, recipe: Recipe) -> "RecipeOut":
        """Build the response model from a domain recipe."""
        return cls(
            id=recipe.id,
            name=recipe.name,
            description=recipe.description,
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            servings=recipe.servings,
            difficulty_level=recipe.difficulty_level,
            cuisine_type=recipe.cuisine_type,
            average_rating=recipe.average_rating,
            rating_count=recipe.rating_count,
        )


class RatingPayload(ApiModel):
    """Body for submitting a rating.

    The range check on ``rating`` happens in the rating service so that an
    out-of-range value is reported like the other rating errors. Booleans and
    floats are not accepted as ratings.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    user_id: str = Field(min_length=1)
    rating: StrictInt
    review: str | None = None


class RatingUpdatePayload(ApiModel):
    """Body for updating a rating."""

    rating: StrictInt
    review: str | None = None


class RatingOut(ApiModel):
    """A stored rating."""

    id: UUID
    recipe_id: UUID
    user_id: str
    rating: int
    review: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, rating: Rating) -> "RatingOut":
        """Build the response model from a domain rating."""
        return cls(
            id=rating.id,
            recipe_id=rating.recipe_id,
            user_id=rating.user_id,
            rating=rating.value,
            review=rating.review,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
        )


class RatingSummaryOut(ApiModel):
    """Average and count, with an unrated recipe reported as 0.0."""

    average_rating: float
    rating_count: int
