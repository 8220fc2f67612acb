"""Recipe rating endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, Response, status

from flavorhub.api.schemas import (
    RatingOut,
    RatingPayload,
    RatingSummaryOut,
    RatingUpdatePayload,
)

if TYPE_CHECKING:
    from flavorhub.containers import AppContainer

router = APIRouter(prefix="/api/recipes/{recipe_id}/ratings", tags=["ratings"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_rating(
    recipe_id: UUID, payload: RatingPayload, request: Request
) -> RatingOut:
    """Submit a user's first rating for a recipe."""
    container: AppContainer = request.app.state.container
    rating = container.rating_service.submit(
        recipe_id, payload.user_id, payload.rating, payload.review
    )
    return RatingOut.from_domain(rating)


@router.get("")
async def list_ratings(recipe_id: UUID, request: Request) -> list[RatingOut]:
    """Return every rating for a recipe."""
    container: AppContainer = request.app.state.container
    ratings = container.rating_service.find_by_recipe(recipe_id)
    return [RatingOut.from_domain(rating) for rating in ratings]


@router.get("/average")
async def rating_summary(recipe_id: UUID, request: Request) -> RatingSummaryOut:
    """Return the average rating and count for a recipe."""
    container: AppContainer = request.app.state.container
    stats = container.rating_aggregator.stats(recipe_id)
    return RatingSummaryOut(
        average_rating=stats.average if stats.average is not None else 0.0,
        rating_count=stats.count,
    )


@router.get("/user/{user_id}")
async def user_rating(recipe_id: UUID, user_id: str, request: Request) -> RatingOut:
    """Return a user's rating for a recipe."""
    container: AppContainer = request.app.state.container
    rating = container.rating_service.find_by_recipe_and_user(recipe_id, user_id)
    if rating is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return RatingOut.from_domain(rating)


@router.put("/{rating_id}")
async def update_rating(
    recipe_id: UUID,
    rating_id: UUID,
    payload: RatingUpdatePayload,
    request: Request,
) -> RatingOut:
    """Change the value and review of an existing rating."""
    container: AppContainer = request.app.state.container
    rating = container.rating_service.update(rating_id, payload.rating, payload.review)
    return RatingOut.from_domain(rating)


@router.delete(
    "/{rating_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_rating(
    recipe_id: UUID, rating_id: UUID, request: Request
) -> Response:
    """Delete a rating; unknown ids are ignored."""
    container: AppContainer = request.app.state.container
    container.rating_service.delete(rating_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
