"""Ratings API endpoints.

POST   /api/cities/{city_id}/general-ratings  - Submit general rating
GET    /api/cities/{city_id}/general-ratings  - Ratings with their average
PUT    /api/general-ratings/{rating_id}       - Edit general rating
DELETE /api/general-ratings/{rating_id}       - Delete general rating
POST   /api/cities/{city_id}/health-ratings   - Submit health rating
GET    /api/cities/{city_id}/health-ratings   - List health ratings
PUT    /api/health-ratings/{rating_id}        - Edit health rating
DELETE /api/health-ratings/{rating_id}        - Delete health rating
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from healthtravel.aggregation.city_views import summarize_general_ratings
from healthtravel.api.app import get_db_session
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.editing import ratings as rating_editing
from healthtravel.models.types import (
    DeleteResult,
    GeneralRatingInput,
    GeneralRatingOut,
    GeneralRatingSummary,
    HealthRatingInput,
    HealthRatingOut,
)

router = APIRouter(tags=["ratings"])


# ============================================================================
# General Ratings
# ============================================================================


@router.post(
    "/cities/{city_id}/general-ratings", response_model=GeneralRatingOut, status_code=201
)
def create_general_rating(
    city_id: str,
    payload: GeneralRatingInput,
    session: DbSession = Depends(get_db_session),
) -> GeneralRatingOut:
    """Submit a general rating (0-5) for a city.

    Raises:
        NotFoundError: 404 if the city does not exist.
    """
    rating = rating_editing.submit_general_rating(session, city_id, payload)
    return GeneralRatingOut.model_validate(rating)


@router.get("/cities/{city_id}/general-ratings", response_model=GeneralRatingSummary)
def get_general_ratings(
    city_id: str,
    session: DbSession = Depends(get_db_session),
) -> GeneralRatingSummary:
    """Get the general ratings of a city with their average.

    Raises:
        NotFoundError: 404 if the city has no ratings.
    """
    return summarize_general_ratings(session, city_id)


@router.put("/general-ratings/{rating_id}", response_model=GeneralRatingOut)
def edit_general_rating(
    rating_id: str,
    payload: GeneralRatingInput,
    session: DbSession = Depends(get_db_session),
) -> GeneralRatingOut:
    """Change the value of a general rating."""
    rating = rating_editing.edit_general_rating(session, rating_id, payload)
    return GeneralRatingOut.model_validate(rating)


@router.delete("/general-ratings/{rating_id}", response_model=DeleteResult)
def delete_general_rating(
    rating_id: str,
    session: DbSession = Depends(get_db_session),
) -> DeleteResult:
    """Delete a general rating."""
    rating_editing.remove_general_rating(session, rating_id)
    return DeleteResult(message="Rating deleted successfully.")


# ============================================================================
# Health Ratings
# ============================================================================


@router.post(
    "/cities/{city_id}/health-ratings", response_model=HealthRatingOut, status_code=201
)
def create_health_rating(
    city_id: str,
    payload: HealthRatingInput,
    session: DbSession = Depends(get_db_session),
) -> HealthRatingOut:
    """Submit a five-axis health rating for a city."""
    rating = rating_editing.submit_health_rating(session, city_id, payload)
    return HealthRatingOut.model_validate(rating)


@router.get("/cities/{city_id}/health-ratings", response_model=list[HealthRatingOut])
def get_health_ratings(
    city_id: str,
    session: DbSession = Depends(get_db_session),
) -> list[HealthRatingOut]:
    """List the health ratings of a city.

    Raises:
        HTTPException: 404 if the city has no health ratings.
    """
    ratings = repo.get_health_ratings_for_city(session, city_id)

    if not ratings:
        raise HTTPException(status_code=404, detail="No health ratings found for city")

    return [HealthRatingOut.model_validate(r) for r in ratings]


@router.put("/health-ratings/{rating_id}", response_model=HealthRatingOut)
def edit_health_rating(
    rating_id: str,
    payload: HealthRatingInput,
    session: DbSession = Depends(get_db_session),
) -> HealthRatingOut:
    """Overwrite every axis of a health rating."""
    rating = rating_editing.edit_health_rating(session, rating_id, payload)
    return HealthRatingOut.model_validate(rating)


@router.delete("/health-ratings/{rating_id}", response_model=DeleteResult)
def delete_health_rating(
    rating_id: str,
    session: DbSession = Depends(get_db_session),
) -> DeleteResult:
    """Delete a health rating."""
    rating_editing.remove_health_rating(session, rating_id)
    return DeleteResult(message="Health rating deleted successfully.")
