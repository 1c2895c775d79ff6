"""General and health rating submission.

Rating rows are independent: every submission appends a row, averages
are computed on read by the aggregation module.
"""

from __future__ import annotations

from typing import Any, Mapping

from healthtravel.core.errors import NotFoundError
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.db.session import transaction
from healthtravel.editing.inputs import parse_input
from healthtravel.models.domain import GeneralRatingEntity, HealthRatingEntity
from healthtravel.models.types import GeneralRatingInput, HealthRatingInput


def _require_city(session: DbSession, city_id: str) -> None:
    if not repo.city_exists(session, city_id):
        raise NotFoundError("City", city_id)


# ============================================================================
# General Ratings
# ============================================================================


def submit_general_rating(
    session: DbSession, city_id: str, payload: GeneralRatingInput | Mapping[str, Any]
) -> GeneralRatingEntity:
    """Add a general rating to a city.

    Args:
        session: Database session.
        city_id: Rated city.
        payload: rating in [0, 5].

    Returns:
        The stored rating.

    Raises:
        ValidationError: If the rating is missing or out of range.
        NotFoundError: If the city does not exist.
    """
    data = parse_input(GeneralRatingInput, payload)

    with transaction(session):
        _require_city(session, city_id)
        rating = repo.create_general_rating(session, city_id, data.rating)

    return rating


def edit_general_rating(
    session: DbSession, rating_id: str, payload: GeneralRatingInput | Mapping[str, Any]
) -> GeneralRatingEntity:
    """Change the value of a general rating.

    Raises:
        ValidationError: If the rating is missing or out of range.
        NotFoundError: If the rating does not exist.
    """
    data = parse_input(GeneralRatingInput, payload)

    with transaction(session):
        rating = repo.update_general_rating(session, rating_id, data.rating)
        if rating is None:
            raise NotFoundError("General rating", rating_id)

    return rating


def remove_general_rating(session: DbSession, rating_id: str) -> GeneralRatingEntity:
    """Delete a general rating.

    Raises:
        NotFoundError: If the rating does not exist.
    """
    with transaction(session):
        rating = repo.delete_general_rating(session, rating_id)
        if rating is None:
            raise NotFoundError("General rating", rating_id)

    return rating


# ============================================================================
# Health Ratings
# ============================================================================


def submit_health_rating(
    session: DbSession, city_id: str, payload: HealthRatingInput | Mapping[str, Any]
) -> HealthRatingEntity:
    """Add a five-axis health rating to a city.

    Raises:
        ValidationError: If any axis is missing or outside [0, 5].
        NotFoundError: If the city does not exist.
    """
    data = parse_input(HealthRatingInput, payload)

    with transaction(session):
        _require_city(session, city_id)
        rating = repo.create_health_rating(session, city_id, data.model_dump())

    return rating


def edit_health_rating(
    session: DbSession, rating_id: str, payload: HealthRatingInput | Mapping[str, Any]
) -> HealthRatingEntity:
    """Overwrite every axis of a health rating.

    Raises:
        ValidationError: If any axis is missing or outside [0, 5].
        NotFoundError: If the rating does not exist.
    """
    data = parse_input(HealthRatingInput, payload)

    with transaction(session):
        rating = repo.update_health_rating(session, rating_id, data.model_dump())
        if rating is None:
            raise NotFoundError("Health rating", rating_id)

    return rating


def remove_health_rating(session: DbSession, rating_id: str) -> HealthRatingEntity:
    """Delete a health rating.

    Raises:
        NotFoundError: If the rating does not exist.
    """
    with transaction(session):
        rating = repo.delete_health_rating(session, rating_id)
        if rating is None:
            raise NotFoundError("Health rating", rating_id)

    return rating
