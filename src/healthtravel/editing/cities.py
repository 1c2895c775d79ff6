"""City creation and city-level field edits."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from healthtravel.core.errors import NotFoundError
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.db.session import transaction
from healthtravel.editing.inputs import parse_input
from healthtravel.models.domain import CityEntity, GeneralRatingEntity
from healthtravel.models.types import CityCreate, CityImageUpdate, DescriptionInput

logger = logging.getLogger(__name__)


def create_city(
    session: DbSession, payload: CityCreate | Mapping[str, Any]
) -> tuple[CityEntity, GeneralRatingEntity]:
    """Create a city together with its first general rating.

    Both rows are written in one transaction.

    Args:
        session: Database session.
        payload: cityName, country, overview and generalRating (0-5).

    Returns:
        Tuple of (city, initial general rating).

    Raises:
        ValidationError: If a field is missing or the rating is out of range.
        StorageError: If the transaction fails.
    """
    data = parse_input(CityCreate, payload)

    with transaction(session):
        city = repo.create_city(
            session,
            city_name=data.city_name,
            country=data.country,
            overview=data.overview,
        )
        rating = repo.create_general_rating(session, city.id, data.general_rating)

    logger.info(f"Created city {city.id} ({city.city_name}, {city.country})")
    return city, rating


def _update_city(session: DbSession, city_id: str, **fields: Any) -> CityEntity:
    with transaction(session):
        city = repo.update_city(session, city_id, **fields)
        if city is None:
            raise NotFoundError("City", city_id)
    return city


def set_city_image(
    session: DbSession, city_id: str, payload: CityImageUpdate | Mapping[str, Any]
) -> CityEntity:
    """Store an already-resolved image URL against a city.

    Raises:
        ValidationError: If the URL is missing.
        NotFoundError: If the city does not exist.
    """
    data = parse_input(CityImageUpdate, payload)
    return _update_city(session, city_id, city_image_url=data.city_image_url)


def set_description(
    session: DbSession, city_id: str, payload: DescriptionInput | Mapping[str, Any]
) -> CityEntity:
    """Set (create or overwrite) the description of a city.

    Raises:
        ValidationError: If the description is missing or empty.
        NotFoundError: If the city does not exist.
    """
    data = parse_input(DescriptionInput, payload)
    return _update_city(session, city_id, description=data.description)


def clear_description(session: DbSession, city_id: str) -> CityEntity:
    """Remove the description of a city.

    Raises:
        NotFoundError: If the city does not exist.
    """
    return _update_city(session, city_id, description=None)
