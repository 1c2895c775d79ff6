"""City read views enriched with rating averages.

Fetches rows via repo and derives averages with the pure functions in
averages. Nothing here writes to the database.
"""

from __future__ import annotations

from healthtravel.aggregation.averages import average_general_rating, average_health_ratings
from healthtravel.core.errors import NotFoundError
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.models.domain import CityBundle
from healthtravel.models.types import (
    CityDetail,
    CityOverview,
    EmergencyInfoOut,
    GeneralRatingOut,
    GeneralRatingSummary,
    HealthRatingOut,
    HospitalOut,
    IllnessOut,
    InsuranceInfoOut,
    VaccineOut,
)


def build_city_detail(bundle: CityBundle) -> CityDetail:
    """Build CityDetail from a loaded bundle.

    Pure function - no database access.

    Args:
        bundle: City with its child rows.

    Returns:
        CityDetail with averageGeneralRating and averageHealthRatings.
    """
    city = bundle.city
    return CityDetail(
        id=city.id,
        city_name=city.city_name,
        country=city.country,
        overview=city.overview,
        description=city.description,
        city_image_url=city.city_image_url,
        general_ratings=[GeneralRatingOut.model_validate(r) for r in bundle.general_ratings],
        health_ratings=[HealthRatingOut.model_validate(r) for r in bundle.health_ratings],
        hospitals=[HospitalOut.model_validate(h) for h in bundle.hospitals],
        common_illnesses=[IllnessOut.model_validate(i) for i in bundle.common_illnesses],
        vaccines=[VaccineOut.model_validate(v) for v in bundle.vaccines],
        emergency_info=(
            EmergencyInfoOut.model_validate(bundle.emergency_info)
            if bundle.emergency_info
            else None
        ),
        insurance_info=(
            InsuranceInfoOut.model_validate(bundle.insurance_info)
            if bundle.insurance_info
            else None
        ),
        average_general_rating=average_general_rating(bundle.general_ratings),
        average_health_ratings=average_health_ratings(bundle.health_ratings),
    )


def get_city_detail(session: DbSession, city_id: str) -> CityDetail:
    """Get one city with all children and derived averages.

    Raises:
        NotFoundError: If the city does not exist.
    """
    bundle = repo.get_city_bundle(session, city_id)
    if bundle is None:
        raise NotFoundError("City", city_id)
    return build_city_detail(bundle)


def list_city_details(session: DbSession) -> list[CityDetail]:
    """Get every city with all children and derived averages."""
    return [build_city_detail(b) for b in repo.list_city_bundles(session)]


def list_city_overviews(session: DbSession) -> list[CityOverview]:
    """Get the listing card of every city."""
    overviews = []
    for bundle in repo.list_cities_with_general_ratings(session):
        city = bundle.city
        overviews.append(
            CityOverview(
                id=city.id,
                city_name=city.city_name,
                country=city.country,
                overview=city.overview,
                city_image_url=city.city_image_url,
                average_general_rating=average_general_rating(bundle.general_ratings),
            )
        )
    return overviews


def summarize_general_ratings(session: DbSession, city_id: str) -> GeneralRatingSummary:
    """Get the general ratings of a city with their mean.

    Raises:
        NotFoundError: If the city has no general ratings.
    """
    ratings = repo.get_general_ratings_for_city(session, city_id)
    if not ratings:
        raise NotFoundError("General ratings for city", city_id)

    return GeneralRatingSummary(
        ratings=[GeneralRatingOut.model_validate(r) for r in ratings],
        average_rating=average_general_rating(ratings),
    )
