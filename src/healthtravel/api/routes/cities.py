"""Cities API endpoints.

GET    /api/cities                          - Every city with children and averages
GET    /api/cities/overview                 - Listing cards with average general rating
POST   /api/cities                          - Create city with first general rating
GET    /api/cities/{city_id}                - One city with children and averages
PUT    /api/cities/{city_id}/image          - Store resolved image URL
POST   /api/cities/{city_id}/description    - Set description
PUT    /api/cities/{city_id}/description    - Edit description
GET    /api/cities/{city_id}/description    - Get description
DELETE /api/cities/{city_id}/description    - Clear description
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from healthtravel.aggregation.city_views import (
    get_city_detail,
    list_city_details,
    list_city_overviews,
)
from healthtravel.api.app import get_db_session
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.editing import cities as city_editing
from healthtravel.models.types import (
    CityCreate,
    CityCreated,
    CityDetail,
    CityImageUpdate,
    CityOut,
    CityOverview,
    DescriptionInput,
    DescriptionOut,
    GeneralRatingOut,
)

router = APIRouter(tags=["cities"])


@router.get("/cities", response_model=list[CityDetail])
def list_cities(session: DbSession = Depends(get_db_session)) -> list[CityDetail]:
    """Get every city with all child rows and derived rating averages."""
    return list_city_details(session)


@router.get("/cities/overview", response_model=list[CityOverview])
def list_overviews(session: DbSession = Depends(get_db_session)) -> list[CityOverview]:
    """Get the listing card of every city."""
    return list_city_overviews(session)


@router.post("/cities", response_model=CityCreated, status_code=201)
def create_city(
    payload: CityCreate,
    session: DbSession = Depends(get_db_session),
) -> CityCreated:
    """Create a city overview.

    Args:
        payload: cityName, country, overview and initial generalRating.
        session: Database session (injected).

    Returns:
        The new city with its initial general rating.
    """
    city, rating = city_editing.create_city(session, payload)
    return CityCreated(
        **CityOut.model_validate(city).model_dump(),
        general_ratings=[GeneralRatingOut.model_validate(rating)],
    )


@router.get("/cities/{city_id}", response_model=CityDetail)
def get_city(city_id: str, session: DbSession = Depends(get_db_session)) -> CityDetail:
    """Get one city with all child rows and derived rating averages.

    Raises:
        NotFoundError: 404 if the city does not exist.
    """
    return get_city_detail(session, city_id)


@router.put("/cities/{city_id}/image", response_model=CityOut)
def set_city_image(
    city_id: str,
    payload: CityImageUpdate,
    session: DbSession = Depends(get_db_session),
) -> CityOut:
    """Store an already-uploaded image URL against a city."""
    city = city_editing.set_city_image(session, city_id, payload)
    return CityOut.model_validate(city)


@router.post("/cities/{city_id}/description", response_model=CityOut, status_code=201)
def create_description(
    city_id: str,
    payload: DescriptionInput,
    session: DbSession = Depends(get_db_session),
) -> CityOut:
    """Set the description of a city."""
    city = city_editing.set_description(session, city_id, payload)
    return CityOut.model_validate(city)


@router.put("/cities/{city_id}/description", response_model=CityOut)
def edit_description(
    city_id: str,
    payload: DescriptionInput,
    session: DbSession = Depends(get_db_session),
) -> CityOut:
    """Overwrite the description of a city."""
    city = city_editing.set_description(session, city_id, payload)
    return CityOut.model_validate(city)


@router.get("/cities/{city_id}/description", response_model=DescriptionOut)
def get_description(
    city_id: str,
    session: DbSession = Depends(get_db_session),
) -> DescriptionOut:
    """Get the description of a city.

    Raises:
        HTTPException: 404 if the city does not exist.
    """
    city = repo.get_city(session, city_id)

    if city is None:
        raise HTTPException(status_code=404, detail="City not found")

    return DescriptionOut(id=city.id, description=city.description)


@router.delete("/cities/{city_id}/description", response_model=CityOut)
def delete_description(
    city_id: str,
    session: DbSession = Depends(get_db_session),
) -> CityOut:
    """Clear the description of a city."""
    city = city_editing.clear_description(session, city_id)
    return CityOut.model_validate(city)
