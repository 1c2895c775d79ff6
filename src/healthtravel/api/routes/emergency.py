"""Emergency info API endpoints.

POST   /api/cities/{city_id}/emergency  - Create emergency info (+ ambulance)
GET    /api/cities/{city_id}/emergency  - Get emergency info of a city
PUT    /api/emergency/{info_id}         - Update phone and/or ambulance
DELETE /api/emergency/{info_id}         - Delete info and its ambulance
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from healthtravel.api.app import get_db_session
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.editing import emergency
from healthtravel.models.types import (
    DeleteResult,
    EmergencyInfoCreate,
    EmergencyInfoOut,
    EmergencyInfoUpdate,
)

router = APIRouter(tags=["emergency"])


@router.post("/cities/{city_id}/emergency", response_model=EmergencyInfoOut, status_code=201)
def create_emergency_info(
    city_id: str,
    payload: EmergencyInfoCreate,
    session: DbSession = Depends(get_db_session),
) -> EmergencyInfoOut:
    """Create the emergency info of a city."""
    info = emergency.create_emergency_info(session, city_id, payload)
    return EmergencyInfoOut.model_validate(info)


@router.get("/cities/{city_id}/emergency", response_model=EmergencyInfoOut)
def get_emergency_info(
    city_id: str,
    session: DbSession = Depends(get_db_session),
) -> EmergencyInfoOut:
    """Get the emergency info of a city.

    Raises:
        HTTPException: 404 if the city has no emergency info.
    """
    info = repo.get_emergency_info_for_city(session, city_id)

    if info is None:
        raise HTTPException(status_code=404, detail="Emergency info not found")

    return EmergencyInfoOut.model_validate(info)


@router.put("/emergency/{info_id}", response_model=EmergencyInfoOut)
def update_emergency_info(
    info_id: str,
    payload: EmergencyInfoUpdate,
    session: DbSession = Depends(get_db_session),
) -> EmergencyInfoOut:
    """Update emergency info. Omitted fields are left unchanged."""
    info = emergency.update_emergency_info(session, info_id, payload)
    return EmergencyInfoOut.model_validate(info)


@router.delete("/emergency/{info_id}", response_model=DeleteResult)
def delete_emergency_info(
    info_id: str,
    session: DbSession = Depends(get_db_session),
) -> DeleteResult:
    """Delete emergency info together with its ambulance service."""
    emergency.delete_emergency_info(session, info_id)
    return DeleteResult(message="Emergency info deleted successfully.")
