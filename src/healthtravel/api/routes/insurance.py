"""Insurance info API endpoints.

POST   /api/cities/{city_id}/insurance  - Create insurance info
GET    /api/cities/{city_id}/insurance  - Get insurance info of a city
PUT    /api/insurance/{info_id}         - Update both flags
DELETE /api/insurance/{info_id}         - Delete insurance info
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from healthtravel.api.app import get_db_session
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.editing import insurance
from healthtravel.models.types import DeleteResult, InsuranceInfoOut, InsuranceInput

router = APIRouter(tags=["insurance"])


@router.post("/cities/{city_id}/insurance", response_model=InsuranceInfoOut, status_code=201)
def create_insurance_info(
    city_id: str,
    payload: InsuranceInput,
    session: DbSession = Depends(get_db_session),
) -> InsuranceInfoOut:
    """Create the insurance info of a city."""
    info = insurance.create_insurance_info(session, city_id, payload)
    return InsuranceInfoOut.model_validate(info)


@router.get("/cities/{city_id}/insurance", response_model=InsuranceInfoOut)
def get_insurance_info(
    city_id: str,
    session: DbSession = Depends(get_db_session),
) -> InsuranceInfoOut:
    """Get the insurance info of a city.

    Raises:
        HTTPException: 404 if the city has no insurance info.
    """
    info = repo.get_insurance_info_for_city(session, city_id)

    if info is None:
        raise HTTPException(status_code=404, detail="Insurance info not found")

    return InsuranceInfoOut.model_validate(info)


@router.put("/insurance/{info_id}", response_model=InsuranceInfoOut)
def update_insurance_info(
    info_id: str,
    payload: InsuranceInput,
    session: DbSession = Depends(get_db_session),
) -> InsuranceInfoOut:
    """Overwrite both insurance flags."""
    info = insurance.update_insurance_info(session, info_id, payload)
    return InsuranceInfoOut.model_validate(info)


@router.delete("/insurance/{info_id}", response_model=DeleteResult)
def delete_insurance_info(
    info_id: str,
    session: DbSession = Depends(get_db_session),
) -> DeleteResult:
    """Delete insurance info."""
    insurance.delete_insurance_info(session, info_id)
    return DeleteResult(message="Insurance info deleted successfully.")
