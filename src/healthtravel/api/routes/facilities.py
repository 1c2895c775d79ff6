"""Hospitals, vaccines and common illnesses API endpoints.

For each of hospitals, vaccines and illnesses:

POST   /api/cities/{city_id}/<kind>        - Create one
POST   /api/cities/{city_id}/<kind>/batch  - Create many
GET    /api/cities/{city_id}/<kind>        - List for city
PUT    /api/cities/{city_id}/<kind>        - Replace the whole set
GET    /api/<kind>/{id}                    - Get one

Deletes:

DELETE /api/hospitals          - Bulk delete by {ids}
DELETE /api/vaccines           - Bulk delete by {ids}
DELETE /api/illnesses/{id}     - Delete one illness
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from healthtravel.api.app import get_db_session
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.editing import facilities, replace_all
from healthtravel.models.types import (
    BatchResult,
    DeleteResult,
    HospitalInput,
    HospitalList,
    HospitalOut,
    IdList,
    IllnessInput,
    IllnessList,
    IllnessOut,
    VaccineInput,
    VaccineList,
    VaccineOut,
)

router = APIRouter(tags=["facilities"])


# ============================================================================
# Hospitals
# ============================================================================


@router.post("/cities/{city_id}/hospitals", response_model=HospitalOut, status_code=201)
def create_hospital(
    city_id: str,
    payload: HospitalInput,
    session: DbSession = Depends(get_db_session),
) -> HospitalOut:
    """Add one hospital to a city."""
    hospital = facilities.add_hospital(session, city_id, payload)
    return HospitalOut.model_validate(hospital)


@router.post("/cities/{city_id}/hospitals/batch", response_model=BatchResult, status_code=201)
def create_hospitals(
    city_id: str,
    payload: HospitalList,
    session: DbSession = Depends(get_db_session),
) -> BatchResult:
    """Add several hospitals to a city."""
    hospitals = facilities.add_hospitals(session, city_id, payload.hospitals)
    return BatchResult(
        message=f"{len(hospitals)} hospital(s) created successfully.",
        count=len(hospitals),
    )


@router.get("/cities/{city_id}/hospitals", response_model=list[HospitalOut])
def list_hospitals(
    city_id: str,
    session: DbSession = Depends(get_db_session),
) -> list[HospitalOut]:
    """List the hospitals of a city.

    Raises:
        HTTPException: 404 if the city has no hospitals.
    """
    hospitals = repo.get_hospitals_for_city(session, city_id)

    if not hospitals:
        raise HTTPException(status_code=404, detail="No hospitals found for city")

    return [HospitalOut.model_validate(h) for h in hospitals]


@router.put("/cities/{city_id}/hospitals", response_model=BatchResult)
def replace_hospitals(
    city_id: str,
    payload: HospitalList,
    session: DbSession = Depends(get_db_session),
) -> BatchResult:
    """Replace every hospital of a city with the given set."""
    result = replace_all.replace_hospitals(session, city_id, payload.hospitals)
    return BatchResult(
        message=f"{result.count} hospital(s) updated successfully.",
        count=result.count,
    )


@router.get("/hospitals/{hospital_id}", response_model=HospitalOut)
def get_hospital(
    hospital_id: str,
    session: DbSession = Depends(get_db_session),
) -> HospitalOut:
    """Get one hospital.

    Raises:
        HTTPException: 404 if the hospital does not exist.
    """
    hospital = repo.get_hospital(session, hospital_id)

    if hospital is None:
        raise HTTPException(status_code=404, detail="Hospital not found")

    return HospitalOut.model_validate(hospital)


@router.delete("/hospitals", response_model=BatchResult)
def delete_hospitals(
    payload: IdList,
    session: DbSession = Depends(get_db_session),
) -> BatchResult:
    """Delete hospitals by ID."""
    count = facilities.remove_hospitals(session, payload.ids)
    return BatchResult(message=f"{count} hospital(s) deleted successfully.", count=count)


# ============================================================================
# Vaccines
# ============================================================================


@router.post("/cities/{city_id}/vaccines", response_model=VaccineOut, status_code=201)
def create_vaccine(
    city_id: str,
    payload: VaccineInput,
    session: DbSession = Depends(get_db_session),
) -> VaccineOut:
    """Add one vaccine to a city."""
    vaccine = facilities.add_vaccine(session, city_id, payload)
    return VaccineOut.model_validate(vaccine)


@router.post("/cities/{city_id}/vaccines/batch", response_model=BatchResult, status_code=201)
def create_vaccines(
    city_id: str,
    payload: VaccineList,
    session: DbSession = Depends(get_db_session),
) -> BatchResult:
    """Add several vaccines to a city."""
    vaccines = facilities.add_vaccines(session, city_id, payload.vaccines)
    return BatchResult(
        message=f"{len(vaccines)} vaccine(s) created successfully.",
        count=len(vaccines),
    )


@router.get("/cities/{city_id}/vaccines", response_model=list[VaccineOut])
def list_vaccines(
    city_id: str,
    session: DbSession = Depends(get_db_session),
) -> list[VaccineOut]:
    """List the vaccines of a city.

    Raises:
        HTTPException: 404 if the city has no vaccines.
    """
    vaccines = repo.get_vaccines_for_city(session, city_id)

    if not vaccines:
        raise HTTPException(status_code=404, detail="No vaccines found for city")

    return [VaccineOut.model_validate(v) for v in vaccines]


@router.put("/cities/{city_id}/vaccines", response_model=BatchResult)
def replace_vaccines(
    city_id: str,
    payload: VaccineList,
    session: DbSession = Depends(get_db_session),
) -> BatchResult:
    """Replace every vaccine of a city with the given set."""
    result = replace_all.replace_vaccines(session, city_id, payload.vaccines)
    return BatchResult(
        message=f"{result.count} vaccine(s) updated successfully.",
        count=result.count,
    )


@router.get("/vaccines/{vaccine_id}", response_model=VaccineOut)
def get_vaccine(
    vaccine_id: str,
    session: DbSession = Depends(get_db_session),
) -> VaccineOut:
    """Get one vaccine."""
    vaccine = repo.get_vaccine(session, vaccine_id)

    if vaccine is None:
        raise HTTPException(status_code=404, detail="Vaccine not found")

    return VaccineOut.model_validate(vaccine)


@router.delete("/vaccines", response_model=BatchResult)
def delete_vaccines(
    payload: IdList,
    session: DbSession = Depends(get_db_session),
) -> BatchResult:
    """Delete vaccines by ID."""
    count = facilities.remove_vaccines(session, payload.ids)
    return BatchResult(message=f"{count} vaccine(s) deleted successfully.", count=count)


# ============================================================================
# Common Illnesses
# ============================================================================


@router.post("/cities/{city_id}/illnesses", response_model=IllnessOut, status_code=201)
def create_illness(
    city_id: str,
    payload: IllnessInput,
    session: DbSession = Depends(get_db_session),
) -> IllnessOut:
    """Add one common illness to a city."""
    illness = facilities.add_illness(session, city_id, payload)
    return IllnessOut.model_validate(illness)


@router.post("/cities/{city_id}/illnesses/batch", response_model=BatchResult, status_code=201)
def create_illnesses(
    city_id: str,
    payload: IllnessList,
    session: DbSession = Depends(get_db_session),
) -> BatchResult:
    """Add several common illnesses to a city."""
    illnesses = facilities.add_illnesses(session, city_id, payload.illnesses)
    return BatchResult(
        message=f"{len(illnesses)} illness(es) created successfully.",
        count=len(illnesses),
    )


@router.get("/cities/{city_id}/illnesses", response_model=list[IllnessOut])
def list_illnesses(
    city_id: str,
    session: DbSession = Depends(get_db_session),
) -> list[IllnessOut]:
    """List the common illnesses of a city.

    Raises:
        HTTPException: 404 if the city has no illnesses.
    """
    illnesses = repo.get_illnesses_for_city(session, city_id)

    if not illnesses:
        raise HTTPException(status_code=404, detail="No common illnesses found for city")

    return [IllnessOut.model_validate(i) for i in illnesses]


@router.put("/cities/{city_id}/illnesses", response_model=BatchResult)
def replace_illnesses(
    city_id: str,
    payload: IllnessList,
    session: DbSession = Depends(get_db_session),
) -> BatchResult:
    """Replace every common illness of a city with the given set."""
    result = replace_all.replace_illnesses(session, city_id, payload.illnesses)
    return BatchResult(
        message=f"{result.count} illness(es) updated successfully.",
        count=result.count,
    )


@router.get("/illnesses/{illness_id}", response_model=IllnessOut)
def get_illness(
    illness_id: str,
    session: DbSession = Depends(get_db_session),
) -> IllnessOut:
    """Get one common illness."""
    illness = repo.get_illness(session, illness_id)

    if illness is None:
        raise HTTPException(status_code=404, detail="Common illness not found")

    return IllnessOut.model_validate(illness)


@router.delete("/illnesses/{illness_id}", response_model=DeleteResult)
def delete_illness(
    illness_id: str,
    session: DbSession = Depends(get_db_session),
) -> DeleteResult:
    """Delete one common illness."""
    facilities.remove_illness(session, illness_id)
    return DeleteResult(message="Common illness deleted successfully.")
