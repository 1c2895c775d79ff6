"""Hospitals, vaccines and common illnesses: create and delete.

Replace-all updates of the same collections live in replace_all.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from healthtravel.core.errors import NotFoundError, ValidationError
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.db.session import transaction
from healthtravel.editing.inputs import parse_input, parse_many
from healthtravel.models.domain import HospitalEntity, IllnessEntity, VaccineEntity
from healthtravel.models.types import HospitalInput, IllnessInput, VaccineInput

logger = logging.getLogger(__name__)


def _require_city(session: DbSession, city_id: str) -> None:
    if not repo.city_exists(session, city_id):
        raise NotFoundError("City", city_id)


def _require_ids(ids: Sequence[str] | None, label: str) -> list[str]:
    if not ids:
        raise ValidationError(f"{label} IDs are required.")
    return list(ids)


# ============================================================================
# Hospitals
# ============================================================================


def add_hospital(
    session: DbSession, city_id: str, payload: HospitalInput | Mapping[str, Any]
) -> HospitalEntity:
    """Add one hospital to a city.

    Raises:
        ValidationError: If name, address, contact or open24Hours is missing.
        NotFoundError: If the city does not exist.
    """
    data = parse_input(HospitalInput, payload)

    with transaction(session):
        _require_city(session, city_id)
        (hospital,) = repo.add_hospitals(session, city_id, [data.model_dump()])

    return hospital


def add_hospitals(
    session: DbSession, city_id: str, payloads: Sequence[HospitalInput | Mapping[str, Any]]
) -> list[HospitalEntity]:
    """Add several hospitals to a city, keeping the existing ones.

    Raises:
        ValidationError: If the list is empty or any element is invalid.
        NotFoundError: If the city does not exist.
    """
    items = parse_many(HospitalInput, payloads, "hospitals")

    with transaction(session):
        _require_city(session, city_id)
        hospitals = repo.add_hospitals(session, city_id, [i.model_dump() for i in items])

    logger.info(f"Added {len(hospitals)} hospitals to city {city_id}")
    return hospitals


def remove_hospitals(session: DbSession, hospital_ids: Sequence[str]) -> int:
    """Delete hospitals by ID.

    Returns:
        Number of hospitals deleted.

    Raises:
        ValidationError: If no IDs are given.
        NotFoundError: If none of the IDs matched.
    """
    ids = _require_ids(hospital_ids, "Hospital")

    with transaction(session):
        count = repo.delete_hospitals_by_ids(session, ids)
        if count == 0:
            raise NotFoundError("Hospitals")

    return count


# ============================================================================
# Vaccines
# ============================================================================


def add_vaccine(
    session: DbSession, city_id: str, payload: VaccineInput | Mapping[str, Any]
) -> VaccineEntity:
    """Add one vaccine to a city.

    Raises:
        ValidationError: If vaccine or importance is missing.
        NotFoundError: If the city does not exist.
    """
    data = parse_input(VaccineInput, payload)

    with transaction(session):
        _require_city(session, city_id)
        (vaccine,) = repo.add_vaccines(session, city_id, [data.model_dump()])

    return vaccine


def add_vaccines(
    session: DbSession, city_id: str, payloads: Sequence[VaccineInput | Mapping[str, Any]]
) -> list[VaccineEntity]:
    """Add several vaccines to a city, keeping the existing ones.

    Raises:
        ValidationError: If the list is empty or any element is invalid.
        NotFoundError: If the city does not exist.
    """
    items = parse_many(VaccineInput, payloads, "vaccines")

    with transaction(session):
        _require_city(session, city_id)
        vaccines = repo.add_vaccines(session, city_id, [i.model_dump() for i in items])

    logger.info(f"Added {len(vaccines)} vaccines to city {city_id}")
    return vaccines


def remove_vaccines(session: DbSession, vaccine_ids: Sequence[str]) -> int:
    """Delete vaccines by ID.

    Raises:
        ValidationError: If no IDs are given.
        NotFoundError: If none of the IDs matched.
    """
    ids = _require_ids(vaccine_ids, "Vaccine")

    with transaction(session):
        count = repo.delete_vaccines_by_ids(session, ids)
        if count == 0:
            raise NotFoundError("Vaccines")

    return count


# ============================================================================
# Common Illnesses
# ============================================================================


def add_illness(
    session: DbSession, city_id: str, payload: IllnessInput | Mapping[str, Any]
) -> IllnessEntity:
    """Add one common illness to a city.

    Raises:
        ValidationError: If illness is missing or empty.
        NotFoundError: If the city does not exist.
    """
    data = parse_input(IllnessInput, payload)

    with transaction(session):
        _require_city(session, city_id)
        (illness,) = repo.add_illnesses(session, city_id, [data.model_dump()])

    return illness


def add_illnesses(
    session: DbSession, city_id: str, payloads: Sequence[IllnessInput | Mapping[str, Any]]
) -> list[IllnessEntity]:
    """Add several common illnesses to a city, keeping the existing ones.

    Raises:
        ValidationError: If the list is empty or any element is invalid.
        NotFoundError: If the city does not exist.
    """
    items = parse_many(IllnessInput, payloads, "illnesses")

    with transaction(session):
        _require_city(session, city_id)
        illnesses = repo.add_illnesses(session, city_id, [i.model_dump() for i in items])

    logger.info(f"Added {len(illnesses)} illnesses to city {city_id}")
    return illnesses


def remove_illness(session: DbSession, illness_id: str) -> IllnessEntity:
    """Delete a common illness.

    Raises:
        NotFoundError: If the illness does not exist.
    """
    with transaction(session):
        illness = repo.delete_illness(session, illness_id)
        if illness is None:
            raise NotFoundError("Common illness", illness_id)

    return illness
