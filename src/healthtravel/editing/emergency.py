"""Emergency info and its ambulance service."""

from __future__ import annotations

from typing import Any, Mapping

from healthtravel.core.errors import NotFoundError
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.db.session import transaction
from healthtravel.editing.inputs import parse_input
from healthtravel.models.domain import EmergencyInfoEntity
from healthtravel.models.types import EmergencyInfoCreate, EmergencyInfoUpdate


def create_emergency_info(
    session: DbSession, city_id: str, payload: EmergencyInfoCreate | Mapping[str, Any]
) -> EmergencyInfoEntity:
    """Create the emergency info of a city.

    The ambulance service, when given, is created in the same transaction.

    Raises:
        ValidationError: If emergencyPhone is missing.
        NotFoundError: If the city does not exist.
        StorageError: If the city already has emergency info.
    """
    data = parse_input(EmergencyInfoCreate, payload)
    ambulance = data.ambulance_service.model_dump() if data.ambulance_service else None

    with transaction(session):
        if not repo.city_exists(session, city_id):
            raise NotFoundError("City", city_id)
        info = repo.create_emergency_info(session, city_id, data.emergency_phone, ambulance)

    return info


def update_emergency_info(
    session: DbSession, info_id: str, payload: EmergencyInfoUpdate | Mapping[str, Any]
) -> EmergencyInfoEntity:
    """Update the phone and/or ambulance service of an emergency info row.

    Only the ambulance fields present in the payload are written; the
    rest keep their stored values.

    Raises:
        ValidationError: If a given field is invalid.
        NotFoundError: If the emergency info does not exist.
    """
    data = parse_input(EmergencyInfoUpdate, payload)
    ambulance = (
        data.ambulance_service.model_dump(exclude_unset=True) if data.ambulance_service else None
    )

    with transaction(session):
        info = repo.update_emergency_info(
            session,
            info_id,
            emergency_phone=data.emergency_phone,
            ambulance_service=ambulance,
        )
        if info is None:
            raise NotFoundError("Emergency info", info_id)

    return info


def delete_emergency_info(session: DbSession, info_id: str) -> None:
    """Delete an emergency info row and its ambulance service together.

    Raises:
        NotFoundError: If the emergency info does not exist.
    """
    with transaction(session):
        repo.delete_ambulance_service_for_info(session, info_id)
        if repo.delete_emergency_info(session, info_id) == 0:
            raise NotFoundError("Emergency info", info_id)
