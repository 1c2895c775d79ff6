"""Insurance info of a city."""

from __future__ import annotations

from typing import Any, Mapping

from healthtravel.core.errors import NotFoundError
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.db.session import transaction
from healthtravel.editing.inputs import parse_input
from healthtravel.models.domain import InsuranceInfoEntity
from healthtravel.models.types import InsuranceInput


def create_insurance_info(
    session: DbSession, city_id: str, payload: InsuranceInput | Mapping[str, Any]
) -> InsuranceInfoEntity:
    """Create the insurance info of a city.

    Raises:
        ValidationError: If either flag is missing.
        NotFoundError: If the city does not exist.
        StorageError: If the city already has insurance info.
    """
    data = parse_input(InsuranceInput, payload)

    with transaction(session):
        if not repo.city_exists(session, city_id):
            raise NotFoundError("City", city_id)
        info = repo.create_insurance_info(
            session,
            city_id,
            international_accepted=data.international_accepted,
            travel_insurance_recommended=data.travel_insurance_recommended,
        )

    return info


def update_insurance_info(
    session: DbSession, info_id: str, payload: InsuranceInput | Mapping[str, Any]
) -> InsuranceInfoEntity:
    """Overwrite both insurance flags.

    Raises:
        ValidationError: If either flag is missing.
        NotFoundError: If the insurance info does not exist.
    """
    data = parse_input(InsuranceInput, payload)

    with transaction(session):
        info = repo.update_insurance_info(
            session,
            info_id,
            international_accepted=data.international_accepted,
            travel_insurance_recommended=data.travel_insurance_recommended,
        )
        if info is None:
            raise NotFoundError("Insurance info", info_id)

    return info


def delete_insurance_info(session: DbSession, info_id: str) -> None:
    """Delete an insurance info row.

    Raises:
        NotFoundError: If the insurance info does not exist.
    """
    with transaction(session):
        if repo.delete_insurance_info(session, info_id) == 0:
            raise NotFoundError("Insurance info", info_id)
