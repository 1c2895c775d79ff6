"""Replace-all updates of a city's child collections.

Each operation swaps the full set of hospitals, vaccines or common
illnesses of a city for a replacement set:

1. Validate every element (ValidationError, nothing touched)
2. Inside one transaction: check the city, delete existing children,
   insert the replacement set
3. Any failure in step 2 rolls back to the prior state

Replaced rows get fresh identifiers; nothing is matched by ID.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from pydantic import BaseModel

from healthtravel.core.errors import NotFoundError
from healthtravel.db import repo
from healthtravel.db.repo import DbSession
from healthtravel.db.session import transaction
from healthtravel.editing.inputs import parse_many
from healthtravel.models.domain import HospitalEntity, IllnessEntity, VaccineEntity
from healthtravel.models.types import HospitalInput, IllnessInput, VaccineInput

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ReplaceResult(Generic[T]):
    """Result of a replace-all update."""

    city_id: str
    count: int
    items: list[T]


def _replace_children(
    session: DbSession,
    city_id: str,
    items: Sequence[BaseModel],
    *,
    label: str,
    delete: Callable[[DbSession, str], int],
    insert: Callable[[DbSession, str, list[Mapping[str, Any]]], list[T]],
) -> ReplaceResult[T]:
    """Delete-then-insert a child collection inside one transaction.

    Args:
        session: Database session.
        city_id: Parent city.
        items: Already-validated replacement set.
        label: Collection name for logging.
        delete: Repo function removing every child of the city.
        insert: Repo function adding the replacement rows.

    Returns:
        ReplaceResult with the newly created rows.

    Raises:
        NotFoundError: If the city does not exist.
        StorageError: If the store fails; prior state is kept.
    """
    rows = [item.model_dump() for item in items]

    with transaction(session):
        if not repo.city_exists(session, city_id):
            raise NotFoundError("City", city_id)

        removed = delete(session, city_id)
        created = insert(session, city_id, rows)

    logger.info(f"Replaced {removed} {label} with {len(created)} for city {city_id}")

    return ReplaceResult(city_id=city_id, count=len(created), items=created)


def replace_hospitals(
    session: DbSession,
    city_id: str,
    hospitals: Sequence[HospitalInput | Mapping[str, Any]],
) -> ReplaceResult[HospitalEntity]:
    """Replace every hospital of a city.

    Args:
        session: Database session.
        city_id: Parent city.
        hospitals: Replacement set; each needs name, address, contact and
            open24Hours.

    Returns:
        ReplaceResult with the new hospital rows.

    Raises:
        ValidationError: If the set is empty or any element is invalid.
        NotFoundError: If the city does not exist.
        StorageError: If the transaction fails.
    """
    items = parse_many(HospitalInput, hospitals, "hospitals")
    return _replace_children(
        session,
        city_id,
        items,
        label="hospitals",
        delete=repo.delete_hospitals_for_city,
        insert=repo.add_hospitals,
    )


def replace_vaccines(
    session: DbSession,
    city_id: str,
    vaccines: Sequence[VaccineInput | Mapping[str, Any]],
) -> ReplaceResult[VaccineEntity]:
    """Replace every vaccine of a city.

    Raises:
        ValidationError: If the set is empty or any element lacks
            vaccine or importance.
        NotFoundError: If the city does not exist.
        StorageError: If the transaction fails.
    """
    items = parse_many(VaccineInput, vaccines, "vaccines")
    return _replace_children(
        session,
        city_id,
        items,
        label="vaccines",
        delete=repo.delete_vaccines_for_city,
        insert=repo.add_vaccines,
    )


def replace_illnesses(
    session: DbSession,
    city_id: str,
    illnesses: Sequence[IllnessInput | Mapping[str, Any]],
) -> ReplaceResult[IllnessEntity]:
    """Replace every common illness of a city.

    Raises:
        ValidationError: If the set is empty or any element lacks illness.
        NotFoundError: If the city does not exist.
        StorageError: If the transaction fails.
    """
    items = parse_many(IllnessInput, illnesses, "illnesses")
    return _replace_children(
        session,
        city_id,
        items,
        label="illnesses",
        delete=repo.delete_illnesses_for_city,
        insert=repo.add_illnesses,
    )
