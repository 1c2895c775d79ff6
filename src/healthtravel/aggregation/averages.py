"""Rating averages.

Pure functions - no database access. Each field's mean is rounded to
2 decimal places on its own; an empty input yields 0 for every field.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Sequence

from healthtravel.models.domain import HEALTH_RATING_FIELDS
from healthtravel.models.types import HealthRatingAverages

GENERAL_RATING_FIELDS = ("rating",)


def _field_value(record: Any, name: str) -> float:
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def average_fields(records: Iterable[Any], fields: Sequence[str]) -> dict[str, float]:
    """Compute the per-field arithmetic mean of a collection of records.

    Summation uses math.fsum, so the result does not depend on the
    order of the records.

    Args:
        records: Objects or mappings exposing every name in fields.
        fields: Numeric fields to average.

    Returns:
        Mapping of field name to mean rounded to 2 decimal places, with
        every field set to 0.0 when records is empty.
    """
    rows = list(records)
    if not rows:
        return {name: 0.0 for name in fields}

    count = len(rows)
    return {
        name: round(math.fsum(_field_value(row, name) for row in rows) / count, 2)
        for name in fields
    }


def average_general_rating(ratings: Iterable[Any]) -> float:
    """Mean of the rating field of general rating records."""
    return average_fields(ratings, GENERAL_RATING_FIELDS)["rating"]


def average_health_ratings(ratings: Iterable[Any]) -> HealthRatingAverages:
    """Per-axis mean of health rating records.

    Args:
        ratings: Health rating entities or mappings with snake_case keys.

    Returns:
        HealthRatingAverages, all zero for an empty input.
    """
    return HealthRatingAverages(**average_fields(ratings, HEALTH_RATING_FIELDS))
