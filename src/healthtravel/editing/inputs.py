"""Input parsing for domain operations.

Callers may pass either a validated pydantic model or a plain mapping
(e.g. a decoded JSON body). Mappings are validated here; any failure
becomes a single ValidationError and nothing downstream runs.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from healthtravel.core.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def _describe(error: PydanticValidationError, prefix: str) -> list[str]:
    """Flatten pydantic errors into 'field: message' strings."""
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        if prefix:
            location = f"{prefix}.{location}" if location else prefix
        messages.append(f"{location}: {item['msg']}")
    return messages


def parse_input(model: type[M], payload: M | Mapping[str, Any], label: str = "") -> M:
    """Validate a single payload against an input model.

    Args:
        model: Pydantic input model.
        payload: Model instance or mapping.
        label: Prefix for error locations.

    Returns:
        Validated model instance.

    Raises:
        ValidationError: If required fields are missing or invalid.
    """
    if isinstance(payload, model):
        return payload

    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        errors = _describe(e, label)
        raise ValidationError(f"Invalid {model.__name__}: {'; '.join(errors)}", errors) from e


def parse_many(
    model: type[M],
    payloads: Sequence[M | Mapping[str, Any]] | None,
    label: str,
) -> list[M]:
    """Validate a non-empty list of payloads as one unit.

    Every element is checked before anything is returned, so a single
    bad element rejects the whole list.

    Args:
        model: Pydantic input model for each element.
        payloads: Elements to validate.
        label: Collection name used in error messages (e.g. "hospitals").

    Returns:
        List of validated model instances, in input order.

    Raises:
        ValidationError: If the list is empty or any element is invalid.
    """
    if not payloads:
        raise ValidationError(f"A non-empty list of {label} is required.")

    parsed: list[M] = []
    errors: list[str] = []
    for index, payload in enumerate(payloads):
        try:
            parsed.append(parse_input(model, payload, f"{label}[{index}]"))
        except ValidationError as e:
            errors.extend(e.errors)

    if errors:
        raise ValidationError(f"All fields are required for each of the {label}.", errors)

    return parsed
