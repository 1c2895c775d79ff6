"""Typed failures raised by domain operations.

The api layer maps each kind to an HTTP status:
- ValidationError -> 400 (no mutation attempted)
- NotFoundError -> 404
- StorageError -> 500 (generic message, cause is logged)
"""

from __future__ import annotations


class HealthTravelError(Exception):
    """Base class for all domain failures."""


class ValidationError(HealthTravelError):
    """Bad, missing or out-of-range input."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class NotFoundError(HealthTravelError):
    """Referenced parent or child row does not exist."""

    def __init__(self, entity: str, identifier: str | None = None):
        self.entity = entity
        self.identifier = identifier
        if identifier is None:
            message = f"{entity} not found"
        else:
            message = f"{entity} not found: {identifier}"
        super().__init__(message)


class StorageError(HealthTravelError):
    """Transaction or connectivity failure in the data store."""
