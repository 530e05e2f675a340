"""Exception types raised by the data-access layer.

Services raise these and never catch them; routers translate them into
HTTP status codes.
"""

from __future__ import annotations

from typing import Any


class StrainbankError(Exception):
    """Base exception for all strainbank errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DatabaseConnectionError(StrainbankError):
    """No handle to the store could be obtained (fatal at startup)."""


class PersistenceError(StrainbankError):
    """A single store round trip failed: constraint, type or binding error."""


class NotFoundError(PersistenceError, LookupError):
    """The targeted row does not exist (or was deleted concurrently)."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(
            f"{entity} {entity_id} not found",
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id
