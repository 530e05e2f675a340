"""Error mapping and query-string helpers shared by the routers."""

from __future__ import annotations

from typing import TypeVar

import structlog
from fastapi import HTTPException, status

from strainbank.exceptions import PersistenceError

logger = structlog.get_logger("strainbank.routes")

CriterionT = TypeVar("CriterionT")


def map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, HTTPException):
		return exc
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	if isinstance(exc, PersistenceError):
		logger.error("persistence_error", error=exc.message, **exc.details)
		return HTTPException(
			status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
			detail=exc.message,
		)
	logger.exception("unexpected_error", error=str(exc))
	return HTTPException(
		status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
		detail="Unexpected data access failure",
	)


def single_criterion(*candidates: CriterionT | None) -> CriterionT | None:
	"""The one criterion supplied by the query string, or ``None`` for all rows."""
	present = [candidate for candidate in candidates if candidate is not None]
	if len(present) > 1:
		raise ValueError("filter on one field at a time")
	return present[0] if present else None
