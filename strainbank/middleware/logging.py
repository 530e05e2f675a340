"""Structured logging for the API process, with a request id on every line."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from strainbank import __version__
from strainbank.config import LogFormat, Settings, get_settings

REQUEST_ID_HEADER = "x-request-id"

# Loggers whose per-request lines duplicate RequestLoggingMiddleware.
_QUIETED_LOGGERS = ("uvicorn.access",)


def _add_service(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
	event_dict.setdefault("service", "strainbank")
	event_dict.setdefault("version", __version__)
	return event_dict


def _renderer(log_format: LogFormat) -> Any:
	if log_format == LogFormat.json:
		return structlog.processors.JSONRenderer()
	return structlog.dev.ConsoleRenderer()


def configure_structured_logging(settings: Settings | None = None) -> None:
	"""Route stdlib and structlog output through one renderer.

	Safe to call more than once; only the first call configures anything.
	"""
	if structlog.is_configured():
		return

	settings = settings or get_settings()
	level = logging.getLevelName(settings.log_level.upper())
	if not isinstance(level, int):
		level = logging.INFO

	logging.basicConfig(level=level, format="%(message)s")
	for name in _QUIETED_LOGGERS:
		logging.getLogger(name).setLevel(logging.WARNING)

	structlog.configure(
		processors=[
			structlog.contextvars.merge_contextvars,
			structlog.processors.add_log_level,
			_add_service,
			structlog.processors.TimeStamper(fmt="iso", utc=True),
			structlog.processors.format_exc_info,
			_renderer(settings.log_format),
		],
		wrapper_class=structlog.make_filtering_bound_logger(level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)


def _elapsed_ms(start: float) -> float:
	return round((time.perf_counter() - start) * 1000.0, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Bind request id, method and path for every log line emitted while the
	request is handled, then log one timing line per request.
	"""

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
		request.state.request_id = request_id

		structlog.contextvars.clear_contextvars()
		structlog.contextvars.bind_contextvars(
			request_id=request_id,
			method=request.method,
			path=request.url.path,
		)

		logger = structlog.get_logger("strainbank.request")
		start = time.perf_counter()

		try:
			response = await call_next(request)
		except Exception as exc:
			logger.exception("http_request_failed", duration_ms=_elapsed_ms(start), error=str(exc))
			raise

		response.headers[REQUEST_ID_HEADER] = request_id
		log = logger.warning if response.status_code >= 500 else logger.info
		log("http_request", status_code=response.status_code, duration_ms=_elapsed_ms(start))
		return response
