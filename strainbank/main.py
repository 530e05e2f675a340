"""FastAPI application entrypoint — lifespan, routers, middleware."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from strainbank import __version__
from strainbank.config import get_settings
from strainbank.database import check_connection, dispose_engine
from strainbank.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from strainbank.routes import batches, growers, strains, terpenes

logger = structlog.get_logger("strainbank")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup fails (and the process exits) when the store is unreachable.
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "strainbank_starting",
        log_level=settings.log_level,
        pool_size=settings.db_pool_size,
    )

    try:
        await check_connection()
    except Exception as exc:
        logger.exception("startup_failure", error=str(exc))
        raise

    yield

    logger.info("strainbank_shutting_down")
    await dispose_engine()


app = FastAPI(
    title="Strainbank API",
    description=(
        "Growers, cannabis strains, harvest batches and batch terpene "
        "profiles over PostgreSQL."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(RequestLoggingMiddleware)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check — verifies the API process is alive."""
    return {
        "status": "ok",
        "service": "strainbank",
        "version": __version__,
    }


# ── Router registration ────────────────────────────────────────────────────
app.include_router(growers.router, prefix="/api/v1")
app.include_router(strains.router, prefix="/api/v1")
app.include_router(batches.router, prefix="/api/v1")
app.include_router(terpenes.router, prefix="/api/v1")
