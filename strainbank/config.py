"""Application settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNC_DRIVER = "postgresql+asyncpg://"
_SYNC_SCHEMES = ("postgres://", "postgresql://")


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration — all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Database ────────────────────────────────────────────────────────────
    database_url: str
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_echo: bool = False

    # ── Server ──────────────────────────────────────────────────────────────
    host: str = "127.0.0.1"
    port: int = 8008

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json

    @field_validator("database_url")
    @classmethod
    def _use_async_driver(cls, value: str) -> str:
        """Accept plain ``postgres://`` URLs and route them through asyncpg."""
        value = value.strip()
        if not value:
            raise ValueError("DATABASE_URL must be set")
        for scheme in _SYNC_SCHEMES:
            if value.startswith(scheme):
                return _ASYNC_DRIVER + value[len(scheme):]
        return value


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call).

    Raises ``pydantic.ValidationError`` when ``DATABASE_URL`` is missing, so
    the process fails before serving anything.
    """
    return Settings()
