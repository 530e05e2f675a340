from __future__ import annotations

import pytest
from pydantic import ValidationError

from strainbank.config import LogFormat, Settings


@pytest.mark.parametrize(
    "raw",
    [
        "postgres://u:p@db:5432/strains",
        "postgresql://u:p@db:5432/strains",
        "postgresql+asyncpg://u:p@db:5432/strains",
    ],
)
def test_database_url_uses_asyncpg(raw: str) -> None:
    settings = Settings(database_url=raw, _env_file=None)

    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/strains"


def test_missing_database_url_fails_fast(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_database_url_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(database_url="  ", _env_file=None)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    settings = Settings(database_url="postgres://localhost/strains", _env_file=None)

    assert settings.port == 8008
    assert settings.log_format == LogFormat.json
