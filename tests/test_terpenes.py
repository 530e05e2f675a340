from __future__ import annotations

import pytest
from httpx import AsyncClient

from strainbank.models.batch import TERPENE_FIELDS, Terpenes
from strainbank.schemas.batch import TerpenesBuilder, TerpenesCreate, TerpenesRead
from strainbank.services.criteria import TerpenesByBatchId, TerpenesById
from strainbank.services.terpenes_service import TerpenesService
from tests.conftest import FakeAsyncSession, compile_pg


def test_builder_leaves_untested_compounds_null() -> None:
    draft = TerpenesBuilder(batch_id=5).myrcene(0.8).limonene(0.3).build()

    assert draft == TerpenesCreate(batch_id=5, myrcene=0.8, limonene=0.3)
    assert [name for name in TERPENE_FIELDS if getattr(draft, name) is None] == [
        "caryophyllene",
        "humulene",
        "linalool",
        "pinene",
    ]


def test_builder_requires_batch() -> None:
    with pytest.raises(ValueError, match="batch_id"):
        TerpenesBuilder().pinene(0.1).build()


def test_drafts_are_immutable() -> None:
    draft = TerpenesCreate(batch_id=5)
    with pytest.raises(ValueError):
        draft.batch_id = 6  # type: ignore[misc]


@pytest.mark.asyncio
async def test_filter_by_batch_id(fake_db_session: FakeAsyncSession) -> None:
    profile = Terpenes(id=1, batch_id=5, myrcene=0.8)
    fake_db_session.returns(profile)

    found = await TerpenesService(fake_db_session).filter(TerpenesByBatchId(5))

    assert found == [profile]
    sql, params = compile_pg(fake_db_session.last_statement)
    assert "WHERE terpenes.batch_id = " in sql
    assert list(params.values()) == [5]


@pytest.mark.asyncio
async def test_post_terpenes_endpoint(client: AsyncClient) -> None:
    response = await client.post("/api/v1/terpenes", json={"batch_id": 5, "pinene": 0.12})

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["pinene"] == 0.12
    assert body["humulene"] is None


@pytest.mark.asyncio
async def test_negative_concentration_rejected(client: AsyncClient) -> None:
    response = await client.post("/api/v1/terpenes", json={"batch_id": 5, "pinene": -1})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_missing_profile_is_404(client: AsyncClient) -> None:
    response = await client.delete("/api/v1/terpenes/9")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_filter_by_id(fake_db_session: FakeAsyncSession) -> None:
    profile = Terpenes(id=2, batch_id=5, pinene=0.1)
    fake_db_session.returns(profile)

    found = await TerpenesService(fake_db_session).filter(TerpenesById(2))

    assert found == [profile]
    sql, params = compile_pg(fake_db_session.last_statement)
    assert "WHERE terpenes.id = " in sql
    assert list(params.values()) == [2]


def test_profile_serialises_real_columns_as_stored() -> None:
    profile = Terpenes(id=2, batch_id=5, myrcene=0.800000011920929, pinene=None)

    dumped = TerpenesRead.model_validate(profile).model_dump(mode="json")

    assert dumped["myrcene"] == 0.8
    assert dumped["pinene"] is None
