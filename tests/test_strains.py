from __future__ import annotations

from types import SimpleNamespace

import pytest
from httpx import AsyncClient

from strainbank.models.catalog import Strain
from strainbank.models.enums import SpeciesEnum
from strainbank.schemas.catalog import StrainCreate, StrainRead
from strainbank.services.criteria import GrowerById, StrainById, StrainByName, StrainBySpecies
from strainbank.services.strain_service import StrainService
from tests.conftest import FakeAsyncSession, compile_pg


def test_species_display_is_lowercase() -> None:
    assert [str(species) for species in SpeciesEnum] == ["indica", "sativa", "hybrid"]
    assert SpeciesEnum.Hybrid.value == "Hybrid"


def test_species_parse_is_case_insensitive() -> None:
    assert SpeciesEnum.parse("INDICA") is SpeciesEnum.Indica
    assert SpeciesEnum.parse(" sativa ") is SpeciesEnum.Sativa
    with pytest.raises(ValueError):
        SpeciesEnum.parse("ruderalis")


def test_strain_record_serialises_species_label() -> None:
    record = StrainRead.model_validate(Strain(id=4, name="Gaylord OG", species=SpeciesEnum.Indica))

    assert record.model_dump(mode="json") == {"id": 4, "name": "Gaylord OG", "species": "Indica"}


@pytest.mark.asyncio
@pytest.mark.parametrize("needle", ["og", "OG", "Og"])
async def test_name_filter_matches_substring_regardless_of_case(
    fake_db_session: FakeAsyncSession,
    needle: str,
) -> None:
    await StrainService(fake_db_session).filter(StrainByName(needle))

    sql, params = compile_pg(fake_db_session.last_statement)
    assert "strains.name ILIKE" in sql
    assert f"%{needle}%" in params.values()


@pytest.mark.asyncio
async def test_species_filter_is_exact_match(fake_db_session: FakeAsyncSession) -> None:
    indica = Strain(id=1, name="Gaylord OG", species=SpeciesEnum.Indica)
    fake_db_session.returns(indica)

    found = await StrainService(fake_db_session).filter(StrainBySpecies(SpeciesEnum.Indica))

    assert found == [indica]
    sql, params = compile_pg(fake_db_session.last_statement)
    assert "WHERE strains.species = " in sql
    assert list(params.values()) == [SpeciesEnum.Indica]


@pytest.mark.asyncio
async def test_unmapped_criterion_falls_back_to_all(fake_db_session: FakeAsyncSession) -> None:
    await StrainService(fake_db_session).filter(GrowerById(1))  # type: ignore[arg-type]

    sql, _ = compile_pg(fake_db_session.last_statement)
    assert "WHERE" not in sql


@pytest.mark.asyncio
async def test_create_strain_keeps_species(fake_db_session: FakeAsyncSession) -> None:
    strain = await StrainService(fake_db_session).create(
        StrainCreate(name="Wedding Cake", species=SpeciesEnum.Hybrid)
    )

    assert isinstance(strain, Strain)
    assert strain.id == 1
    assert strain.species is SpeciesEnum.Hybrid


@pytest.mark.asyncio
async def test_post_strain_endpoint(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/strains",
        json={"name": "Blackwater OG", "species": "Indica"},
    )

    assert response.status_code == 201
    assert response.json() == {"id": 1, "name": "Blackwater OG", "species": "Indica"}


@pytest.mark.asyncio
async def test_post_strain_rejects_unknown_species(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/strains",
        json={"name": "Blackwater OG", "species": "Ruderalis"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_query_strain_by_species(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[object] = []

    async def fake_filter(self: StrainService, criterion: object) -> list[object]:
        seen.append(criterion)
        return [SimpleNamespace(id=2, name="Gaylord OG", species=SpeciesEnum.Indica)]

    monkeypatch.setattr(StrainService, "filter", fake_filter)

    response = await client.get("/api/v1/strains", params={"species": "indica"})

    assert response.status_code == 200
    assert response.json()["items"][0]["species"] == "Indica"
    assert seen == [StrainBySpecies(SpeciesEnum.Indica)]


@pytest.mark.asyncio
async def test_query_strain_bad_species_is_400(client: AsyncClient) -> None:
    response = await client.get("/api/v1/strains", params={"species": "ruderalis"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_strain_by_id(client: AsyncClient, fake_db_session: FakeAsyncSession) -> None:
    fake_db_session.returns(Strain(id=3, name="Blackwater OG", species=SpeciesEnum.Indica))

    response = await client.get("/api/v1/strains/3")

    assert response.status_code == 200
    assert response.json()["name"] == "Blackwater OG"


@pytest.mark.asyncio
async def test_filter_by_id(fake_db_session: FakeAsyncSession) -> None:
    strain = Strain(id=7, name="Blackwater OG", species=SpeciesEnum.Indica)
    fake_db_session.returns(strain)

    found = await StrainService(fake_db_session).filter(StrainById(7))

    assert found == [strain]
    sql, params = compile_pg(fake_db_session.last_statement)
    assert "WHERE strains.id = " in sql
    assert list(params.values()) == [7]
