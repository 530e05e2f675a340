"""Strain routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from strainbank.database import get_db
from strainbank.models.enums import SpeciesEnum
from strainbank.routes.common import map_error, single_criterion
from strainbank.schemas.catalog import StrainCreate, StrainListRead, StrainRead
from strainbank.services.criteria import StrainById, StrainByName, StrainBySpecies
from strainbank.services.strain_service import StrainService

router = APIRouter(prefix="/strains", tags=["strains"])


@router.get("", response_model=StrainListRead)
async def query_strain(
	strain_id: int | None = Query(default=None, alias="id"),
	name: str | None = Query(default=None),
	species: str | None = Query(default=None, description="indica, sativa or hybrid"),
	db: AsyncSession = Depends(get_db),
) -> StrainListRead:
	service = StrainService(db)
	try:
		criterion = single_criterion(
			StrainById(strain_id) if strain_id is not None else None,
			StrainByName(name) if name is not None else None,
			StrainBySpecies(SpeciesEnum.parse(species)) if species is not None else None,
		)
		strains = await service.all() if criterion is None else await service.filter(criterion)
	except Exception as exc:
		raise map_error(exc) from exc
	return StrainListRead(items=[StrainRead.model_validate(strain) for strain in strains])


@router.get("/{strain_id}", response_model=StrainRead)
async def get_strain_by_id(strain_id: int, db: AsyncSession = Depends(get_db)) -> StrainRead:
	try:
		strain = await StrainService(db).get(strain_id)
	except Exception as exc:
		raise map_error(exc) from exc
	return StrainRead.model_validate(strain)


@router.post("", response_model=StrainRead, status_code=status.HTTP_201_CREATED)
async def post_new_strain(payload: StrainCreate, db: AsyncSession = Depends(get_db)) -> StrainRead:
	try:
		strain = await StrainService(db).create(payload)
	except Exception as exc:
		raise map_error(exc) from exc
	return StrainRead.model_validate(strain)


@router.delete("/{strain_id}", response_model=StrainRead)
async def delete_strain(strain_id: int, db: AsyncSession = Depends(get_db)) -> StrainRead:
	try:
		strain = await StrainService(db).delete_by_id(strain_id)
	except Exception as exc:
		raise map_error(exc) from exc
	return StrainRead.model_validate(strain)
