"""Grower routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from strainbank.database import get_db
from strainbank.routes.common import map_error, single_criterion
from strainbank.schemas.catalog import GrowerCreate, GrowerListRead, GrowerRead
from strainbank.services.criteria import GrowerById, GrowerByName
from strainbank.services.grower_service import GrowerService

router = APIRouter(prefix="/growers", tags=["growers"])


@router.get("", response_model=GrowerListRead)
async def query_growers(
	grower_id: int | None = Query(default=None, alias="id"),
	name: str | None = Query(default=None),
	db: AsyncSession = Depends(get_db),
) -> GrowerListRead:
	service = GrowerService(db)
	try:
		criterion = single_criterion(
			GrowerById(grower_id) if grower_id is not None else None,
			GrowerByName(name) if name is not None else None,
		)
		growers = await service.all() if criterion is None else await service.filter(criterion)
	except Exception as exc:
		raise map_error(exc) from exc
	return GrowerListRead(items=[GrowerRead.model_validate(grower) for grower in growers])


@router.get("/{grower_id}", response_model=GrowerRead)
async def get_grower_by_id(grower_id: int, db: AsyncSession = Depends(get_db)) -> GrowerRead:
	try:
		grower = await GrowerService(db).get(grower_id)
	except Exception as exc:
		raise map_error(exc) from exc
	return GrowerRead.model_validate(grower)


@router.post("", response_model=GrowerRead, status_code=status.HTTP_201_CREATED)
async def post_new_grower(payload: GrowerCreate, db: AsyncSession = Depends(get_db)) -> GrowerRead:
	try:
		grower = await GrowerService(db).create(payload)
	except Exception as exc:
		raise map_error(exc) from exc
	return GrowerRead.model_validate(grower)


@router.delete("/{grower_id}", response_model=GrowerRead)
async def delete_grower(grower_id: int, db: AsyncSession = Depends(get_db)) -> GrowerRead:
	try:
		grower = await GrowerService(db).delete_by_id(grower_id)
	except Exception as exc:
		raise map_error(exc) from exc
	return GrowerRead.model_validate(grower)
