"""Terpene profile routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from strainbank.database import get_db
from strainbank.routes.common import map_error
from strainbank.schemas.batch import TerpenesCreate, TerpenesListRead, TerpenesRead
from strainbank.services.criteria import TerpenesByBatchId
from strainbank.services.terpenes_service import TerpenesService

router = APIRouter(prefix="/terpenes", tags=["terpenes"])


@router.get("", response_model=TerpenesListRead)
async def query_terpenes(
	batch_id: int | None = Query(default=None),
	db: AsyncSession = Depends(get_db),
) -> TerpenesListRead:
	service = TerpenesService(db)
	try:
		if batch_id is None:
			profiles = await service.all()
		else:
			profiles = await service.filter(TerpenesByBatchId(batch_id))
	except Exception as exc:
		raise map_error(exc) from exc
	return TerpenesListRead(items=[TerpenesRead.model_validate(profile) for profile in profiles])


@router.get("/{terpenes_id}", response_model=TerpenesRead)
async def get_terpenes_by_id(terpenes_id: int, db: AsyncSession = Depends(get_db)) -> TerpenesRead:
	try:
		profile = await TerpenesService(db).get(terpenes_id)
	except Exception as exc:
		raise map_error(exc) from exc
	return TerpenesRead.model_validate(profile)


@router.post("", response_model=TerpenesRead, status_code=status.HTTP_201_CREATED)
async def post_new_terpenes(
	payload: TerpenesCreate,
	db: AsyncSession = Depends(get_db),
) -> TerpenesRead:
	try:
		profile = await TerpenesService(db).create(payload)
	except Exception as exc:
		raise map_error(exc) from exc
	return TerpenesRead.model_validate(profile)


@router.delete("/{terpenes_id}", response_model=TerpenesRead)
async def delete_terpenes(terpenes_id: int, db: AsyncSession = Depends(get_db)) -> TerpenesRead:
	try:
		profile = await TerpenesService(db).delete_by_id(terpenes_id)
	except Exception as exc:
		raise map_error(exc) from exc
	return TerpenesRead.model_validate(profile)
