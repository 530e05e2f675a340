"""Batch routes: raw records plus the strain/grower joined view."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from strainbank.database import get_db
from strainbank.routes.common import map_error, single_criterion
from strainbank.schemas.batch import BatchCreate, BatchListRead, BatchRead, BatchResponseList
from strainbank.services.batch_service import BatchService
from strainbank.services.criteria import (
	BatchByCbdContent,
	BatchByFinalTestDate,
	BatchByGrowerId,
	BatchByGrowerName,
	BatchByHarvestDate,
	BatchByPackageDate,
	BatchByStrainId,
	BatchByStrainName,
	BatchByThcContent,
	BatchCriterion,
)

router = APIRouter(prefix="/batches", tags=["batches"])


def batch_criterion(
	strain: str | None = Query(default=None, description="strain name substring"),
	grower: str | None = Query(default=None, description="grower name substring"),
	strain_id: int | None = Query(default=None),
	grower_id: int | None = Query(default=None),
	harvest_date: date | None = Query(default=None),
	final_test_date: date | None = Query(default=None),
	package_date: date | None = Query(default=None),
	thc_min: float | None = Query(default=None),
	thc_max: float | None = Query(default=None),
	cbd_min: float | None = Query(default=None),
	cbd_max: float | None = Query(default=None),
) -> BatchCriterion | None:
	"""Parse the batch query string into at most one criterion."""
	try:
		return single_criterion(
			BatchByStrainName(strain) if strain is not None else None,
			BatchByGrowerName(grower) if grower is not None else None,
			BatchByStrainId(strain_id) if strain_id is not None else None,
			BatchByGrowerId(grower_id) if grower_id is not None else None,
			BatchByHarvestDate(harvest_date) if harvest_date is not None else None,
			BatchByFinalTestDate(final_test_date) if final_test_date is not None else None,
			BatchByPackageDate(package_date) if package_date is not None else None,
			BatchByThcContent(thc_min, thc_max)
			if thc_min is not None or thc_max is not None
			else None,
			BatchByCbdContent(cbd_min, cbd_max)
			if cbd_min is not None or cbd_max is not None
			else None,
		)
	except ValueError as exc:
		raise map_error(exc) from exc


@router.get("", response_model=BatchResponseList)
async def get_all_batches(
	criterion: BatchCriterion | None = Depends(batch_criterion),
	db: AsyncSession = Depends(get_db),
) -> BatchResponseList:
	service = BatchService(db)
	try:
		if criterion is None:
			batches = await service.all_joined()
		else:
			batches = await service.filter_joined(criterion)
	except Exception as exc:
		raise map_error(exc) from exc
	return BatchResponseList(items=batches)


@router.get("/raw", response_model=BatchListRead)
async def get_raw_batches(
	criterion: BatchCriterion | None = Depends(batch_criterion),
	db: AsyncSession = Depends(get_db),
) -> BatchListRead:
	service = BatchService(db)
	try:
		batches = await service.all() if criterion is None else await service.filter(criterion)
	except Exception as exc:
		raise map_error(exc) from exc
	return BatchListRead(items=[BatchRead.model_validate(batch) for batch in batches])


@router.get("/strain/{strain_id}", response_model=BatchResponseList)
async def get_batches_by_strain_id(
	strain_id: int,
	db: AsyncSession = Depends(get_db),
) -> BatchResponseList:
	try:
		batches = await BatchService(db).filter_joined(BatchByStrainId(strain_id))
	except Exception as exc:
		raise map_error(exc) from exc
	return BatchResponseList(items=batches)


@router.get("/grower/{grower_id}", response_model=BatchResponseList)
async def get_batches_by_grower_id(
	grower_id: int,
	db: AsyncSession = Depends(get_db),
) -> BatchResponseList:
	try:
		batches = await BatchService(db).filter_joined(BatchByGrowerId(grower_id))
	except Exception as exc:
		raise map_error(exc) from exc
	return BatchResponseList(items=batches)


@router.get("/{batch_id}", response_model=BatchRead)
async def get_batch_by_id(batch_id: int, db: AsyncSession = Depends(get_db)) -> BatchRead:
	try:
		batch = await BatchService(db).get(batch_id)
	except Exception as exc:
		raise map_error(exc) from exc
	return BatchRead.model_validate(batch)


@router.post("", response_model=BatchRead, status_code=status.HTTP_201_CREATED)
async def post_new_batch(payload: BatchCreate, db: AsyncSession = Depends(get_db)) -> BatchRead:
	try:
		batch = await BatchService(db).create(payload)
	except Exception as exc:
		raise map_error(exc) from exc
	return BatchRead.model_validate(batch)


@router.delete("/{batch_id}", response_model=BatchRead)
async def delete_batch(batch_id: int, db: AsyncSession = Depends(get_db)) -> BatchRead:
	try:
		batch = await BatchService(db).delete_by_id(batch_id)
	except Exception as exc:
		raise map_error(exc) from exc
	return BatchRead.model_validate(batch)
