"""Batch data access, including the strain/grower joined view.

Raw ``filter()`` resolves the name criteria through an ``IN`` subquery so it
still selects bare ``batches`` rows.  The joined view selects from
``batches ⋈ strains ⋈ growers`` and matches names on the joined columns.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select, select

from strainbank.models.batch import Batch
from strainbank.models.catalog import Grower, Strain
from strainbank.schemas.batch import BatchCreate, BatchResponse
from strainbank.services.base import Clause, EntityService, contains, equals, within
from strainbank.services.criteria import (
	BatchByCbdContent,
	BatchByFinalTestDate,
	BatchByGrowerId,
	BatchByGrowerName,
	BatchByHarvestDate,
	BatchById,
	BatchByPackageDate,
	BatchByStrainId,
	BatchByStrainName,
	BatchByThcContent,
	BatchCriterion,
)


def _strain_name_subquery(criterion: BatchByStrainName) -> ColumnElement[bool]:
	names = select(Strain.id).where(contains(Strain.name)(criterion))
	return Batch.strain_id.in_(names)


def _grower_name_subquery(criterion: BatchByGrowerName) -> ColumnElement[bool]:
	names = select(Grower.id).where(contains(Grower.name)(criterion))
	return Batch.grower_id.in_(names)


_COLUMN_FILTERS: dict[type, Clause] = {
	BatchById: equals(Batch.id, "id"),
	BatchByStrainId: equals(Batch.strain_id, "strain_id"),
	BatchByGrowerId: equals(Batch.grower_id, "grower_id"),
	BatchByHarvestDate: equals(Batch.harvest_date, "harvest_date"),
	BatchByFinalTestDate: equals(Batch.final_test_date, "final_test_date"),
	BatchByPackageDate: equals(Batch.package_date, "package_date"),
	BatchByThcContent: within(Batch.thc_content),
	BatchByCbdContent: within(Batch.cbd_content),
}


class BatchService(EntityService[Batch, BatchCreate, BatchCriterion]):
	model = Batch
	entity_name = "Batch"
	_filters = {
		**_COLUMN_FILTERS,
		BatchByStrainName: _strain_name_subquery,
		BatchByGrowerName: _grower_name_subquery,
	}
	_joined_filters: dict[type, Clause] = {
		**_COLUMN_FILTERS,
		BatchByStrainName: contains(Strain.name),
		BatchByGrowerName: contains(Grower.name),
	}

	async def all_joined(self) -> list[BatchResponse]:
		rows = await self._execute(self._joined_select())
		return [BatchResponse.model_validate(row) for row in rows.all()]

	async def filter_joined(self, criterion: BatchCriterion) -> list[BatchResponse]:
		build = self._joined_filters.get(type(criterion))
		if build is None:
			return await self.all_joined()
		rows = await self._execute(self._joined_select().where(build(criterion)))
		return [BatchResponse.model_validate(row) for row in rows.all()]

	@staticmethod
	def _joined_select() -> Select[Any]:
		return (
			select(
				Strain.name.label("strain"),
				Batch.harvest_date,
				Batch.final_test_date,
				Batch.package_date,
				Grower.name.label("grower"),
				Batch.thc_content,
				Batch.cbd_content,
			)
			.select_from(Batch)
			.join(Strain, Batch.strain_id == Strain.id)
			.join(Grower, Batch.grower_id == Grower.id)
			.order_by(Batch.id)
		)
