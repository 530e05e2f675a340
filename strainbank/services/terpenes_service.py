"""Terpene profile data access."""

from __future__ import annotations

from strainbank.models.batch import Terpenes
from strainbank.schemas.batch import TerpenesCreate
from strainbank.services.base import EntityService, equals
from strainbank.services.criteria import TerpenesByBatchId, TerpenesById, TerpenesCriterion


class TerpenesService(EntityService[Terpenes, TerpenesCreate, TerpenesCriterion]):
	model = Terpenes
	entity_name = "Terpenes"
	_filters = {
		TerpenesById: equals(Terpenes.id, "id"),
		TerpenesByBatchId: equals(Terpenes.batch_id, "batch_id"),
	}
