"""Grower data access."""

from __future__ import annotations

from strainbank.models.catalog import Grower
from strainbank.schemas.catalog import GrowerCreate
from strainbank.services.base import EntityService, contains, equals
from strainbank.services.criteria import GrowerById, GrowerByName, GrowerCriterion


class GrowerService(EntityService[Grower, GrowerCreate, GrowerCriterion]):
	model = Grower
	entity_name = "Grower"
	_filters = {
		GrowerById: equals(Grower.id, "id"),
		GrowerByName: contains(Grower.name),
	}
