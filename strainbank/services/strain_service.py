"""Strain data access."""

from __future__ import annotations

from strainbank.models.catalog import Strain
from strainbank.schemas.catalog import StrainCreate
from strainbank.services.base import EntityService, contains, equals
from strainbank.services.criteria import (
	StrainById,
	StrainByName,
	StrainBySpecies,
	StrainCriterion,
)


class StrainService(EntityService[Strain, StrainCreate, StrainCriterion]):
	model = Strain
	entity_name = "Strain"
	_filters = {
		StrainById: equals(Strain.id, "id"),
		StrainByName: contains(Strain.name),
		StrainBySpecies: equals(Strain.species, "species"),
	}
