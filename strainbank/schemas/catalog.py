"""Pydantic drafts and records for growers and strains."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from strainbank.models.enums import SpeciesEnum


class _NamedDraft(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str = Field(min_length=1, max_length=255)

	@field_validator("name", mode="before")
	@classmethod
	def _strip_name(cls, value: object) -> object:
		return value.strip() if isinstance(value, str) else value


class GrowerCreate(_NamedDraft):
	pass


class StrainCreate(_NamedDraft):
	species: SpeciesEnum


class GrowerRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	name: str


class StrainRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	name: str
	species: SpeciesEnum


class GrowerListRead(BaseModel):
	items: list[GrowerRead]


class StrainListRead(BaseModel):
	items: list[StrainRead]
