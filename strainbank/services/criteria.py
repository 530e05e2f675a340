"""Filter criteria: one closed union of frozen dataclasses per entity.

Each ``filter()`` call takes exactly one criterion.  Services translate a
criterion into a single parameterised WHERE clause through a per-entity
mapping table; no SQL text is ever assembled from the values.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TypeAlias

from strainbank.models.enums import SpeciesEnum


@dataclass(frozen=True)
class FloatRange:
	"""Inclusive ``[minimum, maximum]``; an omitted bound is open."""

	minimum: float | None = None
	maximum: float | None = None

	def __post_init__(self) -> None:
		if self.minimum is None and self.maximum is None:
			raise ValueError("a range needs at least one bound")
		if (
			self.minimum is not None
			and self.maximum is not None
			and self.minimum > self.maximum
		):
			raise ValueError(f"minimum {self.minimum} is greater than maximum {self.maximum}")


# ── Grower ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GrowerById:
	id: int


@dataclass(frozen=True)
class GrowerByName:
	name: str


GrowerCriterion: TypeAlias = GrowerById | GrowerByName


# ── Strain ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class StrainById:
	id: int


@dataclass(frozen=True)
class StrainByName:
	name: str


@dataclass(frozen=True)
class StrainBySpecies:
	species: SpeciesEnum


StrainCriterion: TypeAlias = StrainById | StrainByName | StrainBySpecies


# ── Batch ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BatchById:
	id: int


@dataclass(frozen=True)
class BatchByStrainId:
	strain_id: int


@dataclass(frozen=True)
class BatchByGrowerId:
	grower_id: int


@dataclass(frozen=True)
class BatchByHarvestDate:
	harvest_date: date


@dataclass(frozen=True)
class BatchByFinalTestDate:
	final_test_date: date


@dataclass(frozen=True)
class BatchByPackageDate:
	package_date: date


@dataclass(frozen=True)
class BatchByThcContent(FloatRange):
	pass


@dataclass(frozen=True)
class BatchByCbdContent(FloatRange):
	pass


@dataclass(frozen=True)
class BatchByStrainName:
	name: str


@dataclass(frozen=True)
class BatchByGrowerName:
	name: str


BatchCriterion: TypeAlias = (
	BatchById
	| BatchByStrainId
	| BatchByGrowerId
	| BatchByHarvestDate
	| BatchByFinalTestDate
	| BatchByPackageDate
	| BatchByThcContent
	| BatchByCbdContent
	| BatchByStrainName
	| BatchByGrowerName
)


# ── Terpenes ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TerpenesById:
	id: int


@dataclass(frozen=True)
class TerpenesByBatchId:
	batch_id: int


TerpenesCriterion: TypeAlias = TerpenesById | TerpenesByBatchId
