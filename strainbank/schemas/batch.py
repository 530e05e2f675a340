"""Pydantic drafts, records and the joined view for batches and terpenes.

``BatchBuilder`` and ``TerpenesBuilder`` assemble a draft one field at a
time when the values arrive from several places before a single insert::

    draft = (
        BatchBuilder()
        .strain_id(3)
        .grower_id(3)
        .thc_content(22.9)
        .cbd_content(0.2)
        .build()
    )
"""

from __future__ import annotations

import struct
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def _as_float4(value: float) -> float:
	return struct.unpack("f", struct.pack("f", value))[0]


def single_precision(value: float | None) -> float | None:
	"""Shortest decimal that reads back as the same REAL (float4) value.

	asyncpg decodes a REAL column into a double, so 22.9 comes back as
	22.899999618530273.  Rendering it with the fewest significant digits
	that survive the float4 round trip gives 22.9 again.
	"""
	if value is None:
		return None
	stored = _as_float4(value)
	for digits in range(6, 10):
		candidate = float(f"{stored:.{digits}g}")
		if _as_float4(candidate) == stored:
			return candidate
	return stored


class BatchCreate(BaseModel):
	model_config = ConfigDict(frozen=True)

	strain_id: int
	grower_id: int
	harvest_date: date | None = None
	final_test_date: date | None = None
	package_date: date | None = None
	thc_content: float = Field(ge=0)
	cbd_content: float = Field(ge=0)


class BatchRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	strain_id: int
	grower_id: int
	harvest_date: date | None
	final_test_date: date | None
	package_date: date | None
	thc_content: float
	cbd_content: float

	@field_serializer("thc_content", "cbd_content")
	def serialize_content(self, value: float) -> float | None:
		return single_precision(value)


class BatchResponse(BaseModel):
	"""A batch with strain and grower ids resolved to names.

	Field order mirrors the join's select list and is part of the contract.
	"""

	model_config = ConfigDict(from_attributes=True, frozen=True)

	strain: str
	harvest_date: date | None
	final_test_date: date | None
	package_date: date | None
	grower: str
	thc_content: float
	cbd_content: float

	@field_serializer("thc_content", "cbd_content")
	def serialize_content(self, value: float) -> float | None:
		return single_precision(value)


class TerpenesCreate(BaseModel):
	model_config = ConfigDict(frozen=True)

	batch_id: int
	caryophyllene: float | None = Field(default=None, ge=0)
	humulene: float | None = Field(default=None, ge=0)
	limonene: float | None = Field(default=None, ge=0)
	linalool: float | None = Field(default=None, ge=0)
	myrcene: float | None = Field(default=None, ge=0)
	pinene: float | None = Field(default=None, ge=0)


class TerpenesRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: int
	batch_id: int
	caryophyllene: float | None
	humulene: float | None
	limonene: float | None
	linalool: float | None
	myrcene: float | None
	pinene: float | None

	@field_serializer("caryophyllene", "humulene", "limonene", "linalool", "myrcene", "pinene")
	def serialize_terpene(self, value: float | None) -> float | None:
		return single_precision(value)


class BatchListRead(BaseModel):
	items: list[BatchRead]


class BatchResponseList(BaseModel):
	items: list[BatchResponse]


class TerpenesListRead(BaseModel):
	items: list[TerpenesRead]


class _DraftBuilder:
	_draft_type: type[BaseModel]
	_required: tuple[str, ...] = ()

	def __init__(self) -> None:
		self._fields: dict[str, Any] = {}

	def _set(self, field: str, value: Any) -> Any:
		self._fields[field] = value
		return self

	def build(self) -> Any:
		missing = [name for name in self._required if name not in self._fields]
		if missing:
			raise ValueError(f"{self._draft_type.__name__} is missing {', '.join(missing)}")
		return self._draft_type(**self._fields)


class BatchBuilder(_DraftBuilder):
	_draft_type = BatchCreate
	_required = ("strain_id", "grower_id", "thc_content", "cbd_content")

	def __init__(self, strain_id: int | None = None, grower_id: int | None = None) -> None:
		super().__init__()
		if strain_id is not None:
			self.strain_id(strain_id)
		if grower_id is not None:
			self.grower_id(grower_id)

	def strain_id(self, value: int) -> BatchBuilder:
		return self._set("strain_id", value)

	def grower_id(self, value: int) -> BatchBuilder:
		return self._set("grower_id", value)

	def harvest_date(self, value: date | None) -> BatchBuilder:
		return self._set("harvest_date", value)

	def final_test_date(self, value: date | None) -> BatchBuilder:
		return self._set("final_test_date", value)

	def package_date(self, value: date | None) -> BatchBuilder:
		return self._set("package_date", value)

	def thc_content(self, value: float) -> BatchBuilder:
		return self._set("thc_content", value)

	def cbd_content(self, value: float) -> BatchBuilder:
		return self._set("cbd_content", value)

	def build(self) -> BatchCreate:
		return super().build()


class TerpenesBuilder(_DraftBuilder):
	_draft_type = TerpenesCreate
	_required = ("batch_id",)

	def __init__(self, batch_id: int | None = None) -> None:
		super().__init__()
		if batch_id is not None:
			self.batch_id(batch_id)

	def batch_id(self, value: int) -> TerpenesBuilder:
		return self._set("batch_id", value)

	def caryophyllene(self, value: float | None) -> TerpenesBuilder:
		return self._set("caryophyllene", value)

	def humulene(self, value: float | None) -> TerpenesBuilder:
		return self._set("humulene", value)

	def limonene(self, value: float | None) -> TerpenesBuilder:
		return self._set("limonene", value)

	def linalool(self, value: float | None) -> TerpenesBuilder:
		return self._set("linalool", value)

	def myrcene(self, value: float | None) -> TerpenesBuilder:
		return self._set("myrcene", value)

	def pinene(self, value: float | None) -> TerpenesBuilder:
		return self._set("pinene", value)

	def build(self) -> TerpenesCreate:
		return super().build()
