"""Generic create/delete/retrieve contracts shared by every entity service."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel
from sqlalchemy import ColumnElement, Select, and_, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from strainbank.exceptions import NotFoundError, PersistenceError
from strainbank.models.base import Base
from strainbank.services.criteria import FloatRange

ModelT = TypeVar("ModelT", bound=Base)
DraftT = TypeVar("DraftT", bound=BaseModel)
CriterionT = TypeVar("CriterionT")

RecordT = TypeVar("RecordT")
RecordT_co = TypeVar("RecordT_co", covariant=True)
DraftT_contra = TypeVar("DraftT_contra", contravariant=True)
CriterionT_contra = TypeVar("CriterionT_contra", contravariant=True)

Clause = Callable[[Any], ColumnElement[bool]]

LIKE_ESCAPE = "\\"


@runtime_checkable
class Creatable(Protocol[DraftT_contra, RecordT_co]):
	async def create(self, draft: DraftT_contra) -> RecordT_co: ...


@runtime_checkable
class Deletable(Protocol[RecordT]):
	async def delete(self, record: RecordT) -> RecordT: ...


@runtime_checkable
class Retrievable(Protocol[CriterionT_contra, RecordT_co]):
	async def all(self) -> Sequence[RecordT_co]: ...

	async def filter(self, criterion: CriterionT_contra) -> Sequence[RecordT_co]: ...


# ── Criterion → clause builders ─────────────────────────────────────────────


def substring_pattern(value: str) -> str:
	"""Wrap ``value`` in ``%`` wildcards with LIKE metacharacters escaped."""
	escaped = (
		value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
		.replace("%", LIKE_ESCAPE + "%")
		.replace("_", LIKE_ESCAPE + "_")
	)
	return f"%{escaped}%"


def equals(column: InstrumentedAttribute[Any], field: str) -> Clause:
	return lambda criterion: column == getattr(criterion, field)


def contains(column: InstrumentedAttribute[Any], field: str = "name") -> Clause:
	"""Case-insensitive substring match (``ILIKE '%value%'``)."""
	return lambda criterion: column.ilike(
		substring_pattern(getattr(criterion, field)),
		escape=LIKE_ESCAPE,
	)


def within(column: InstrumentedAttribute[Any]) -> Clause:
	def clause(criterion: FloatRange) -> ColumnElement[bool]:
		bounds: list[ColumnElement[bool]] = []
		if criterion.minimum is not None:
			bounds.append(column >= criterion.minimum)
		if criterion.maximum is not None:
			bounds.append(column <= criterion.maximum)
		return and_(*bounds)

	return clause


# ── Generic service ─────────────────────────────────────────────────────────


class EntityService(Generic[ModelT, DraftT, CriterionT]):
	"""Create, delete and retrieve rows of one table.

	Subclasses set ``model``, ``entity_name`` and ``_filters`` (criterion type
	→ clause builder).  Every public call is one store round trip; store
	failures surface as ``PersistenceError`` and are never retried.
	"""

	model: ClassVar[type[Base]]
	entity_name: ClassVar[str]
	_filters: ClassVar[dict[type, Clause]] = {}

	def __init__(self, db: AsyncSession):
		self.db = db

	async def create(self, draft: DraftT) -> ModelT:
		record = self.model(**draft.model_dump())
		self.db.add(record)
		try:
			await self.db.flush()
			await self.db.refresh(record)
		except SQLAlchemyError as exc:
			raise PersistenceError(
				f"could not create {self.entity_name}: {exc}",
				details={"entity": self.entity_name},
			) from exc
		return record  # type: ignore[return-value]

	async def delete(self, record: ModelT) -> ModelT:
		return await self.delete_by_id(record.id)  # type: ignore[attr-defined]

	async def delete_by_id(self, entity_id: int) -> ModelT:
		stmt = (
			delete(self.model)
			.where(self.model.id == entity_id)  # type: ignore[attr-defined]
			.returning(self.model)
		)
		rows = await self._execute(stmt)
		deleted = rows.scalar_one_or_none()
		if deleted is None:
			raise NotFoundError(self.entity_name, entity_id)
		return deleted

	async def get(self, entity_id: int) -> ModelT:
		stmt = select(self.model).where(self.model.id == entity_id)  # type: ignore[attr-defined]
		rows = await self._execute(stmt)
		record = rows.scalar_one_or_none()
		if record is None:
			raise NotFoundError(self.entity_name, entity_id)
		return record

	async def all(self) -> list[ModelT]:
		rows = await self._execute(self._ordered(select(self.model)))
		return list(rows.scalars().all())

	async def filter(self, criterion: CriterionT) -> list[ModelT]:
		clause = self.where_clause(criterion)
		if clause is None:
			return await self.all()
		rows = await self._execute(self._ordered(select(self.model).where(clause)))
		return list(rows.scalars().all())

	def where_clause(self, criterion: CriterionT) -> ColumnElement[bool] | None:
		"""Clause for ``criterion``; ``None`` when this entity has no mapping."""
		build = self._filters.get(type(criterion))
		return None if build is None else build(criterion)

	def _ordered(self, stmt: Select[Any]) -> Select[Any]:
		return stmt.order_by(self.model.id)  # type: ignore[attr-defined]

	async def _execute(self, stmt: Any) -> Any:
		try:
			return await self.db.execute(stmt)
		except SQLAlchemyError as exc:
			raise PersistenceError(
				f"{self.entity_name} query failed: {exc}",
				details={"entity": self.entity_name},
			) from exc
