"""Batch and Terpenes ORM models.

A batch is one harvest of a strain by a grower.  The three lifecycle dates
are nullable because a batch is recorded before it is harvested, lab tested
and packaged.  A terpene profile is sparse: labs rarely test every compound,
so each concentration column is independently nullable.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import REAL, Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from strainbank.models.base import Base, SerialPrimaryKeyMixin

TERPENE_FIELDS: tuple[str, ...] = (
    "caryophyllene",
    "humulene",
    "limonene",
    "linalool",
    "myrcene",
    "pinene",
)


class Batch(Base, SerialPrimaryKeyMixin):
    __tablename__ = "batches"

    strain_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("strains.id"),
        nullable=False,
    )
    harvest_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    final_test_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    package_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    grower_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("growers.id"),
        nullable=False,
    )
    thc_content: Mapped[float] = mapped_column(REAL, nullable=False)
    cbd_content: Mapped[float] = mapped_column(REAL, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Batch id={self.id} strain={self.strain_id} "
            f"grower={self.grower_id} thc={self.thc_content}>"
        )


class Terpenes(Base, SerialPrimaryKeyMixin):
    __tablename__ = "terpenes"

    batch_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("batches.id"),
        nullable=False,
    )
    caryophyllene: Mapped[float | None] = mapped_column(REAL, nullable=True)
    humulene: Mapped[float | None] = mapped_column(REAL, nullable=True)
    limonene: Mapped[float | None] = mapped_column(REAL, nullable=True)
    linalool: Mapped[float | None] = mapped_column(REAL, nullable=True)
    myrcene: Mapped[float | None] = mapped_column(REAL, nullable=True)
    pinene: Mapped[float | None] = mapped_column(REAL, nullable=True)

    def __repr__(self) -> str:
        return f"<Terpenes id={self.id} batch={self.batch_id}>"
