"""Grower and Strain ORM models, the reference tables batches point at."""

from __future__ import annotations

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from strainbank.models.base import Base, SerialPrimaryKeyMixin
from strainbank.models.enums import SpeciesEnum


class Grower(Base, SerialPrimaryKeyMixin):
    """A licensed cultivator producing batches."""

    __tablename__ = "growers"

    name: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<Grower id={self.id} name={self.name!r}>"


class Strain(Base, SerialPrimaryKeyMixin):
    """A named cultivar; ``species`` is stored as the native ``species`` enum."""

    __tablename__ = "strains"

    name: Mapped[str] = mapped_column(String, nullable=False)
    species: Mapped[SpeciesEnum] = mapped_column(
        Enum(
            SpeciesEnum,
            name="species",
            create_constraint=False,
            native_enum=True,
        ),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Strain id={self.id} name={self.name!r} species={self.species}>"
