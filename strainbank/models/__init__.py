"""ORM model registry — importing this module registers every table on Base.metadata.

Alembic ``env.py`` imports ``Base`` from here (not from ``base.py``) so that
autogenerate sees all tables.
"""

from strainbank.models.base import Base, SerialPrimaryKeyMixin
from strainbank.models.batch import TERPENE_FIELDS, Batch, Terpenes
from strainbank.models.catalog import Grower, Strain
from strainbank.models.enums import SpeciesEnum

__all__ = [
    "Base",
    "Batch",
    "Grower",
    "SerialPrimaryKeyMixin",
    "SpeciesEnum",
    "Strain",
    "TERPENE_FIELDS",
    "Terpenes",
]
