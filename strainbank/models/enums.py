"""PostgreSQL-backed enum types for the ORM models.

Each StrEnum maps 1:1 to a PostgreSQL CREATE TYPE ... AS ENUM; the member
names are the stored labels.
"""

from enum import StrEnum


class SpeciesEnum(StrEnum):
    """Closed botanical classification of a strain."""

    Indica = "Indica"
    Sativa = "Sativa"
    Hybrid = "Hybrid"

    def __str__(self) -> str:
        return self.value.lower()

    @classmethod
    def parse(cls, raw: str) -> "SpeciesEnum":
        """Case-insensitive lookup (``"indica"`` → ``SpeciesEnum.Indica``)."""
        for member in cls:
            if member.value.lower() == raw.strip().lower():
                return member
        raise ValueError(f"unknown species {raw!r}; expected one of indica, sativa, hybrid")
