"""initial_schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 00:00:00.000000

Creates the ``species`` enum type and the growers, strains, batches and
terpenes tables.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ENUM_SPECIES = postgresql.ENUM(
    "Indica", "Sativa", "Hybrid", name="species", create_type=False
)


def upgrade() -> None:
    ENUM_SPECIES.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "growers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "strains",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("species", ENUM_SPECIES, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "batches",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("strain_id", sa.Integer(), nullable=False),
        sa.Column("harvest_date", sa.Date(), nullable=True),
        sa.Column("final_test_date", sa.Date(), nullable=True),
        sa.Column("package_date", sa.Date(), nullable=True),
        sa.Column("grower_id", sa.Integer(), nullable=False),
        sa.Column("thc_content", sa.REAL(), nullable=False),
        sa.Column("cbd_content", sa.REAL(), nullable=False),
        sa.ForeignKeyConstraint(["strain_id"], ["strains.id"]),
        sa.ForeignKeyConstraint(["grower_id"], ["growers.id"]),
        sa.PrimaryKeyConstraint("id"),
    )

    # Every concentration is nullable: labs rarely test all six compounds.
    op.create_table(
        "terpenes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("batch_id", sa.Integer(), nullable=False),
        sa.Column("caryophyllene", sa.REAL(), nullable=True),
        sa.Column("humulene", sa.REAL(), nullable=True),
        sa.Column("limonene", sa.REAL(), nullable=True),
        sa.Column("linalool", sa.REAL(), nullable=True),
        sa.Column("myrcene", sa.REAL(), nullable=True),
        sa.Column("pinene", sa.REAL(), nullable=True),
        sa.ForeignKeyConstraint(["batch_id"], ["batches.id"]),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("terpenes")
    op.drop_table("batches")
    op.drop_table("strains")
    op.drop_table("growers")
    ENUM_SPECIES.drop(op.get_bind(), checkfirst=True)
