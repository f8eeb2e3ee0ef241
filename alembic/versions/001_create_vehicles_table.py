"""Create vehicles table

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "vehicles",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("plate", sa.String(length=20), nullable=False),
        sa.Column("chassis_code", sa.String(length=32), nullable=False),
        sa.Column("specification", sa.Text(), nullable=True),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("odometer_km", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(precision=14, scale=2), nullable=True),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        # Uniqueness lives in the store so concurrent creates cannot both win
        sa.UniqueConstraint("plate", name="uq_vehicles_plate"),
        sa.UniqueConstraint("chassis_code", name="uq_vehicles_chassis_code"),
    )
    op.create_index(
        op.f("ix_vehicles_created_at"),
        "vehicles",
        ["created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_vehicles_created_at"), table_name="vehicles")
    op.drop_table("vehicles")
