"""Create bancos table

Revision ID: 3c1f0b7e9d24
Revises:
Create Date: 2026-10-19 10:12:40.512730

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f0b7e9d24"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "bancos",
        sa.Column("banco_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=50), nullable=False),
        sa.Column("tasa", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("cat", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("comision", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("plazo_maximo", sa.Integer(), server_default=sa.text("60"), nullable=False),
        sa.Column(
            "monto_maximo",
            sa.Numeric(precision=15, scale=2),
            server_default=sa.text("5000000"),
            nullable=False,
        ),
        sa.Column("activo", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("logo", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("banco_id"),
        sa.CheckConstraint("plazo_maximo > 0", name="ck_bancos_plazo_maximo_positive"),
        sa.CheckConstraint("monto_maximo >= 0", name="ck_bancos_monto_maximo_non_negative"),
        schema="cliquea",
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("bancos", schema="cliquea")
