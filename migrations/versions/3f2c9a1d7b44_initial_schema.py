"""initial_schema

Create the property management schema:
- Agreements (rental agreements with a tenant)
- Apartments (optionally let under one agreement)
- Deposits (optionally tied to one agreement)

Revision ID: 3f2c9a1d7b44
Revises:
Create Date: 2026-10-19 09:12:40.512731

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2c9a1d7b44"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # AGREEMENTS table
    # ========================================================================
    op.create_table(
        "agreements",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("tenant_name", sa.String(100), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("monthly_rent", sa.Numeric(12, 2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "end_date IS NULL OR end_date >= start_date",
            name="ck_agreements_period",
        ),
    )

    # ========================================================================
    # APARTMENTS table
    # ========================================================================
    op.create_table(
        "apartments",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("rooms", sa.Integer(), nullable=True),
        sa.Column("area", sa.Float(), nullable=True),
        sa.Column("agreement_id", sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["agreement_id"], ["agreements.id"], ondelete="SET NULL"
        ),
        sa.UniqueConstraint("agreement_id", name="uq_apartments_agreement_id"),
    )

    # ========================================================================
    # DEPOSITS table
    # ========================================================================
    op.create_table(
        "deposits",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("paid_on", sa.Date(), nullable=True),
        sa.Column(
            "refunded", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("agreement_id", sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["agreement_id"], ["agreements.id"], ondelete="SET NULL"
        ),
        sa.UniqueConstraint("agreement_id", name="uq_deposits_agreement_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("deposits")
    op.drop_table("apartments")
    op.drop_table("agreements")
