"""SQLAlchemy table definitions for property management.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Float,
    ForeignKey,
    Identity,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# AGREEMENTS TABLE
# ============================================================================
agreements_table = Table(
    "agreements",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("tenant_name", String(100), nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=True),
    Column("monthly_rent", Numeric(12, 2), nullable=False),
    CheckConstraint(
        "end_date IS NULL OR end_date >= start_date", name="ck_agreements_period"
    ),
)

# ============================================================================
# APARTMENTS TABLE
# ============================================================================
apartments_table = Table(
    "apartments",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("address", String(255), nullable=True),
    Column("rooms", Integer, nullable=True),
    Column("area", Float, nullable=True),  # Square metres
    # One-to-one: an agreement lets at most one apartment
    Column(
        "agreement_id",
        BigInteger,
        ForeignKey("agreements.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    ),
)

# ============================================================================
# DEPOSITS TABLE
# ============================================================================
deposits_table = Table(
    "deposits",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("paid_on", Date, nullable=True),
    Column("refunded", Boolean, nullable=False, server_default="false"),
    Column(
        "agreement_id",
        BigInteger,
        ForeignKey("agreements.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    ),
)
