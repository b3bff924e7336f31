# This project was developed with assistance from AI tools.
"""add loan catalog

Revision ID: 3c1f0a7d2b94
Revises:
Create Date: 2026-09-02 10:12:41.503118

"""

import sqlalchemy as sa
from alembic import op

revision = "3c1f0a7d2b94"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "institutions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("logo_url", sa.String(500), nullable=True),
        sa.Column("website", sa.String(500), nullable=True),
        sa.Column("contact_phone", sa.String(50), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("contact_address", sa.Text(), nullable=True),
        sa.Column("types", sa.JSON(), nullable=False),
        sa.Column("review_score", sa.Numeric(2, 1), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_institutions_name", "institutions", ["name"])

    op.create_table(
        "loan_products",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("institution_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("loan_type", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("min_amount", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("max_amount", sa.Numeric(14, 2), nullable=True),
        sa.Column("min_term", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("max_term", sa.Integer(), nullable=True),
        sa.Column("base_rate", sa.Numeric(6, 3), nullable=False),
        sa.Column("variable_rate", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("has_fees", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("min_credit_score", sa.Integer(), nullable=True),
        sa.Column("perks", sa.JSON(), nullable=False),
        sa.Column("requirements", sa.JSON(), nullable=False),
        sa.Column("processing_time", sa.String(100), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        sa.CheckConstraint(
            "max_amount IS NULL OR min_amount <= max_amount", name="ck_loan_products_amount_bounds",
        ),
        sa.CheckConstraint(
            "max_term IS NULL OR min_term <= max_term", name="ck_loan_products_term_bounds",
        ),
        sa.ForeignKeyConstraint(["institution_id"], ["institutions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_loan_products_institution_id", "loan_products", ["institution_id"])
    op.create_index("ix_loan_products_loan_type", "loan_products", ["loan_type"])

    op.create_table(
        "interest_rates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("loan_product_id", sa.Integer(), nullable=False),
        sa.Column(
            "observed_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        sa.Column("rate", sa.Numeric(6, 3), nullable=False),
        sa.Column("term_months", sa.Integer(), nullable=False),
        sa.Column("credit_score_min", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("credit_score_max", sa.Integer(), nullable=False, server_default="850"),
        sa.Column("conditions", sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(["loan_product_id"], ["loan_products.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_interest_rates_product_observed",
        "interest_rates",
        ["loan_product_id", "observed_at"],
    )

    op.create_table(
        "seed_manifest",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "seeded_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        sa.Column("config_hash", sa.String(64), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("seed_manifest")
    op.drop_index("ix_interest_rates_product_observed", table_name="interest_rates")
    op.drop_table("interest_rates")
    op.drop_index("ix_loan_products_loan_type", table_name="loan_products")
    op.drop_index("ix_loan_products_institution_id", table_name="loan_products")
    op.drop_table("loan_products")
    op.drop_index("ix_institutions_name", table_name="institutions")
    op.drop_table("institutions")
