"""Initial schema for the invoicing domain.

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18
"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None

invoice_status_enum = sa.Enum("unprocessed", "processing", "paid", "error", name="invoice_status")
COMPANY_PK = "company.id"


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    ]


def _contact_columns() -> list[sa.Column]:
    return [
        sa.Column("corporate_name", sa.String(length=255), nullable=False),
        sa.Column("representative", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=20), nullable=False),
        sa.Column("postal_code", sa.String(length=10), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    invoice_status_enum.create(bind, checkfirst=True)

    op.create_table(
        "company",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        *_contact_columns(),
        *_timestamps(),
    )
    op.create_index("ix_company_corporate_name", "company", ["corporate_name"])

    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["company_id"], [COMPANY_PK], ondelete="CASCADE"),
    )
    op.create_index("ix_user_company_id", "user", ["company_id"])

    op.create_table(
        "businesspartner",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        *_contact_columns(),
        *_timestamps(),
        sa.ForeignKeyConstraint(["company_id"], [COMPANY_PK], ondelete="CASCADE"),
    )
    op.create_index("ix_businesspartner_company_id", "businesspartner", ["company_id"])
    op.create_index("ix_businesspartner_corporate_name", "businesspartner", ["corporate_name"])

    op.create_table(
        "invoice",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("business_partner_id", sa.Integer(), nullable=False),
        sa.Column("issue_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("payment_amount", sa.Numeric(15, 2), nullable=False),
        sa.Column("fee", sa.Numeric(18, 6), nullable=False),
        sa.Column("fee_rate", sa.Numeric(5, 4), nullable=False, server_default=sa.text("0.0400")),
        sa.Column("consumption_tax", sa.Numeric(18, 6), nullable=False),
        sa.Column("consumption_tax_rate", sa.Numeric(5, 4), nullable=False, server_default=sa.text("0.1000")),
        sa.Column("invoice_amount", sa.Numeric(15, 2), nullable=False),
        sa.Column("payment_due_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", invoice_status_enum, nullable=False, server_default="unprocessed"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["company_id"], [COMPANY_PK], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["business_partner_id"], ["businesspartner.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_invoice_company_id", "invoice", ["company_id"])
    op.create_index("ix_invoice_business_partner_id", "invoice", ["business_partner_id"])
    op.create_index("ix_invoice_payment_due_date", "invoice", ["payment_due_date"])
    op.create_index("ix_invoice_status", "invoice", ["company_id", "status"])
    op.create_index("ix_invoice_company_due_date", "invoice", ["company_id", "payment_due_date"])


def downgrade() -> None:
    op.drop_table("invoice")
    op.drop_table("businesspartner")
    op.drop_table("user")
    op.drop_table("company")

    bind = op.get_bind()
    invoice_status_enum.drop(bind, checkfirst=True)
