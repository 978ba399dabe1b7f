"""ORM model definitions for the invoicing backend."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import DateTime, Enum as SQLEnum, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

DELETE_CASCADE = "all, delete-orphan"

COMPANY_FK = "company.id"

# Principal and total are stored to the cent; derived fee and tax keep the
# full precision produced by the fixed rates.
MONEY = Numeric(15, 2)
DERIVED_MONEY = Numeric(18, 6)
RATE = Numeric(5, 4)


class InvoiceStatus(str, Enum):
    """Lifecycle state for invoices."""

    UNPROCESSED = "unprocessed"
    PROCESSING = "processing"
    PAID = "paid"
    ERROR = "error"


class Company(Base, TimestampMixin):
    """Company is the tenant root owning users, partners and invoices."""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    corporate_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    representative: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(10), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)

    users: Mapped[list["User"]] = relationship("User", back_populates="company", cascade=DELETE_CASCADE)
    business_partners: Mapped[list["BusinessPartner"]] = relationship(
        "BusinessPartner", back_populates="company", cascade=DELETE_CASCADE
    )
    invoices: Mapped[list["Invoice"]] = relationship("Invoice", back_populates="company", cascade=DELETE_CASCADE)


class CompanyScopedMixin(TimestampMixin):
    """Mixin for entities owned by exactly one company."""

    company_id: Mapped[int] = mapped_column(ForeignKey(COMPANY_FK, ondelete="cascade"), nullable=False, index=True)


class User(CompanyScopedMixin, Base):
    """User acting on behalf of a company."""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    company: Mapped[Company] = relationship("Company", back_populates="users")


class BusinessPartner(CompanyScopedMixin, Base):
    """Counterparty invoiced by a company."""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    corporate_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    representative: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(10), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)

    company: Mapped[Company] = relationship("Company", back_populates="business_partners")
    invoices: Mapped[list["Invoice"]] = relationship(
        "Invoice", back_populates="business_partner", cascade="all, delete"
    )


class Invoice(CompanyScopedMixin, Base):
    """Invoice issued by a company to one of its business partners."""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    business_partner_id: Mapped[int] = mapped_column(
        ForeignKey("businesspartner.id", ondelete="cascade"), nullable=False, index=True
    )
    issue_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    payment_amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    fee: Mapped[Decimal] = mapped_column(DERIVED_MONEY, nullable=False)
    fee_rate: Mapped[Decimal] = mapped_column(RATE, nullable=False)
    consumption_tax: Mapped[Decimal] = mapped_column(DERIVED_MONEY, nullable=False)
    consumption_tax_rate: Mapped[Decimal] = mapped_column(RATE, nullable=False)
    invoice_amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    payment_due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    status: Mapped[InvoiceStatus] = mapped_column(
        SQLEnum(InvoiceStatus, name="invoice_status", values_callable=lambda enum: [item.value for item in enum]),
        default=InvoiceStatus.UNPROCESSED,
        nullable=False,
    )

    company: Mapped[Company] = relationship("Company", back_populates="invoices")
    business_partner: Mapped[BusinessPartner] = relationship("BusinessPartner", back_populates="invoices")

    __table_args__ = (
        Index("ix_invoice_status", "company_id", "status"),
        Index("ix_invoice_company_due_date", "company_id", "payment_due_date"),
    )


__all__ = [
    "Company",
    "User",
    "BusinessPartner",
    "Invoice",
    "InvoiceStatus",
]
