"""Pydantic schemas for invoice endpoints."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer

from app.db.models import InvoiceStatus

from .business_partner import BusinessPartnerRead
from .common import UtcDatetime, format_money
from .company import CompanyRead

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class InvoiceCreate(BaseModel):
    """Payload for creating invoices.

    Amount positivity and the due date are business rules enforced by the
    invoice service, not by schema validation.
    """

    business_partner_id: int
    payment_amount: Decimal
    payment_due_date: datetime


class InvoiceRead(BaseModel):
    """Invoice representation returned to clients."""

    id: int
    company_id: int
    business_partner_id: int
    issue_date: UtcDatetime
    payment_amount: Decimal
    fee: Decimal
    fee_rate: Decimal
    consumption_tax: Decimal
    consumption_tax_rate: Decimal
    invoice_amount: Decimal
    payment_due_date: UtcDatetime
    status: InvoiceStatus
    created_at: UtcDatetime
    updated_at: UtcDatetime
    company: CompanyRead | None = None
    business_partner: BusinessPartnerRead | None = None

    class Config:
        from_attributes = True

    @field_serializer(
        "payment_amount",
        "fee",
        "fee_rate",
        "consumption_tax",
        "consumption_tax_rate",
        "invoice_amount",
        when_used="json",
    )
    def serialize_money(self, value: Decimal) -> str:
        return format_money(value)


class InvoiceFilterParams(BaseModel):
    """Query parameters for invoice listing.

    ``status`` stays a free string: values outside :class:`InvoiceStatus`
    match nothing instead of being rejected.
    """

    start_date: datetime | None = None
    end_date: datetime | None = None
    status: str | None = None


class Pagination(BaseModel):
    """Page/limit pair applied to invoice listings."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def normalize(
        cls,
        page: int | None,
        limit: int | None,
        default_limit: int = DEFAULT_PAGE_SIZE,
        max_limit: int = MAX_PAGE_SIZE,
    ) -> "Pagination":
        """Apply defaults to missing or non-positive values and clamp the limit."""

        if page is None or page < 1:
            page = DEFAULT_PAGE
        if limit is None or limit < 1:
            limit = default_limit
        if limit > max_limit:
            limit = max_limit
        return cls(page=page, limit=limit)


class InvoiceListResponse(BaseModel):
    """Paginated invoice list."""

    items: list[InvoiceRead]
    page: int = Field(ge=1)
    limit: int
