"""Pydantic schemas exposed by the API layer."""
from .company import CompanyRead
from .business_partner import BusinessPartnerCreate, BusinessPartnerRead
from .invoice import (
    InvoiceCreate,
    InvoiceRead,
    InvoiceListResponse,
    InvoiceFilterParams,
    Pagination,
)

__all__ = [
    "CompanyRead",
    "BusinessPartnerCreate",
    "BusinessPartnerRead",
    "InvoiceCreate",
    "InvoiceRead",
    "InvoiceListResponse",
    "InvoiceFilterParams",
    "Pagination",
]
