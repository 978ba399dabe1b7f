"""Pydantic schemas for business partner endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field

from .common import UtcDatetime


class BusinessPartnerCreate(BaseModel):
    """Payload for registering a business partner.

    Phone and postal code formats are checked by the service so that format
    violations surface as service validation errors.
    """

    corporate_name: str = Field(..., min_length=1, max_length=255)
    representative: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(..., min_length=1, max_length=20)
    postal_code: str = Field(..., min_length=1, max_length=10)
    address: str = Field(..., min_length=1)


class BusinessPartnerRead(BaseModel):
    """Business partner representation returned to clients."""

    id: int
    company_id: int
    corporate_name: str
    representative: str
    phone_number: str
    postal_code: str
    address: str
    created_at: UtcDatetime
    updated_at: UtcDatetime

    class Config:
        from_attributes = True
