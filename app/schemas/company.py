"""Pydantic schemas for company representations."""
from __future__ import annotations

from pydantic import BaseModel

from .common import UtcDatetime


class CompanyRead(BaseModel):
    """Company representation embedded in invoice responses."""

    id: int
    corporate_name: str
    representative: str
    phone_number: str
    postal_code: str
    address: str
    created_at: UtcDatetime
    updated_at: UtcDatetime

    class Config:
        from_attributes = True
