"""Repository for business partner entities."""
from __future__ import annotations

from app.db.models import BusinessPartner

from .base import CompanyScopedRepository


class BusinessPartnerRepository(CompanyScopedRepository[BusinessPartner]):
    """Business partner repository with company-scoped helpers.

    ``get`` stays unscoped so callers can tell a missing partner apart from
    one owned by another company.
    """

    model = BusinessPartner
