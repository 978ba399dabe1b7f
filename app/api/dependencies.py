"""FastAPI dependency utilities for company-scoped access."""
from __future__ import annotations

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db_session
from app.schemas.invoice import InvoiceFilterParams
from app.services.business_partner_service import BusinessPartnerService
from app.services.invoice_service import InvoiceService

USER_ID_HEADER = "X-User-Id"


def parse_user_id(raw_value: str | None) -> int:
    """Validate the authenticated user identifier forwarded by the gateway."""

    if not raw_value:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {USER_ID_HEADER} header",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        user_id = int(raw_value)
    except ValueError:
        user_id = 0
    if user_id < 1:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid {USER_ID_HEADER} header",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


def get_acting_user_id(x_user_id: str | None = Header(default=None, alias=USER_ID_HEADER)) -> int:
    """Resolve the acting user id for the request."""

    return parse_user_id(x_user_id)


def get_invoice_service(session: Session = Depends(get_db_session)) -> InvoiceService:
    """Provide invoice service with database session."""

    return InvoiceService(session)


def get_business_partner_service(session: Session = Depends(get_db_session)) -> BusinessPartnerService:
    """Provide business partner service with database session."""

    return BusinessPartnerService(session)


def get_invoice_filters(params: InvoiceFilterParams = Depends()) -> InvoiceFilterParams:
    """Expose invoice filters via dependency injection."""

    return params
