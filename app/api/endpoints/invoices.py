"""Invoice REST endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_acting_user_id, get_invoice_filters, get_invoice_service
from app.api.errors import map_service_error
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceFilterParams,
    InvoiceListResponse,
    InvoiceRead,
)
from app.services.exceptions import ServiceError
from app.services.invoice_service import InvoiceService

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.post("", response_model=InvoiceRead, status_code=status.HTTP_201_CREATED)
def create_invoice(
    payload: InvoiceCreate,
    user_id: int = Depends(get_acting_user_id),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceRead:
    """Create an invoice for the caller's company."""

    try:
        return service.create(user_id, payload)
    except ServiceError as exc:
        raise map_service_error(exc) from exc


@router.get("", response_model=InvoiceListResponse)
def list_invoices(
    filters: InvoiceFilterParams = Depends(get_invoice_filters),
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
    user_id: int = Depends(get_acting_user_id),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceListResponse:
    """List the caller's invoices, furthest due date first."""

    try:
        return service.list(user_id, filters, page=page, limit=limit)
    except ServiceError as exc:
        raise map_service_error(exc) from exc


@router.get("/{invoice_id}", response_model=InvoiceRead)
def get_invoice(
    invoice_id: int,
    user_id: int = Depends(get_acting_user_id),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceRead:
    """Fetch a single invoice of the caller's company."""

    try:
        return service.get(user_id, invoice_id)
    except ServiceError as exc:
        raise map_service_error(exc) from exc
