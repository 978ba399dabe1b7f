"""Business partner REST endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_acting_user_id, get_business_partner_service
from app.api.errors import map_service_error
from app.schemas.business_partner import BusinessPartnerCreate, BusinessPartnerRead
from app.services.business_partner_service import BusinessPartnerService
from app.services.exceptions import ServiceError

router = APIRouter(prefix="/business-partners", tags=["business-partners"])


@router.post("", response_model=BusinessPartnerRead, status_code=status.HTTP_201_CREATED)
def create_business_partner(
    payload: BusinessPartnerCreate,
    user_id: int = Depends(get_acting_user_id),
    service: BusinessPartnerService = Depends(get_business_partner_service),
) -> BusinessPartnerRead:
    """Register a business partner for the caller's company."""

    try:
        return service.create(user_id, payload)
    except ServiceError as exc:
        raise map_service_error(exc) from exc


@router.get("", response_model=list[BusinessPartnerRead])
def list_business_partners(
    user_id: int = Depends(get_acting_user_id),
    service: BusinessPartnerService = Depends(get_business_partner_service),
) -> list[BusinessPartnerRead]:
    """List business partners of the caller's company."""

    try:
        return service.list(user_id)
    except ServiceError as exc:
        raise map_service_error(exc) from exc
