"""Business partner service handling registration and listing."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.tenant import CompanyScope, UserNotFoundError, load_company_scope
from app.repositories.business_partner import BusinessPartnerRepository
from app.schemas.business_partner import BusinessPartnerCreate, BusinessPartnerRead
from app.utils.validation import is_valid_phone_number, is_valid_postal_code

from .exceptions import PersistenceError, UnauthorizedError, ValidationError


logger = logging.getLogger(__name__)


class BusinessPartnerService:
    """Company-scoped business partner operations."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.partners = BusinessPartnerRepository(session)

    def create(self, acting_user_id: int, payload: BusinessPartnerCreate) -> BusinessPartnerRead:
        scope = self._resolve_scope(acting_user_id)
        if not is_valid_phone_number(payload.phone_number):
            raise ValidationError("invalid phone number format. Expected format: XXX-XXXX-XXXX")
        if not is_valid_postal_code(payload.postal_code):
            raise ValidationError("invalid postal code format. Expected format: XXX-XXXX")

        partner = self.partners.model(
            company_id=scope.company_id,
            corporate_name=payload.corporate_name,
            representative=payload.representative,
            phone_number=payload.phone_number,
            postal_code=payload.postal_code,
            address=payload.address,
        )
        self.partners.add(partner)
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Business partner creation failed for company %s", scope.company_id)
            raise PersistenceError("failed to create business partner") from exc
        self.session.refresh(partner)
        return BusinessPartnerRead.model_validate(partner)

    def list(self, acting_user_id: int) -> list[BusinessPartnerRead]:
        scope = self._resolve_scope(acting_user_id)
        rows = self.partners.list_for_company(scope)
        return [BusinessPartnerRead.model_validate(row) for row in rows]

    def _resolve_scope(self, acting_user_id: int) -> CompanyScope:
        try:
            return load_company_scope(self.session, acting_user_id)
        except UserNotFoundError as exc:
            raise UnauthorizedError("user not found") from exc
