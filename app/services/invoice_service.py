"""Invoice service: pricing, tenant checks and persistence for invoices."""
from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.settings import Settings, get_settings
from app.core.tenant import (
    CompanyScope,
    TenantMismatchError,
    UserNotFoundError,
    load_company_scope,
)
from app.db.models import Invoice, InvoiceStatus
from app.repositories.business_partner import BusinessPartnerRepository
from app.repositories.invoice import InvoiceRepository
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceFilterParams,
    InvoiceListResponse,
    InvoiceRead,
    Pagination,
)
from app.utils.clock import Clock, as_utc, utcnow

from .exceptions import (
    ForbiddenError,
    NotFoundError,
    PersistenceError,
    UnauthorizedError,
    ValidationError,
)
from .pricing import CENT, compute_invoice_amounts


logger = logging.getLogger(__name__)


class InvoiceService:
    """Sole entry point for creating and reading invoices on behalf of a user."""

    def __init__(
        self,
        session: Session,
        clock: Clock | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.session = session
        self.clock = clock or utcnow
        self.settings = settings or get_settings()
        self.invoices = InvoiceRepository(session)
        self.partners = BusinessPartnerRepository(session)

    def create(self, acting_user_id: int, payload: InvoiceCreate) -> InvoiceRead:
        scope = self._resolve_scope(acting_user_id)
        now = as_utc(self.clock())

        payment_amount = Decimal(str(payload.payment_amount))
        if payment_amount <= 0:
            raise ValidationError("payment amount must be greater than zero")
        if payment_amount != payment_amount.quantize(CENT):
            raise ValidationError("payment amount cannot have more than two decimal places")

        due_date = as_utc(payload.payment_due_date)
        if due_date <= now:
            raise ValidationError("payment due date must be in the future")

        partner = self.partners.get(payload.business_partner_id)
        if partner is None:
            raise NotFoundError("business partner not found")
        try:
            scope.ensure_entity_belongs(partner)
        except TenantMismatchError as exc:
            logger.warning(
                "User %s attempted to invoice partner %s of another company",
                scope.user_id,
                partner.id,
            )
            raise ForbiddenError("business partner does not belong to your company") from exc

        fee_rate = self.settings.fee_rate
        tax_rate = self.settings.consumption_tax_rate
        amounts = compute_invoice_amounts(payment_amount, fee_rate, tax_rate)

        invoice = Invoice(
            company_id=scope.company_id,
            business_partner_id=partner.id,
            issue_date=now,
            payment_amount=payment_amount,
            fee=amounts.fee,
            fee_rate=fee_rate,
            consumption_tax=amounts.consumption_tax,
            consumption_tax_rate=tax_rate,
            invoice_amount=amounts.invoice_amount,
            payment_due_date=due_date,
            status=InvoiceStatus.UNPROCESSED,
        )
        try:
            self.invoices.create(invoice)
            self.session.commit()
        except PersistenceError:
            self.session.rollback()
            logger.exception("Invoice creation failed for company %s", scope.company_id)
            raise
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Invoice commit failed for company %s", scope.company_id)
            raise PersistenceError("failed to create invoice") from exc

        logger.info(
            "Created invoice %s for company %s (amount %s)",
            invoice.id,
            scope.company_id,
            amounts.invoice_amount,
        )
        created = self.invoices.get_with_relations(invoice.id)
        if created is None:
            raise PersistenceError("failed to load created invoice")
        return InvoiceRead.model_validate(created)

    def get(self, acting_user_id: int, invoice_id: int) -> InvoiceRead:
        scope = self._resolve_scope(acting_user_id)
        invoice = self.invoices.get_with_relations(invoice_id)
        if invoice is None:
            raise NotFoundError("invoice not found")
        try:
            scope.ensure_entity_belongs(invoice)
        except TenantMismatchError as exc:
            raise NotFoundError("invoice not found") from exc
        return InvoiceRead.model_validate(invoice)

    def list(
        self,
        acting_user_id: int,
        filters: InvoiceFilterParams | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> InvoiceListResponse:
        scope = self._resolve_scope(acting_user_id)
        pagination = Pagination.normalize(
            page,
            limit,
            default_limit=self.settings.default_page_size,
            max_limit=self.settings.max_page_size,
        )
        rows = self.invoices.list_filtered(scope, filters or InvoiceFilterParams(), pagination)
        return InvoiceListResponse(
            items=[InvoiceRead.model_validate(row) for row in rows],
            page=pagination.page,
            limit=pagination.limit,
        )

    def _resolve_scope(self, acting_user_id: int) -> CompanyScope:
        try:
            return load_company_scope(self.session, acting_user_id)
        except UserNotFoundError as exc:
            raise UnauthorizedError("user not found") from exc
