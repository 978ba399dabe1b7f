"""Invoice repository handling company-scoped queries."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, false, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from app.core.tenant import CompanyScope
from app.db.models import Invoice, InvoiceStatus
from app.schemas.invoice import InvoiceFilterParams, Pagination
from app.services.exceptions import PersistenceError
from app.utils.clock import as_utc

from .base import CompanyScopedRepository


class InvoiceRepository(CompanyScopedRepository[Invoice]):
    """Invoice repository with filtering helpers."""

    model = Invoice

    def create(self, invoice: Invoice) -> Invoice:
        """Stage and flush ``invoice`` so its identifier and timestamps are assigned."""

        self.session.add(invoice)
        try:
            self.session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError("failed to create invoice") from exc
        return invoice

    def get_with_relations(self, invoice_id: int) -> Invoice | None:
        statement = self._joined_query().where(self.model.id == invoice_id)
        return self.session.scalar(statement)

    def build_filter_query(
        self,
        scope: CompanyScope,
        filters: InvoiceFilterParams | None = None,
        pagination: Pagination | None = None,
    ) -> Select[tuple[Invoice]]:
        statement = self._joined_query().where(self.model.company_id == scope.company_id)
        if filters is not None:
            if filters.start_date is not None:
                statement = statement.where(self.model.payment_due_date >= as_utc(filters.start_date))
            if filters.end_date is not None:
                statement = statement.where(self.model.payment_due_date <= as_utc(filters.end_date))
            if filters.status is not None:
                status = _coerce_status(filters.status)
                if status is None:
                    statement = statement.where(false())
                else:
                    statement = statement.where(self.model.status == status)

        statement = statement.order_by(self.model.payment_due_date.desc(), self.model.id.asc())

        if pagination is not None and pagination.limit > 0:
            statement = statement.limit(pagination.limit).offset(pagination.offset)
        return statement

    def list_filtered(
        self,
        scope: CompanyScope,
        filters: InvoiceFilterParams | None = None,
        pagination: Pagination | None = None,
    ) -> Sequence[Invoice]:
        statement = self.build_filter_query(scope, filters, pagination)
        return self.session.scalars(statement).unique().all()

    def update_status(self, scope: CompanyScope, invoice_id: int, status: InvoiceStatus) -> Invoice | None:
        invoice = self.get_for_company(scope, invoice_id)
        if invoice is None:
            return None
        invoice.status = status
        try:
            self.session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError("failed to update invoice status") from exc
        return invoice

    def _joined_query(self) -> Select[tuple[Invoice]]:
        return self._base_query().options(
            joinedload(self.model.company),
            joinedload(self.model.business_partner),
        )


def _coerce_status(value: str | InvoiceStatus) -> InvoiceStatus | None:
    try:
        return InvoiceStatus(value)
    except ValueError:
        return None
