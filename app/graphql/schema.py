"""Strawberry GraphQL schema definition."""
from __future__ import annotations

from collections.abc import Callable
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from typing import TypeVar

import strawberry
from graphql import GraphQLError
from sqlalchemy.orm import Session
from strawberry.types import Info

from app.db.models import InvoiceStatus
from app.graphql.context import GraphQLContext
from app.schemas.business_partner import BusinessPartnerCreate, BusinessPartnerRead
from app.schemas.company import CompanyRead
from app.schemas.invoice import InvoiceCreate, InvoiceFilterParams, InvoiceListResponse, InvoiceRead
from app.services.business_partner_service import BusinessPartnerService
from app.services.exceptions import ServiceError
from app.services.invoice_service import InvoiceService


ServiceType = TypeVar("ServiceType")
ResultType = TypeVar("ResultType")


InvoiceStatusEnum = strawberry.enum(InvoiceStatus, name="InvoiceStatus")


@contextmanager
def _session_scope(context: GraphQLContext):
    session = context.get_session()
    try:
        yield session
    finally:
        session.close()


def _execute_with_service(
    info: Info[GraphQLContext, None],
    builder: Callable[[Session], ServiceType],
    executor: Callable[[ServiceType, int], ResultType],
) -> ResultType:
    context = info.context
    with _session_scope(context) as session:
        service = builder(session)
        try:
            return executor(service, context.user_id)
        except ServiceError as exc:
            raise GraphQLError(str(exc)) from exc


@strawberry.type
class CompanyType:
    id: strawberry.ID
    corporate_name: str
    representative: str
    phone_number: str
    postal_code: str
    address: str


@strawberry.type
class BusinessPartnerType:
    id: strawberry.ID
    company_id: strawberry.ID
    corporate_name: str
    representative: str
    phone_number: str
    postal_code: str
    address: str
    created_at: datetime


@strawberry.type
class InvoiceType:
    id: strawberry.ID
    company_id: strawberry.ID
    business_partner_id: strawberry.ID
    issue_date: datetime
    payment_amount: Decimal
    fee: Decimal
    fee_rate: Decimal
    consumption_tax: Decimal
    consumption_tax_rate: Decimal
    invoice_amount: Decimal
    payment_due_date: datetime
    status: InvoiceStatusEnum
    created_at: datetime
    company: CompanyType | None
    business_partner: BusinessPartnerType | None


@strawberry.type
class InvoiceListType:
    items: list[InvoiceType]
    page: int
    limit: int


@strawberry.input
class InvoiceCreateInput:
    business_partner_id: strawberry.ID
    payment_amount: Decimal
    payment_due_date: datetime


@strawberry.input
class InvoiceFilterInput:
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: str | None = None


@strawberry.input
class BusinessPartnerCreateInput:
    corporate_name: str
    representative: str
    phone_number: str
    postal_code: str
    address: str


def _to_company_type(company: CompanyRead | None) -> CompanyType | None:
    if company is None:
        return None
    return CompanyType(
        id=strawberry.ID(str(company.id)),
        corporate_name=company.corporate_name,
        representative=company.representative,
        phone_number=company.phone_number,
        postal_code=company.postal_code,
        address=company.address,
    )


def _to_business_partner_type(partner: BusinessPartnerRead | None) -> BusinessPartnerType | None:
    if partner is None:
        return None
    return BusinessPartnerType(
        id=strawberry.ID(str(partner.id)),
        company_id=strawberry.ID(str(partner.company_id)),
        corporate_name=partner.corporate_name,
        representative=partner.representative,
        phone_number=partner.phone_number,
        postal_code=partner.postal_code,
        address=partner.address,
        created_at=partner.created_at,
    )


def _to_invoice_type(invoice: InvoiceRead) -> InvoiceType:
    return InvoiceType(
        id=strawberry.ID(str(invoice.id)),
        company_id=strawberry.ID(str(invoice.company_id)),
        business_partner_id=strawberry.ID(str(invoice.business_partner_id)),
        issue_date=invoice.issue_date,
        payment_amount=invoice.payment_amount,
        fee=invoice.fee,
        fee_rate=invoice.fee_rate,
        consumption_tax=invoice.consumption_tax,
        consumption_tax_rate=invoice.consumption_tax_rate,
        invoice_amount=invoice.invoice_amount,
        payment_due_date=invoice.payment_due_date,
        status=InvoiceStatusEnum(invoice.status),
        created_at=invoice.created_at,
        company=_to_company_type(invoice.company),
        business_partner=_to_business_partner_type(invoice.business_partner),
    )


def _to_invoice_list(response: InvoiceListResponse) -> InvoiceListType:
    return InvoiceListType(
        items=[_to_invoice_type(item) for item in response.items],
        page=response.page,
        limit=response.limit,
    )


def _build_invoice_filters(filters: InvoiceFilterInput | None) -> InvoiceFilterParams:
    if filters is None:
        return InvoiceFilterParams()
    return InvoiceFilterParams(
        start_date=filters.start_date,
        end_date=filters.end_date,
        status=filters.status,
    )


@strawberry.type
class Query:
    """Root GraphQL query type.

    Every field acts for the user named in ``X-User-Id``; liveness is served
    by the REST ``/api/health`` route, which needs no identity.
    """

    @strawberry.field(description="List invoices of the caller's company")
    def invoices(
        self,
        info: Info[GraphQLContext, None],
        filters: InvoiceFilterInput | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> InvoiceListType:
        response = _execute_with_service(
            info,
            InvoiceService,
            lambda service, user_id: service.list(
                user_id, _build_invoice_filters(filters), page=page, limit=limit
            ),
        )
        return _to_invoice_list(response)

    @strawberry.field(description="Fetch a single invoice of the caller's company")
    def invoice(self, info: Info[GraphQLContext, None], invoice_id: strawberry.ID) -> InvoiceType:
        invoice = _execute_with_service(
            info,
            InvoiceService,
            lambda service, user_id: service.get(user_id, int(invoice_id)),
        )
        return _to_invoice_type(invoice)

    @strawberry.field(description="List business partners of the caller's company")
    def business_partners(self, info: Info[GraphQLContext, None]) -> list[BusinessPartnerType]:
        rows = _execute_with_service(
            info,
            BusinessPartnerService,
            lambda service, user_id: service.list(user_id),
        )
        return [_to_business_partner_type(row) for row in rows]


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(description="Create an invoice for the caller's company")
    def create_invoice(self, info: Info[GraphQLContext, None], payload: InvoiceCreateInput) -> InvoiceType:
        request = InvoiceCreate(
            business_partner_id=int(payload.business_partner_id),
            payment_amount=payload.payment_amount,
            payment_due_date=payload.payment_due_date,
        )
        invoice = _execute_with_service(
            info,
            InvoiceService,
            lambda service, user_id: service.create(user_id, request),
        )
        return _to_invoice_type(invoice)

    @strawberry.mutation(description="Register a business partner for the caller's company")
    def create_business_partner(
        self,
        info: Info[GraphQLContext, None],
        payload: BusinessPartnerCreateInput,
    ) -> BusinessPartnerType:
        request = BusinessPartnerCreate(
            corporate_name=payload.corporate_name,
            representative=payload.representative,
            phone_number=payload.phone_number,
            postal_code=payload.postal_code,
            address=payload.address,
        )
        partner = _execute_with_service(
            info,
            BusinessPartnerService,
            lambda service, user_id: service.create(user_id, request),
        )
        return _to_business_partner_type(partner)


schema = strawberry.Schema(query=Query, mutation=Mutation)
