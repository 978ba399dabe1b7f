"""Unit tests for repository abstractions."""
from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.tenant import CompanyScope
from app.db.models import Company
from app.repositories.business_partner import BusinessPartnerRepository


def test_add_and_get_by_primary_key(session: Session, company: Company, partner_factory) -> None:
    repo = BusinessPartnerRepository(session)

    alpha = repo.add(partner_factory(company, "Alpha Trading"))
    session.commit()

    fetched = repo.get(alpha.id)
    assert fetched is not None
    assert fetched.corporate_name == "Alpha Trading"
    assert repo.get(9999) is None


def test_company_scoped_repository_filters_by_company(
    session: Session,
    company: Company,
    other_company: Company,
    partner_factory,
) -> None:
    repo = BusinessPartnerRepository(session)
    own_a = repo.add(partner_factory(company, "Own A"))
    own_b = repo.add(partner_factory(company, "Own B"))
    foreign = repo.add(partner_factory(other_company, "Foreign"))
    session.commit()

    scope = CompanyScope(company_id=company.id, user_id=1)

    assert [partner.id for partner in repo.list_for_company(scope)] == [own_a.id, own_b.id]
    assert [partner.id for partner in repo.list_for_company(scope, offset=1)] == [own_b.id]
    assert [partner.id for partner in repo.list_for_company(scope, limit=1)] == [own_a.id]
    assert repo.get_for_company(scope, own_a.id) is not None
    assert repo.get_for_company(scope, foreign.id) is None
