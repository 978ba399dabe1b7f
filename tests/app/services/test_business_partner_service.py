"""Tests for :mod:`app.services.business_partner_service`."""
from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.models import BusinessPartner, User
from app.schemas.business_partner import BusinessPartnerCreate
from app.services.business_partner_service import BusinessPartnerService
from app.services.exceptions import PersistenceError, UnauthorizedError, ValidationError


def _payload(**overrides: str) -> BusinessPartnerCreate:
    data = {
        "corporate_name": "Supplier B LLC",
        "representative": "Jiro Tanaka",
        "phone_number": "06-2345-6789",
        "postal_code": "530-0001",
        "address": "Osaka, Kita-ku Umeda 2-2-2",
    }
    data.update(overrides)
    return BusinessPartnerCreate(**data)


def test_create_assigns_acting_users_company(session: Session, user: User) -> None:
    service = BusinessPartnerService(session)

    result = service.create(user.id, _payload())

    assert result.id is not None
    assert result.company_id == user.company_id
    assert result.corporate_name == "Supplier B LLC"
    assert result.created_at.tzinfo is not None
    assert session.get(BusinessPartner, result.id) is not None


@pytest.mark.parametrize("phone", ["090-1234-5678", "03-1234-5678", "0120-12-3456"])
def test_create_accepts_domestic_phone_layouts(session: Session, user: User, phone: str) -> None:
    result = BusinessPartnerService(session).create(user.id, _payload(phone_number=phone))

    assert result.phone_number == phone


@pytest.mark.parametrize("phone", ["3-1234-5678", "03-1234-567", "0312345678", "+81-3-1234-5678"])
def test_create_rejects_malformed_phone(session: Session, user: User, phone: str) -> None:
    with pytest.raises(ValidationError, match="phone number"):
        BusinessPartnerService(session).create(user.id, _payload(phone_number=phone))


@pytest.mark.parametrize("postal", ["1000001", "10-00001", "100-001", "100-00011"])
def test_create_rejects_malformed_postal_code(session: Session, user: User, postal: str) -> None:
    with pytest.raises(ValidationError, match="postal code"):
        BusinessPartnerService(session).create(user.id, _payload(postal_code=postal))


def test_create_requires_known_user(session: Session) -> None:
    with pytest.raises(UnauthorizedError):
        BusinessPartnerService(session).create(999, _payload())


def test_create_wraps_commit_failure(
    session: Session,
    user: User,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def failing_commit() -> None:
        raise IntegrityError("INSERT", {}, Exception("constraint failed"))

    monkeypatch.setattr(session, "commit", failing_commit)

    with pytest.raises(PersistenceError):
        BusinessPartnerService(session).create(user.id, _payload())


def test_list_is_company_scoped(
    session: Session,
    user: User,
    other_user: User,
    partner: BusinessPartner,
    other_partner: BusinessPartner,
) -> None:
    service = BusinessPartnerService(session)
    created = service.create(user.id, _payload())

    own = service.list(user.id)
    foreign = service.list(other_user.id)

    assert [item.id for item in own] == [partner.id, created.id]
    assert [item.id for item in foreign] == [other_partner.id]
