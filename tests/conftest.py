"""Shared pytest fixtures for invoicing API tests."""
from __future__ import annotations

from collections.abc import Generator
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.router import router as api_router
from app.core.database import build_engine, get_db_session
from app.db.base import Base
from app.db.models import BusinessPartner, Company, User

FIXED_NOW = datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc)


def make_company(name: str) -> Company:
    return Company(
        corporate_name=name,
        representative="Taro Yamada",
        phone_number="03-1234-5678",
        postal_code="100-0001",
        address="Tokyo, Chiyoda-ku 1-1-1",
    )


def make_partner(company: Company, name: str) -> BusinessPartner:
    return BusinessPartner(
        company_id=company.id,
        corporate_name=name,
        representative="Hanako Suzuki",
        phone_number="03-1111-2222",
        postal_code="101-0001",
        address="Tokyo, Chiyoda-ku Marunouchi 1-1-1",
    )


@pytest.fixture()
def engine() -> Generator:
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session(engine) -> Generator[Session, None, None]:
    SessionLocal = sessionmaker(bind=engine, class_=Session, autoflush=False, autocommit=False)
    db_session = SessionLocal()
    try:
        yield db_session
    finally:
        db_session.close()


@pytest.fixture()
def company(session: Session) -> Company:
    company = make_company("Tech Solutions Inc.")
    session.add(company)
    session.commit()
    session.refresh(company)
    return company


@pytest.fixture()
def other_company(session: Session) -> Company:
    company = make_company("Digital Services Corp.")
    session.add(company)
    session.commit()
    session.refresh(company)
    return company


@pytest.fixture()
def user(session: Session, company: Company) -> User:
    user = User(
        company_id=company.id,
        full_name="Alice Johnson",
        email="alice@techsolutions.example",
        password_hash="opaque-hash",
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture()
def other_user(session: Session, other_company: Company) -> User:
    user = User(
        company_id=other_company.id,
        full_name="Bob Wilson",
        email="bob@digitalservices.example",
        password_hash="opaque-hash",
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture()
def partner(session: Session, company: Company) -> BusinessPartner:
    partner = make_partner(company, "Supplier A Ltd.")
    session.add(partner)
    session.commit()
    session.refresh(partner)
    return partner


@pytest.fixture()
def other_partner(session: Session, other_company: Company) -> BusinessPartner:
    partner = make_partner(other_company, "Partner C Inc.")
    session.add(partner)
    session.commit()
    session.refresh(partner)
    return partner


@pytest.fixture()
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture()
def due_date() -> datetime:
    return FIXED_NOW + timedelta(days=30)


@pytest.fixture()
def client(session: Session) -> Generator[TestClient, None, None]:
    application = FastAPI()
    application.include_router(api_router, prefix="/api")

    def override_get_db_session() -> Generator[Session, None, None]:
        try:
            yield session
        finally:
            session.rollback()

    application.dependency_overrides[get_db_session] = override_get_db_session

    with TestClient(application) as test_client:
        yield test_client

    application.dependency_overrides.clear()


@pytest.fixture()
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def partner_factory():
    return make_partner
