"""End-to-end REST flow against an in-memory database."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from app.db.models import BusinessPartner, User


def _headers(user: User) -> dict[str, str]:
    return {"X-User-Id": str(user.id)}


def _future(days: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


def test_partner_and_invoice_lifecycle(client: TestClient, user: User) -> None:
    partner_response = client.post(
        "/api/business-partners",
        json={
            "corporate_name": "Supplier B LLC",
            "representative": "Jiro Tanaka",
            "phone_number": "06-2345-6789",
            "postal_code": "530-0001",
            "address": "Osaka, Kita-ku Umeda 2-2-2",
        },
        headers=_headers(user),
    )
    assert partner_response.status_code == 201
    partner_id = partner_response.json()["id"]

    created = client.post(
        "/api/invoices",
        json={"business_partner_id": partner_id, "payment_amount": "10000", "payment_due_date": _future(30)},
        headers=_headers(user),
    )
    assert created.status_code == 201
    invoice = created.json()
    assert invoice["fee"] == "400.00"
    assert invoice["consumption_tax"] == "40.00"
    assert invoice["invoice_amount"] == "10440.00"
    assert invoice["status"] == "unprocessed"
    assert invoice["business_partner"]["corporate_name"] == "Supplier B LLC"

    fetched = client.get(f"/api/invoices/{invoice['id']}", headers=_headers(user))
    assert fetched.status_code == 200
    assert fetched.json()["invoice_amount"] == "10440.00"

    listing = client.get("/api/invoices", headers=_headers(user))
    assert listing.status_code == 200
    assert [item["id"] for item in listing.json()["items"]] == [invoice["id"]]


def test_cross_company_access_is_hidden(
    client: TestClient,
    user: User,
    other_user: User,
    partner: BusinessPartner,
    other_partner: BusinessPartner,
) -> None:
    created = client.post(
        "/api/invoices",
        json={"business_partner_id": partner.id, "payment_amount": "500", "payment_due_date": _future(10)},
        headers=_headers(user),
    )
    assert created.status_code == 201

    foreign_read = client.get(f"/api/invoices/{created.json()['id']}", headers=_headers(other_user))
    foreign_partner = client.post(
        "/api/invoices",
        json={"business_partner_id": other_partner.id, "payment_amount": "500", "payment_due_date": _future(10)},
        headers=_headers(user),
    )
    foreign_list = client.get("/api/invoices", headers=_headers(other_user))

    assert foreign_read.status_code == 404
    assert foreign_partner.status_code == 404
    assert foreign_list.json()["items"] == []


def test_business_rules_surface_as_bad_request(client: TestClient, user: User, partner: BusinessPartner) -> None:
    zero_amount = client.post(
        "/api/invoices",
        json={"business_partner_id": partner.id, "payment_amount": "0", "payment_due_date": _future(10)},
        headers=_headers(user),
    )
    past_due = client.post(
        "/api/invoices",
        json={"business_partner_id": partner.id, "payment_amount": "100", "payment_due_date": _future(-1)},
        headers=_headers(user),
    )
    bad_phone = client.post(
        "/api/business-partners",
        json={
            "corporate_name": "Broken Co.",
            "representative": "Nobody",
            "phone_number": "12345",
            "postal_code": "530-0001",
            "address": "Nowhere",
        },
        headers=_headers(user),
    )

    assert zero_amount.status_code == 400
    assert past_due.status_code == 400
    assert bad_phone.status_code == 400


def test_unknown_user_is_unauthorized(client: TestClient) -> None:
    response = client.get("/api/invoices", headers={"X-User-Id": "999"})

    assert response.status_code == 401


def test_list_clamps_limit(client: TestClient, user: User) -> None:
    response = client.get("/api/invoices", params={"limit": 500}, headers=_headers(user))

    assert response.status_code == 200
    assert response.json()["limit"] == 100
    assert response.json()["page"] == 1


def test_sub_cent_amount_is_rejected_without_storing(client: TestClient, user: User, partner: BusinessPartner) -> None:
    response = client.post(
        "/api/invoices",
        json={"business_partner_id": partner.id, "payment_amount": "0.001", "payment_due_date": _future(5)},
        headers=_headers(user),
    )

    assert response.status_code == 400
    assert "two decimal places" in response.json()["detail"]
    assert client.get("/api/invoices", headers=_headers(user)).json()["items"] == []
