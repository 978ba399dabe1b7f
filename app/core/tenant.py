"""Company scope utilities and multi-tenancy guardrails."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from app.db.models import User


class TenantAccessError(RuntimeError):
    """Base error for tenant access violations."""


class UserNotFoundError(TenantAccessError):
    """Raised when the acting user cannot be located."""


class TenantMismatchError(TenantAccessError):
    """Raised when data access crosses company boundaries."""


@dataclass(slots=True, frozen=True)
class CompanyScope:
    """Verified binding between an acting user and the company they act for.

    Repositories require a scope for every tenant-scoped query, so a query
    cannot be issued without a resolved company identifier. Build scopes with
    :func:`load_company_scope`.
    """

    company_id: int
    user_id: int

    def ensure_entity_belongs(self, entity: Any) -> None:
        """Raise :class:`TenantMismatchError` unless ``entity`` is owned by this company."""

        entity_company_id = getattr(entity, "company_id", None)
        if entity_company_id is None or int(entity_company_id) != self.company_id:
            raise TenantMismatchError(
                f"Company mismatch: expected {self.company_id}, received {entity_company_id}"
            )


def load_company_scope(session: Session, user_id: int) -> CompanyScope:
    """Resolve the acting user and return the scope of their company."""

    user = session.get(User, user_id)
    if user is None:
        raise UserNotFoundError(f"User {user_id} not found")
    return CompanyScope(company_id=user.company_id, user_id=user.id)
