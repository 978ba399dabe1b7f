"""Repository abstractions for database access."""
from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from app.db.base import Base
from app.core.tenant import CompanyScope

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Base repository providing add and primary-key lookup."""

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        return instance

    def get(self, obj_id: int) -> ModelT | None:
        statement = self._base_query().where(self.model.id == obj_id)  # type: ignore[attr-defined]
        return self.session.scalar(statement)

    def _base_query(self) -> Select[tuple[ModelT]]:
        return select(self.model)


class CompanyScopedRepository(Repository[ModelT]):
    """Repository enforcing company-based filtering."""

    def get_for_company(self, scope: CompanyScope, obj_id: int) -> ModelT | None:
        statement = (
            self._base_query()
            .where(self.model.id == obj_id)  # type: ignore[attr-defined]
            .where(self.model.company_id == scope.company_id)  # type: ignore[attr-defined]
        )
        return self.session.scalar(statement)

    def list_for_company(
        self,
        scope: CompanyScope,
        offset: int = 0,
        limit: int | None = None,
    ) -> Sequence[ModelT]:
        statement = (
            self._base_query()
            .where(self.model.company_id == scope.company_id)  # type: ignore[attr-defined]
            .order_by(self.model.id)  # type: ignore[attr-defined]
            .offset(offset)
        )
        if limit is not None:
            statement = statement.limit(limit)
        return self.session.scalars(statement).all()
