"""GraphQL context utilities for company-scoped operations."""
from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.orm import Session, sessionmaker
from strawberry.fastapi import BaseContext

from app.api.dependencies import USER_ID_HEADER, parse_user_id
from app.core.database import SessionLocal


@dataclass(slots=True)
class GraphQLContext(BaseContext):
    """Per-request context: the acting user id and a factory for resolver sessions."""

    user_id: int
    session_factory: sessionmaker[Session]

    def get_session(self) -> Session:
        """Open a session; the caller closes it."""

        return self.session_factory()


def build_context(user_id: int) -> GraphQLContext:
    """Bind an authenticated user to the application session factory."""

    return GraphQLContext(user_id=user_id, session_factory=SessionLocal)


def context_getter(request: Request) -> GraphQLContext:
    """Resolve the acting user from the forwarded identity header."""

    return build_context(parse_user_id(request.headers.get(USER_ID_HEADER)))
