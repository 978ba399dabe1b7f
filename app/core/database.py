"""Database engine and session management utilities."""
from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from app.db import Base, models  # noqa: F401  # Ensure models are imported for metadata registration

from .settings import get_settings


def build_engine(database_url: str, **engine_options: Any) -> Engine:
    """Create an engine; SQLite connections get foreign key enforcement."""

    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, future=True, connect_args=connect_args, **engine_options)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:  # type: ignore[no-untyped-def]
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


_settings = get_settings()

ENGINE = build_engine(_settings.database_url)
SessionLocal = sessionmaker(bind=ENGINE, class_=Session, autoflush=False, autocommit=False)


def get_db_session() -> Generator[Session, None, None]:
    """Yield a database session and ensure closure."""

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_database_schema() -> None:
    """Create database tables based on ORM metadata."""

    Base.metadata.create_all(bind=ENGINE)
