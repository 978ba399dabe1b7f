"""FastAPI application factory wiring REST, GraphQL, logging and migrations."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from alembic import command
from alembic.config import Config
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from strawberry.fastapi import GraphQLRouter

from app.api.router import router as api_router
from app.core.database import ENGINE, create_database_schema
from app.core.logging_config import configure_logging
from app.core.settings import Settings, get_settings
from app.graphql.context import context_getter
from app.graphql.schema import schema

API_PREFIX = "/api"
API_VERSION = "0.1.0"
ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"

logger = logging.getLogger(__name__)


def _run_migrations() -> None:
    """Upgrade the schema to the latest revision, or create it from metadata when Alembic fails."""

    try:
        command.upgrade(Config(str(ALEMBIC_INI)), "head")
    except Exception:
        logger.warning("Alembic upgrade failed; creating schema from metadata", exc_info=True)
        create_database_schema()


def _ensure_sqlite_directory(settings: Settings) -> None:
    """Create the parent directory of a file-backed SQLite database."""

    url = settings.database_url
    if not url.startswith("sqlite") or ":///" not in url or ":memory:" in url:
        return
    database_path = url.split(":///", 1)[-1]
    Path(database_path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.log_level)
    _ensure_sqlite_directory(settings)
    _run_migrations()
    app.state.settings = settings
    logger.info("%s started (%s)", settings.app_name, settings.environment)
    try:
        yield
    finally:
        ENGINE.dispose()
        logger.info("%s stopped", settings.app_name)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Hide unexpected failures behind a generic 500 payload."""

    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal service error"},
    )


def create_app() -> FastAPI:
    """Build the ASGI application with REST routes under ``/api`` and GraphQL at ``/graphql``."""

    settings = get_settings()
    application = FastAPI(title=settings.app_name, version=API_VERSION, lifespan=lifespan)

    application.include_router(api_router, prefix=API_PREFIX)
    application.include_router(
        GraphQLRouter(schema, path="/graphql", context_getter=context_getter),
        prefix="",
    )
    application.add_exception_handler(Exception, unhandled_error_handler)

    return application


app = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
