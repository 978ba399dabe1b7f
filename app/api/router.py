"""REST router mounted under ``/api``."""
from fastapi import APIRouter

from app.api.endpoints import business_partners, invoices

router = APIRouter()


@router.get("/health", tags=["health"], summary="Health check")
def health_check() -> dict[str, str]:
    """Liveness probe; does not touch the database."""

    return {"status": "ok"}


for endpoint_router in (invoices.router, business_partners.router):
    router.include_router(endpoint_router)
