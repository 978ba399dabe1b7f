"""REST endpoint routers exposed by the API."""
from . import business_partners, invoices

__all__ = [
    "business_partners",
    "invoices",
]
