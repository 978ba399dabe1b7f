"""Service-layer exception hierarchy."""
from __future__ import annotations


class ServiceError(Exception):
    """Base service error."""


class NotFoundError(ServiceError):
    """Raised when an entity is not found or belongs to another company."""


class ValidationError(ServiceError):
    """Raised when business validation fails."""


class ForbiddenError(ServiceError):
    """Raised when a referenced entity belongs to another company."""


class UnauthorizedError(ServiceError):
    """Raised when the acting user cannot be resolved."""


class PersistenceError(ServiceError):
    """Raised when the underlying store fails; never retried by the service."""
