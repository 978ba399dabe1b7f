"""Database package exposing the declarative base and the invoicing ORM models."""

from .base import Base, TimestampMixin
from . import models

__all__ = ["Base", "TimestampMixin", "models"]
