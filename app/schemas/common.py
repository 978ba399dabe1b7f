"""Shared field types for API schemas."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator

from app.utils.clock import as_utc

CENT = Decimal("0.01")

# SQLite hands back naive datetimes; everything stored is UTC.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


def format_money(value: Decimal) -> str:
    """Render an amount with at least two fraction digits, keeping finer precision."""

    value = Decimal(value)
    cents = value.quantize(CENT)
    if value == cents:
        return str(cents)
    return format(value.normalize(), "f")
