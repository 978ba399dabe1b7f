"""Invoice pricing: fee, consumption tax and billed total."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

FEE_RATE = Decimal("0.04")
CONSUMPTION_TAX_RATE = Decimal("0.10")
CENT = Decimal("0.01")


@dataclass(slots=True, frozen=True)
class InvoiceAmounts:
    """Derived amounts for a single principal."""

    fee: Decimal
    consumption_tax: Decimal
    invoice_amount: Decimal


def _to_decimal(value: Decimal | float | int | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_invoice_amounts(
    payment_amount: Decimal | float | int | str,
    fee_rate: Decimal | float | str = FEE_RATE,
    consumption_tax_rate: Decimal | float | str = CONSUMPTION_TAX_RATE,
) -> InvoiceAmounts:
    """Price an invoice.

    ``fee`` and ``consumption_tax`` are kept exactly as computed; only the
    billed total is rounded to the cent (half away from zero). Positivity of
    ``payment_amount`` is the caller's concern.

    >>> compute_invoice_amounts(12345).invoice_amount
    Decimal('12888.18')
    """

    principal = _to_decimal(payment_amount)
    fee = principal * _to_decimal(fee_rate)
    consumption_tax = fee * _to_decimal(consumption_tax_rate)
    total = (principal + fee + consumption_tax).quantize(CENT, rounding=ROUND_HALF_UP)
    return InvoiceAmounts(fee=fee, consumption_tax=consumption_tax, invoice_amount=total)
