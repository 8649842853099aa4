"""US-dollar formatting for amounts held in cents."""

from __future__ import annotations

from decimal import Decimal

_CENTS_PER_DOLLAR = Decimal(100)


def usd(amount_in_cents: int) -> str:
    """Format cents as US currency, e.g. 40000 -> '$400.00', -150 -> '-$1.50'."""
    dollars = Decimal(amount_in_cents) / _CENTS_PER_DOLLAR
    if dollars < 0:
        return f"-${-dollars:,.2f}"
    return f"${dollars:,.2f}"
