"""Billing statements for theatrical performance invoices."""

from theater.domains.errors import StatementError, UnknownPlay, UnknownPlayType
from theater.domains.models import Catalog, Invoice, Performance, Play, PlayType
from theater.domains.pricing import compute_amount, compute_volume_credits
from theater.services.statement import (
    StatementData,
    StatementLine,
    StatementPrinter,
    render,
    render_plain_text,
)

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "Invoice",
    "Performance",
    "Play",
    "PlayType",
    "StatementData",
    "StatementError",
    "StatementLine",
    "StatementPrinter",
    "UnknownPlay",
    "UnknownPlayType",
    "compute_amount",
    "compute_volume_credits",
    "render",
    "render_plain_text",
]
