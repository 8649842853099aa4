"""
Statement rendering: price every performance on an invoice and format the result.

Rendering is all-or-nothing. Every performance is priced before any text is
assembled, so an unknown play or genre leaves no partial statement.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from theater.domains.errors import UnknownPlay
from theater.domains.models import Invoice, Performance, Play
from theater.domains.pricing import compute_amount, compute_volume_credits
from theater.utils.currency import usd
from theater.utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class StatementLine:
    """One priced performance."""

    play_name: str
    play_type: str
    audience: int
    amount: int
    volume_credits: int


@dataclass(frozen=True)
class StatementData:
    """A fully priced invoice, ready to be formatted."""

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: int
    total_volume_credits: int


class StatementPrinter:
    """Prices an invoice against a catalog of plays and renders its statement."""

    def __init__(self, invoice: Invoice, plays: Mapping[str, Play]) -> None:
        self._invoice = invoice
        self._plays = plays

    @property
    def invoice(self) -> Invoice:
        return self._invoice

    def get_play(self, performance: Performance) -> Play:
        """
        Look up the play a performance refers to.

        Raises:
            UnknownPlay: If the play id is not in the catalog.
        """
        try:
            return self._plays[performance.play_id]
        except KeyError:
            raise UnknownPlay(performance.play_id) from None

    def get_amount(self, performance: Performance, play: Play) -> int:
        """Charge in cents for one performance. Raises UnknownPlayType."""
        return compute_amount(performance.audience, play.type)

    def get_volume_credits(self, performance: Performance, play: Play) -> int:
        return compute_volume_credits(performance.audience, play.type)

    def get_total_amount(self) -> int:
        """Total charge in cents over all performances."""
        return self.statement_data().total_amount

    def get_total_volume_credits(self) -> int:
        return self.statement_data().total_volume_credits

    def statement_data(self) -> StatementData:
        """
        Price every performance in invoice order.

        Raises:
            UnknownPlay: A performance references a play missing from the catalog.
            UnknownPlayType: A play's genre has no pricing rule.
        """
        lines: list[StatementLine] = []
        for perf in self._invoice.performances:
            play = self.get_play(perf)
            lines.append(
                StatementLine(
                    play_name=play.name,
                    play_type=play.type,
                    audience=perf.audience,
                    amount=self.get_amount(perf, play),
                    volume_credits=self.get_volume_credits(perf, play),
                )
            )
        return StatementData(
            customer=self._invoice.customer,
            lines=tuple(lines),
            total_amount=sum(line.amount for line in lines),
            total_volume_credits=sum(line.volume_credits for line in lines),
        )

    def statement(self) -> str:
        """Render the plain-text statement for this printer's invoice."""
        data = self.statement_data()
        logger.debug(
            "Rendered statement for %s: %d performance(s), total %d cents",
            data.customer,
            len(data.lines),
            data.total_amount,
        )
        return render_plain_text(data)


def render_plain_text(data: StatementData) -> str:
    """Format a priced statement; each line ends with the platform line separator."""
    out = [f"Statement for {data.customer}"]
    for line in data.lines:
        out.append(f"  {line.play_name}: {usd(line.amount)} ({line.audience} seats)")
    out.append(f"Amount owed is {usd(data.total_amount)}")
    out.append(f"You earned {data.total_volume_credits} credits")
    return "".join(f"{s}{os.linesep}" for s in out)


def render(invoice: Invoice, catalog: Mapping[str, Play]) -> str:
    """
    Render the statement for an invoice.

    Raises:
        UnknownPlay: A performance references a play missing from the catalog.
        UnknownPlayType: A play's genre has no pricing rule.
    """
    return StatementPrinter(invoice, catalog).statement()
