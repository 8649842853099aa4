"""Streamlit UI helpers for editing an invoice and showing its statement.

Pure helpers (`statement_rows`, `performances_from_rows`) hold the table logic;
the `render_*` functions only draw. They take `st` as a parameter so tests can
pass a stand-in.
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from theater.domains.errors import StatementError, UnknownPlay, UnknownPlayType
from theater.domains.models import Catalog, Invoice, Performance, Play
from theater.services.statement import StatementData, render_plain_text
from theater.utils.currency import usd
from theater.utils.logger import get_logger

logger = get_logger()


def sample_catalog() -> Catalog:
    """Plays offered in the demo."""
    return Catalog(
        {
            "hamlet": Play("Hamlet", "tragedy"),
            "as-like": Play("As You Like It", "comedy"),
            "othello": Play("Othello", "tragedy"),
        }
    )


def sample_invoice() -> Invoice:
    return Invoice(
        "BigCo",
        (
            Performance("hamlet", 55),
            Performance("as-like", 35),
            Performance("othello", 40),
        ),
    )


def invoice_rows(invoice: Invoice) -> list[dict[str, Any]]:
    """Editor rows for an invoice's performances."""
    return [{"playID": p.play_id, "audience": p.audience} for p in invoice.performances]


def performances_from_rows(rows: list[dict[str, Any]]) -> tuple[Performance, ...]:
    """Editor rows -> performances. Rows with a blank play id are skipped; a blank audience is 0."""
    out: list[Performance] = []
    for row in rows:
        raw_id = row.get("playID")
        play_id = raw_id.strip() if isinstance(raw_id, str) else ""
        if not play_id:
            continue
        out.append(Performance(play_id, _seats(row.get("audience"))))
    return tuple(out)


def _seats(value: Any) -> int:
    # Editor cells left empty come back as None or NaN
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def statement_rows(data: StatementData) -> list[dict[str, Any]]:
    """Table rows for the charges table, one per performance."""
    return [
        {
            "Play": line.play_name,
            "Type": line.play_type,
            "Seats": line.audience,
            "Amount": usd(line.amount),
            "Credits": line.volume_credits,
        }
        for line in data.lines
    ]


def error_message(err: StatementError) -> str:
    """User-facing text for a failed statement."""
    if isinstance(err, UnknownPlay):
        return f"Play '{err.play_id}' is not in the catalog. No statement was produced."
    if isinstance(err, UnknownPlayType):
        return f"Play type '{err.play_type}' has no pricing rule. No statement was produced."
    return f"Statement failed: {err}"


def render_statement(data: StatementData, st=st) -> None:
    """Show the plain-text statement, the charges table and the totals."""
    col1, col2 = st.columns([1, 1])
    with col1:
        st.metric("Amount owed", usd(data.total_amount))
    with col2:
        st.metric("Volume credits", data.total_volume_credits)
    st.dataframe(statement_rows(data), use_container_width=True, hide_index=True)
    st.subheader("Statement")
    st.code(render_plain_text(data), language="text")


def render_error(err: StatementError, st=st) -> None:
    logger.info("Statement rejected: %s", err)
    st.error(error_message(err))


def render_catalog(catalog: Catalog, st=st) -> None:
    """List catalog plays so users know which play ids are valid."""
    st.caption("Catalog")
    for play_id, play in catalog.items():
        st.markdown(f"- `{play_id}`: {play.name} ({play.type})")
