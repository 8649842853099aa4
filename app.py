"""
Theater Statement — Streamlit UI entry point.
"""

import streamlit as st

# Load .env first so THEATER_LOG_* settings are picked up
from theater.utils.config import load_config
load_config()

from theater.domains.errors import StatementError
from theater.domains.models import Invoice
from theater.services.statement import StatementPrinter
from theater.utils.logger import setup_from_config
from theater.ui.statement_display import (
    invoice_rows,
    performances_from_rows,
    render_catalog,
    render_error,
    render_statement,
    sample_catalog,
    sample_invoice,
)

log = setup_from_config()

st.set_page_config(page_title="Theater Statement", layout="wide")
st.title("Theater Statement")

catalog = sample_catalog()

if "rows" not in st.session_state:
    st.session_state.rows = invoice_rows(sample_invoice())
if "customer" not in st.session_state:
    st.session_state.customer = sample_invoice().customer

with st.sidebar:
    st.header("Invoice")
    customer = st.text_input("Customer", value=st.session_state.customer)
    render_catalog(catalog)
    if st.button("Reset to sample", use_container_width=True):
        st.session_state.rows = invoice_rows(sample_invoice())
        st.session_state.customer = sample_invoice().customer
        st.rerun()

st.subheader("Performances")
edited = st.data_editor(
    st.session_state.rows,
    num_rows="dynamic",
    use_container_width=True,
    key="performances_editor",
)

rows = edited.to_dict("records") if hasattr(edited, "to_dict") else edited
invoice = Invoice(customer.strip(), performances_from_rows(rows))
try:
    data = StatementPrinter(invoice, catalog).statement_data()
except StatementError as e:
    render_error(e)
else:
    log.info("Statement for %s: %d line(s)", data.customer, len(data.lines))
    render_statement(data)
