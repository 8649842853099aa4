"""Streamlit UI helpers."""
