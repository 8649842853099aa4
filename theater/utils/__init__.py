"""Shared utilities: configuration, logging and currency formatting."""
