"""Domain layer: statement records, errors and pricing rules.

Domain modules have no I/O and do not depend on the UI.
"""
