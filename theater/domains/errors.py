"""Errors raised while pricing or rendering a statement."""

from __future__ import annotations


class StatementError(Exception):
    """Base class for statement errors. Raised for malformed input, never transient."""


class UnknownPlayType(StatementError, ValueError):
    """Raised when a play's genre has no pricing rule."""

    def __init__(self, play_type: str) -> None:
        super().__init__(f"unknown type: {play_type}")
        self.play_type = play_type


class UnknownPlay(StatementError, LookupError):
    """Raised when a performance references a play id missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(f"unknown play: {play_id}")
        self.play_id = play_id
