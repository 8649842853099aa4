"""
Statement input records: plays, performances, invoices and the play catalog.

All records are immutable. `from_dict` constructors accept already-parsed
mappings (e.g. JSON objects); the package itself never reads files.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class PlayType(str, Enum):
    """Genres with a pricing rule."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, value: PlayType | str) -> PlayType | None:
        """Return the matching genre, or None when the value is not recognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Play:
    """A play as listed in the catalog. `type` keeps the raw genre string."""

    name: str
    type: str

    @property
    def genre(self) -> PlayType | None:
        return PlayType.parse(self.type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Play:
        play_type = data["type"]
        if isinstance(play_type, PlayType):
            play_type = play_type.value
        return cls(name=str(data["name"]), type=str(play_type))


@dataclass(frozen=True)
class Performance:
    """One performance of a play: which play and how many seats were filled."""

    play_id: str
    audience: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Performance:
        """Build from {"playID" | "play_id", "audience"}."""
        play_id = data["playID"] if "playID" in data else data["play_id"]
        return cls(play_id=str(play_id), audience=int(data["audience"]))


@dataclass(frozen=True)
class Invoice:
    """A customer and the ordered performances billed to them."""

    customer: str
    performances: tuple[Performance, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Freeze any iterable (e.g. a list) so the invoice cannot change under a renderer.
        if not isinstance(self.performances, tuple):
            object.__setattr__(self, "performances", tuple(self.performances))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Invoice:
        perfs = [Performance.from_dict(p) for p in data.get("performances") or []]
        return cls(customer=str(data["customer"]), performances=tuple(perfs))


class Catalog(Mapping[str, Play]):
    """
    Read-only mapping of play id -> Play.

    The renderer accepts any Mapping; Catalog is a convenience that snapshots
    the plays so later changes to the source dict are not visible.
    """

    def __init__(self, plays: Mapping[str, Play] | Iterable[tuple[str, Play]] = ()) -> None:
        self._plays: Mapping[str, Play] = MappingProxyType(dict(plays))

    def __getitem__(self, play_id: str) -> Play:
        return self._plays[play_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._plays)

    def __len__(self) -> int:
        return len(self._plays)

    def __repr__(self) -> str:
        return f"Catalog({dict(self._plays)!r})"

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]]) -> Catalog:
        """Build from {play_id: {"name", "type"}}."""
        return cls({str(pid): Play.from_dict(p) for pid, p in data.items()})
