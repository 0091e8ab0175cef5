"""
Deck rendering sinks.

A deck draws itself as a flat sequence of separators and tiles. Any
object implementing TileSink can receive them; RecordingTileSink keeps
them in memory for callers that serialize the layout.
"""

import secrets
import string
from dataclasses import dataclass, field
from typing import Literal, Protocol

ID_ALPHABET = string.ascii_letters + string.digits


def make_id(length: int) -> str:
    """Random alphanumeric suffix for render-session element keys."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


class TileSink(Protocol):
    """Surface a deck can be drawn into."""

    def clear(self) -> None: ...

    def add_separator(self, rank: int, count: int) -> None: ...

    def add_tile(self, card_id: int, key: str, quantity: int) -> None: ...


@dataclass(frozen=True, slots=True)
class TileElement:
    """
    One drawn element.

    Separators carry rank and count; tiles carry card_id, key and quantity.
    """

    kind: Literal["separator", "tile"]
    rank: int | None = None
    count: int | None = None
    card_id: int | None = None
    key: str | None = None
    quantity: int | None = None


@dataclass
class RecordingTileSink:
    """TileSink that records elements in draw order."""

    elements: list[TileElement] = field(default_factory=list)

    def clear(self) -> None:
        self.elements.clear()

    def add_separator(self, rank: int, count: int) -> None:
        self.elements.append(TileElement(kind="separator", rank=rank, count=count))

    def add_tile(self, card_id: int, key: str, quantity: int) -> None:
        self.elements.append(
            TileElement(kind="tile", card_id=card_id, key=key, quantity=quantity)
        )

    @property
    def separators(self) -> list[TileElement]:
        return [e for e in self.elements if e.kind == "separator"]

    @property
    def tiles(self) -> list[TileElement]:
        return [e for e in self.elements if e.kind == "tile"]
