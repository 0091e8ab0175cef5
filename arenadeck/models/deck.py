"""
Deck entity.

A deck is a mainboard and a sideboard of card entries plus the metadata
Arena stores with it. Derived views (colors, missing wildcards, rendered
layout, text exports) are computed from the boards on request.

Boards are sorted once, when the deck is built. Later edits to the
boards are not re-sorted, and the cached color profile is only refreshed
by get_colors() or invalidate_colors().
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any

from arenadeck.config import REPRINT_ONLY_SET, settings
from arenadeck.exceptions import MissingReprintError
from arenadeck.models.card_list import CardEntry, CardsList
from arenadeck.models.colors import Colors
from arenadeck.services.card_sort import SIDEBOARD_SEPARATOR, compare_cards, get_card_type_sort
from arenadeck.services.renderer import make_id

if TYPE_CHECKING:
    from arenadeck.models.card import CardRecord
    from arenadeck.services.card_database import CardDatabase
    from arenadeck.services.card_sort import CardComparator
    from arenadeck.services.renderer import TileSink
    from arenadeck.services.set_registry import SetRegistry
    from arenadeck.services.wildcards import WildcardsMissing

logger = logging.getLogger(__name__)

RARITIES = ("rare", "common", "uncommon", "mythic", "token", "land")

# Bucket for rarities outside RARITIES
OTHER_RARITY = "other"

RawEntries = Iterable[CardEntry | Mapping[str, Any] | int]


class Deck:
    """
    An Arena deck.

    Attributes:
        mainboard: Main deck entries, sorted at construction
        sideboard: Sideboard entries, sorted at construction
        name: Deck title
        id: Arena deck ID
        last_updated: Last-modified timestamp as Arena reports it
        tile: Card art ID shown for the deck
        tags: Deck tags; defaults to the deck's format
        custom: True for decks built by the player rather than precons
    """

    def __init__(
        self,
        record: Mapping[str, Any],
        main: RawEntries | None = None,
        side: RawEntries | None = None,
        *,
        card_db: CardDatabase,
        compare: CardComparator | None = None,
        default_tile: int | None = None,
    ):
        self.card_db = card_db
        self.mainboard = CardsList(_entries_or(record.get("mainDeck"), main), card_db)
        self.sideboard = CardsList(_entries_or(record.get("sideboard"), side), card_db)
        self.name: str = record.get("name") or ""
        self.id: str = record.get("id") or ""
        self.last_updated: str = record.get("lastUpdated") or ""
        self.tile: int = record.get("deckTileId") or default_tile or settings.default_deck_tile
        tags = record.get("tags")
        self.tags: list[str] = list(tags) if tags is not None else _format_tags(record)
        self.custom: bool = bool(record.get("custom", False))
        self._colors: Colors | None = None

        if compare is None:
            compare = compare_cards(card_db)
        self.sort_mainboard(compare)
        self.sort_sideboard(compare)

        logger.debug(
            "deck_loaded",
            extra={
                "deck_id": self.id,
                "mainboard_entries": len(self.mainboard),
                "sideboard_entries": len(self.sideboard),
            },
        )

    def __repr__(self) -> str:
        return f"Deck(name={self.name!r}, id={self.id!r})"

    @property
    def colors(self) -> Colors:
        """Cached colors, computed from the mainboard on first access."""
        if self._colors is None:
            return self.get_colors()
        return self._colors

    def sort_mainboard(self, compare: CardComparator) -> None:
        self.mainboard.get().sort(key=cmp_to_key(compare))

    def sort_sideboard(self, compare: CardComparator) -> None:
        self.sideboard.get().sort(key=cmp_to_key(compare))

    def get_colors(self, count_mainboard: bool = True, count_sideboard: bool = False) -> Colors:
        """
        Compute and cache the colors of the mainboard and/or sideboard.

        By default only the mainboard counts.
        """
        self._colors = Colors()

        if count_mainboard:
            self._colors.add_from_color(self.mainboard.get_colors())

        if count_sideboard:
            self._colors.add_from_color(self.sideboard.get_colors())

        return self._colors

    def invalidate_colors(self) -> None:
        """Drop the cached colors; the next `colors` access recomputes them."""
        self._colors = None

    def get_missing_wildcards(
        self,
        wildcards_missing: WildcardsMissing,
        count_mainboard: bool = True,
        count_sideboard: bool = True,
    ) -> dict[str, int]:
        """
        Wildcards of each rarity needed to complete this deck.

        Args:
            wildcards_missing: Policy giving the shortfall for (card_id, quantity)
            count_mainboard: Include mainboard entries
            count_sideboard: Include sideboard entries

        Returns:
            Shortfall per rarity. Always holds the six known rarities; an
            "other" key appears only for cards of an unrecognized rarity.
        """
        missing = dict.fromkeys(RARITIES, 0)

        boards: list[CardsList] = []
        if count_mainboard:
            boards.append(self.mainboard)
        if count_sideboard:
            boards.append(self.sideboard)

        for board in boards:
            for entry in board.get():
                rarity = self.card_db.get(entry.id).rarity
                if rarity not in missing:
                    logger.warning(
                        "unknown_rarity",
                        extra={"card_id": entry.id, "rarity": rarity, "deck_id": self.id},
                    )
                    rarity = OTHER_RARITY
                missing[rarity] = missing.get(rarity, 0) + wildcards_missing(
                    entry.id, entry.quantity
                )

        return missing

    def draw(self, sink: TileSink) -> None:
        """
        Draw this deck into a tile sink.

        Mainboard cards are grouped under a separator per type category,
        labelled with how many cards share the first card's type line.
        The sideboard follows under a single separator. Zero-quantity
        entries draw no tile but still delimit type groups.
        """
        unique = make_id(4)
        sink.clear()

        prev_sort: int | None = None
        for entry in self.mainboard.get():
            card_type = self.card_db.get(entry.id).type
            card_type_sort = get_card_type_sort(card_type)
            if card_type_sort != prev_sort:
                sink.add_separator(card_type_sort, self.mainboard.count_type(card_type))

            if entry.quantity > 0:
                sink.add_tile(entry.id, unique + "a", entry.quantity)

            prev_sort = card_type_sort

        if not self.sideboard.is_empty():
            sink.add_separator(SIDEBOARD_SEPARATOR, self.sideboard.count())
            for entry in self.sideboard.get():
                if entry.quantity > 0:
                    sink.add_tile(entry.id, unique + "b", entry.quantity)

    def get_export_txt(self) -> str:
        """
        Export as plain text: "<quantity> <name>" per line.

        Lines end in CRLF. A blank line separates mainboard and sideboard,
        and is present even when the sideboard is empty.
        """
        lines = self._export_lines(self.mainboard, self._format_txt_line)
        lines.append("\r\n")
        lines.extend(self._export_lines(self.sideboard, self._format_txt_line))
        return "".join(lines)

    def get_export_arena(self, set_registry: SetRegistry) -> str:
        """
        Export in Arena import format: "<quantity> <name> (<set>) <number> ".

        Lines end in CRLF with a space before it. Cards printed only in the
        Mythic Edition are exported as their first reprint.

        Raises:
            UnknownSetError: If a card's set is not in the registry
            MissingReprintError: If a Mythic Edition card lists no reprint
        """

        def format_line(entry: CardEntry) -> str:
            card = self._resolve_arena_printing(self.card_db.get(entry.id))
            set_code = set_registry.get_arena_code(card.set)
            return f"{self._export_quantity(entry)} {card.name} ({set_code}) {card.cid} \r\n"

        lines = self._export_lines(self.mainboard, format_line)
        lines.append("\r\n")
        lines.extend(self._export_lines(self.sideboard, format_line))
        return "".join(lines)

    def get_save(self) -> dict[str, Any]:
        """Plain record of this deck, readable back by the constructor."""
        return {
            "id": self.id,
            "name": self.name,
            "lastUpdated": self.last_updated,
            "deckTileId": self.tile,
            "tags": list(self.tags),
            "custom": self.custom,
            "mainDeck": self.mainboard.to_list(),
            "sideboard": self.sideboard.to_list(),
        }

    def _resolve_arena_printing(self, card: CardRecord) -> CardRecord:
        if card.set != REPRINT_ONLY_SET:
            return card
        if not card.reprints:
            raise MissingReprintError(card.id)
        reprint = self.card_db.get(card.reprints[0])
        logger.debug(
            "mythic_edition_redirect",
            extra={"card_id": card.id, "reprint_id": reprint.id},
        )
        return reprint

    def _format_txt_line(self, entry: CardEntry) -> str:
        name = self.card_db.get(entry.id).name
        return f"{self._export_quantity(entry)} {name}\r\n"

    @staticmethod
    def _export_quantity(entry: CardEntry) -> int:
        return entry.quantity if entry.mensurable else 1

    @staticmethod
    def _export_lines(board: CardsList, format_line: Callable[[CardEntry], str]) -> list[str]:
        return [
            format_line(entry)
            for entry in board.remove_duplicates(replace_list=False)
            if entry.quantity > 0
        ]


def _entries_or(entries: RawEntries | None, fallback: RawEntries | None) -> RawEntries | None:
    return fallback if entries is None else entries


def _format_tags(record: Mapping[str, Any]) -> list[str]:
    deck_format = record.get("format")
    return [deck_format] if deck_format else []
