"""
Card database service.

Loads and caches Arena card metadata keyed by card ID.
"""

import json
import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path
from typing import Any

from arenadeck.config import settings
from arenadeck.exceptions import CardNotFoundError
from arenadeck.models.card import CardRecord

logger = logging.getLogger(__name__)


class CardDatabase:
    """
    Lookup from Arena card ID to static card metadata.

    Lookups of unknown IDs raise CardNotFoundError rather than returning
    a placeholder; every ID a deck references must be present.
    """

    def __init__(self, cards: dict[int, CardRecord] | None = None):
        self._cards: dict[int, CardRecord] = cards or {}

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[CardRecord]:
        return iter(self._cards.values())

    def get(self, card_id: int) -> CardRecord:
        """
        Get the record for a card.

        Raises:
            CardNotFoundError: If the ID is not in the database
        """
        try:
            return self._cards[card_id]
        except KeyError:
            raise CardNotFoundError(card_id) from None

    def add(self, card: CardRecord) -> None:
        self._cards[card.id] = card

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> "CardDatabase":
        """Build a database from raw card objects."""
        cards: dict[int, CardRecord] = {}
        for raw in records:
            card = CardRecord.from_dict(raw)
            cards[card.id] = card
        return cls(cards)


def load_card_database(path: Path | None = None) -> CardDatabase:
    """
    Load card database from file.

    The file holds either a JSON list of card objects or an object with
    a "cards" list.

    Args:
        path: Path to JSON file. Defaults to settings.card_database_path

    Returns:
        CardDatabase indexed by card ID.

    Raises:
        FileNotFoundError: If database file doesn't exist
    """
    if path is None:
        path = settings.card_database_path

    if not path.exists():
        raise FileNotFoundError(
            f"Card database not found at {path}. "
            "Set CARD_DATABASE_PATH to an Arena card JSON export."
        )

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("cards", [])

    db = CardDatabase.from_records(data)
    logger.info("card_database_loaded", extra={"path": str(path), "card_count": len(db)})
    return db


@lru_cache(maxsize=1)
def get_card_database() -> CardDatabase:
    """
    Get cached card database.

    Cached after first load.

    Raises:
        FileNotFoundError: If database file doesn't exist
    """
    return load_card_database()
