"""
Wildcard shortfall policy.

Decides how many wildcards a deck entry still needs given what the
player owns. Copies of any printing count toward the same card.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from arenadeck.config import MAX_COPIES
from arenadeck.models.collection import OwnedCollection

if TYPE_CHECKING:
    from arenadeck.services.card_database import CardDatabase

WildcardsMissing = Callable[[int, int], int]

# Rarities that never cost a wildcard
FREE_RARITIES = frozenset({"land", "token"})


def get_wildcards_missing(
    card_id: int,
    quantity: int,
    collection: OwnedCollection,
    card_db: CardDatabase,
) -> int:
    """
    Wildcards needed to own `quantity` copies of a card.

    Owned copies of the card and all its reprints are summed. Requests
    above MAX_COPIES are capped, since extra copies are never crafted.

    Returns:
        Shortfall, zero when the player already owns enough.
    """
    card = card_db.get(card_id)
    if card.rarity in FREE_RARITIES:
        return 0

    owned = max(0, collection.get_quantity(card_id))
    for reprint_id in card.reprints:
        owned += max(0, collection.get_quantity(reprint_id))

    needed = min(quantity, MAX_COPIES)
    return max(0, needed - min(owned, MAX_COPIES))


def wildcard_policy(collection: OwnedCollection, card_db: CardDatabase) -> WildcardsMissing:
    """Bind a collection and database into a (card_id, quantity) policy."""

    def wildcards_missing(card_id: int, quantity: int) -> int:
        return get_wildcards_missing(card_id, quantity, collection, card_db)

    return wildcards_missing
