"""
Card ordering for deck zones.

Cards group by type category, then sort by mana value and name within
a category. The category rank also labels the separators drawn between
groups.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from arenadeck.models.card_list import CardEntry

if TYPE_CHECKING:
    from arenadeck.services.card_database import CardDatabase

CardComparator = Callable[[CardEntry, CardEntry], int]

# Checked in order; the first type found in the type line wins
TYPE_SORT_ORDER: tuple[tuple[str, int], ...] = (
    ("Creature", 1),
    ("Planeswalker", 2),
    ("Instant", 3),
    ("Sorcery", 4),
    ("Artifact", 5),
    ("Enchantment", 6),
    ("Land", 7),
)

OTHER_TYPE_SORT = 8

# Separator label for the sideboard section
SIDEBOARD_SEPARATOR = 99


def get_card_type_sort(type_line: str) -> int:
    """Rank of a type line's category, 8 for anything unrecognized."""
    for card_type, rank in TYPE_SORT_ORDER:
        if card_type in type_line:
            return rank
    return OTHER_TYPE_SORT


def compare_cards(card_db: CardDatabase) -> CardComparator:
    """
    Build a comparator ordering entries by type rank, mana value, then name.

    Returns:
        Two-argument comparator returning a negative, zero or positive int.
    """

    def compare(a: CardEntry, b: CardEntry) -> int:
        card_a = card_db.get(a.id)
        card_b = card_db.get(b.id)
        key_a = (get_card_type_sort(card_a.type), card_a.cmc, card_a.name)
        key_b = (get_card_type_sort(card_b.type), card_b.cmc, card_b.name)
        return (key_a > key_b) - (key_a < key_b)

    return compare
