"""
Ordered card list backing a deck zone.

Entries keep their insertion order until sorted by the owner. Quantities
never go below zero; zeroed entries stay in the list until duplicates are
removed or the owner drops them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from arenadeck.models.colors import Colors

if TYPE_CHECKING:
    from arenadeck.services.card_database import CardDatabase


@dataclass
class CardEntry:
    """
    One line of a deck zone.

    Attributes:
        id: Arena card ID
        quantity: Copies in this zone (zero is allowed)
        mensurable: False for objects whose copies are not counted, exported as 1
    """

    id: int
    quantity: int = 1
    mensurable: bool = True

    @classmethod
    def from_raw(cls, raw: CardEntry | Mapping[str, Any] | int) -> CardEntry:
        """Build an entry from a mapping, an existing entry or a bare ID."""
        if isinstance(raw, CardEntry):
            return cls(id=raw.id, quantity=raw.quantity, mensurable=raw.mensurable)
        if isinstance(raw, Mapping):
            return cls(
                id=int(raw.get("id", 0)),
                quantity=int(raw.get("quantity", 1)),
                mensurable=bool(raw.get("mensurable", True)),
            )
        return cls(id=int(raw))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "quantity": self.quantity, "mensurable": self.mensurable}


class CardsList:
    """Ordered, mutable list of card entries resolved against a card database."""

    def __init__(
        self,
        entries: Iterable[CardEntry | Mapping[str, Any] | int] | None,
        card_db: CardDatabase,
    ):
        self.card_db = card_db
        self._list: list[CardEntry] = [CardEntry.from_raw(raw) for raw in entries or ()]

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[CardEntry]:
        return iter(self._list)

    def is_empty(self) -> bool:
        return not self._list

    def get(self) -> list[CardEntry]:
        """The live entry list. Sorting it reorders this zone."""
        return self._list

    def count(self) -> int:
        """Total quantity across all entries."""
        return sum(entry.quantity for entry in self._list)

    def count_type(self, type_line: str) -> int:
        """Total quantity of entries whose card type matches exactly."""
        return sum(
            entry.quantity
            for entry in self._list
            if self.card_db.get(entry.id).type == type_line
        )

    def add(self, card_id: int, quantity: int = 1) -> None:
        """
        Add copies to the first entry for a card, appending one if needed.

        Raises:
            ValueError: If quantity is not positive
        """
        _check_quantity(quantity)
        for entry in self._list:
            if entry.id == card_id:
                entry.quantity += quantity
                return
        self._list.append(CardEntry(id=card_id, quantity=quantity))

    def remove(self, card_id: int, quantity: int = 1) -> None:
        """
        Remove copies of a card, leaving a zero-quantity entry at worst.

        Raises:
            ValueError: If quantity is not positive
        """
        _check_quantity(quantity)
        for entry in self._list:
            if entry.id != card_id or entry.quantity == 0:
                continue
            taken = min(entry.quantity, quantity)
            entry.quantity -= taken
            quantity -= taken
            if quantity == 0:
                return

    def remove_duplicates(self, replace_list: bool = True) -> list[CardEntry]:
        """
        Merge entries sharing a card ID.

        Quantities are summed into the first occurrence, which keeps its
        position and mensurable flag. Entries are copied, so the current list
        is untouched unless replace_list is set.

        Returns:
            The merged list in original relative order.
        """
        merged: dict[int, CardEntry] = {}
        for entry in self._list:
            if entry.id in merged:
                merged[entry.id].quantity += entry.quantity
            else:
                merged[entry.id] = CardEntry.from_raw(entry)

        new_list = list(merged.values())
        if replace_list:
            self._list = new_list
        return new_list

    def get_colors(self) -> Colors:
        """
        Color identity of the cards in this list.

        Costs always count. Lands add their frame colors when they show
        fewer than three, so tri-lands and rainbow lands stay neutral.
        """
        colors = Colors()
        for entry in self._list:
            card = self.card_db.get(entry.id)
            if "Land" in card.type and len(card.frame) < 3:
                colors.add_from_array(card.frame)
            colors.add_from_cost(card.cost)
        return colors

    def to_list(self) -> list[dict[str, Any]]:
        """Plain entry dicts, in current order."""
        return [entry.to_dict() for entry in self._list]


def _check_quantity(quantity: int) -> None:
    if quantity <= 0:
        raise ValueError(f"Quantity must be positive, got {quantity}")
