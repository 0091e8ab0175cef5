from dataclasses import dataclass, field


@dataclass
class OwnedCollection:
    """
    A player's owned cards.

    Cards are stored by Arena ID with the number of copies owned.
    Each printing is a separate entry; reprints are summed by the wildcard policy.
    """

    cards: dict[int, int] = field(default_factory=dict)

    def get_quantity(self, card_id: int) -> int:
        """Get quantity owned of a specific printing."""
        return self.cards.get(card_id, 0)

    def add_card(self, card_id: int, quantity: int = 1) -> None:
        """Add copies of a printing to the collection."""
        self.cards[card_id] = self.cards.get(card_id, 0) + quantity

    def total_cards(self) -> int:
        """Total number of cards in collection."""
        return sum(self.cards.values())

    def unique_cards(self) -> int:
        """Number of unique printings in collection."""
        return len(self.cards)
