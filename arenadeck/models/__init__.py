from arenadeck.models.card import CardRecord
from arenadeck.models.card_list import CardEntry, CardsList
from arenadeck.models.collection import OwnedCollection
from arenadeck.models.colors import Colors
from arenadeck.models.deck import RARITIES, Deck

__all__ = [
    "CardEntry",
    "CardRecord",
    "CardsList",
    "Colors",
    "Deck",
    "OwnedCollection",
    "RARITIES",
]
