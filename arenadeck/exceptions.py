"""
Lookup failures raised by the card database and set registry.

Both derive from KeyError so callers treating them as plain missing-key
faults keep working.
"""


class ArenaDeckError(Exception):
    """Base class for arenadeck errors."""


class CardNotFoundError(ArenaDeckError, KeyError):
    """Raised when a card id has no record in the card database."""

    def __init__(self, card_id: int):
        self.card_id = card_id
        super().__init__(f"Card {card_id} not found in card database")

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownSetError(ArenaDeckError, KeyError):
    """Raised when a set name has no entry in the set registry."""

    def __init__(self, set_name: str):
        self.set_name = set_name
        super().__init__(f"Set '{set_name}' not found in set registry")

    def __str__(self) -> str:
        return str(self.args[0])


class MissingReprintError(ArenaDeckError, LookupError):
    """Raised when a reprint-only card has no other printing to export as."""

    def __init__(self, card_id: int):
        self.card_id = card_id
        super().__init__(f"Card {card_id} has no reprint to export as")
