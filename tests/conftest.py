from typing import Any

import pytest

from arenadeck.services.card_database import CardDatabase
from arenadeck.services.set_registry import SetRegistry

BOLT = 1
GOBLIN_GUIDE = 2
MOUNTAIN = 3
SHOCK = 4
NEGATE = 5
KARN_MED = 6
KARN = 7
TREASURE = 8
LLANOWAR_ELVES = 9


@pytest.fixture
def raw_cards() -> list[dict[str, Any]]:
    """Card database objects as they appear in the JSON export."""
    return [
        {
            "id": BOLT,
            "name": "Bolt",
            "type": "Instant",
            "rarity": "common",
            "set": "Core Set 2019",
            "cid": "141",
            "cost": ["r"],
        },
        {
            "id": GOBLIN_GUIDE,
            "name": "Goblin Guide",
            "type": "Creature - Goblin Scout",
            "rarity": "rare",
            "set": "Dominaria",
            "cid": "126",
            "cost": ["r"],
        },
        {
            "id": MOUNTAIN,
            "name": "Mountain",
            "type": "Basic Land - Mountain",
            "rarity": "land",
            "set": "Core Set 2019",
            "cid": "275",
            "frame": [4],
        },
        {
            "id": SHOCK,
            "name": "Shock",
            "type": "Instant",
            "rarity": "common",
            "set": "Dominaria",
            "cid": "144",
            "cost": ["r"],
        },
        {
            "id": NEGATE,
            "name": "Negate",
            "type": "Instant",
            "rarity": "common",
            "set": "Dominaria",
            "cid": "59",
            "cost": ["1", "u"],
        },
        {
            "id": KARN_MED,
            "name": "Karn, Scion of Stone",
            "type": "Legendary Planeswalker - Karn",
            "rarity": "mythic",
            "set": "Mythic Edition",
            "cid": "3",
            "cost": ["4"],
            "reprints": [KARN],
        },
        {
            "id": KARN,
            "name": "Karn, Scion of Stone",
            "type": "Legendary Planeswalker - Karn",
            "rarity": "mythic",
            "set": "Dominaria",
            "cid": "1",
            "cost": ["4"],
            "reprints": [KARN_MED],
        },
        {
            "id": TREASURE,
            "name": "Treasure",
            "type": "Token Artifact - Treasure",
            "rarity": "token",
            "set": "Ixalan",
            "cid": "T1",
        },
        {
            "id": LLANOWAR_ELVES,
            "name": "Llanowar Elves",
            "type": "Creature - Elf Druid",
            "rarity": "common",
            "set": "Dominaria",
            "cid": "168",
            "cost": ["g"],
        },
    ]


@pytest.fixture
def card_db(raw_cards: list[dict[str, Any]]) -> CardDatabase:
    """Sample card database for testing."""
    return CardDatabase.from_records(raw_cards)


@pytest.fixture
def raw_sets() -> dict[str, dict[str, Any]]:
    return {
        "Core Set 2019": {"code": "M19"},
        "Dominaria": {"code": "DOM", "arenacode": "DAR"},
        "Ixalan": {"code": "XLN"},
        "Mythic Edition": {"code": "MED"},
        "Welcome Deck 2019": {},
    }


@pytest.fixture
def set_registry(raw_sets: dict[str, dict[str, Any]]) -> SetRegistry:
    """Sample set registry for testing."""
    return SetRegistry.from_dict(raw_sets)


@pytest.fixture
def deck_record() -> dict[str, Any]:
    """Mono-red deck record with a blue sideboard card."""
    return {
        "id": "deck-1",
        "name": "Mono Red",
        "format": "Standard",
        "lastUpdated": "2019-01-01T00:00:00",
        "deckTileId": 12345,
        "mainDeck": [
            {"id": MOUNTAIN, "quantity": 20},
            {"id": BOLT, "quantity": 4},
            {"id": GOBLIN_GUIDE, "quantity": 4},
            {"id": SHOCK, "quantity": 4},
        ],
        "sideboard": [
            {"id": NEGATE, "quantity": 2},
        ],
    }
