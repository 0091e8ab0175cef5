"""
ArenaDeck services.

Card and set lookups, card ordering, wildcard policy and render sinks.
"""

from arenadeck.services.card_database import (
    CardDatabase,
    get_card_database,
    load_card_database,
)
from arenadeck.services.card_sort import (
    SIDEBOARD_SEPARATOR,
    compare_cards,
    get_card_type_sort,
)
from arenadeck.services.renderer import (
    RecordingTileSink,
    TileElement,
    TileSink,
    make_id,
)
from arenadeck.services.set_registry import (
    SetInfo,
    SetRegistry,
    get_set_registry,
    load_set_registry,
)
from arenadeck.services.wildcards import (
    get_wildcards_missing,
    wildcard_policy,
)

__all__ = [
    "CardDatabase",
    "get_card_database",
    "load_card_database",
    "SIDEBOARD_SEPARATOR",
    "compare_cards",
    "get_card_type_sort",
    "RecordingTileSink",
    "TileElement",
    "TileSink",
    "make_id",
    "SetInfo",
    "SetRegistry",
    "get_set_registry",
    "load_set_registry",
    "get_wildcards_missing",
    "wildcard_policy",
]
