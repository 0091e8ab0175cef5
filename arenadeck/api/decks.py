"""
Deck API endpoints.

Builds a Deck from a posted Arena deck record and returns one of its
derived views: exports, colors, missing wildcards or the drawn layout.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from arenadeck.exceptions import CardNotFoundError, MissingReprintError, UnknownSetError
from arenadeck.models.collection import OwnedCollection
from arenadeck.models.deck import Deck
from arenadeck.services.card_database import CardDatabase, get_card_database
from arenadeck.services.renderer import RecordingTileSink
from arenadeck.services.set_registry import SetRegistry, get_set_registry
from arenadeck.services.wildcards import wildcard_policy

router = APIRouter(prefix="/decks", tags=["decks"])


class CardEntryPayload(BaseModel):
    """One deck entry as Arena stores it."""

    id: int
    quantity: int = Field(default=1, ge=0)
    mensurable: bool = True


class DeckPayload(BaseModel):
    """Raw Arena deck record. Field names follow Arena's own keys."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    name: str = ""
    format: str | None = None
    last_updated: str = Field(default="", alias="lastUpdated")
    deck_tile_id: int | None = Field(default=None, alias="deckTileId")
    tags: list[str] | None = None
    custom: bool = False
    main_deck: list[CardEntryPayload] | None = Field(default=None, alias="mainDeck")
    sideboard: list[CardEntryPayload] | None = None

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class WildcardsRequest(BaseModel):
    """Deck plus the player's owned copies by card ID."""

    deck: DeckPayload
    owned: dict[int, Annotated[int, Field(ge=0)]] = Field(default_factory=dict)


class ExportResponse(BaseModel):
    """Response model for a deck export."""

    name: str
    format: str
    text: str


class ColorsResponse(BaseModel):
    """Response model for deck colors (W=1 through G=5)."""

    colors: list[int]


class LayoutElementResponse(BaseModel):
    """A drawn separator or tile."""

    kind: str
    rank: int | None = None
    count: int | None = None
    card_id: int | None = None
    key: str | None = None
    quantity: int | None = None


class LayoutResponse(BaseModel):
    """Response model for a drawn deck."""

    elements: list[LayoutElementResponse]


CardDb = Annotated[CardDatabase, Depends(get_card_database)]
Sets = Annotated[SetRegistry, Depends(get_set_registry)]


@contextmanager
def _lookup_errors() -> Iterator[None]:
    """Translate card and set lookup failures into HTTP errors."""
    try:
        yield
    except CardNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except (UnknownSetError, MissingReprintError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e


@router.post("/export/txt", response_model=ExportResponse)
async def export_txt(payload: DeckPayload, card_db: CardDb) -> ExportResponse:
    """
    Export a deck as plain "<quantity> <name>" lines.

    Returns 404 if the deck references an unknown card.
    """
    with _lookup_errors():
        deck = Deck(payload.to_record(), card_db=card_db)
        text = deck.get_export_txt()
    return ExportResponse(name=deck.name, format="txt", text=text)


@router.post("/export/arena", response_model=ExportResponse)
async def export_arena(payload: DeckPayload, card_db: CardDb, sets: Sets) -> ExportResponse:
    """
    Export a deck in Arena import format.

    Returns 404 for an unknown card, 422 if a card's set cannot be
    resolved to a code or a Mythic Edition card has no reprint.
    """
    with _lookup_errors():
        deck = Deck(payload.to_record(), card_db=card_db)
        text = deck.get_export_arena(sets)
    return ExportResponse(name=deck.name, format="arena", text=text)


@router.post("/colors", response_model=ColorsResponse)
async def deck_colors(
    payload: DeckPayload,
    card_db: CardDb,
    count_mainboard: Annotated[bool, Query()] = True,
    count_sideboard: Annotated[bool, Query()] = False,
) -> ColorsResponse:
    """Colors of the mainboard and, if asked, the sideboard."""
    with _lookup_errors():
        deck = Deck(payload.to_record(), card_db=card_db)
        colors = deck.get_colors(count_mainboard, count_sideboard)
    return ColorsResponse(colors=colors.get())


@router.post("/wildcards", response_model=dict[str, int])
async def missing_wildcards(
    request: WildcardsRequest,
    card_db: CardDb,
    count_mainboard: Annotated[bool, Query()] = True,
    count_sideboard: Annotated[bool, Query()] = True,
) -> dict[str, int]:
    """Wildcards per rarity needed to complete the deck from owned cards."""
    policy = wildcard_policy(OwnedCollection(cards=dict(request.owned)), card_db)
    with _lookup_errors():
        deck = Deck(request.deck.to_record(), card_db=card_db)
        return deck.get_missing_wildcards(policy, count_mainboard, count_sideboard)


@router.post("/layout", response_model=LayoutResponse)
async def deck_layout(payload: DeckPayload, card_db: CardDb) -> LayoutResponse:
    """Separators and tiles of the deck, in draw order."""
    sink = RecordingTileSink()
    with _lookup_errors():
        deck = Deck(payload.to_record(), card_db=card_db)
        deck.draw(sink)
    return LayoutResponse(
        elements=[
            LayoutElementResponse(
                kind=e.kind,
                rank=e.rank,
                count=e.count,
                card_id=e.card_id,
                key=e.key,
                quantity=e.quantity,
            )
            for e in sink.elements
        ]
    )
