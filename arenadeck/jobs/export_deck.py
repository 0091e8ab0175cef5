"""
Export a saved Arena deck record from the command line.

Usage:
    python -m arenadeck.jobs.export_deck deck.json --format arena
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from arenadeck.config import settings
from arenadeck.models.deck import Deck
from arenadeck.services.card_database import CardDatabase, load_card_database
from arenadeck.services.set_registry import SetRegistry, load_set_registry

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("txt", "arena")


def export_deck_file(
    deck_path: Path,
    export_format: str,
    card_db: CardDatabase,
    set_registry: SetRegistry | None = None,
) -> str:
    """
    Read a deck record from JSON and export it.

    Args:
        deck_path: JSON file holding one Arena deck record
        export_format: "txt" or "arena"
        card_db: Card database to resolve entries against
        set_registry: Required for the arena format

    Returns:
        Exported deck text

    Raises:
        ValueError: If the format is unknown or arena lacks a set registry
        CardNotFoundError: If the deck references an unknown card
    """
    if export_format not in EXPORT_FORMATS:
        raise ValueError(f"Unknown export format: {export_format}")

    with open(deck_path, encoding="utf-8") as f:
        record = json.load(f)

    deck = Deck(record, card_db=card_db)
    logger.info("Exporting deck %r as %s", deck.name, export_format)

    if export_format == "txt":
        return deck.get_export_txt()

    if set_registry is None:
        raise ValueError("Arena export needs a set registry")
    return deck.get_export_arena(set_registry)


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Export an Arena deck record")
    parser.add_argument("deck", type=Path, help="Path to deck record JSON")
    parser.add_argument(
        "--format",
        choices=EXPORT_FORMATS,
        default="arena",
        help="Export format (default: arena)",
    )
    parser.add_argument("--cards", type=Path, help="Card database JSON (default: settings)")
    parser.add_argument("--sets", type=Path, help="Set registry JSON (default: settings)")

    args = parser.parse_args()

    if not args.deck.exists():
        print(f"Error: Deck file not found: {args.deck}")
        sys.exit(1)

    card_db = load_card_database(args.cards)
    set_registry = load_set_registry(args.sets) if args.format == "arena" else None

    sys.stdout.write(export_deck_file(args.deck, args.format, card_db, set_registry))


if __name__ == "__main__":
    main()
