"""Tests for the deck export job."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from arenadeck.config import settings
from arenadeck.jobs.export_deck import export_deck_file, main
from arenadeck.services.card_database import CardDatabase
from arenadeck.services.set_registry import SetRegistry


@pytest.fixture
def deck_path(tmp_path: Path, deck_record: dict[str, Any]) -> Path:
    path = tmp_path / "deck.json"
    path.write_text(json.dumps(deck_record), encoding="utf-8")
    return path


class TestExportDeckFile:
    def test_txt(self, deck_path: Path, card_db: CardDatabase) -> None:
        text = export_deck_file(deck_path, "txt", card_db)
        assert text.startswith("4 Goblin Guide\r\n")

    def test_arena(
        self, deck_path: Path, card_db: CardDatabase, set_registry: SetRegistry
    ) -> None:
        text = export_deck_file(deck_path, "arena", card_db, set_registry)
        assert text.endswith("2 Negate (DAR) 59 \r\n")

    def test_arena_requires_set_registry(self, deck_path: Path, card_db: CardDatabase) -> None:
        with pytest.raises(ValueError, match="set registry"):
            export_deck_file(deck_path, "arena", card_db)

    def test_unknown_format(self, deck_path: Path, card_db: CardDatabase) -> None:
        with pytest.raises(ValueError, match="Unknown export format"):
            export_deck_file(deck_path, "mtgo", card_db)


class TestMain:
    def test_writes_export_and_configures_logging(
        self,
        tmp_path: Path,
        deck_path: Path,
        raw_cards: list[dict[str, Any]],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        cards_path = tmp_path / "cards.json"
        cards_path.write_text(json.dumps(raw_cards), encoding="utf-8")
        monkeypatch.setattr(
            "sys.argv",
            ["arenadeck-export", str(deck_path), "--format", "txt", "--cards", str(cards_path)],
        )

        with patch("arenadeck.jobs.export_deck.logging.basicConfig") as basic_config:
            main()

        basic_config.assert_called_once()
        assert basic_config.call_args.kwargs["level"] == settings.log_level
        assert capsys.readouterr().out.startswith("4 Goblin Guide\r\n")
