"""Tests for set registry service."""

import json
from pathlib import Path
from typing import Any

import pytest

from arenadeck.exceptions import UnknownSetError
from arenadeck.services.set_registry import SetInfo, SetRegistry, load_set_registry


class TestSetRegistry:
    def test_get(self, set_registry: SetRegistry) -> None:
        assert set_registry.get("Dominaria") == SetInfo(
            name="Dominaria", code="DOM", arenacode="DAR"
        )

    def test_get_unknown_raises(self, set_registry: SetRegistry) -> None:
        with pytest.raises(UnknownSetError) as exc_info:
            set_registry.get("Alpha")
        assert exc_info.value.set_name == "Alpha"

    def test_set_code_from_registry(self, set_registry: SetRegistry) -> None:
        assert set_registry.get_set_code("Core Set 2019") == "M19"

    def test_set_code_falls_back_to_name(self, set_registry: SetRegistry) -> None:
        assert set_registry.get_set_code("Welcome Deck 2019") == "Welcome Deck 2019"
        assert set_registry.get_set_code("Alpha") == "Alpha"

    def test_set_code_empty_name(self, set_registry: SetRegistry) -> None:
        assert set_registry.get_set_code("") == ""

    def test_arena_code_prefers_arenacode(self, set_registry: SetRegistry) -> None:
        assert set_registry.get_arena_code("Dominaria") == "DAR"

    def test_arena_code_falls_back_to_set_code(self, set_registry: SetRegistry) -> None:
        assert set_registry.get_arena_code("Core Set 2019") == "M19"
        assert set_registry.get_arena_code("Welcome Deck 2019") == "Welcome Deck 2019"

    def test_arena_code_unknown_set_raises(self, set_registry: SetRegistry) -> None:
        with pytest.raises(UnknownSetError):
            set_registry.get_arena_code("Alpha")


class TestLoadSetRegistry:
    def test_load(self, tmp_path: Path, raw_sets: dict[str, dict[str, Any]]) -> None:
        path = tmp_path / "sets.json"
        path.write_text(json.dumps(raw_sets), encoding="utf-8")

        registry = load_set_registry(path)

        assert len(registry) == len(raw_sets)
        assert "Ixalan" in registry

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Set registry not found"):
            load_set_registry(tmp_path / "missing.json")
