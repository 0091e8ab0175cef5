"""
Set registry service.

Resolves set names, as stored on card records, to the set codes used by
exports. Arena sometimes uses its own code for a set; that code wins
when present.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from arenadeck.config import settings
from arenadeck.exceptions import UnknownSetError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SetInfo:
    """
    A card set.

    Attributes:
        name: Set name (e.g., "Dominaria")
        code: Printed set code (e.g., "DOM")
        arenacode: Code Arena expects on import, when it differs from code
    """

    name: str
    code: str | None = None
    arenacode: str | None = None


class SetRegistry:
    """Mapping from set name to SetInfo."""

    def __init__(self, sets: dict[str, SetInfo] | None = None):
        self._sets: dict[str, SetInfo] = sets or {}

    def __contains__(self, set_name: object) -> bool:
        return set_name in self._sets

    def __len__(self) -> int:
        return len(self._sets)

    def get(self, set_name: str) -> SetInfo:
        """
        Get a set by name.

        Raises:
            UnknownSetError: If the set is not registered
        """
        try:
            return self._sets[set_name]
        except KeyError:
            raise UnknownSetError(set_name) from None

    def get_set_code(self, set_name: str) -> str:
        """
        Derive the code for a set.

        Returns the registered code, or the set name itself when the
        registry has no code for it. Empty names give an empty code.
        """
        if not set_name:
            return ""
        info = self._sets.get(set_name)
        if info is None or not info.code:
            return set_name
        return info.code

    def get_arena_code(self, set_name: str) -> str:
        """
        Code to use in Arena exports.

        Raises:
            UnknownSetError: If the set is not registered
        """
        return self.get(set_name).arenacode or self.get_set_code(set_name)

    @classmethod
    def from_dict(cls, data: dict[str, dict[str, Any]]) -> "SetRegistry":
        """Build a registry from {set name: {"code": ..., "arenacode": ...}}."""
        return cls(
            {
                name: SetInfo(name=name, code=raw.get("code"), arenacode=raw.get("arenacode"))
                for name, raw in data.items()
            }
        )


def load_set_registry(path: Path | None = None) -> SetRegistry:
    """
    Load set registry from file.

    Args:
        path: Path to JSON file. Defaults to settings.set_registry_path

    Raises:
        FileNotFoundError: If registry file doesn't exist
    """
    if path is None:
        path = settings.set_registry_path

    if not path.exists():
        raise FileNotFoundError(
            f"Set registry not found at {path}. Set SET_REGISTRY_PATH to a sets JSON file."
        )

    with open(path, encoding="utf-8") as f:
        registry = SetRegistry.from_dict(json.load(f))

    logger.info("set_registry_loaded", extra={"path": str(path), "set_count": len(registry)})
    return registry


@lru_cache(maxsize=1)
def get_set_registry() -> SetRegistry:
    """Get cached set registry."""
    return load_set_registry()
