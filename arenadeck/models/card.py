from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CardRecord:
    """
    Static card metadata from the card database.

    Attributes:
        id: Arena's internal card ID (grpId)
        name: Card name exactly as it appears in Arena
        type: Full type line (e.g., "Creature - Goblin Shaman")
        rarity: common, uncommon, rare, mythic, token or land
        set: Set name (e.g., "Core Set 2019"), resolved to a code by the set registry
        cid: Collector number within set
        cost: Mana symbols (e.g., ("1", "r", "r"))
        frame: Frame color ints, W=1 through G=5
        reprints: Arena IDs of other printings of this card
    """

    id: int
    name: str
    type: str = ""
    rarity: str = "common"
    set: str = ""
    cid: str = ""
    cost: tuple[str, ...] = ()
    frame: tuple[int, ...] = ()
    reprints: tuple[int, ...] = ()

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CardRecord":
        """Build a record from a raw card database object."""
        return cls(
            id=int(raw["id"]),
            name=raw["name"],
            type=raw.get("type", ""),
            rarity=raw.get("rarity", "common"),
            set=raw.get("set", ""),
            cid=str(raw.get("cid", "")),
            cost=tuple(raw.get("cost") or ()),
            frame=tuple(raw.get("frame") or ()),
            reprints=tuple(int(r) for r in raw.get("reprints") or ()),
        )

    @property
    def cmc(self) -> int:
        """Converted mana cost: numeric symbols add their value, others add one."""
        total = 0
        for symbol in self.cost:
            symbol = symbol.lower().removeprefix("o")
            if symbol.isdigit():
                total += int(symbol)
            elif symbol and symbol != "x":
                total += 1
        return total
