"""
Color identity profile.

Colors are tracked as five flags. Merges are additive and idempotent:
adding a color that is already present changes nothing.
"""

from collections.abc import Iterable

WHITE = 1
BLUE = 2
BLACK = 3
RED = 4
GREEN = 5

COLOR_LETTERS = {"w": WHITE, "u": BLUE, "b": BLACK, "r": RED, "g": GREEN}


class Colors:
    """Accumulated color identity of a group of cards."""

    def __init__(self) -> None:
        self.w = False
        self.u = False
        self.b = False
        self.r = False
        self.g = False

    def __repr__(self) -> str:
        return f"Colors({self.get()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colors):
            return NotImplemented
        return self.get() == other.get()

    def __len__(self) -> int:
        return self.length

    @property
    def length(self) -> int:
        """Number of distinct colors present."""
        return len(self.get())

    def get(self) -> list[int]:
        """Color ints present, in WUBRG order."""
        flags = (self.w, self.u, self.b, self.r, self.g)
        return [color for color, present in zip(range(WHITE, GREEN + 1), flags) if present]

    def add_from_cost(self, cost: Iterable[str]) -> "Colors":
        """
        Add the colors of a mana cost.

        Hybrid symbols (e.g., "wu") add every color they name.
        Generic and colorless symbols add nothing.
        """
        for symbol in cost:
            symbol = symbol.lower().removeprefix("o")
            for letter in symbol:
                color = COLOR_LETTERS.get(letter)
                if color is not None:
                    self._set(color)
        return self

    def add_from_array(self, colors: Iterable[int]) -> "Colors":
        """Add colors given as ints (W=1 through G=5)."""
        for color in colors:
            self._set(color)
        return self

    def add_from_color(self, other: "Colors") -> "Colors":
        """Merge another profile into this one."""
        return self.add_from_array(other.get())

    def _set(self, color: int) -> None:
        if color == WHITE:
            self.w = True
        elif color == BLUE:
            self.u = True
        elif color == BLACK:
            self.b = True
        elif color == RED:
            self.r = True
        elif color == GREEN:
            self.g = True
