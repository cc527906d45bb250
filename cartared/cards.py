"""Cards of the four-colour deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

VALUES_PER_COLOR = 10


class Color(IntEnum):
    """Card colours, in ascending rank order."""

    AMARILLO = 0
    AZUL = 1
    ROJO = 2
    NEGRO = 3

    @property
    def label(self) -> str:
        """The display name of the colour."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Card:
    """A card with a colour and a value from 0 to 9."""

    color: Color = Color.AMARILLO
    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", Color(self.color))

    def __str__(self) -> str:
        return f"[{self.color.label} {self.value}]"

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return (self.color, self.value) > (other.color, other.value)


def full_deck() -> list[Card]:
    """Return the 40 cards of a complete deck, ordered by colour then value."""
    return [Card(color, value) for color in Color for value in range(VALUES_PER_COLOR)]