"""A player holding a hand and a pile of won cards."""

from __future__ import annotations

from .cards import Card


class Player:
    """One participant in a match."""

    def __init__(self, name: str, local: bool = True) -> None:
        self.name = name
        self.local = local
        self.hand: list[Card] = []
        self.won: list[Card] = []
        self.last_played_index = -1

    def clear_hand(self) -> None:
        """Discard every card in the hand."""
        self.hand.clear()

    def add_card(self, card: Card) -> None:
        """Put a card at the end of the hand."""
        self.hand.append(card)

    def hand_size(self) -> int:
        """Number of cards in the hand."""
        return len(self.hand)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.hand):
            raise IndexError("Índice de carta fuera de rango")

    def card_at(self, index: int) -> Card:
        """Return the card at a position in the hand."""
        self._check_index(index)
        return self.hand[index]

    def remove_card(self, index: int) -> Card:
        """Take the card at a position out of the hand and return it."""
        self._check_index(index)
        self.last_played_index = index
        return self.hand.pop(index)

    def add_won_card(self, card: Card) -> None:
        """Record a card won in a round."""
        self.won.append(card)

    def won_count(self) -> int:
        """Number of cards won so far."""
        return len(self.won)