"""Hands of cards held by a participant."""

from typing import Iterable, Iterator

from carddeck.cards import Card


class Hand:
    """An ordered, growable collection of cards, first received first."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def push(self, card: Card) -> None:
        """Add a card to the end of the hand."""
        self._cards.append(card)

    def count(self) -> int:
        """Return the number of cards in the hand. Same as ``len(hand)``."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if the hand holds no cards."""
        return not self._cards

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the cards. Changing it does not change the hand."""
        return tuple(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Hand({self._cards!r})"
