"""The standard 52-card deck."""

from random import Random
from typing import Iterator

from carddeck.cards import ALL_RANKS, ALL_SUITS, Card
from carddeck.config import default_rng
from carddeck.exceptions import NotEnoughCardsError
from carddeck.hand import Hand
from carddeck.logging_utils import get_logger

logger = get_logger(__name__)

DECK_SIZE = len(ALL_SUITS) * len(ALL_RANKS)


class Deck:
    """
    A standard 52-card deck.

    Cards are stored bottom to top, so the top of the deck is the end of
    the list and drawing takes from there. A fresh deck holds every suit
    in turn, each from Two up to Ace, which puts the Ace of Spades on top.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new ordered deck.

        Args:
            rng: Random number generator for shuffling. Defaults to one
                seeded from CARDDECK_SEED, or from OS entropy when unset.
        """
        self._rng = rng or default_rng()
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def shuffled(cls, rng: Random | None = None) -> "Deck":
        """Return a new deck, already shuffled."""
        deck = cls(rng=rng)
        deck.shuffle()
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = [Card(rank, suit) for suit in ALL_SUITS for rank in ALL_RANKS]
        logger.debug("Deck reset to %d ordered cards", len(self._cards))

    def shuffle(self) -> None:
        """Shuffle the cards remaining in the deck."""
        self._rng.shuffle(self._cards)
        logger.debug("Shuffled %d cards", len(self._cards))

    def draw(self) -> Card | None:
        """Remove and return the top card, or None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def draw_many(self, n: int) -> list[Card]:
        """
        Draw n cards from the top, in draw order.

        Raises:
            ValueError: n is negative.
            NotEnoughCardsError: fewer than n cards remain. The deck is
                left untouched.
        """
        if n < 0:
            raise ValueError("Cannot draw a negative number of cards")
        self._require(n)
        return [self._cards.pop() for _ in range(n)]

    def deal(self, hand_count: int, cards_per_hand: int) -> list[Hand]:
        """
        Deal cards round-robin into new hands.

        Each round gives one card to every hand in turn, hand 0 first.

        Args:
            hand_count: Number of hands to create.
            cards_per_hand: Number of cards each hand receives.

        Returns:
            The new hands, indexed 0..hand_count-1.

        Raises:
            ValueError: either count is negative.
            NotEnoughCardsError: the deck holds fewer than
                hand_count * cards_per_hand cards. Nothing is drawn.
        """
        if hand_count < 0 or cards_per_hand < 0:
            raise ValueError("Hand count and cards per hand must be non-negative")
        self._require(hand_count * cards_per_hand)

        hands = [Hand() for _ in range(hand_count)]
        for _ in range(cards_per_hand):
            for hand in hands:
                hand.push(self._cards.pop())

        logger.debug(
            "Dealt %d hands of %d cards, %d remain",
            hand_count,
            cards_per_hand,
            len(self._cards),
        )
        return hands

    def peek(self, index: int) -> Card:
        """Return the card at index (0 is the bottom) without removing it."""
        return self._cards[index]

    def count(self) -> int:
        """Return the number of cards remaining. Same as ``len(deck)``."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if no cards remain."""
        return not self._cards

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining. Same as ``len(deck)``."""
        return len(self._cards)

    def _require(self, n: int) -> None:
        if n > len(self._cards):
            raise NotEnoughCardsError(requested=n, available=len(self._cards))

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
