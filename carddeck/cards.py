"""Suit, Rank and Card - immutable card representations.

Ranks run Ace high: TWO is 2 and ACE is 14.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

from carddeck.exceptions import CardParseError


class Suit(Enum):
    """Card suits, in deck construction order."""

    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    @property
    def symbol(self) -> str:
        """Return the single-character suit glyph."""
        return self.value

    def __str__(self) -> str:
        return self.symbol


class Rank(Enum):
    """Card ranks, Ace high."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """Return the single-character rank symbol (T for ten)."""
        if self.value < 10:
            return str(self.value)
        return {
            Rank.TEN: "T",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    def __str__(self) -> str:
        return self.symbol

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value >= other.value


ALL_SUITS: tuple[Suit, ...] = tuple(Suit)
ALL_RANKS: tuple[Rank, ...] = tuple(Rank)


@total_ordering
@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    @property
    def sort_key(self) -> tuple[int, int]:
        """Order by rank, then by suit declaration order."""
        return (self.rank.value, ALL_SUITS.index(self.suit))

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Th' or '10D'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise CardParseError(f"Invalid card string: {s!r}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_LOOKUP:
            raise CardParseError(f"Invalid rank: {rank_str!r}")
        if suit_str not in _SUIT_LOOKUP:
            raise CardParseError(f"Invalid suit: {suit_str!r}")

        return cls(_RANK_LOOKUP[rank_str], _SUIT_LOOKUP[suit_str])


_RANK_LOOKUP: dict[str, Rank] = {rank.symbol: rank for rank in Rank}
_RANK_LOOKUP["10"] = Rank.TEN

_SUIT_LOOKUP: dict[str, Suit] = {suit.symbol: suit for suit in Suit}
_SUIT_LOOKUP.update(
    {
        "C": Suit.CLUBS,
        "D": Suit.DIAMONDS,
        "H": Suit.HEARTS,
        "S": Suit.SPADES,
    }
)


def card(rank: Rank, suit: Suit) -> Card:
    """Shorthand for ``Card(rank, suit)``."""
    return Card(rank, suit)
