"""Text rendering for cards, hands and decks."""

from typing import Iterable

from carddeck.cards import Card
from carddeck.deck import Deck
from carddeck.hand import Hand


def format_card(card: Card) -> str:
    """Render a card as rank then suit, e.g. 'A♣'."""
    return f"{card.rank.symbol}{card.suit.symbol}"


def format_cards(cards: Iterable[Card], sep: str = " ") -> str:
    """Render cards in the given order, joined by sep."""
    return sep.join(format_card(card) for card in cards)


def format_hand(hand: Hand) -> str:
    """Render a hand, first received card first."""
    return format_cards(hand)


def format_deck(deck: Deck, label: str = "Deck") -> str:
    """
    Render a deck in draw order (top card first) behind a label.

    >>> format_deck(Deck(), label="Ordered deck")[:22]
    'Ordered deck: A♠ K♠ Q♠'
    """
    return f"{label}: {format_cards(reversed(list(deck)))}"
