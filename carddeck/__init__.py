"""Standard 52-card deck: cards, shuffling and dealing hands."""

from carddeck.cards import ALL_RANKS, ALL_SUITS, Card, Rank, Suit, card
from carddeck.deck import DECK_SIZE, Deck
from carddeck.display import format_card, format_cards, format_deck, format_hand
from carddeck.exceptions import CardError, CardParseError, NotEnoughCardsError
from carddeck.hand import Hand

__all__ = [
    "ALL_RANKS",
    "ALL_SUITS",
    "Card",
    "CardError",
    "CardParseError",
    "DECK_SIZE",
    "Deck",
    "Hand",
    "NotEnoughCardsError",
    "Rank",
    "Suit",
    "card",
    "format_card",
    "format_cards",
    "format_deck",
    "format_hand",
]
