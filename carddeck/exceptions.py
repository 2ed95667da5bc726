"""Exceptions raised by the card deck library."""


class CardError(Exception):
    """Base class for card deck errors."""


class CardParseError(CardError, ValueError):
    """A string could not be parsed into a card."""


class NotEnoughCardsError(CardError):
    """More cards were requested than the deck holds.

    This is a caller error: check ``len(deck)`` before dealing.
    """

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot take {requested} cards from a deck holding {available}"
        )
