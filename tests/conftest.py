"""Pytest fixtures for card deck tests."""

import pytest
from random import Random

from carddeck.cards import Card, Rank, Suit
from carddeck.deck import Deck


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def ordered_deck(rng):
    """A fresh, unshuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck.shuffled(rng=rng)


@pytest.fixture
def full_set():
    """Every rank/suit combination, once."""
    return {Card(rank, suit) for suit in Suit for rank in Rank}
