"""Tests for configuration and logging setup."""

import logging
import os
import pytest
from unittest.mock import patch

from carddeck.config import DeckConfig, LoggingConfig, ShuffleConfig, default_rng, reseed
from carddeck.deck import Deck
from carddeck.logging_utils import get_logger, setup_logging


class TestShuffleConfig:
    """Tests for ShuffleConfig."""

    def test_seed_defaults_to_none(self):
        with patch.dict(os.environ, {}, clear=True):
            assert ShuffleConfig().seed is None

    def test_seed_from_env(self):
        with patch.dict(os.environ, {"CARDDECK_SEED": "1234"}):
            assert ShuffleConfig().seed == 1234

    def test_blank_seed_is_none(self):
        with patch.dict(os.environ, {"CARDDECK_SEED": "  "}):
            assert ShuffleConfig().seed is None

    def test_invalid_seed_raises(self):
        with patch.dict(os.environ, {"CARDDECK_SEED": "abc"}):
            with pytest.raises(ValueError):
                ShuffleConfig()

    def test_seeded_session_shuffles_differ_and_repeat(self, monkeypatch):
        """Test that one seed reproduces a session of distinct shuffles."""
        monkeypatch.setattr("carddeck.config._shared_rng", None)
        cfg = DeckConfig(shuffle=ShuffleConfig(seed=5))

        reseed(cfg)
        first = list(Deck.shuffled())
        second = list(Deck.shuffled())
        assert first != second

        reseed(cfg)
        assert list(Deck.shuffled()) == first
        assert list(Deck.shuffled()) == second

    def test_default_rng_is_shared(self, monkeypatch):
        monkeypatch.setattr("carddeck.config._shared_rng", None)
        monkeypatch.setattr("carddeck.config.config", DeckConfig(shuffle=ShuffleConfig(seed=5)))

        assert default_rng() is default_rng()
        assert list(Deck.shuffled()) != list(Deck.shuffled())


class TestLogging:
    """Tests for logging helpers."""

    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert LoggingConfig().level == "DEBUG"

    def test_level_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert LoggingConfig().level == "INFO"

    def test_get_logger(self):
        assert get_logger("carddeck.deck") is logging.getLogger("carddeck.deck")

    def test_setup_logging_calls_basic_config(self):
        with patch("carddeck.logging_utils.logging.basicConfig") as basic_config:
            setup_logging("warning")
        assert basic_config.call_args.kwargs["level"] == logging.WARNING

    def test_deal_logs_at_debug(self, ordered_deck, caplog):
        with caplog.at_level(logging.DEBUG, logger="carddeck.deck"):
            ordered_deck.deal(2, 3)
        assert "Dealt 2 hands of 3 cards, 46 remain" in caplog.text
