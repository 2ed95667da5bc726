"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field
from random import Random


def _parse_seed() -> int | None:
    """Parse CARDDECK_SEED environment variable."""
    raw = os.getenv("CARDDECK_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"CARDDECK_SEED must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class ShuffleConfig:
    """Shuffle configuration."""

    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass(frozen=True)
class DeckConfig:
    """Library configuration."""

    shuffle: ShuffleConfig = field(default_factory=ShuffleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = DeckConfig()

# Shared by every deck created without its own generator
_shared_rng: Random | None = None


def default_rng() -> Random:
    """
    Return the random source used when a deck is created without one.

    The generator is created once, seeded from CARDDECK_SEED, and shared,
    so a seed reproduces a whole session while each shuffle still draws
    fresh randomness.
    """
    global _shared_rng
    if _shared_rng is None:
        _shared_rng = Random(config.shuffle.seed)
    return _shared_rng


def reseed(cfg: DeckConfig | None = None) -> Random:
    """Replace the shared generator with one seeded from cfg (or the global config)."""
    global _shared_rng
    cfg = cfg or config
    _shared_rng = Random(cfg.shuffle.seed)
    return _shared_rng
