"""Turn-based melee duel simulator."""

__version__ = "0.1.0"
