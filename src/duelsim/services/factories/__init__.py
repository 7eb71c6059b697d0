"""Factory helpers for runtime entities."""

from .character_factory import create_character, validate_actor
from .combatant_factory import make_combatant, refresh_combatant

__all__ = [
    "create_character",
    "make_combatant",
    "refresh_combatant",
    "validate_actor",
]
