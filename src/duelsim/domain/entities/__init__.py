"""Runtime entity exports."""

from .actor import Actor
from .character import Character
from .equipment import OffHand, Shield, intact_shield, off_hand_weapon

__all__ = [
    "Actor",
    "Character",
    "OffHand",
    "Shield",
    "intact_shield",
    "off_hand_weapon",
]
