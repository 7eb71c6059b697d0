"""Character definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CharacterDef:
    """Starting attributes and equipment ids for a named character."""

    id: str
    name: str
    intelligence: int
    strength: int
    dexterity: int
    main_hand_id: str
    armour_id: str
    off_hand_id: str | None = None
    gold: int = 0
    experience: int = 0
