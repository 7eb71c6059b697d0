"""Domain definition exports."""

from .armour_def import ArmourDef
from .character_def import CharacterDef
from .shield_def import ShieldDef
from .weapon_def import WeaponDef

__all__ = [
    "ArmourDef",
    "CharacterDef",
    "ShieldDef",
    "WeaponDef",
]
