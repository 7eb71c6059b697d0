"""Actor model: intrinsic attributes plus equipped items."""
from __future__ import annotations

from dataclasses import dataclass

from duelsim.domain.defs import ArmourDef, WeaponDef

from .equipment import OffHand, off_hand_weapon


@dataclass(slots=True)
class Actor:
    """Stores the raw attributes and equipment of a fighter."""

    intelligence: int
    strength: int
    dexterity: int
    main_hand: WeaponDef
    armour: ArmourDef
    off_hand: OffHand = None

    @property
    def is_dual_wielding(self) -> bool:
        return off_hand_weapon(self.off_hand) is not None
