"""Equipment runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from duelsim.domain.defs import ShieldDef, WeaponDef


@dataclass(slots=True)
class Shield:
    """A shield carried by one actor; its durability wears down in battle."""

    id: str
    name: str
    block_chance: int
    weight: int
    durability: int
    price: int
    kind: Literal["shield"] = field(default="shield", init=False)

    @classmethod
    def from_def(cls, shield_def: ShieldDef) -> "Shield":
        return cls(
            id=shield_def.id,
            name=shield_def.name,
            block_chance=shield_def.block_chance,
            weight=shield_def.weight,
            durability=shield_def.durability,
            price=shield_def.price,
        )

    @property
    def is_intact(self) -> bool:
        return self.durability > 0


OffHand = Union[WeaponDef, Shield, None]


def off_hand_weapon(off_hand: OffHand) -> WeaponDef | None:
    """Return the off-hand weapon, or None for a shield or an empty hand."""
    if off_hand is not None and off_hand.kind == "weapon":
        return off_hand
    return None


def intact_shield(off_hand: OffHand) -> Shield | None:
    """Return the off-hand shield while it still has durability left."""
    if off_hand is not None and off_hand.kind == "shield" and off_hand.is_intact:
        return off_hand
    return None
