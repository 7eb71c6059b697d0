"""Armour definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from duelsim.core.types import ArmourMaterial


@dataclass(frozen=True, slots=True)
class ArmourDef:
    """Body armour with a base damage-reduction value."""

    id: str
    name: str
    value: int
    weight: int
    material: ArmourMaterial
    price: int
