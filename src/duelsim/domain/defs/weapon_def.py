"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from duelsim.core.types import EdgeType


@dataclass(frozen=True, slots=True)
class WeaponDef:
    """Weapon definition; shared by every actor that equips it."""

    id: str
    name: str
    damage: int
    weight: int
    edge: EdgeType
    price: int
    kind: Literal["weapon"] = field(default="weapon", init=False)
