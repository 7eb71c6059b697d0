"""Shield definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ShieldDef:
    """Catalogue entry for a shield; runtime wear lives on ``Shield``."""

    id: str
    name: str
    block_chance: int
    weight: int
    durability: int
    price: int
