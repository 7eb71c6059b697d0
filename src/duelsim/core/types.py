"""Shared type aliases for the core and domain layers."""
from typing import Literal

EdgeType = Literal["blunt", "pierce", "slash"]
ArmourMaterial = Literal["none", "padded", "leather", "mail", "plate"]
Hand = Literal["main", "off"]
MitigationEdge = Literal["main_hand", "striking"]

EDGE_TYPES: tuple[EdgeType, ...] = ("blunt", "pierce", "slash")
ARMOUR_MATERIALS: tuple[ArmourMaterial, ...] = ("none", "padded", "leather", "mail", "plate")

__all__ = [
    "ARMOUR_MATERIALS",
    "ArmourMaterial",
    "EDGE_TYPES",
    "EdgeType",
    "Hand",
    "MitigationEdge",
]
