"""Armour mitigation against the different weapon edge types."""
from __future__ import annotations

from typing import Mapping

from duelsim.core.types import ArmourMaterial, EdgeType
from duelsim.domain.defs import ArmourDef

EFFECTIVENESS: Mapping[ArmourMaterial, Mapping[EdgeType, float]] = {
    "none": {"blunt": 1.00, "pierce": 1.00, "slash": 1.00},
    "padded": {"blunt": 1.00, "pierce": 0.50, "slash": 0.75},
    "leather": {"blunt": 0.85, "pierce": 0.66, "slash": 1.00},
    "mail": {"blunt": 0.90, "pierce": 0.75, "slash": 1.00},
    "plate": {"blunt": 0.95, "pierce": 0.85, "slash": 1.00},
}


def armour_effectiveness(material: ArmourMaterial, edge: EdgeType) -> float:
    try:
        return EFFECTIVENESS[material][edge]
    except KeyError as exc:
        raise ValueError(f"No mitigation entry for {material!r} armour against {edge!r} edges.") from exc


def mitigation(armour: ArmourDef, edge: EdgeType) -> float:
    """Damage absorbed by ``armour`` from a single hit with the given edge."""
    return armour.value * armour_effectiveness(armour.material, edge)
