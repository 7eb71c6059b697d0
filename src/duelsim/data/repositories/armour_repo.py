"""Armour repository."""
from __future__ import annotations

from typing import Dict

from duelsim.core.types import ARMOUR_MATERIALS
from duelsim.data.errors import DataValidationError
from duelsim.data.repositories.base import RepositoryBase
from duelsim.domain.defs import ArmourDef


class ArmourRepository(RepositoryBase[ArmourDef]):
    """Loads and validates armour definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("armour.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ArmourDef]:
        armour: Dict[str, ArmourDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Armour IDs must be strings.")
            context = f"armour '{raw_id}'"
            armour_data = self._require_mapping(payload, context)
            self._assert_exact_fields(armour_data, {"name", "value", "weight", "material", "price"}, context)

            armour[raw_id] = ArmourDef(
                id=raw_id,
                name=self._require_str(armour_data["name"], f"{context} name"),
                value=self._require_non_negative_int(armour_data["value"], f"{context} value"),
                weight=self._require_non_negative_int(armour_data["weight"], f"{context} weight"),
                material=self._require_choice(armour_data["material"], ARMOUR_MATERIALS, f"{context} material"),
                price=self._require_non_negative_int(armour_data["price"], f"{context} price"),
            )
        return armour
