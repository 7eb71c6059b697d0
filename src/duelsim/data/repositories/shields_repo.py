"""Shields repository."""
from __future__ import annotations

from typing import Dict

from duelsim.data.errors import DataValidationError
from duelsim.data.repositories.base import RepositoryBase
from duelsim.domain.defs import ShieldDef


class ShieldsRepository(RepositoryBase[ShieldDef]):
    """Loads and validates shield definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("shields.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ShieldDef]:
        shields: Dict[str, ShieldDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Shield IDs must be strings.")
            context = f"shield '{raw_id}'"
            shield_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                shield_data,
                {"name", "block_chance", "weight", "durability", "price"},
                context,
            )

            block_chance = self._require_non_negative_int(shield_data["block_chance"], f"{context} block_chance")
            if block_chance > 100:
                raise DataValidationError(f"{context} block_chance must be between 0 and 100.")

            shields[raw_id] = ShieldDef(
                id=raw_id,
                name=self._require_str(shield_data["name"], f"{context} name"),
                block_chance=block_chance,
                weight=self._require_non_negative_int(shield_data["weight"], f"{context} weight"),
                durability=self._require_non_negative_int(shield_data["durability"], f"{context} durability"),
                price=self._require_non_negative_int(shield_data["price"], f"{context} price"),
            )
        return shields
