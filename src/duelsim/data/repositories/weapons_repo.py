"""Weapons repository."""
from __future__ import annotations

from typing import Dict

from duelsim.core.types import EDGE_TYPES
from duelsim.data.errors import DataValidationError
from duelsim.data.repositories.base import RepositoryBase
from duelsim.domain.defs import WeaponDef


class WeaponsRepository(RepositoryBase[WeaponDef]):
    """Loads and validates weapon definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("weapons.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, WeaponDef]:
        weapons: Dict[str, WeaponDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Weapon IDs must be strings.")
            context = f"weapon '{raw_id}'"
            weapon_data = self._require_mapping(payload, context)
            self._assert_exact_fields(weapon_data, {"name", "damage", "weight", "edge", "price"}, context)

            weapons[raw_id] = WeaponDef(
                id=raw_id,
                name=self._require_str(weapon_data["name"], f"{context} name"),
                damage=self._require_non_negative_int(weapon_data["damage"], f"{context} damage"),
                weight=self._require_non_negative_int(weapon_data["weight"], f"{context} weight"),
                edge=self._require_choice(weapon_data["edge"], EDGE_TYPES, f"{context} edge"),
                price=self._require_non_negative_int(weapon_data["price"], f"{context} price"),
            )
        return weapons
