"""Characters repository with equipment reference validation."""
from __future__ import annotations

from typing import Dict

from duelsim.data.errors import DataReferenceError, DataValidationError
from duelsim.data.repositories.armour_repo import ArmourRepository
from duelsim.data.repositories.base import RepositoryBase
from duelsim.data.repositories.shields_repo import ShieldsRepository
from duelsim.data.repositories.weapons_repo import WeaponsRepository
from duelsim.domain.defs import CharacterDef


class CharactersRepository(RepositoryBase[CharacterDef]):
    """Loads characters and ensures referenced equipment exists.

    ``off_hand`` may name either a weapon or a shield, or be omitted/null for
    an empty hand. An id present in both catalogues is rejected as ambiguous.
    """

    def __init__(
        self,
        weapons_repo: WeaponsRepository | None = None,
        shields_repo: ShieldsRepository | None = None,
        armour_repo: ArmourRepository | None = None,
        base_path=None,
    ) -> None:
        super().__init__("characters.json", base_path)
        self._weapons_repo = weapons_repo or WeaponsRepository(base_path=base_path)
        self._shields_repo = shields_repo or ShieldsRepository(base_path=base_path)
        self._armour_repo = armour_repo or ArmourRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CharacterDef]:
        weapon_ids = set(self._weapons_repo.ids())
        shield_ids = set(self._shields_repo.ids())
        armour_ids = set(self._armour_repo.ids())

        characters: Dict[str, CharacterDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Character IDs must be strings.")
            context = f"character '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {"name", "intelligence", "strength", "dexterity", "main_hand", "armour"},
                context,
                optional_fields={"off_hand", "gold", "experience"},
            )

            main_hand = self._require_str(data["main_hand"], f"{context} main_hand")
            armour = self._require_str(data["armour"], f"{context} armour")
            off_hand_raw = data.get("off_hand")
            off_hand = None if off_hand_raw is None else self._require_str(off_hand_raw, f"{context} off_hand")

            if main_hand not in weapon_ids:
                raise DataReferenceError(f"{context} references missing weapon '{main_hand}'.")
            if armour not in armour_ids:
                raise DataReferenceError(f"{context} references missing armour '{armour}'.")
            if off_hand is not None:
                in_weapons = off_hand in weapon_ids
                in_shields = off_hand in shield_ids
                if not in_weapons and not in_shields:
                    raise DataReferenceError(f"{context} references missing off-hand item '{off_hand}'.")
                if in_weapons and in_shields:
                    raise DataValidationError(f"{context} off_hand '{off_hand}' is both a weapon and a shield.")

            characters[raw_id] = CharacterDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                intelligence=self._require_non_negative_int(data["intelligence"], f"{context} intelligence"),
                strength=self._require_non_negative_int(data["strength"], f"{context} strength"),
                dexterity=self._require_non_negative_int(data["dexterity"], f"{context} dexterity"),
                main_hand_id=main_hand,
                armour_id=armour,
                off_hand_id=off_hand,
                gold=self._require_non_negative_int(data.get("gold", 0), f"{context} gold"),
                experience=self._require_non_negative_int(data.get("experience", 0), f"{context} experience"),
            )
        return characters
