"""Repositories bundled over one definitions directory."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from duelsim.data.repositories import (
    ArmourRepository,
    CharactersRepository,
    ShieldsRepository,
    WeaponsRepository,
)
from duelsim.domain.entities import Character
from duelsim.services.factories import create_character


@dataclass(slots=True)
class Catalogue:
    """Repositories sharing one definitions directory."""

    weapons: WeaponsRepository
    shields: ShieldsRepository
    armour: ArmourRepository
    characters: CharactersRepository

    @classmethod
    def load(cls, base_path: Path | str | None = None) -> "Catalogue":
        weapons = WeaponsRepository(base_path=base_path)
        shields = ShieldsRepository(base_path=base_path)
        armour = ArmourRepository(base_path=base_path)
        characters = CharactersRepository(
            weapons_repo=weapons,
            shields_repo=shields,
            armour_repo=armour,
            base_path=base_path,
        )
        return cls(weapons=weapons, shields=shields, armour=armour, characters=characters)

    def create_character(self, character_id: str) -> Character:
        return create_character(
            character_id,
            characters_repo=self.characters,
            weapons_repo=self.weapons,
            shields_repo=self.shields,
            armour_repo=self.armour,
        )
