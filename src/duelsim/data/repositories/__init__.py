"""Repository exports."""

from .armour_repo import ArmourRepository
from .characters_repo import CharactersRepository
from .shields_repo import ShieldsRepository
from .weapons_repo import WeaponsRepository

__all__ = [
    "ArmourRepository",
    "CharactersRepository",
    "ShieldsRepository",
    "WeaponsRepository",
]
