"""Factory for creating persistent characters from catalogue definitions."""
from __future__ import annotations

import logging

from duelsim.core.types import ARMOUR_MATERIALS, EDGE_TYPES
from duelsim.data.repositories import (
    ArmourRepository,
    CharactersRepository,
    ShieldsRepository,
    WeaponsRepository,
)
from duelsim.domain.defs import WeaponDef
from duelsim.domain.entities import Actor, Character, OffHand, Shield
from duelsim.services.errors import ConfigurationError, FactoryError

logger = logging.getLogger(__name__)


def create_character(
    character_id: str,
    characters_repo: CharactersRepository,
    weapons_repo: WeaponsRepository,
    shields_repo: ShieldsRepository,
    armour_repo: ArmourRepository,
) -> Character:
    """Instantiate a character that lives for the whole simulation run.

    Weapons and armour are shared catalogue definitions. A shield is copied
    into a fresh ``Shield`` so its wear belongs to this character only and
    carries over from one battle to the next.
    """
    try:
        character_def = characters_repo.get(character_id)
    except KeyError as exc:
        raise FactoryError(f"Character '{character_id}' not found.") from exc

    try:
        main_hand = weapons_repo.get(character_def.main_hand_id)
    except KeyError as exc:
        raise FactoryError(
            f"Weapon '{character_def.main_hand_id}' not found for character '{character_id}'."
        ) from exc

    try:
        armour = armour_repo.get(character_def.armour_id)
    except KeyError as exc:
        raise FactoryError(
            f"Armour '{character_def.armour_id}' not found for character '{character_id}'."
        ) from exc

    off_hand: OffHand = None
    off_hand_id = character_def.off_hand_id
    if off_hand_id is not None:
        if off_hand_id in weapons_repo:
            off_hand = weapons_repo.get(off_hand_id)
        elif off_hand_id in shields_repo:
            off_hand = Shield.from_def(shields_repo.get(off_hand_id))
        else:
            raise FactoryError(f"Off-hand item '{off_hand_id}' not found for character '{character_id}'.")

    actor = Actor(
        intelligence=character_def.intelligence,
        strength=character_def.strength,
        dexterity=character_def.dexterity,
        main_hand=main_hand,
        off_hand=off_hand,
        armour=armour,
    )
    validate_actor(actor, context=character_def.name)
    logger.debug("Created character %s (%s)", character_def.name, character_id)
    return Character(
        name=character_def.name,
        actor=actor,
        gold=character_def.gold,
        experience=character_def.experience,
    )


def validate_actor(actor: Actor, *, context: str = "actor") -> None:
    """Reject attributes and equipment the combat formulas are not defined for."""
    problems: list[str] = []
    for attribute in ("intelligence", "strength", "dexterity"):
        if getattr(actor, attribute) < 0:
            problems.append(f"{attribute} is negative")

    problems.extend(_weapon_problems(actor.main_hand, "main hand"))

    armour = actor.armour
    if armour.value < 0 or armour.weight < 0:
        problems.append(f"armour '{armour.name}' has a negative value or weight")
    if armour.material not in ARMOUR_MATERIALS:
        problems.append(f"armour '{armour.name}' has unknown material '{armour.material}'")

    off_hand = actor.off_hand
    if off_hand is not None:
        if off_hand.kind == "weapon":
            problems.extend(_weapon_problems(off_hand, "off hand"))
        else:
            if off_hand.weight < 0:
                problems.append(f"shield '{off_hand.name}' has a negative weight")
            if not 0 <= off_hand.block_chance <= 100:
                problems.append(f"shield '{off_hand.name}' block chance is outside 0-100")

    if problems:
        raise ConfigurationError(f"Invalid {context}: {'; '.join(problems)}.")


def _weapon_problems(weapon: WeaponDef, slot: str) -> list[str]:
    problems: list[str] = []
    if weapon.damage < 0 or weapon.weight < 0:
        problems.append(f"{slot} weapon '{weapon.name}' has a negative damage or weight")
    if weapon.edge not in EDGE_TYPES:
        problems.append(f"{slot} weapon '{weapon.name}' has unknown edge '{weapon.edge}'")
    return problems
