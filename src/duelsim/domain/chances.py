"""Chance and damage formulas for a single swing.

Every chance is a threshold on a 0-100 scale. A check passes only when a
fresh percentile roll is strictly greater than the threshold, so a roll equal
to the threshold fails.
"""
from __future__ import annotations

from duelsim.core.rng import RNG
from duelsim.core.rounding import round_half_up
from duelsim.domain.attributes import derived_burden
from duelsim.domain.defs import WeaponDef
from duelsim.domain.entities import Actor, intact_shield

BASE_HIT_CHANCE = 50
BASE_DODGE_CHANCE = 66
BASE_CRITICAL_HIT_CHANCE = 90
ATTRIBUTE_CHANCE_DIVISOR = 10
WEIGHT_CHANCE_DIVISOR = 10
STRENGTH_DAMAGE_DIVISOR = 5
DUAL_WIELD_STRENGTH_FACTOR = 0.5
DAMAGE_VARIANCE_DIVISOR = 5
DUAL_WIELD_DAMAGE_VARIANCE_DIVISOR = 4
CRITICAL_HIT_MULTIPLIER = 1.5


def check_succeeds(roll: int, chance_required: float) -> bool:
    return roll > chance_required


def attack_hit_chance_required(attacker: Actor, defender: Actor) -> int:
    dex_delta = (attacker.dexterity - defender.dexterity) / ATTRIBUTE_CHANCE_DIVISOR
    int_delta = (attacker.intelligence - defender.intelligence) / ATTRIBUTE_CHANCE_DIVISOR
    return round_half_up(BASE_HIT_CHANCE - dex_delta + int_delta)


def dodge_chance_required(defender: Actor, attacker: Actor) -> int:
    dex_delta = (defender.dexterity - attacker.dexterity) / ATTRIBUTE_CHANCE_DIVISOR
    int_delta = (defender.intelligence - attacker.intelligence) / ATTRIBUTE_CHANCE_DIVISOR
    return round_half_up(BASE_DODGE_CHANCE - dex_delta + int_delta)


def weight_chance_penalty(defender: Actor) -> float:
    """Amount added to the hit and dodge thresholds for a burdened defender."""
    return derived_burden(defender) / WEIGHT_CHANCE_DIVISOR


def critical_hit_chance_required(attacker: Actor, defender: Actor) -> float:
    return BASE_CRITICAL_HIT_CHANCE - (attacker.intelligence - defender.intelligence) / ATTRIBUTE_CHANCE_DIVISOR


def block_chance_required(defender: Actor) -> int:
    shield = intact_shield(defender.off_hand)
    if shield is None:
        return 0
    return 100 - shield.block_chance


def base_damage(weapon: WeaponDef, attacker_strength: int, dual_wielding: bool, rng: RNG) -> float:
    """Weapon damage plus a strength bonus, less a random variance slice.

    Dual wielding halves the strength bonus of each swing and widens the
    variance slice from a fifth to a quarter of the damage.
    """
    strength_factor = DUAL_WIELD_STRENGTH_FACTOR if dual_wielding else 1
    damage = weapon.damage + (attacker_strength / STRENGTH_DAMAGE_DIVISOR) * strength_factor
    divisor = DUAL_WIELD_DAMAGE_VARIANCE_DIVISOR if dual_wielding else DAMAGE_VARIANCE_DIVISOR
    return damage - rng.random() * damage / divisor


def final_damage(damage: float, is_critical: bool) -> int:
    if is_critical:
        return round_half_up(damage * CRITICAL_HIT_MULTIPLIER)
    return round_half_up(damage)
