"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from duelsim.core.types import ArmourMaterial, Hand
from duelsim.domain.defs import ArmourDef, WeaponDef
from duelsim.domain.entities import Character


@dataclass(frozen=True, slots=True)
class CriticalHitStats:
    chance: float
    rolled: int
    is_successful: bool


@dataclass(frozen=True, slots=True)
class DamageStats:
    """Damage that reached the defender's armour on an unblocked hit."""

    damage_caused: int
    against_armour_type: ArmourMaterial
    damage_blocked_by_armour: float

    @property
    def damage_given(self) -> float:
        return self.damage_caused - self.damage_blocked_by_armour


@dataclass(slots=True)
class AttackStats:
    """Outcome of one swing, stored on the attacker."""

    base_chance: int
    weight_chance_reduction: float
    chance: float
    rolled: int
    is_successful: bool
    hand: Hand = "main"
    was_dodged: bool = False
    critical_hit_stats: CriticalHitStats | None = None
    damage_stats: DamageStats | None = None


@dataclass(frozen=True, slots=True)
class DodgeStats:
    """Outcome of one dodge attempt, stored on the defender."""

    base_chance: int
    weight_chance_reduction: float
    chance: float
    rolled: int
    is_successful: bool


@dataclass(frozen=True, slots=True)
class BlockStats:
    chance: int
    rolled: int
    damage: int
    is_successful: bool


@dataclass(frozen=True, slots=True)
class WoundStats:
    """A landed (un-dodged) hit, stored on the defender whether or not it was blocked."""

    weapon: WeaponDef
    armour: ArmourDef
    attacker_strength: int
    is_critical_damage: bool
    damage_taken: int
    damage_blocked_by_armour: float


@dataclass(slots=True)
class RoundStats:
    """Per-battle record of every swing, dodge, block and wound."""

    attacks: List[AttackStats] = field(default_factory=list)
    dodges: List[DodgeStats] = field(default_factory=list)
    blocks: List[BlockStats] = field(default_factory=list)
    wounds: List[WoundStats] = field(default_factory=list)
    winner: bool | None = None


@dataclass(slots=True)
class Combatant:
    """Per-battle state wrapped around a persistent character."""

    character: Character
    attacks: int
    attack_remainder: float
    weight: float
    initiative: float
    health: float
    round_stats: RoundStats = field(default_factory=RoundStats)

    @property
    def name(self) -> str:
        return self.character.name

    @property
    def is_alive(self) -> bool:
        return self.health > 0
