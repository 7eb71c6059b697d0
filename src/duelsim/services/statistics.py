"""Per-battle statistics and their running totals across a simulation."""
from __future__ import annotations

from dataclasses import dataclass, replace

from duelsim.core.rounding import round_half_up, round_half_up_to
from duelsim.domain.battle_models import Combatant
from duelsim.services.battle_service import BattleResult

RATE_DECIMALS = 3


def rate(successes: int, count: int) -> float:
    """Success ratio rounded half up to three decimals; 0 when nothing was attempted.

    Reported figures use the same half-up rule as the combat formulas.
    """
    if count == 0:
        return 0.0
    return round_half_up_to(successes / count, RATE_DECIMALS)


def average(total: float, count: int) -> int:
    if count == 0:
        return 0
    return round_half_up(total / count)


@dataclass(frozen=True, slots=True)
class AttackRateStats:
    count: int
    success_count: int
    critical_hit_count: int
    total_damage: int
    total_damage_given: float

    @property
    def success_rate(self) -> float:
        return rate(self.success_count, self.count)

    @property
    def critical_hit_rate(self) -> float:
        return rate(self.critical_hit_count, self.count)

    @property
    def average_damage(self) -> int:
        return average(self.total_damage, self.count)

    @property
    def average_damage_given(self) -> int:
        return average(self.total_damage_given, self.count)


@dataclass(frozen=True, slots=True)
class CheckRateStats:
    """Attempts and successes of a defensive check (dodge or block)."""

    count: int
    success_count: int

    @property
    def success_rate(self) -> float:
        return rate(self.success_count, self.count)


@dataclass(frozen=True, slots=True)
class CombatantBattleStats:
    name: str
    attacks: AttackRateStats
    dodges: CheckRateStats
    blocks: CheckRateStats


@dataclass(frozen=True, slots=True)
class BattleSummary:
    turns: int
    winner_name: str | None
    combatants: tuple[CombatantBattleStats, CombatantBattleStats]


def summarize_combatant(combatant: Combatant) -> CombatantBattleStats:
    stats = combatant.round_stats
    damaging = [attack.damage_stats for attack in stats.attacks if attack.damage_stats is not None]
    return CombatantBattleStats(
        name=combatant.name,
        attacks=AttackRateStats(
            count=len(stats.attacks),
            success_count=sum(1 for attack in stats.attacks if attack.is_successful),
            critical_hit_count=sum(
                1
                for attack in stats.attacks
                if attack.critical_hit_stats is not None and attack.critical_hit_stats.is_successful
            ),
            total_damage=sum(damage.damage_caused for damage in damaging),
            total_damage_given=sum(damage.damage_given for damage in damaging),
        ),
        dodges=CheckRateStats(
            count=len(stats.dodges),
            success_count=sum(1 for dodge in stats.dodges if dodge.is_successful),
        ),
        blocks=CheckRateStats(
            count=len(stats.blocks),
            success_count=sum(1 for block in stats.blocks if block.is_successful),
        ),
    )


def summarize_battle(result: BattleResult) -> BattleSummary:
    first, second = result.combatants
    return BattleSummary(
        turns=result.turns,
        winner_name=result.winner.name if result.winner is not None else None,
        combatants=(summarize_combatant(first), summarize_combatant(second)),
    )


@dataclass(frozen=True, slots=True)
class CombatantTotals:
    """Sum of one fighter's per-battle statistics over a run."""

    name: str
    battles: int = 0
    attacks: int = 0
    successful_attacks: int = 0
    critical_hits: int = 0
    total_damage: int = 0
    total_damage_given: float = 0
    dodges: int = 0
    successful_dodges: int = 0
    blocks: int = 0
    successful_blocks: int = 0

    def plus(self, stats: CombatantBattleStats) -> "CombatantTotals":
        return replace(
            self,
            battles=self.battles + 1,
            attacks=self.attacks + stats.attacks.count,
            successful_attacks=self.successful_attacks + stats.attacks.success_count,
            critical_hits=self.critical_hits + stats.attacks.critical_hit_count,
            total_damage=self.total_damage + stats.attacks.total_damage,
            total_damage_given=self.total_damage_given + stats.attacks.total_damage_given,
            dodges=self.dodges + stats.dodges.count,
            successful_dodges=self.successful_dodges + stats.dodges.success_count,
            blocks=self.blocks + stats.blocks.count,
            successful_blocks=self.successful_blocks + stats.blocks.success_count,
        )

    @property
    def success_rate(self) -> float:
        return rate(self.successful_attacks, self.attacks)

    @property
    def critical_hit_rate(self) -> float:
        return rate(self.critical_hits, self.attacks)

    @property
    def dodge_rate(self) -> float:
        return rate(self.successful_dodges, self.dodges)

    @property
    def block_rate(self) -> float:
        return rate(self.successful_blocks, self.blocks)

    @property
    def average_damage(self) -> int:
        return average(self.total_damage, self.attacks)

    @property
    def average_damage_given(self) -> int:
        return average(self.total_damage_given, self.attacks)


@dataclass(frozen=True, slots=True)
class SimulationTotals:
    """Running totals threaded through the repeated-battle loop."""

    first: CombatantTotals
    second: CombatantTotals
    battles: int = 0
    draws: int = 0

    @classmethod
    def start(cls, first_name: str, second_name: str) -> "SimulationTotals":
        return cls(first=CombatantTotals(name=first_name), second=CombatantTotals(name=second_name))

    def plus(self, summary: BattleSummary) -> "SimulationTotals":
        first_stats, second_stats = summary.combatants
        return replace(
            self,
            first=self.first.plus(first_stats),
            second=self.second.plus(second_stats),
            battles=self.battles + 1,
            draws=self.draws + (1 if summary.winner_name is None else 0),
        )
