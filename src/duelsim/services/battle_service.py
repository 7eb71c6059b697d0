"""Battle service resolving a full duel between two characters."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from duelsim.core.rng import RNG
from duelsim.core.types import Hand
from duelsim.domain.attributes import can_ever_act
from duelsim.domain.battle_models import (
    AttackStats,
    BlockStats,
    Combatant,
    CriticalHitStats,
    DamageStats,
    DodgeStats,
    WoundStats,
)
from duelsim.domain.chances import (
    attack_hit_chance_required,
    base_damage,
    block_chance_required,
    check_succeeds,
    critical_hit_chance_required,
    dodge_chance_required,
    final_damage,
    weight_chance_penalty,
)
from duelsim.domain.defs import WeaponDef
from duelsim.domain.entities import Character, intact_shield, off_hand_weapon
from duelsim.domain.mitigation import mitigation
from duelsim.domain.rules import BattleRules
from duelsim.services.errors import ConfigurationError
from duelsim.services.factories import make_combatant, validate_actor
from duelsim.services.turn_scheduler import TurnScheduler

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    first_name: str
    second_name: str


@dataclass(slots=True)
class TurnStartedEvent(BattleEvent):
    turn: int
    attacker_name: str
    attacker_actions: int
    defender_name: str
    defender_actions: int


@dataclass(slots=True)
class SwingResolvedEvent(BattleEvent):
    attacker_name: str
    defender_name: str
    hand: Hand
    weapon_name: str
    hit_chance: float
    hit_roll: int
    is_hit: bool
    dodge_chance: float
    dodge_roll: int
    is_dodged: bool
    is_critical: bool = False
    is_blocked: bool = False
    damage: int = 0
    absorbed: float = 0
    defender_health: float = 0

    @property
    def landed(self) -> bool:
        return self.is_hit and not self.is_dodged


@dataclass(slots=True)
class ShieldBrokenEvent(BattleEvent):
    combatant_name: str
    shield_name: str


@dataclass(slots=True)
class CombatantDefeatedEvent(BattleEvent):
    winner_name: str
    loser_name: str
    loser_health: float


@dataclass(slots=True)
class BattleDrawnEvent(BattleEvent):
    turns: int


@dataclass(slots=True)
class BattleResult:
    """Final combatant state of one battle plus its narration events."""

    combatants: tuple[Combatant, Combatant]
    turns: int
    winner: Combatant | None = None
    loser: Combatant | None = None
    events: List[BattleEvent] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class BattleService:
    """Runs duels to completion and applies their consequences to the characters."""

    def __init__(self, rules: BattleRules | None = None) -> None:
        self._rules = rules or BattleRules()

    @property
    def rules(self) -> BattleRules:
        return self._rules

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def run_battle(
        self,
        character_one: Character,
        character_two: Character,
        rng: RNG,
        *,
        record_events: bool = True,
    ) -> BattleResult:
        """Fight until one combatant drops to 0 health or the turn ceiling is hit.

        Fresh combatants are created for this battle only. The characters
        themselves (and any shield they carry) are mutated in place, so wins,
        rewards and shield wear accumulate across repeated calls.
        """
        self.ensure_can_fight(character_one, character_two)

        combatant_one = make_combatant(character_one)
        combatant_two = make_combatant(character_two)
        scheduler = TurnScheduler(combatant_one, combatant_two)
        events: List[BattleEvent] | None = [] if record_events else None
        if events is not None:
            events.append(BattleStartedEvent(first_name=character_one.name, second_name=character_two.name))
            events.append(self._turn_started(scheduler))

        result = BattleResult(
            combatants=scheduler.combatants,
            turns=1,
            events=events if events is not None else [],
        )
        while True:
            if scheduler.is_turn_exhausted:
                if scheduler.turn >= self._rules.max_turns:
                    self._record_draw(result, scheduler.turn, events)
                    return result
                scheduler.end_turn()
                if events is not None:
                    events.append(self._turn_started(scheduler))
                continue

            attacker, defender = scheduler.begin_action()
            self.resolve_action(attacker, defender, rng, events)
            if not defender.is_alive:
                self._record_victory(result, attacker, defender, scheduler.turn, events)
                return result
            scheduler.after_action()

    def ensure_can_fight(self, character_one: Character, character_two: Character) -> None:
        """Raise ConfigurationError for matchups the engine cannot resolve."""
        if character_one is character_two:
            raise ConfigurationError(f"{character_one.name} cannot fight themselves.")
        validate_actor(character_one.actor, context=character_one.name)
        validate_actor(character_two.actor, context=character_two.name)
        if not can_ever_act(character_one.actor) and not can_ever_act(character_two.actor):
            raise ConfigurationError(
                f"Neither {character_one.name} nor {character_two.name} can ever act: "
                "dexterity does not exceed burden for either fighter."
            )

    # -----------------------
    # Attack Resolution
    # -----------------------
    def resolve_action(
        self,
        attacker: Combatant,
        defender: Combatant,
        rng: RNG,
        events: List[BattleEvent] | None = None,
    ) -> None:
        """Resolve one action: a main-hand swing, then an off-hand swing when dual wielding."""
        actor = attacker.character.actor
        self.resolve_swing(attacker, defender, actor.main_hand, "main", rng, events)
        second_weapon = off_hand_weapon(actor.off_hand)
        if second_weapon is not None and defender.is_alive:
            self.resolve_swing(attacker, defender, second_weapon, "off", rng, events)

    def resolve_swing(
        self,
        attacker: Combatant,
        defender: Combatant,
        weapon: WeaponDef,
        hand: Hand,
        rng: RNG,
        events: List[BattleEvent] | None = None,
    ) -> AttackStats:
        """Roll hit, dodge, critical hit and block for one weapon and apply the damage."""
        attacking = attacker.character.actor
        defending = defender.character.actor
        weight_penalty = weight_chance_penalty(defending)

        base_hit_chance = attack_hit_chance_required(attacking, defending)
        hit_chance = base_hit_chance + weight_penalty
        hit_roll = rng.roll_percentile()
        is_hit = check_succeeds(hit_roll, hit_chance)

        # The dodge is rolled even for a miss so dodge statistics cover every swing.
        base_dodge_chance = dodge_chance_required(defending, attacking)
        dodge_chance = base_dodge_chance + weight_penalty
        dodge_roll = rng.roll_percentile()
        is_dodged = check_succeeds(dodge_roll, dodge_chance)

        attack_stats = AttackStats(
            base_chance=base_hit_chance,
            weight_chance_reduction=weight_penalty,
            chance=hit_chance,
            rolled=hit_roll,
            is_successful=is_hit,
            hand=hand,
            was_dodged=is_dodged,
        )
        attacker.round_stats.attacks.append(attack_stats)
        defender.round_stats.dodges.append(
            DodgeStats(
                base_chance=base_dodge_chance,
                weight_chance_reduction=weight_penalty,
                chance=dodge_chance,
                rolled=dodge_roll,
                is_successful=is_dodged,
            )
        )
        logger.debug(
            "%s %s-hand %s: hit required %s rolled %s; %s dodge required %s rolled %s",
            attacker.name,
            hand,
            weapon.name,
            hit_chance,
            hit_roll,
            defender.name,
            dodge_chance,
            dodge_roll,
        )

        swing_event = SwingResolvedEvent(
            attacker_name=attacker.name,
            defender_name=defender.name,
            hand=hand,
            weapon_name=weapon.name,
            hit_chance=hit_chance,
            hit_roll=hit_roll,
            is_hit=is_hit,
            dodge_chance=dodge_chance,
            dodge_roll=dodge_roll,
            is_dodged=is_dodged,
            defender_health=defender.health,
        )
        if is_hit and not is_dodged:
            self._resolve_landed_hit(attacker, defender, weapon, attack_stats, swing_event, rng, events)
        if events is not None:
            events.append(swing_event)
        return attack_stats

    def _resolve_landed_hit(
        self,
        attacker: Combatant,
        defender: Combatant,
        weapon: WeaponDef,
        attack_stats: AttackStats,
        swing_event: SwingResolvedEvent,
        rng: RNG,
        events: List[BattleEvent] | None,
    ) -> None:
        attacking = attacker.character.actor
        defending = defender.character.actor

        critical_chance = critical_hit_chance_required(attacking, defending)
        critical_roll = rng.roll_percentile()
        is_critical = check_succeeds(critical_roll, critical_chance)
        attack_stats.critical_hit_stats = CriticalHitStats(
            chance=critical_chance, rolled=critical_roll, is_successful=is_critical
        )

        damage = final_damage(
            base_damage(weapon, attacking.strength, attacking.is_dual_wielding, rng),
            is_critical,
        )
        edge = attacking.main_hand.edge if self._rules.mitigation_edge == "main_hand" else weapon.edge
        absorbed = mitigation(defending.armour, edge)
        if self._rules.clamp_mitigation:
            absorbed = min(absorbed, damage)

        is_blocked = False
        shield = intact_shield(defending.off_hand)
        if shield is not None:
            block_chance = block_chance_required(defending)
            block_roll = rng.roll_percentile()
            is_blocked = check_succeeds(block_roll, block_chance)
            # Wear is the raw hit, blocked or not.
            shield.durability -= damage
            defender.round_stats.blocks.append(
                BlockStats(chance=block_chance, rolled=block_roll, damage=damage, is_successful=is_blocked)
            )
            logger.debug(
                "%s block required %s rolled %s; %s durability %s",
                defender.name,
                block_chance,
                block_roll,
                shield.name,
                shield.durability,
            )
            if not shield.is_intact and events is not None:
                events.append(ShieldBrokenEvent(combatant_name=defender.name, shield_name=shield.name))

        if not is_blocked:
            defender.health -= damage - absorbed
            attack_stats.damage_stats = DamageStats(
                damage_caused=damage,
                against_armour_type=defending.armour.material,
                damage_blocked_by_armour=absorbed,
            )

        defender.round_stats.wounds.append(
            WoundStats(
                weapon=weapon,
                armour=defending.armour,
                attacker_strength=attacking.strength,
                is_critical_damage=is_critical,
                damage_taken=damage,
                damage_blocked_by_armour=absorbed,
            )
        )

        swing_event.is_critical = is_critical
        swing_event.is_blocked = is_blocked
        swing_event.damage = damage
        swing_event.absorbed = absorbed
        swing_event.defender_health = defender.health
        logger.debug(
            "%s dealt %s%s (%s absorbed); %s health %s",
            attacker.name,
            damage,
            " critical" if is_critical else "",
            absorbed,
            defender.name,
            defender.health,
        )

    # -----------------------
    # Outcome
    # -----------------------
    def _record_victory(
        self,
        result: BattleResult,
        winner: Combatant,
        loser: Combatant,
        turn: int,
        events: List[BattleEvent] | None,
    ) -> None:
        rules = self._rules
        winner.character.wins += 1
        winner.character.experience += rules.win_experience
        winner.character.gold += rules.win_gold
        loser.character.losses += 1
        loser.character.experience += rules.loss_experience
        loser.character.gold += rules.loss_gold
        winner.round_stats.winner = True
        loser.round_stats.winner = False

        result.winner = winner
        result.loser = loser
        result.turns = turn
        if events is not None:
            events.append(
                CombatantDefeatedEvent(winner_name=winner.name, loser_name=loser.name, loser_health=loser.health)
            )
        logger.debug("%s defeated %s on turn %d", winner.name, loser.name, turn)

    def _record_draw(self, result: BattleResult, turn: int, events: List[BattleEvent] | None) -> None:
        result.turns = turn
        if events is not None:
            events.append(BattleDrawnEvent(turns=turn))
        logger.info("Battle reached the %d turn ceiling and ends in a draw", turn)

    @staticmethod
    def _turn_started(scheduler: TurnScheduler) -> TurnStartedEvent:
        return TurnStartedEvent(
            turn=scheduler.turn,
            attacker_name=scheduler.attacker.name,
            attacker_actions=scheduler.attacker.attacks,
            defender_name=scheduler.defender.name,
            defender_actions=scheduler.defender.attacks,
        )
