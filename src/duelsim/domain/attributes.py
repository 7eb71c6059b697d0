"""Derived combat attributes computed from an actor's raw stats and equipment."""
from __future__ import annotations

from dataclasses import dataclass

from duelsim.core.rounding import round_half_up
from duelsim.domain.entities import Actor, OffHand

ACTION_COST = 33
HEALTH_PER_STRENGTH = 2
STRENGTH_CARRY_DIVISOR = 2
DEXTERITY_INITIATIVE_DIVISOR = 4


@dataclass(frozen=True, slots=True)
class ActionBudget:
    """Actions granted for one turn plus the budget carried into the next."""

    actions: int
    remainder: float


def off_hand_weight(off_hand: OffHand) -> int:
    """Weight of the off-hand; a broken shield or an empty hand weighs nothing."""
    if off_hand is None:
        return 0
    if off_hand.kind == "weapon":
        return off_hand.weight
    return off_hand.weight if off_hand.is_intact else 0


def derived_burden(actor: Actor) -> float:
    carried = actor.armour.weight + actor.main_hand.weight + off_hand_weight(actor.off_hand)
    return max(0, carried - actor.strength / STRENGTH_CARRY_DIVISOR)


def derived_health_pool(actor: Actor) -> int:
    return actor.strength * HEALTH_PER_STRENGTH


def derived_action_budget(actor: Actor, carried_remainder: float = 0) -> ActionBudget:
    """Split dexterity (plus carried budget, minus burden) into whole actions.

    Each action costs ``ACTION_COST`` units. The action count is rounded, not
    floored, so a budget of 50 already buys two actions; the unspent part of a
    non-negative budget carries over to the next turn.
    """
    raw_budget = actor.dexterity + carried_remainder - derived_burden(actor)
    actions = max(0, round_half_up(raw_budget / ACTION_COST))
    remainder = max(0, raw_budget) % ACTION_COST
    return ActionBudget(actions=actions, remainder=remainder)


def derived_initiative(actor: Actor, remainder: float) -> float:
    return (
        actor.intelligence
        - derived_burden(actor)
        + actor.dexterity / DEXTERITY_INITIATIVE_DIVISOR
        + remainder
    )


def can_ever_act(actor: Actor) -> bool:
    """False when the actor's per-turn budget can never reach a single action."""
    return actor.dexterity - derived_burden(actor) > 0
