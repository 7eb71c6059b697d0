"""Construction and turn-boundary refresh of per-battle combatants."""
from __future__ import annotations

from duelsim.domain.attributes import (
    derived_action_budget,
    derived_burden,
    derived_health_pool,
    derived_initiative,
)
from duelsim.domain.battle_models import Combatant, RoundStats
from duelsim.domain.entities import Character


def make_combatant(character: Character) -> Combatant:
    """Wrap ``character`` in fresh battle state (full health, empty stats)."""
    actor = character.actor
    budget = derived_action_budget(actor)
    return Combatant(
        character=character,
        attacks=budget.actions,
        attack_remainder=budget.remainder,
        weight=derived_burden(actor),
        initiative=derived_initiative(actor, budget.remainder),
        health=derived_health_pool(actor),
        round_stats=RoundStats(),
    )


def refresh_combatant(combatant: Combatant) -> None:
    """Grant the next turn's actions and recompute initiative and burden."""
    actor = combatant.character.actor
    budget = derived_action_budget(actor, combatant.attack_remainder)
    combatant.attacks = budget.actions
    combatant.attack_remainder = budget.remainder
    combatant.initiative = derived_initiative(actor, budget.remainder)
    combatant.weight = derived_burden(actor)
