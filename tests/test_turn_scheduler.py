from __future__ import annotations

import pytest

from duelsim.domain.battle_models import Combatant
from duelsim.services.factories import make_combatant, refresh_combatant
from duelsim.services.turn_scheduler import TurnScheduler, initiative_order
from tests.helpers.combat_fixtures import make_character, quick_duelist, slow_duelist


def _combatant(name: str, *, attacks: int, initiative: float) -> Combatant:
    return Combatant(
        character=make_character(name),
        attacks=attacks,
        attack_remainder=0,
        weight=0,
        initiative=initiative,
        health=100,
    )


def test_make_combatant_derives_fresh_battle_state() -> None:
    combatant = make_combatant(quick_duelist())

    assert combatant.attacks == 2
    assert combatant.attack_remainder == 4
    assert combatant.initiative == 51.5
    assert combatant.health == 100
    assert combatant.weight == 0
    assert combatant.round_stats.attacks == []


def test_refresh_combatant_carries_remainder_into_next_turn() -> None:
    combatant = make_combatant(slow_duelist())
    combatant.attacks = 0

    refresh_combatant(combatant)

    assert combatant.attacks == 2  # 30 dexterity + 30 carried
    assert combatant.attack_remainder == 27
    assert combatant.initiative == 64.5


def test_higher_initiative_attacks_first() -> None:
    first = _combatant("first", attacks=1, initiative=20)
    second = _combatant("second", attacks=1, initiative=10)

    assert initiative_order(first, second) == (first, second)


def test_initiative_tie_goes_to_second_combatant() -> None:
    first = _combatant("first", attacks=1, initiative=10)
    second = _combatant("second", attacks=1, initiative=10)

    attacker, defender = initiative_order(first, second)

    assert attacker is second
    assert defender is first


def test_combatants_keep_construction_order_when_second_leads() -> None:
    first = _combatant("first", attacks=1, initiative=10)
    second = _combatant("second", attacks=1, initiative=30)

    scheduler = TurnScheduler(first, second)

    assert scheduler.attacker is second
    assert scheduler.combatants == (first, second)


def test_begin_action_spends_one_action() -> None:
    first = _combatant("first", attacks=2, initiative=20)
    second = _combatant("second", attacks=1, initiative=10)
    scheduler = TurnScheduler(first, second)

    attacker, defender = scheduler.begin_action()

    assert attacker is first
    assert defender is second
    assert first.attacks == 1


def test_initiative_winner_without_actions_yields_to_opponent() -> None:
    first = _combatant("first", attacks=0, initiative=50)
    second = _combatant("second", attacks=2, initiative=10)
    scheduler = TurnScheduler(first, second)

    attacker, _ = scheduler.begin_action()

    assert attacker is second
    assert first.attacks == 0
    assert second.attacks == 1


def test_roles_swap_when_attacker_has_fewer_actions_left() -> None:
    first = _combatant("first", attacks=1, initiative=20)
    second = _combatant("second", attacks=2, initiative=10)
    scheduler = TurnScheduler(first, second)

    scheduler.begin_action()
    scheduler.after_action()

    assert scheduler.attacker is second


def test_roles_hold_when_actions_are_equal() -> None:
    first = _combatant("first", attacks=3, initiative=20)
    second = _combatant("second", attacks=2, initiative=10)
    scheduler = TurnScheduler(first, second)

    scheduler.begin_action()
    scheduler.after_action()

    assert scheduler.attacker is first


def test_exhausted_turn_refuses_actions_until_turn_ends() -> None:
    a = make_combatant(quick_duelist())
    b = make_combatant(slow_duelist())
    a.attacks = 0
    b.attacks = 0
    scheduler = TurnScheduler(a, b)

    assert scheduler.is_turn_exhausted
    with pytest.raises(RuntimeError):
        scheduler.begin_action()

    scheduler.end_turn()

    assert scheduler.turn == 2
    assert not scheduler.is_turn_exhausted
    assert a.attacks == 2
    assert b.attacks == 2
    assert scheduler.attacker is b  # 64.5 initiative against 55.5
