from __future__ import annotations

import pytest

from duelsim.core.rounding import round_half_up, round_half_up_to
from duelsim.domain.attributes import (
    ACTION_COST,
    can_ever_act,
    derived_action_budget,
    derived_burden,
    derived_health_pool,
    derived_initiative,
)
from tests.helpers.combat_fixtures import HATCHET, QUILT, make_actor, make_buckler


def test_round_half_up_rounds_halves_towards_positive_infinity() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(1.49) == 1


def test_round_half_up_to_keeps_the_half_up_rule() -> None:
    assert round_half_up_to(0.0625, 3) == 0.063
    assert round_half_up_to(2 / 3, 3) == 0.667
    assert round_half_up_to(0.125, 2) == 0.13


def test_burden_is_offset_by_half_strength_and_never_negative() -> None:
    light = make_actor(strength=50, main_hand=HATCHET, off_hand=make_buckler(), armour=QUILT)
    strained = make_actor(strength=20, main_hand=HATCHET, off_hand=make_buckler(), armour=QUILT)

    assert derived_burden(light) == 0  # 12 + 6 + 3 - 25
    assert derived_burden(strained) == 11  # 12 + 6 + 3 - 10


def test_broken_shield_adds_no_weight() -> None:
    actor = make_actor(strength=20, main_hand=HATCHET, off_hand=make_buckler(durability=0), armour=QUILT)

    assert derived_burden(actor) == 5  # 12 + 3 - 10


def test_off_hand_weapon_always_adds_weight() -> None:
    actor = make_actor(strength=0, main_hand=HATCHET, off_hand=HATCHET, armour=QUILT)

    assert derived_burden(actor) == 27


def test_health_pool_is_double_strength() -> None:
    assert derived_health_pool(make_actor(strength=50)) == 100


def test_action_budget_rounds_and_carries_remainder() -> None:
    budget = derived_action_budget(make_actor(dexterity=70))

    assert budget.actions == 2
    assert budget.remainder == 4


def test_action_budget_uses_carried_remainder() -> None:
    budget = derived_action_budget(make_actor(dexterity=70), carried_remainder=30)

    assert budget.actions == 3  # 100 / 33 rounds to 3
    assert budget.remainder == 1


def test_action_budget_half_action_rounds_up() -> None:
    # cloth 1 + dagger 5 - 11 / 2 leaves a burden of 0.5, so the raw budget is exactly half an action.
    actor = make_actor(strength=11, dexterity=17)

    budget = derived_action_budget(actor)

    assert budget.actions == 1
    assert budget.remainder == pytest.approx(16.5)


def test_action_budget_negative_raw_budget_yields_nothing() -> None:
    budget = derived_action_budget(make_actor(strength=0, dexterity=0))

    assert budget.actions == 0
    assert budget.remainder == 0


@pytest.mark.parametrize("carried", [0, 10.5, 32.9])
def test_action_budget_remainder_stays_within_one_action(carried: float) -> None:
    for dexterity in range(0, 200, 7):
        for strength in (0, 11, 50):
            budget = derived_action_budget(make_actor(strength=strength, dexterity=dexterity), carried)
            assert isinstance(budget.actions, int)
            assert budget.actions >= 0
            assert 0 <= budget.remainder < ACTION_COST


def test_initiative_combines_intelligence_dexterity_and_remainder() -> None:
    actor = make_actor(intelligence=30, strength=50, dexterity=70)

    assert derived_initiative(actor, 4) == 51.5


def test_initiative_is_reduced_by_burden() -> None:
    actor = make_actor(intelligence=30, strength=20, dexterity=40, main_hand=HATCHET, off_hand=make_buckler(), armour=QUILT)

    assert derived_initiative(actor, 0) == 30 - 11 + 10


def test_can_ever_act_requires_dexterity_above_burden() -> None:
    assert can_ever_act(make_actor(dexterity=1))
    assert not can_ever_act(make_actor(strength=0, dexterity=6))
