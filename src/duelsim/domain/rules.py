"""Tunable battle rules: rewards, the turn ceiling and mitigation policies."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Mapping

from duelsim.core.types import MitigationEdge

DEFAULT_MAX_TURNS = 500


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Rules applied by the battle service.

    ``clamp_mitigation`` keeps armour from absorbing more than the hit dealt,
    so a hit never heals. ``mitigation_edge`` selects which weapon's edge the
    defender's armour is measured against: ``"main_hand"`` uses the
    attacker's main-hand weapon for every swing, ``"striking"`` uses the
    weapon that actually swung.
    """

    win_experience: int = 200
    win_gold: int = 10
    loss_experience: int = 75
    loss_gold: int = 5
    max_turns: int = DEFAULT_MAX_TURNS
    clamp_mitigation: bool = True
    mitigation_edge: MitigationEdge = "main_hand"

    def __post_init__(self) -> None:
        for name in ("win_experience", "win_gold", "loss_experience", "loss_gold", "max_turns"):
            value = getattr(self, name)
            # bool is an int subclass; reject it like the catalogue validators do.
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer.")
        if not isinstance(self.clamp_mitigation, bool):
            raise ValueError("clamp_mitigation must be true or false.")
        if self.max_turns < 1:
            raise ValueError("max_turns must be at least 1.")
        if self.mitigation_edge not in ("main_hand", "striking"):
            raise ValueError("mitigation_edge must be 'main_hand' or 'striking'.")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> "BattleRules":
        """Build rules from a config mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in raw.items() if key in known})
