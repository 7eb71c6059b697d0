"""Turn scheduling for a two-combatant battle."""
from __future__ import annotations

import logging

from duelsim.domain.battle_models import Combatant
from duelsim.services.factories import refresh_combatant

logger = logging.getLogger(__name__)


def initiative_order(first: Combatant, second: Combatant) -> tuple[Combatant, Combatant]:
    """Return ``(attacker, defender)`` for the start of a turn.

    ``first`` leads only with strictly higher initiative; ties go to ``second``.
    """
    if first.initiative > second.initiative:
        return first, second
    return second, first


class TurnScheduler:
    """Decides who swings next and when a turn is over.

    A turn starts with the initiative winner attacking. After every action
    the roles swap if the attacker now has fewer actions left than the
    defender, which interleaves actions instead of strictly alternating. The
    turn ends once neither side has actions left; both combatants are then
    refreshed and initiative is re-evaluated.
    """

    def __init__(self, first: Combatant, second: Combatant) -> None:
        self._first = first
        self._second = second
        self.turn = 1
        self.attacker, self.defender = initiative_order(first, second)

    @property
    def combatants(self) -> tuple[Combatant, Combatant]:
        return self._first, self._second

    @property
    def is_turn_exhausted(self) -> bool:
        return self.attacker.attacks == 0 and self.defender.attacks == 0

    def begin_action(self) -> tuple[Combatant, Combatant]:
        """Spend one action of the current attacker and return the pair."""
        if self.is_turn_exhausted:
            raise RuntimeError("No actions remain this turn; call end_turn() first.")
        if self.attacker.attacks == 0:
            self._swap()
        self.attacker.attacks -= 1
        return self.attacker, self.defender

    def after_action(self) -> None:
        if self.attacker.attacks < self.defender.attacks:
            self._swap()

    def end_turn(self) -> None:
        logger.debug("Turn %d ended", self.turn)
        self.turn += 1
        refresh_combatant(self._first)
        refresh_combatant(self._second)
        self.attacker, self.defender = initiative_order(self._first, self._second)

    def _swap(self) -> None:
        self.attacker, self.defender = self.defender, self.attacker
