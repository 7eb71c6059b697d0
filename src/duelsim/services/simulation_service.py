"""Repeated battles between the same two characters."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from duelsim.core.rng import RNG
from duelsim.domain.entities import Character
from duelsim.services.battle_service import BattleResult, BattleService
from duelsim.services.errors import ConfigurationError
from duelsim.services.statistics import BattleSummary, SimulationTotals, summarize_battle

logger = logging.getLogger(__name__)

BattleObserver = Callable[[int, BattleResult], None]


@dataclass(frozen=True, slots=True)
class SimulationReport:
    """Everything the reporting layer needs once a run has finished."""

    first: Character
    second: Character
    totals: SimulationTotals
    summaries: tuple[BattleSummary, ...]


class SimulationService:
    """Runs a fixed number of sequential battles and aggregates their statistics.

    The two characters are reused for every battle, so their wins, losses,
    experience, gold and shield wear carry from one battle to the next, while
    health, actions and initiative start fresh each time.
    """

    def __init__(self, battle_service: BattleService) -> None:
        self._battle_service = battle_service

    def run(
        self,
        first: Character,
        second: Character,
        battles: int,
        rng: RNG,
        *,
        observer: BattleObserver | None = None,
    ) -> SimulationReport:
        if battles < 1:
            raise ConfigurationError("A simulation needs at least one battle.")
        self._battle_service.ensure_can_fight(first, second)

        totals = SimulationTotals.start(first.name, second.name)
        summaries: List[BattleSummary] = []
        for index in range(battles):
            result = self._battle_service.run_battle(first, second, rng, record_events=observer is not None)
            if observer is not None:
                observer(index, result)
            summary = summarize_battle(result)
            summaries.append(summary)
            totals = totals.plus(summary)

        logger.info(
            "%d battles: %s %d wins, %s %d wins, %d draws",
            totals.battles,
            first.name,
            first.wins,
            second.name,
            second.wins,
            totals.draws,
        )
        return SimulationReport(first=first, second=second, totals=totals, summaries=tuple(summaries))
