"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, List

from duelsim.services.battle_service import (
    BattleDrawnEvent,
    BattleEvent,
    BattleStartedEvent,
    CombatantDefeatedEvent,
    ShieldBrokenEvent,
    SwingResolvedEvent,
    TurnStartedEvent,
)
from duelsim.services.simulation_service import SimulationReport
from duelsim.services.statistics import CombatantTotals


def debug_enabled() -> bool:
    """Return True only when DUELSIM_DEBUG is explicitly set to '1'."""
    return os.getenv("DUELSIM_DEBUG") == "1"


def capitalise(text: str) -> str:
    return text[:1].upper() + text[1:] if text else ""


def format_number(value: float) -> str:
    """Drop a trailing '.0' so whole numbers print as integers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def format_battle_event(event: BattleEvent) -> str:
    if isinstance(event, BattleStartedEvent):
        return f"{capitalise(event.first_name)} vs {capitalise(event.second_name)}"
    if isinstance(event, TurnStartedEvent):
        return (
            f"+++ Turn {event.turn}: {event.attacker_name} leads "
            f"({event.attacker_actions} actions), {event.defender_name} has {event.defender_actions} +++"
        )
    if isinstance(event, SwingResolvedEvent):
        return _format_swing(event)
    if isinstance(event, ShieldBrokenEvent):
        return f"{event.combatant_name}'s {event.shield_name} breaks."
    if isinstance(event, CombatantDefeatedEvent):
        return f"{event.winner_name} wins ({event.loser_name} health: {format_number(event.loser_health)})."
    if isinstance(event, BattleDrawnEvent):
        return f"No winner after {event.turns} turns; the battle is a draw."
    return str(event)


def _format_swing(event: SwingResolvedEvent) -> str:
    opening = (
        f"{event.attacker_name} swings {event.weapon_name} ({event.hand} hand): "
        f"hit required {format_number(event.hit_chance)}, rolled {event.hit_roll}; "
        f"dodge required {format_number(event.dodge_chance)}, rolled {event.dodge_roll}"
    )
    if not event.is_hit:
        return f"{opening}. Missed."
    if event.is_dodged:
        return f"{opening}. {event.defender_name} dodges."
    kind = "critical damage" if event.is_critical else "damage"
    if event.is_blocked:
        return f"{opening}. {event.defender_name} blocks {event.damage} {kind}."
    return (
        f"{opening}. {event.damage} {kind}, {format_number(event.absorbed)} absorbed by armour; "
        f"{event.defender_name} health {format_number(event.defender_health)}."
    )


def render_battle_events(battle_number: int, events: Iterable[BattleEvent]) -> None:
    render_heading(f"Battle {battle_number}")
    render_bullet_lines(format_battle_event(event) for event in events)


def report_lines(report: SimulationReport) -> List[str]:
    """Build the end-of-run report as plain lines."""
    lines = [
        f"{capitalise(report.first.name)} vs {capitalise(report.second.name)}",
        f"Battles: {report.totals.battles} (draws: {report.totals.draws})",
    ]
    for character, totals in ((report.first, report.totals.first), (report.second, report.totals.second)):
        lines.append("")
        lines.append(f"{capitalise(character.name)} Stats")
        lines.append("-" * 16)
        lines.append(f"Wins: {character.wins}")
        lines.append(f"Losses: {character.losses}")
        lines.append(f"Experience: {character.experience}")
        lines.append(f"Gold: {character.gold}")
        lines.extend(_totals_lines(totals))
    return lines


def _totals_lines(totals: CombatantTotals) -> List[str]:
    return [
        f"Attacks: {totals.attacks} (success rate {totals.success_rate:.3f})",
        f"Critical hits: {totals.critical_hits} (rate {totals.critical_hit_rate:.3f})",
        f"Total Damage: {format_number(totals.total_damage)}",
        f"Total Damage Given: {format_number(totals.total_damage_given)}",
        f"Average Damage: {totals.average_damage}",
        f"Average Damage Given: {totals.average_damage_given}",
        f"Dodges: {totals.successful_dodges}/{totals.dodges} (rate {totals.dodge_rate:.3f})",
        f"Blocks: {totals.successful_blocks}/{totals.blocks} (rate {totals.block_rate:.3f})",
    ]


def render_report(report: SimulationReport) -> None:
    render_heading("Simulation Report")
    for line in report_lines(report):
        print(line)
