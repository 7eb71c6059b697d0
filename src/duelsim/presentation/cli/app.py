"""Command-line entry point running repeated duels between two characters."""
from __future__ import annotations

import argparse
import logging
import secrets
import sys
from pathlib import Path
from typing import Optional, Sequence

from duelsim.core.rng import RNG
from duelsim.data.errors import DataError
from duelsim.services import ConfigurationError, FactoryError, SimulationService
from duelsim.services.battle_service import BattleResult, BattleService
from duelsim.services.catalogue import Catalogue

from .config import load_config
from .render import debug_enabled, render_battle_events, render_heading, render_report

logger = logging.getLogger(__name__)

_MAX_RANDOM_SEED = 2**31 - 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duelsim",
        description="Run repeated melee duels between two catalogue characters and report statistics.",
    )
    parser.add_argument("--battles", type=int, help="number of battles to run (default from config, else 100)")
    parser.add_argument("--seed", type=int, help="RNG seed (random when omitted)")
    parser.add_argument("--one", dest="character_one", help="id of the first character")
    parser.add_argument("--two", dest="character_two", help="id of the second character")
    parser.add_argument("--config", type=Path, help="path to a JSON config file")
    parser.add_argument("--definitions", type=Path, help="directory holding the JSON catalogue")
    parser.add_argument("--narrate", action="store_true", help="print every swing of every battle")
    parser.add_argument("--list", action="store_true", help="list the available characters and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a simulation and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose or debug_enabled() else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        catalogue = Catalogue.load(args.definitions)
        if args.list:
            _render_character_list(catalogue)
            return 0

        first = catalogue.create_character(args.character_one or config.character_one)
        second = catalogue.create_character(args.character_two or config.character_two)
        battles = args.battles if args.battles is not None else config.battles
        seed = args.seed if args.seed is not None else secrets.randbelow(_MAX_RANDOM_SEED)
        logger.info("Running %d battles with seed %d", battles, seed)

        simulation = SimulationService(BattleService(config.rules))
        report = simulation.run(
            first,
            second,
            battles,
            RNG(seed),
            observer=_narrate if args.narrate else None,
        )
    except (DataError, FactoryError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Seed: {seed}")
    render_report(report)
    return 0


def _narrate(index: int, result: BattleResult) -> None:
    render_battle_events(index + 1, result.events)


def _render_character_list(catalogue: Catalogue) -> None:
    render_heading("Characters")
    for character_def in catalogue.characters.all():
        off_hand = character_def.off_hand_id or "-"
        print(
            f"{character_def.id:<16} INT {character_def.intelligence:>3}  STR {character_def.strength:>3}  "
            f"DEX {character_def.dexterity:>3}  {character_def.main_hand_id} / {off_hand} / {character_def.armour_id}"
        )
