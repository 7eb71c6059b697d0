"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from duelsim.domain.rules import BattleRules
from duelsim.services.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BATTLES = 100
DEFAULT_CHARACTER_ONE = "one"
DEFAULT_CHARACTER_TWO = "two"


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Defaults for a simulation run; command-line flags override them."""

    battles: int = DEFAULT_BATTLES
    character_one: str = DEFAULT_CHARACTER_ONE
    character_two: str = DEFAULT_CHARACTER_TWO
    rules: BattleRules = field(default_factory=BattleRules)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "duelsim"
        return Path.home() / "duelsim"
    return Path.home() / ".config" / "duelsim"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def load_config(path: Path | None = None) -> SimulationConfig:
    """Load config from disk or return defaults.

    A missing or unreadable file falls back to defaults. Rule overrides that
    are present but invalid raise ConfigurationError instead of being ignored.
    """
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return SimulationConfig()
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return SimulationConfig()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: expected a JSON object", config_path)
        return SimulationConfig()

    battles = raw.get("battles", DEFAULT_BATTLES)
    if isinstance(battles, bool) or not isinstance(battles, int) or battles < 1:
        battles = DEFAULT_BATTLES
    character_one = raw.get("character_one")
    character_two = raw.get("character_two")
    return SimulationConfig(
        battles=battles,
        character_one=character_one if isinstance(character_one, str) else DEFAULT_CHARACTER_ONE,
        character_two=character_two if isinstance(character_two, str) else DEFAULT_CHARACTER_TWO,
        rules=_load_rules(raw.get("rules")),
    )


def save_config(config: SimulationConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(_to_payload(config), indent=2, sort_keys=True), encoding="utf-8")


def _load_rules(raw_rules: object) -> BattleRules:
    if raw_rules is None:
        return BattleRules()
    if not isinstance(raw_rules, dict):
        raise ConfigurationError("Config 'rules' must be an object.")
    try:
        return BattleRules.from_mapping(raw_rules)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid battle rules in config: {exc}") from exc


def _to_payload(config: SimulationConfig) -> Dict[str, object]:
    rules = config.rules
    return {
        "battles": config.battles,
        "character_one": config.character_one,
        "character_two": config.character_two,
        "rules": {
            "win_experience": rules.win_experience,
            "win_gold": rules.win_gold,
            "loss_experience": rules.loss_experience,
            "loss_gold": rules.loss_gold,
            "max_turns": rules.max_turns,
            "clamp_mitigation": rules.clamp_mitigation,
            "mitigation_edge": rules.mitigation_edge,
        },
    }
