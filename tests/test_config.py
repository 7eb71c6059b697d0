import json
from pathlib import Path

import pytest

from duelsim.domain.rules import BattleRules
from duelsim.presentation.cli.config import SimulationConfig, load_config, save_config
from duelsim.services.errors import ConfigurationError


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.json")

    assert config == SimulationConfig()
    assert config.battles == 100
    assert (config.character_one, config.character_two) == ("one", "two")
    assert config.rules == BattleRules()


def test_config_round_trips_through_disk(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    config = SimulationConfig(
        battles=25,
        character_one="three",
        character_two="five",
        rules=BattleRules(max_turns=50, clamp_mitigation=False, mitigation_edge="striking"),
    )

    save_config(config, path)

    assert load_config(path) == config


def test_unreadable_config_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")

    assert load_config(path) == SimulationConfig()


def test_non_object_config_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert load_config(path) == SimulationConfig()


def test_invalid_battle_count_uses_default(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"battles": 0, "character_one": 7}), encoding="utf-8")

    config = load_config(path)

    assert config.battles == 100
    assert config.character_one == "one"


def test_unknown_rule_keys_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rules": {"win_gold": 50, "legacy_option": True}}), encoding="utf-8")

    assert load_config(path).rules == BattleRules(win_gold=50)


def test_invalid_rules_raise_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rules": {"mitigation_edge": "sideways"}}), encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_rules_must_be_an_object(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rules": [1]}), encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_string_boolean_rule_raises_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rules": {"clamp_mitigation": "false"}}), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="clamp_mitigation"):
        load_config(path)


def test_string_reward_raises_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rules": {"win_gold": "10"}}), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="win_gold"):
        load_config(path)


def test_boolean_turn_ceiling_is_rejected() -> None:
    with pytest.raises(ValueError):
        BattleRules(max_turns=True)


def test_boolean_clamp_from_config_is_kept(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rules": {"clamp_mitigation": False}}), encoding="utf-8")

    assert load_config(path).rules.clamp_mitigation is False


def test_battle_rules_reject_zero_turn_ceiling() -> None:
    with pytest.raises(ValueError):
        BattleRules(max_turns=0)
