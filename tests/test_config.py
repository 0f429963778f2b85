import logging
from pathlib import Path

import pytest

from conquest.config import BattleConfig, setup_logging


def test_defaults_load_bundled_tables():
    cfg = BattleConfig()
    assert cfg.cards_path is None and cfg.enemies_path is None
    catalog, enemies = cfg.load_tables()
    assert catalog.has("knight")
    assert enemies.has("red_dragon")


def test_yaml_round_trip(tmp_path):
    path = tmp_path / "battle.yaml"
    BattleConfig(cards_path=Path("data/cards.yaml"), log_level="DEBUG").to_yaml(path)
    cfg = BattleConfig.from_yaml(path)
    assert cfg.cards_path == Path("data/cards.yaml")
    assert cfg.enemies_path is None
    assert cfg.log_level == "DEBUG"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        BattleConfig.from_yaml(tmp_path / "nope.yaml")


def test_partial_yaml_falls_back_to_defaults(tmp_path):
    path = tmp_path / "battle.yaml"
    path.write_text("log_level: warning\n", encoding="utf-8")
    cfg = BattleConfig.from_yaml(path)
    assert cfg.log_level == "WARNING"
    assert cfg.cards_path is None


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CONQUEST_ENEMIES", str(tmp_path / "enemies.yaml"))
    monkeypatch.setenv("CONQUEST_LOG_LEVEL", "debug")
    monkeypatch.delenv("CONQUEST_CARDS", raising=False)
    cfg = BattleConfig.from_env()
    assert cfg.enemies_path == tmp_path / "enemies.yaml"
    assert cfg.cards_path is None
    assert cfg.log_level == "DEBUG"


def test_setup_logging_accepts_names(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    setup_logging("debug")
    setup_logging(logging.WARNING)
    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == logging.WARNING
