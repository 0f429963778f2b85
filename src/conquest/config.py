from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml

from conquest.data.catalog import CardCatalog, EnemyRegistry
from conquest.data.loader import load_cards, load_enemies

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Lightweight logging configuration; applications can override as needed."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


@dataclass
class BattleConfig:
    """Where the battle data tables come from and how chatty the engine is.

    - cards_path / enemies_path: YAML tables to load; None means the tables bundled
      with the package.
    - log_level: name of the logging level passed to ``setup_logging``.
    """

    cards_path: Optional[Path] = None
    enemies_path: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, path: Path) -> "BattleConfig":
        """Load configuration from a YAML file. Missing fields fallback to defaults."""
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        cfg = cls()
        if raw.get("cards_path"):
            cfg.cards_path = Path(raw["cards_path"])
        if raw.get("enemies_path"):
            cfg.enemies_path = Path(raw["enemies_path"])
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg

    @classmethod
    def from_env(cls) -> "BattleConfig":
        """Build configuration from CONQUEST_CARDS, CONQUEST_ENEMIES and CONQUEST_LOG_LEVEL."""
        cfg = cls()
        if os.getenv("CONQUEST_CARDS"):
            cfg.cards_path = Path(os.environ["CONQUEST_CARDS"])
        if os.getenv("CONQUEST_ENEMIES"):
            cfg.enemies_path = Path(os.environ["CONQUEST_ENEMIES"])
        cfg.log_level = os.getenv("CONQUEST_LOG_LEVEL", cfg.log_level).upper()
        return cfg

    def to_yaml(self, path: Path) -> None:
        """Persist configuration to a YAML file."""
        data = {
            "cards_path": str(self.cards_path) if self.cards_path else None,
            "enemies_path": str(self.enemies_path) if self.enemies_path else None,
            "log_level": self.log_level,
        }
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=True)

    def load_tables(self) -> Tuple[CardCatalog, EnemyRegistry]:
        logger.debug("Loading data tables (cards=%s, enemies=%s)", self.cards_path or "<bundled>", self.enemies_path or "<bundled>")
        return load_cards(self.cards_path), load_enemies(self.enemies_path)
