from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Optional

import yaml
from jsonschema import Draft7Validator

from conquest.cards.models import BattleCard
from conquest.cards.structures import CardSlotModifier, StructureCard, SupportPowerModifier
from conquest.enemies.models import Enemy
from conquest.exceptions import DataValidationError

from .catalog import CardCatalog, EnemyRegistry
from .factories import build_card_skill, build_enemy_skill

logger = logging.getLogger(__name__)

_PKG = "conquest.data"


@lru_cache(maxsize=None)
def _load_schema(name: str) -> Dict[str, Any]:
    """Load a bundled JSON schema from ``conquest/data/schemas``; cached since schemas are static."""
    entry = resources.files(_PKG).joinpath("schemas").joinpath(f"{name}.schema.json")
    with entry.open("rb") as fh:
        schema = json.load(fh)
    logger.debug("Loaded %s schema", name)
    return schema


def validate(data: Any, schema_name: str) -> None:
    """Validate a parsed table against a bundled schema.

    Raises:
        DataValidationError carrying every jsonschema error found.
    """
    validator = Draft7Validator(_load_schema(schema_name))
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        for err in errors:
            logger.error("%s data validation error at %s: %s", schema_name, list(err.path), err.message)
        raise DataValidationError(f"{schema_name} data failed validation", errors)


def read_table(filename: str, path: Optional[os.PathLike | str] = None) -> Any:
    """Read a YAML table from ``path``, or the copy bundled with the package when path is None."""
    if path is None:
        text = resources.files(_PKG).joinpath(filename).read_text(encoding="utf-8")
        logger.debug("Loaded embedded data table %s", filename)
    else:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        logger.debug("Loaded data table from path: %s", path)
    return yaml.safe_load(text) or {}


def card_from_dict(data: Dict[str, Any]) -> BattleCard:
    skill = build_card_skill(data["skill"]) if data.get("skill") else None
    return BattleCard(
        card_id=data["id"],
        base_power=float(data["power"]),
        card_type=data.get("type", ""),
        skill=skill,
        experience=int(data.get("experience", 0)),
    )


def structure_from_dict(data: Dict[str, Any]) -> StructureCard:
    modifiers = []
    if data.get("card_slot"):
        modifiers.append(CardSlotModifier(int(data["card_slot"])))
    if data.get("support_power"):
        modifiers.append(SupportPowerModifier(float(data["support_power"])))
    return StructureCard(
        card_id=data["id"],
        description_key=data.get("description_key", ""),
        battlefield_modifiers=tuple(modifiers),
    )


def enemy_from_dict(data: Dict[str, Any]) -> Enemy:
    return Enemy(
        enemy_id=data["id"],
        enemy_type=data["type"],
        power=float(data["power"]),
        card_slot=int(data["card_slot"]),
        skills=tuple(build_enemy_skill(s) for s in data.get("skills", [])),
        question=data.get("question", ""),
    )


def load_cards_from_dict(data: Dict[str, Any]) -> CardCatalog:
    validate(data, "card")
    try:
        catalog = CardCatalog(
            battle_cards=[card_from_dict(c) for c in data.get("battle_cards", [])],
            structure_cards=[structure_from_dict(s) for s in data.get("structure_cards", [])],
        )
    except ValueError as e:
        raise DataValidationError(f"card data is inconsistent: {e}") from e
    return catalog


def load_enemies_from_dict(data: Dict[str, Any]) -> EnemyRegistry:
    validate(data, "enemy")
    try:
        registry = EnemyRegistry(enemy_from_dict(e) for e in data.get("enemies", []))
    except ValueError as e:
        raise DataValidationError(f"enemy data is inconsistent: {e}") from e
    return registry


def load_cards(path: Optional[os.PathLike | str] = None) -> CardCatalog:
    catalog = load_cards_from_dict(read_table("cards.yaml", path))
    logger.info(
        "Card catalog loaded: %d battle cards, %d structure cards",
        len(catalog.battle_card_ids()),
        len(catalog.structure_card_ids()),
    )
    return catalog


def load_enemies(path: Optional[os.PathLike | str] = None) -> EnemyRegistry:
    registry = load_enemies_from_dict(read_table("enemies.yaml", path))
    logger.info("Enemy registry loaded: %d enemies", len(registry))
    return registry
