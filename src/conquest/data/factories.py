"""Builders that turn skill entries of the data tables into skill objects.

Each card skill entry has a ``kind`` plus the parameters that kind needs;
enemy skill entries work the same way against ``conquest.enemies.skills``.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping

from conquest.battle import predicates
from conquest.battle.calculators import (
    Composite,
    Condition,
    EffectAll,
    EffectAllCondition,
    EffectIndices,
    EffectSelf,
    Func,
    SkillCalculator,
    SupportPowerMultiplier,
    position_bonus,
    two_platoon,
)
from conquest.battle.modifiers import PowerModifier
from conquest.battle.skills import BattleCardSkill, EnemySkill
from conquest.enemies import skills as enemy_skills
from conquest.exceptions import DataValidationError

logger = logging.getLogger(__name__)

CalculatorBuilder = Callable[[Mapping[str, Any]], SkillCalculator]
EnemySkillBuilder = Callable[[str, Mapping[str, Any]], EnemySkill]


def _modifier(params: Mapping[str, Any]) -> PowerModifier:
    return PowerModifier.from_dict(params.get("modifier", {}))


def _enemy_type(params: Mapping[str, Any]) -> SkillCalculator:
    return Condition(
        predicates.enemy_type_is(params["enemy_type"]),
        EffectSelf(PowerModifier(multiplicative_buff=float(params["value"]))),
    )


def _trailings(params: Mapping[str, Any]) -> SkillCalculator:
    return EffectAllCondition(
        PowerModifier(multiplicative_buff=float(params["value"])),
        predicates.after_owner(params.get("card_type", "")),
    )


def _all_by_card_type(params: Mapping[str, Any]) -> SkillCalculator:
    return EffectAllCondition(
        PowerModifier(multiplicative_buff=float(params["value"])),
        predicates.card_type_is(params["card_type"]),
    )


def _by_index(params: Mapping[str, Any]) -> SkillCalculator:
    return Condition(
        predicates.slot_is(int(params["index"])),
        EffectSelf(PowerModifier(multiplicative_buff=float(params["value"]))),
    )


def _composite(params: Mapping[str, Any]) -> SkillCalculator:
    return Composite(tuple(build_calculator(p) for p in params["calculators"]))


CALCULATOR_BUILDERS: Dict[str, CalculatorBuilder] = {
    "self": lambda p: EffectSelf(_modifier(p)),
    "all": lambda p: EffectAll(_modifier(p)),
    "indices": lambda p: EffectIndices(_modifier(p), tuple(int(d) for d in p.get("deltas", (-1, 1)))),
    "support_power": lambda p: SupportPowerMultiplier(float(p["value"])),
    "enemy_type": _enemy_type,
    "trailings": _trailings,
    "all_by_card_type": _all_by_card_type,
    "by_index": _by_index,
    "protect_self": lambda p: EffectSelf(PowerModifier(protection=float(p["value"]))),
    "protect_neighbors": lambda p: EffectIndices(PowerModifier(protection=float(p["value"])), (-1, 1)),
    "boost_buff": lambda p: EffectSelf(PowerModifier(buff_boost=float(p["value"]))),
    "two_platoon": lambda p: Func(two_platoon(p["card_type"], float(p["value"]))),
    "position_bonus": lambda p: Func(position_bonus),
    "composite": _composite,
}

ENEMY_SKILL_BUILDERS: Dict[str, EnemySkillBuilder] = {
    "additive_debuff_all": lambda sid, p: enemy_skills.additive_debuff_all(sid, float(p["value"])),
    "multiplicative_debuff_all": lambda sid, p: enemy_skills.multiplicative_debuff_all(sid, float(p["value"])),
    "card_type_additive_debuff": lambda sid, p: enemy_skills.card_type_additive_debuff(
        sid, p["card_type"], float(p["value"])
    ),
    "card_type_except_additive_debuff": lambda sid, p: enemy_skills.card_type_except_additive_debuff(
        sid, p["card_type"], float(p["value"])
    ),
    "card_type_multiplicative_debuff": lambda sid, p: enemy_skills.card_type_multiplicative_debuff(
        sid, p["card_type"], float(p["value"])
    ),
    "card_type_except_multiplicative_debuff": lambda sid, p: enemy_skills.card_type_except_multiplicative_debuff(
        sid, p["card_type"], float(p["value"])
    ),
    "index_forward_multiplicative_debuff": lambda sid, p: enemy_skills.index_forward_multiplicative_debuff(
        sid, int(p["num_of_cards"]), float(p["value"])
    ),
    "index_backward_multiplicative_debuff": lambda sid, p: enemy_skills.index_backward_multiplicative_debuff(
        sid, int(p["num_of_cards"]), float(p["value"])
    ),
    "odd_slot_additive_debuff": lambda sid, p: enemy_skills.odd_slot_additive_debuff(sid, float(p["value"])),
    "even_slot_multiplicative_debuff": lambda sid, p: enemy_skills.even_slot_multiplicative_debuff(
        sid, float(p["value"])
    ),
}


def _build(kind: Any, make: Callable[[], Any]) -> Any:
    try:
        return make()
    except KeyError as e:
        raise DataValidationError(f"Skill kind {kind!r} is missing parameter {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise DataValidationError(f"Skill kind {kind!r} has a bad parameter: {e}") from e


def build_calculator(params: Mapping[str, Any]) -> SkillCalculator:
    kind = params.get("kind")
    try:
        builder = CALCULATOR_BUILDERS[kind]
    except KeyError as e:
        raise DataValidationError(f"Unknown card skill kind: {kind!r}") from e
    return _build(kind, lambda: builder(params))


def build_card_skill(params: Mapping[str, Any]) -> BattleCardSkill:
    return BattleCardSkill(
        skill_id=params["id"],
        calculator=build_calculator(params),
        description_key=params.get("description_key", ""),
    )


def build_enemy_skill(params: Mapping[str, Any]) -> EnemySkill:
    kind = params.get("kind")
    try:
        builder = ENEMY_SKILL_BUILDERS[kind]
    except KeyError as e:
        raise DataValidationError(f"Unknown enemy skill kind: {kind!r}") from e
    skill = _build(kind, lambda: builder(params["id"], params))
    if params.get("description_key"):
        skill = replace(skill, description_key=params["description_key"])
    logger.debug("Built enemy skill %s (%s)", skill.skill_id, kind)
    return skill
