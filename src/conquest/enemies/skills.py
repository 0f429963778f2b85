"""Factories for the enemy skills used by the enemy data table."""
from __future__ import annotations

from conquest.battle import predicates
from conquest.battle.modifiers import PowerModifier
from conquest.battle.skills import EnemySkill


def additive_debuff_all(skill_id: str, value: float) -> EnemySkill:
    return EnemySkill(skill_id, predicates.every_slot, PowerModifier(additive_debuff=value))


def multiplicative_debuff_all(skill_id: str, value: float) -> EnemySkill:
    return EnemySkill(skill_id, predicates.every_slot, PowerModifier(multiplicative_debuff=value))


def card_type_additive_debuff(skill_id: str, card_type: str, value: float) -> EnemySkill:
    return EnemySkill(skill_id, predicates.card_type_is(card_type), PowerModifier(additive_debuff=value))


def card_type_except_additive_debuff(skill_id: str, card_type: str, value: float) -> EnemySkill:
    return EnemySkill(skill_id, predicates.card_type_is_not(card_type), PowerModifier(additive_debuff=value))


def card_type_multiplicative_debuff(skill_id: str, card_type: str, value: float) -> EnemySkill:
    return EnemySkill(skill_id, predicates.card_type_is(card_type), PowerModifier(multiplicative_debuff=value))


def card_type_except_multiplicative_debuff(skill_id: str, card_type: str, value: float) -> EnemySkill:
    return EnemySkill(skill_id, predicates.card_type_is_not(card_type), PowerModifier(multiplicative_debuff=value))


def index_forward_multiplicative_debuff(skill_id: str, num_of_cards: int, value: float) -> EnemySkill:
    """Debuffs the first ``num_of_cards`` slots."""
    return EnemySkill(skill_id, predicates.first_n(num_of_cards), PowerModifier(multiplicative_debuff=value))


def index_backward_multiplicative_debuff(skill_id: str, num_of_cards: int, value: float) -> EnemySkill:
    """Debuffs the last ``num_of_cards`` slots."""
    return EnemySkill(skill_id, predicates.last_n(num_of_cards), PowerModifier(multiplicative_debuff=value))


def odd_slot_additive_debuff(skill_id: str, value: float) -> EnemySkill:
    return EnemySkill(skill_id, predicates.odd_slot, PowerModifier(additive_debuff=value))


def even_slot_multiplicative_debuff(skill_id: str, value: float) -> EnemySkill:
    return EnemySkill(skill_id, predicates.even_slot, PowerModifier(multiplicative_debuff=value))
