"""Reusable predicates for calculators and enemy skills.

Slot predicates take ``(index, ctx)``; guards take ``ctx`` only and are
evaluated once per owning card.
"""
from __future__ import annotations

from typing import Callable

from .context import CalculationContext

SlotPredicate = Callable[[int, CalculationContext], bool]
Guard = Callable[[CalculationContext], bool]


def every_slot(index: int, ctx: CalculationContext) -> bool:
    return ctx.in_range(index)


def card_type_is(card_type: str) -> SlotPredicate:
    def predicate(index: int, ctx: CalculationContext) -> bool:
        card = ctx.card_at(index)
        return card is not None and card.card_type == card_type

    return predicate


def card_type_is_not(card_type: str) -> SlotPredicate:
    def predicate(index: int, ctx: CalculationContext) -> bool:
        card = ctx.card_at(index)
        return card is not None and card.card_type != card_type

    return predicate


def after_owner(card_type: str = "") -> SlotPredicate:
    """Slots placed after the owning card, optionally of one card type only."""

    def predicate(index: int, ctx: CalculationContext) -> bool:
        if ctx.owner_index is None or index <= ctx.owner_index:
            return False
        card = ctx.card_at(index)
        return card is not None and (not card_type or card.card_type == card_type)

    return predicate


def first_n(count: int) -> SlotPredicate:
    def predicate(index: int, ctx: CalculationContext) -> bool:
        return ctx.in_range(index) and index < count

    return predicate


def last_n(count: int) -> SlotPredicate:
    def predicate(index: int, ctx: CalculationContext) -> bool:
        return ctx.in_range(index) and index >= len(ctx.cards) - count

    return predicate


def odd_slot(index: int, ctx: CalculationContext) -> bool:
    # Slots are numbered from one on the battle screen.
    return ctx.in_range(index) and index % 2 == 0


def even_slot(index: int, ctx: CalculationContext) -> bool:
    return ctx.in_range(index) and index % 2 == 1


def enemy_type_is(enemy_type: str) -> Guard:
    def guard(ctx: CalculationContext) -> bool:
        return ctx.enemy.enemy_type == enemy_type

    return guard


def neighbor_type_is(card_type: str, delta: int = 1) -> Guard:
    """Guard holding when the card ``delta`` slots from the owner has ``card_type``."""

    def guard(ctx: CalculationContext) -> bool:
        if ctx.owner_index is None:
            return False
        card = ctx.card_at(ctx.owner_index + delta)
        return card is not None and card.card_type == card_type

    return guard


def slot_is(index: int) -> Guard:
    def guard(ctx: CalculationContext) -> bool:
        return ctx.owner_index == index

    return guard
