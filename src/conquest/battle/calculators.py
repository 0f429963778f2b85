from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Tuple

from .context import CalculationContext
from .effects import SkillEffect
from .modifiers import PowerModifier
from .predicates import Guard, SlotPredicate

logger = logging.getLogger(__name__)

CustomCalculation = Callable[[CalculationContext], Iterable[Tuple[int, PowerModifier]]]


def _in_range(effects: Iterable[SkillEffect], ctx: CalculationContext) -> List[SkillEffect]:
    kept = []
    for effect in effects:
        if ctx.in_range(effect.index):
            kept.append(effect)
        else:
            logger.debug("Dropping effect for out-of-range slot %s (cards=%s)", effect.index, len(ctx.cards))
    return kept


class SkillCalculator:
    """Base class for battle card skill rules.

    A calculator decides which slots a skill touches and with what modifier.
    ``ctx.owner_index`` is the slot of the card that owns the skill.
    """

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        raise NotImplementedError

    def support_bonus(self, ctx: CalculationContext) -> float:
        """Flat power added to the team support-power accumulator (none by default)."""
        return 0.0


@dataclass(frozen=True)
class EffectSelf(SkillCalculator):
    modifier: PowerModifier

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        if ctx.owner_index is None:
            return []
        return _in_range([SkillEffect(ctx.owner_index, self.modifier)], ctx)


@dataclass(frozen=True)
class EffectAll(SkillCalculator):
    modifier: PowerModifier

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        return [SkillEffect(i, self.modifier) for i in range(len(ctx.cards))]


@dataclass(frozen=True)
class EffectAllCondition(SkillCalculator):
    """Applies to every slot for which ``predicate(index, ctx)`` holds."""

    modifier: PowerModifier
    predicate: SlotPredicate

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        return [SkillEffect(i, self.modifier) for i in range(len(ctx.cards)) if self.predicate(i, ctx)]


@dataclass(frozen=True)
class EffectIndices(SkillCalculator):
    """Applies to slots at fixed offsets from the owner, e.g. (-1, 1) for neighbours.

    Offsets that fall off either end of the card row are dropped, never wrapped.
    """

    modifier: PowerModifier
    deltas: Tuple[int, ...] = (-1, 1)

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        if ctx.owner_index is None:
            return []
        effects = [SkillEffect(ctx.owner_index + d, self.modifier) for d in self.deltas]
        return _in_range(effects, ctx)


@dataclass(frozen=True)
class Condition(SkillCalculator):
    """Runs ``inner`` only when ``guard(ctx)`` holds for the owning card."""

    guard: Guard
    inner: SkillCalculator

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        if not self.guard(ctx):
            return []
        return self.inner.calculate(ctx)

    def support_bonus(self, ctx: CalculationContext) -> float:
        if not self.guard(ctx):
            return 0.0
        return self.inner.support_bonus(ctx)


@dataclass(frozen=True)
class SupportPowerMultiplier(SkillCalculator):
    """Adds ``value`` straight to the team support power, not to any card."""

    value: float

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        return []

    def support_bonus(self, ctx: CalculationContext) -> float:
        return self.value


@dataclass(frozen=True)
class Func(SkillCalculator):
    """Escape hatch for rules outside the closed variant set.

    ``fn`` receives the context and yields ``(index, modifier)`` pairs.
    """

    fn: CustomCalculation

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        return _in_range((SkillEffect(i, m) for i, m in self.fn(ctx)), ctx)


@dataclass(frozen=True)
class Composite(SkillCalculator):
    calculators: Tuple[SkillCalculator, ...] = field(default_factory=tuple)

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        effects: List[SkillEffect] = []
        for calculator in self.calculators:
            effects.extend(calculator.calculate(ctx))
        return effects

    def support_bonus(self, ctx: CalculationContext) -> float:
        return sum(c.support_bonus(ctx) for c in self.calculators)


def position_bonus(ctx: CalculationContext) -> List[Tuple[int, PowerModifier]]:
    """Owner gains flat power equal to its slot index."""
    if ctx.owner_index is None:
        return []
    return [(ctx.owner_index, PowerModifier(additive_buff=float(ctx.owner_index)))]


def two_platoon(card_type: str, multiplier: float) -> CustomCalculation:
    """Owner and its right-hand neighbour both gain ``multiplier`` when the neighbour has ``card_type``."""

    def fn(ctx: CalculationContext) -> List[Tuple[int, PowerModifier]]:
        if ctx.owner_index is None:
            return []
        right = ctx.card_at(ctx.owner_index + 1)
        if right is None or right.card_type != card_type:
            return []
        buff = PowerModifier(multiplicative_buff=multiplier)
        return [(ctx.owner_index, buff), (ctx.owner_index + 1, buff)]

    return fn
