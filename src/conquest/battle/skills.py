from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .calculators import SkillCalculator
from .context import CalculationContext
from .effects import SkillEffect
from .modifiers import PowerModifier
from .predicates import SlotPredicate

logger = logging.getLogger(__name__)

__all__ = ["BattleCardSkill", "EnemySkill", "SkillEffect"]


@dataclass(frozen=True)
class BattleCardSkill:
    """A skill carried by a battle card; the calculator holds the actual rule."""

    skill_id: str
    calculator: SkillCalculator
    description_key: str = ""

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        effects = self.calculator.calculate(ctx)
        logger.debug("Card skill %s at slot %s produced %d effect(s)", self.skill_id, ctx.owner_index, len(effects))
        return effects

    def support_bonus(self, ctx: CalculationContext) -> float:
        return self.calculator.support_bonus(ctx)


@dataclass(frozen=True)
class EnemySkill:
    """A fixed modifier the enemy applies to every slot matching ``predicate``."""

    skill_id: str
    predicate: SlotPredicate
    modifier: PowerModifier
    description_key: str = ""

    def calculate(self, ctx: CalculationContext) -> List[SkillEffect]:
        effects = [SkillEffect(i, self.modifier) for i in range(len(ctx.cards)) if self.predicate(i, ctx)]
        logger.debug("Enemy skill %s hit slots %s", self.skill_id, [e.index for e in effects])
        return effects
