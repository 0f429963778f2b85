"""Battle power-resolution engine."""

from .battlefield import Battlefield, BattleReport, BattleState, SlotPower
from .calculators import (
    Composite,
    Condition,
    EffectAll,
    EffectAllCondition,
    EffectIndices,
    EffectSelf,
    Func,
    SkillCalculator,
    SupportPowerMultiplier,
)
from .context import CalculationContext
from .effects import SkillEffect
from .events import BattleAbandoned, BattleWon, EventBus
from .modifiers import PowerModifier
from .skills import BattleCardSkill, EnemySkill

__all__ = [
    "BattleAbandoned",
    "BattleCardSkill",
    "BattleReport",
    "BattleState",
    "BattleWon",
    "Battlefield",
    "CalculationContext",
    "Composite",
    "Condition",
    "EffectAll",
    "EffectAllCondition",
    "EffectIndices",
    "EffectSelf",
    "EnemySkill",
    "EventBus",
    "Func",
    "PowerModifier",
    "SkillCalculator",
    "SkillEffect",
    "SlotPower",
    "SupportPowerMultiplier",
]
