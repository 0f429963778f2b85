from .models import BattleCard, EXPERIENCE_PER_LEVEL, LEVEL_POWER_GROWTH
from .structures import BattlefieldModifier, CardSlotModifier, StructureCard, SupportPowerModifier

__all__ = [
    "BattleCard",
    "BattlefieldModifier",
    "CardSlotModifier",
    "EXPERIENCE_PER_LEVEL",
    "LEVEL_POWER_GROWTH",
    "StructureCard",
    "SupportPowerModifier",
]
