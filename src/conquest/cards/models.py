from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from conquest.battle.skills import BattleCardSkill

# Experience needed per level and the power gained for each level above 1.
EXPERIENCE_PER_LEVEL = 100
LEVEL_POWER_GROWTH = 0.1


@dataclass(frozen=True)
class BattleCard:
    """A card placed on the battlefield during combat.

    Cards are immutable templates; the deck tracks how many copies the
    player owns. ``card_type`` (warrior, mage, beast, ...) is what other
    skills use to pick their targets.
    """

    card_id: str
    base_power: float
    card_type: str = ""
    skill: Optional[BattleCardSkill] = None
    experience: int = 0

    def __post_init__(self) -> None:
        if self.base_power < 0:
            raise ValueError(f"Card '{self.card_id}' has negative base power {self.base_power}")
        if self.experience < 0:
            raise ValueError(f"Card '{self.card_id}' has negative experience {self.experience}")

    @property
    def level(self) -> int:
        return 1 + self.experience // EXPERIENCE_PER_LEVEL

    @property
    def power(self) -> float:
        """Base power scaled by level; level 1 cards keep their base power."""
        return float(self.base_power) * (1.0 + LEVEL_POWER_GROWTH * (self.level - 1))

    def gain_experience(self) -> BattleCard:
        """Return a copy of this card after absorbing a duplicate.

        Higher levels gain less experience per duplicate.
        """
        return replace(self, experience=self.experience + EXPERIENCE_PER_LEVEL // self.level)
