from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from conquest.cards.models import BattleCard
    from conquest.enemies.models import Enemy


@dataclass(frozen=True)
class CalculationContext:
    """
    Read-only snapshot handed to every calculator, predicate and enemy skill.

    Holds the ordered placed cards, the enemy, and the slot index of the card
    whose skill is being evaluated (None while evaluating enemy skills).
    """

    cards: Tuple["BattleCard", ...]
    enemy: "Enemy"
    owner_index: Optional[int] = None

    @classmethod
    def snapshot(cls, cards: Sequence["BattleCard"], enemy: "Enemy") -> CalculationContext:
        return cls(cards=tuple(cards), enemy=enemy)

    def for_owner(self, index: int) -> CalculationContext:
        return replace(self, owner_index=index)

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self.cards)

    def card_at(self, index: int) -> Optional["BattleCard"]:
        if not self.in_range(index):
            return None
        return self.cards[index]
