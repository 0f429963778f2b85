from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from conquest.battle.battlefield import Battlefield

logger = logging.getLogger(__name__)


class BattlefieldModifier:
    """A structure effect applied to a battlefield when the fight starts."""

    def modify(self, battlefield: "Battlefield") -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class CardSlotModifier(BattlefieldModifier):
    value: int

    def modify(self, battlefield: "Battlefield") -> None:
        battlefield.card_slot += self.value
        logger.debug("Card slot %+d => %s", self.value, battlefield.card_slot)


@dataclass(frozen=True)
class SupportPowerModifier(BattlefieldModifier):
    value: float

    def modify(self, battlefield: "Battlefield") -> None:
        battlefield.base_support_power += self.value
        logger.debug("Support power %+.1f => %s", self.value, battlefield.base_support_power)


@dataclass(frozen=True)
class StructureCard:
    """A card built into a territory. Its battlefield modifiers apply to fights next to it."""

    card_id: str
    description_key: str = ""
    battlefield_modifiers: Tuple[BattlefieldModifier, ...] = field(default_factory=tuple)

    def apply(self, battlefield: "Battlefield") -> None:
        for modifier in self.battlefield_modifiers:
            modifier.modify(battlefield)
