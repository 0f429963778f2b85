from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from .context import CalculationContext
from .events import BattleAbandoned, BattleWon, EventBus
from .modifiers import PowerModifier

if TYPE_CHECKING:
    from conquest.cards.models import BattleCard
    from conquest.cards.structures import StructureCard
    from conquest.enemies.models import Enemy

logger = logging.getLogger(__name__)


class BattleState(str, Enum):
    ASSEMBLING = "assembling"
    WON = "won"
    ABANDONED = "abandoned"


@dataclass(frozen=True)
class SlotPower:
    card: "BattleCard"
    modifier: PowerModifier
    power: float


@dataclass(frozen=True)
class BattleReport:
    """Everything the presentation layer needs to show a battle's numbers."""

    slots: Tuple[SlotPower, ...]
    support_power: float
    total_power: float
    enemy_power: float

    @property
    def can_beat(self) -> bool:
        return self.total_power >= self.enemy_power

    @property
    def card_powers(self) -> List[float]:
        return [s.power for s in self.slots]


class Battlefield:
    """A single fight against one enemy.

    Cards are placed and removed while the battlefield is assembling; the
    total power is recomputed from scratch on every query. A battlefield ends
    either won (``beat``) or abandoned (``abandon``) and is not reused.
    """

    def __init__(
        self,
        enemy: "Enemy",
        base_support_power: float = 0.0,
        cards: Optional[Iterable["BattleCard"]] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.enemy = enemy
        self.base_support_power = float(base_support_power)
        self.card_slot = enemy.card_slot
        self.cards: List["BattleCard"] = []
        self.event_bus = event_bus
        self.state = BattleState.ASSEMBLING
        # Initial cards go through the same capacity check; overflow is dropped.
        for card in cards or ():
            self.add_card(card)

    @classmethod
    def create(
        cls,
        enemy: "Enemy",
        support_power: float = 0.0,
        structures: Iterable["StructureCard"] = (),
        event_bus: Optional[EventBus] = None,
    ) -> Battlefield:
        """Open a battlefield, applying the modifiers of nearby structure cards."""
        battlefield = cls(enemy, support_power, event_bus=event_bus)
        for structure in structures:
            structure.apply(battlefield)
        logger.debug(
            "Battlefield opened vs %s (slots=%s, support=%s)",
            enemy.enemy_id,
            battlefield.card_slot,
            battlefield.base_support_power,
        )
        return battlefield

    @property
    def is_assembling(self) -> bool:
        return self.state is BattleState.ASSEMBLING

    @property
    def is_full(self) -> bool:
        return len(self.cards) >= self.card_slot

    def add_card(self, card: "BattleCard") -> bool:
        if not self.is_assembling:
            logger.warning("Cannot place %s: battlefield is %s", card.card_id, self.state.value)
            return False
        if self.is_full:
            logger.warning("Cannot place %s: all %s slots are taken", card.card_id, self.card_slot)
            return False
        self.cards.append(card)
        logger.debug("Placed %s in slot %s", card.card_id, len(self.cards) - 1)
        return True

    def remove_card(self, index: int) -> Optional["BattleCard"]:
        if not self.is_assembling:
            logger.warning("Cannot remove slot %s: battlefield is %s", index, self.state.value)
            return None
        if index < 0 or index >= len(self.cards):
            return None
        card = self.cards.pop(index)
        logger.debug("Removed %s from slot %s", card.card_id, index)
        return card

    def evaluate(self) -> BattleReport:
        """Run every card and enemy skill and fold the results into final powers."""
        ctx = CalculationContext.snapshot(self.cards, self.enemy)
        accumulators = [PowerModifier() for _ in self.cards]
        support_power = self.base_support_power

        for i, card in enumerate(self.cards):
            if card.skill is None:
                continue
            owner_ctx = ctx.for_owner(i)
            for effect in card.skill.calculate(owner_ctx):
                accumulators[effect.index] = accumulators[effect.index].combine(effect.modifier)
            support_power += card.skill.support_bonus(owner_ctx)

        for skill in self.enemy.skills:
            for effect in skill.calculate(ctx):
                accumulators[effect.index] = accumulators[effect.index].combine(effect.modifier)

        slots = tuple(
            SlotPower(card=card, modifier=mod, power=mod.resolve(card.power))
            for card, mod in zip(self.cards, accumulators)
        )
        total = sum(s.power for s in slots) + support_power
        return BattleReport(
            slots=slots,
            support_power=support_power,
            total_power=total,
            enemy_power=float(self.enemy.power),
        )

    def calculated_powers(self) -> List[float]:
        return self.evaluate().card_powers

    def total_power(self) -> float:
        return self.evaluate().total_power

    def can_beat(self) -> bool:
        return self.evaluate().can_beat

    def beat(self) -> bool:
        """Record the fight as won if the placed cards are strong enough.

        The placed cards stay on the battlefield; returning them is up to the caller.
        """
        if not self.is_assembling:
            logger.warning("beat() called on a %s battlefield", self.state.value)
            return False
        report = self.evaluate()
        if not report.can_beat:
            logger.debug("Not enough power: %.2f < %.2f", report.total_power, report.enemy_power)
            return False
        self.state = BattleState.WON
        logger.info("Defeated %s with %.2f power (needed %.2f)", self.enemy.enemy_id, report.total_power, report.enemy_power)
        if self.event_bus is not None:
            self.event_bus.emit(BattleWon(self.enemy.enemy_id, report.total_power, report.enemy_power))
        return True

    def abandon(self) -> List["BattleCard"]:
        """Retreat from the fight and hand back every placed card."""
        if not self.is_assembling:
            logger.warning("abandon() called on a %s battlefield", self.state.value)
            return []
        returned, self.cards = self.cards, []
        self.state = BattleState.ABANDONED
        logger.info("Retreated from %s; %d card(s) returned", self.enemy.enemy_id, len(returned))
        if self.event_bus is not None:
            self.event_bus.emit(BattleAbandoned(self.enemy.enemy_id, tuple(c.card_id for c in returned)))
        return returned
