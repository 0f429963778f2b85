from __future__ import annotations

import logging
from typing import Iterable, Optional, Set

from conquest.battle.battlefield import Battlefield
from conquest.battle.events import BattleWon, EventBus
from conquest.cards.structures import StructureCard
from conquest.data.catalog import EnemyRegistry
from conquest.enemies.models import Enemy

from .deck import CardDeck

logger = logging.getLogger(__name__)


class BattleFlow:
    """Drives one battlefield at a time on behalf of the UI.

    Keeps the deck and the battlefield consistent: a card is taken from the
    deck only when the battlefield accepts it, and goes back to the deck when
    removed or when the fight is abandoned.
    """

    def __init__(self, deck: CardDeck, enemies: EnemyRegistry, event_bus: Optional[EventBus] = None) -> None:
        self.deck = deck
        self.enemies = enemies
        self.event_bus = event_bus or EventBus()
        self.battlefield: Optional[Battlefield] = None
        self.defeated: Set[str] = set()
        self.event_bus.subscribe(BattleWon, self._on_battle_won)

    def _on_battle_won(self, event: BattleWon) -> None:
        self.defeated.add(event.enemy_id)

    def start(
        self,
        enemy: Enemy | str,
        support_power: float = 0.0,
        structures: Iterable[StructureCard] = (),
    ) -> Optional[Battlefield]:
        if isinstance(enemy, str):
            enemy = self.enemies.get(enemy)
        if enemy.enemy_id in self.defeated:
            logger.warning("%s is already defeated", enemy.enemy_id)
            return None
        if self.battlefield is not None and self.battlefield.is_assembling:
            self.rollback()
        self.battlefield = Battlefield.create(enemy, support_power, structures, event_bus=self.event_bus)
        return self.battlefield

    def place_card(self, card_id: str) -> bool:
        if self.battlefield is None or self.deck.count(card_id) <= 0:
            return False
        if self.battlefield.is_full or not self.battlefield.is_assembling:
            return False
        card = self.deck.take(card_id)
        if card is None:
            return False
        if not self.battlefield.add_card(card):
            self.deck.put(card)
            return False
        return True

    def remove_from_battle(self, index: int) -> bool:
        if self.battlefield is None:
            return False
        card = self.battlefield.remove_card(index)
        if card is None:
            return False
        self.deck.put(card)
        return True

    def conquer(self) -> bool:
        """Win the current fight if possible. Committed cards are spent, not returned."""
        if self.battlefield is None:
            return False
        if not self.battlefield.beat():
            return False
        self.battlefield = None
        return True

    def rollback(self) -> None:
        if self.battlefield is None:
            return
        for card in self.battlefield.abandon():
            self.deck.put(card)
        self.battlefield = None
