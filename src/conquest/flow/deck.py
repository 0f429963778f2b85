from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from conquest.cards.models import BattleCard

logger = logging.getLogger(__name__)


class CardDeck:
    """The player's battle cards, counted per card id.

    All copies of one id share a single card instance, so experience
    gained by absorbing duplicates applies to every copy.
    """

    def __init__(self, cards: Optional[Iterable[BattleCard]] = None) -> None:
        self._cards: Dict[str, BattleCard] = {}
        self._counts: Dict[str, int] = {}
        for card in cards or ():
            self.put(card)

    def count(self, card_id: str) -> int:
        return self._counts.get(card_id, 0)

    def card_ids(self) -> List[str]:
        return sorted(cid for cid, n in self._counts.items() if n > 0)

    def __len__(self) -> int:
        return sum(self._counts.values())

    def put(self, card: BattleCard) -> None:
        """Add one copy of ``card``; an already known id keeps its existing level."""
        self._cards.setdefault(card.card_id, card)
        self._counts[card.card_id] = self._counts.get(card.card_id, 0) + 1

    def take(self, card_id: str) -> Optional[BattleCard]:
        if self.count(card_id) <= 0:
            return None
        self._counts[card_id] -= 1
        return self._cards[card_id]

    def absorb(self, card: BattleCard) -> BattleCard:
        """Turn a duplicate of an owned card into experience; unknown cards are simply added."""
        owned = self._cards.get(card.card_id)
        if owned is None:
            self.put(card)
            return card
        leveled = owned.gain_experience()
        self._cards[card.card_id] = leveled
        logger.debug("%s absorbed a duplicate: level %s -> %s", card.card_id, owned.level, leveled.level)
        return leveled
