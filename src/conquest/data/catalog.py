from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

from conquest.cards.models import BattleCard
from conquest.cards.structures import StructureCard
from conquest.enemies.models import Enemy
from conquest.exceptions import UnknownCardError, UnknownEnemyError


class CardCatalog:
    """In-memory registry of battle and structure card templates."""

    def __init__(
        self,
        battle_cards: Optional[Iterable[BattleCard]] = None,
        structure_cards: Optional[Iterable[StructureCard]] = None,
    ) -> None:
        self._battle: Dict[str, BattleCard] = {}
        self._structures: Dict[str, StructureCard] = {}
        for card in battle_cards or ():
            self.add_battle_card(card)
        for structure in structure_cards or ():
            self.add_structure_card(structure)

    def _check_unique(self, card_id: str) -> None:
        if card_id in self._battle or card_id in self._structures:
            raise ValueError(f"Duplicate card id: {card_id}")

    def add_battle_card(self, card: BattleCard) -> None:
        self._check_unique(card.card_id)
        self._battle[card.card_id] = card

    def add_structure_card(self, card: StructureCard) -> None:
        self._check_unique(card.card_id)
        self._structures[card.card_id] = card

    def has(self, card_id: str) -> bool:
        return card_id in self._battle or card_id in self._structures

    def battle_card(self, card_id: str) -> BattleCard:
        try:
            return self._battle[card_id]
        except KeyError as e:
            raise UnknownCardError(f"Unknown battle card id: {card_id}") from e

    def structure_card(self, card_id: str) -> StructureCard:
        try:
            return self._structures[card_id]
        except KeyError as e:
            raise UnknownCardError(f"Unknown structure card id: {card_id}") from e

    def battle_card_ids(self) -> List[str]:
        return sorted(self._battle)

    def structure_card_ids(self) -> List[str]:
        return sorted(self._structures)

    def generate(self, card_ids: Iterable[str]) -> Tuple[List[BattleCard], List[StructureCard]]:
        """Resolve card ids into fresh copies of their templates, split by kind.

        Raises UnknownCardError if any id is not in the catalog.
        """
        battle: List[BattleCard] = []
        structures: List[StructureCard] = []
        for card_id in card_ids:
            if card_id in self._battle:
                battle.append(replace(self._battle[card_id]))
            elif card_id in self._structures:
                structures.append(replace(self._structures[card_id]))
            else:
                raise UnknownCardError(f"Unknown card id: {card_id}")
        return battle, structures


class EnemyRegistry:
    """In-memory registry of enemy definitions."""

    def __init__(self, enemies: Optional[Iterable[Enemy]] = None) -> None:
        self._enemies: Dict[str, Enemy] = {}
        for e in enemies or ():
            self.add(e)

    def add(self, enemy: Enemy) -> None:
        if enemy.enemy_id in self._enemies:
            raise ValueError(f"Duplicate enemy id: {enemy.enemy_id}")
        self._enemies[enemy.enemy_id] = enemy

    def get(self, enemy_id: str) -> Enemy:
        try:
            return self._enemies[enemy_id]
        except KeyError as e:
            raise UnknownEnemyError(f"Unknown enemy id: {enemy_id}") from e

    def has(self, enemy_id: str) -> bool:
        return enemy_id in self._enemies

    def ids(self) -> List[str]:
        return sorted(self._enemies)

    def __len__(self) -> int:
        return len(self._enemies)
