from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from conquest.battle.skills import EnemySkill


@dataclass(frozen=True)
class Enemy:
    """An opponent guarding a wilderness or boss point.

    ``power`` is the value the player's total must reach; ``card_slot`` caps
    how many battle cards may be committed against it.
    """

    enemy_id: str
    enemy_type: str
    power: float
    card_slot: int
    skills: Tuple[EnemySkill, ...] = field(default_factory=tuple)
    question: str = ""

    def __post_init__(self) -> None:
        if self.power < 0:
            raise ValueError(f"Enemy '{self.enemy_id}' has negative power {self.power}")
        if self.card_slot < 0:
            raise ValueError(f"Enemy '{self.enemy_id}' has negative card slot {self.card_slot}")
