from .battle import BattleFlow
from .deck import CardDeck

__all__ = ["BattleFlow", "CardDeck"]
