"""Static card and enemy data tables and the code that loads them."""

from .catalog import CardCatalog, EnemyRegistry
from .loader import load_cards, load_cards_from_dict, load_enemies, load_enemies_from_dict

__all__ = [
    "CardCatalog",
    "EnemyRegistry",
    "load_cards",
    "load_cards_from_dict",
    "load_enemies",
    "load_enemies_from_dict",
]
