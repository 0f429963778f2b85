"""
Conquest battle rules package.

Holds the battle power-resolution engine (``conquest.battle``), the card and
enemy templates it operates on, and the static data tables those templates
are loaded from. Rendering and scene code live outside this package.
"""

__version__ = "0.1.0"

__all__ = [
    "battle",
    "cards",
    "enemies",
    "data",
    "flow",
]
