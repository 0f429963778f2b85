from __future__ import annotations

from dataclasses import dataclass

from .modifiers import PowerModifier


@dataclass(frozen=True)
class SkillEffect:
    """A modifier aimed at one battlefield slot."""

    index: int
    modifier: PowerModifier
