from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Dict, Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PowerModifier:
    """Adjustments applied to the power of a single battlefield slot.

    All fields are magnitudes (never negative). Whether a value helps or hurts
    the card is decided by the field it lives in:

    - additive_buff: flat power added before scaling.
    - additive_debuff: flat power removed before scaling.
    - multiplicative_buff: fraction added to the 1.0 scale factor.
    - multiplicative_debuff: fraction removed from the 1.0 scale factor.
    - protection: dampens both debuff kinds on this slot, down to zero.
    - buff_boost: scales both buff kinds by (1 + buff_boost); debuffs are untouched.
    """

    additive_buff: float = 0.0
    additive_debuff: float = 0.0
    multiplicative_buff: float = 0.0
    multiplicative_debuff: float = 0.0
    protection: float = 0.0
    buff_boost: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"PowerModifier.{f.name} must be a non-negative magnitude, got {value}")

    def combine(self, other: PowerModifier) -> PowerModifier:
        """Field-wise sum of two modifiers.

        Args:
            other: Another PowerModifier instance.
        Returns:
            A new PowerModifier holding the summed magnitudes.
        """
        return PowerModifier(
            additive_buff=self.additive_buff + other.additive_buff,
            additive_debuff=self.additive_debuff + other.additive_debuff,
            multiplicative_buff=self.multiplicative_buff + other.multiplicative_buff,
            multiplicative_debuff=self.multiplicative_debuff + other.multiplicative_debuff,
            protection=self.protection + other.protection,
            buff_boost=self.buff_boost + other.buff_boost,
        )

    def __add__(self, other: PowerModifier) -> PowerModifier:
        if not isinstance(other, PowerModifier):
            return NotImplemented
        return self.combine(other)

    @staticmethod
    def sum(modifiers: Iterable[PowerModifier]) -> PowerModifier:
        total = PowerModifier()
        for m in modifiers:
            total = total.combine(m)
        return total

    @property
    def is_empty(self) -> bool:
        return self == PowerModifier()

    @property
    def effective_additive_debuff(self) -> float:
        return max(0.0, self.additive_debuff - self.protection)

    @property
    def effective_multiplicative_debuff(self) -> float:
        return max(0.0, self.multiplicative_debuff - self.protection)

    def resolve(self, power: float) -> float:
        """Fold this modifier into a card's power and return the final value.

        The flat part and the scale factor are each floored at zero before
        they are multiplied, rather than flooring only the product. This only
        differs when both are negative, whose raw product would be positive.
        The result is never negative.
        """
        boost = 1.0 + self.buff_boost
        flat = max(0.0, float(power) + self.additive_buff * boost - self.effective_additive_debuff)
        scale = max(0.0, 1.0 + self.multiplicative_buff * boost - self.effective_multiplicative_debuff)
        result = flat * scale
        logger.debug("Resolved power %s with %s => %s", power, self, result)
        return result

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @staticmethod
    def from_dict(data: Dict) -> PowerModifier:
        return PowerModifier(
            additive_buff=float(data.get("additive_buff", 0.0)),
            additive_debuff=float(data.get("additive_debuff", 0.0)),
            multiplicative_buff=float(data.get("multiplicative_buff", 0.0)),
            multiplicative_debuff=float(data.get("multiplicative_debuff", 0.0)),
            protection=float(data.get("protection", 0.0)),
            buff_boost=float(data.get("buff_boost", 0.0)),
        )
