"""
Stateless Skills for Wayfarer.

Skills are pure rules functions that:
- Take game models as input
- Resolve one mechanic (dice, movement, combat)
- Return a structured result describing what happened
- NEVER hold state between calls
- NEVER write output themselves
"""

from wayfarer.skills.dice import (
    DamageSource,
    DiceResult,
    damage_notation,
    damage_roller,
    roll_dice,
)

__all__ = [
    "DamageSource",
    "DiceResult",
    "damage_notation",
    "damage_roller",
    "roll_dice",
]
