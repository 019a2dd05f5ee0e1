"""
Dice Rolling Skill.

Fair, cryptographically random dice rolling in NdX+M notation, plus the
bounded damage rolls every combatant attacks with.
"""

from __future__ import annotations

import re
import secrets
from collections.abc import Callable

from pydantic import BaseModel, Field

DamageSource = Callable[[], int]
"""Zero-argument callable producing one attack's damage."""


class DiceResult(BaseModel):
    """Result of a dice roll."""

    notation: str = Field(description="Original dice notation")
    rolls: list[int] = Field(description="Individual die results")
    modifier: int = Field(default=0, description="Any +/- modifier")
    total: int = Field(description="Final result")


def roll_dice(notation: str) -> DiceResult:
    """
    Roll dice using standard notation.

    Supports:
    - NdX: Roll N dice with X sides (e.g., "2d6", "1d20")
    - NdX+M: Add modifier (e.g., "1d20+5", "1d26-1")

    Args:
        notation: Dice notation string

    Returns:
        DiceResult with individual rolls and total

    Examples:
        >>> result = roll_dice("1d12-1")
        >>> result.total  # 0 through 11
    """
    notation = notation.lower().strip()

    pattern = r"^(\d+)d(\d+)([+-]\d+)?$"
    match = re.match(pattern, notation)

    if not match:
        raise ValueError(f"Invalid dice notation: {notation}")

    num_dice = int(match.group(1))
    die_size = int(match.group(2))
    modifier = int(match.group(3)) if match.group(3) else 0

    if num_dice < 1 or die_size < 1:
        raise ValueError("Number of dice and die size must be positive")

    # Every roll draws fresh from the OS entropy pool, no shared seed
    rolls = [secrets.randbelow(die_size) + 1 for _ in range(num_dice)]

    return DiceResult(
        notation=notation,
        rolls=rolls,
        modifier=modifier,
        total=sum(rolls) + modifier,
    )


def damage_notation(low: int, high: int) -> str:
    """
    Express an inclusive damage range as a single-die roll.

    >>> damage_notation(0, 25)
    '1d26-1'
    """
    if low < 0 or high < low:
        raise ValueError(f"Invalid damage range: {low}..{high}")

    sides = high - low + 1
    offset = low - 1
    if offset == 0:
        return f"1d{sides}"
    return f"1d{sides}{'+' if offset > 0 else ''}{offset}"


def damage_roller(low: int, high: int) -> DamageSource:
    """Build a damage source that rolls [low, high] on every call."""
    notation = damage_notation(low, high)

    def roll() -> int:
        return roll_dice(notation).total

    return roll
