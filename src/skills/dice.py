"""
Dice Rolling Skill.

Implements fair, cryptographically random dice rolling following standard notation.
"""

from __future__ import annotations

import re
import secrets
from collections.abc import Callable

from pydantic import BaseModel, Field

Roller = Callable[[int], int]
"""Returns a uniformly random integer in [1, sides]."""


class DiceResult(BaseModel):
    """Result of a dice roll."""

    notation: str = Field(description="Original dice notation")
    rolls: list[int] = Field(description="Individual die results")
    kept: list[int] | None = Field(default=None, description="Kept dice for kh/kl")
    modifier: int = Field(default=0, description="Any +/- modifier")
    total: int = Field(description="Final result")


def d(sides: int) -> int:
    """Roll a single die with the given number of sides."""
    if sides < 1:
        raise ValueError("Die size must be positive")
    return secrets.randbelow(sides) + 1


def roll_many(sides: int, count: int, roller: Roller = d) -> list[int]:
    """Roll several dice of the same size."""
    return [roller(sides) for _ in range(count)]


def roll_dice(notation: str, roller: Roller = d) -> DiceResult:
    """
    Roll dice using standard notation.

    Supports:
    - NdX: Roll N dice with X sides (e.g., "2d6", "1d20")
    - NdX+M: Add modifier (e.g., "1d20+5", "2d6-2")
    - NdXkhN: Keep highest N dice (e.g., "4d6kh3")
    - NdXklN: Keep lowest N dice (e.g., "2d20kl1")

    Args:
        notation: Dice notation string
        roller: Single-die roller, replaceable for deterministic rolls

    Returns:
        DiceResult with individual rolls and total

    Examples:
        >>> result = roll_dice("2d6+3")
        >>> result.total  # Sum of 2d6 plus 3
        >>> result.rolls  # [4, 2] (example)
    """
    notation = notation.lower().strip()

    # Pattern: NdX (optional: kh/klN) (optional: +/-M)
    pattern = r"^(\d*)d(\d+)(?:(kh|kl)(\d+))?([+-]\d+)?$"
    match = re.match(pattern, notation)

    if not match:
        raise ValueError(f"Invalid dice notation: {notation or '(empty)'}")

    num_dice = int(match.group(1)) if match.group(1) else 1
    die_size = int(match.group(2))
    keep_type = match.group(3)  # "kh" or "kl" or None
    keep_count = int(match.group(4)) if match.group(4) else None
    modifier = int(match.group(5)) if match.group(5) else 0

    if num_dice < 1 or die_size < 1:
        raise ValueError("Number of dice and die size must be positive")

    if num_dice > 100:
        raise ValueError(f"Cannot roll more than 100 dice at once (asked for {num_dice})")

    if keep_count is not None and keep_count > num_dice:
        raise ValueError(f"Cannot keep {keep_count} dice when only rolling {num_dice}")

    rolls = roll_many(die_size, num_dice, roller)

    kept: list[int] | None = None
    if keep_type == "kh" and keep_count:
        kept = sorted(rolls, reverse=True)[:keep_count]
        dice_sum = sum(kept)
    elif keep_type == "kl" and keep_count:
        kept = sorted(rolls)[:keep_count]
        dice_sum = sum(kept)
    else:
        dice_sum = sum(rolls)

    return DiceResult(
        notation=notation,
        rolls=rolls,
        kept=kept,
        modifier=modifier,
        total=dice_sum + modifier,
    )
