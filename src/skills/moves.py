"""
Move Rolls.

Game-specific rolls with graded outcomes:
- Ironsworn action roll: d6 + modifiers vs. two d10 challenge dice
- Apocalypse World move: 2d6 + modifiers vs. fixed bands
- Yes/no oracle: d100 vs. a likelihood
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, Field

from src.skills.dice import Roller, d, roll_many

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_modifier(token: str) -> int | None:
    """Read the integer at the start of a token ("+2", "-1", "3rd"), if any."""
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else None


def parse_modifiers(tokens: Iterable[str]) -> list[int]:
    """Pick out every integer modifier, ignoring tokens that are not numbers."""
    return [m for m in (parse_modifier(t) for t in tokens) if m is not None]


class ActionOutcome(str, Enum):
    """Ironsworn action roll outcomes."""

    MISS = "miss"
    WEAK_HIT = "weak_hit"
    STRONG_HIT = "strong_hit"


class ActionRollResult(BaseModel):
    """Result of an Ironsworn action roll."""

    action_die: int
    modifiers: list[int] = Field(default_factory=list)
    challenge_dice: tuple[int, int]

    @property
    def action_score(self) -> int:
        return self.action_die + sum(self.modifiers)

    @property
    def hits(self) -> int:
        return sum(1 for c in self.challenge_dice if self.action_score > c)

    @property
    def outcome(self) -> ActionOutcome:
        return [ActionOutcome.MISS, ActionOutcome.WEAK_HIT, ActionOutcome.STRONG_HIT][self.hits]

    @property
    def is_match(self) -> bool:
        return self.challenge_dice[0] == self.challenge_dice[1]


def roll_action(modifiers: Iterable[int] = (), roller: Roller = d) -> ActionRollResult:
    """
    Make an Ironsworn action roll.

    The action score (d6 + modifiers) must strictly beat a challenge die
    to count as a hit against it. Beating both is a strong hit, one is a
    weak hit, neither is a miss.
    """
    action_die = roller(6)
    first, second = roll_many(10, 2, roller)
    return ActionRollResult(
        action_die=action_die,
        modifiers=list(modifiers),
        challenge_dice=(first, second),
    )


class MoveOutcome(str, Enum):
    """Apocalypse World move outcomes."""

    MISS = "miss"
    MIXED = "mixed"
    SUCCESS = "success"


class MoveRollResult(BaseModel):
    """Result of an Apocalypse World move roll."""

    dice: tuple[int, int]
    modifiers: list[int] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.dice) + sum(self.modifiers)

    @property
    def outcome(self) -> MoveOutcome:
        if self.total <= 6:
            return MoveOutcome.MISS
        if self.total <= 9:
            return MoveOutcome.MIXED
        return MoveOutcome.SUCCESS


def roll_move(modifiers: Iterable[int] = (), roller: Roller = d) -> MoveRollResult:
    """Roll 2d6 plus modifiers: 6 or less misses, 7-9 is mixed, 10+ succeeds."""
    first, second = roll_many(6, 2, roller)
    return MoveRollResult(dice=(first, second), modifiers=list(modifiers))


class YesNoResult(BaseModel):
    """Result of asking a yes/no question of the oracle."""

    odds: int = Field(ge=0, le=100, description="Chance of a yes, in percent")
    roll: int = Field(ge=1, le=100)

    @property
    def is_yes(self) -> bool:
        return self.roll <= self.odds


def ask_yes_no(odds: int, roller: Roller = d) -> YesNoResult:
    """Roll d100; the answer is yes when the roll is at or under the odds."""
    return YesNoResult(odds=odds, roll=roller(100))
