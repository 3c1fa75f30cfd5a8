"""
Stateless Skills for the oracle bot.

Skills are pure functions that:
- Take plain arguments and an optional die roller
- Execute dice logic
- Return structured output (Pydantic models)
- NEVER maintain state between calls
- NEVER send messages
"""

from src.skills.dice import DiceResult, Roller, d, roll_dice, roll_many
from src.skills.moves import (
    ActionOutcome,
    ActionRollResult,
    MoveOutcome,
    MoveRollResult,
    YesNoResult,
    ask_yes_no,
    parse_modifier,
    parse_modifiers,
    roll_action,
    roll_move,
)

__all__ = [
    # Dice
    "Roller",
    "d",
    "roll_dice",
    "roll_many",
    "DiceResult",
    # Moves
    "ActionOutcome",
    "ActionRollResult",
    "MoveOutcome",
    "MoveRollResult",
    "YesNoResult",
    "ask_yes_no",
    "parse_modifier",
    "parse_modifiers",
    "roll_action",
    "roll_move",
]
