"""Tests for the graded move rolls."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.skills.moves import (
    ActionOutcome,
    MoveOutcome,
    ask_yes_no,
    parse_modifier,
    parse_modifiers,
    roll_action,
    roll_move,
)


def _scripted(*values: int):
    """A roller that returns the given values in order, recording die sizes."""
    rolls = iter(values)
    sizes: list[int] = []

    def roller(sides: int) -> int:
        sizes.append(sides)
        return next(rolls)

    roller.sizes = sizes  # type: ignore[attr-defined]
    return roller


class TestModifiers:
    """Test reading modifiers out of free text arguments."""

    @pytest.mark.parametrize(
        "token,expected",
        [("+2", 2), ("-1", -1), ("3", 3), ("0", 0), ("2nd", 2), ("edge", None), ("", None)],
    )
    def test_parse_modifier(self, token, expected):
        assert parse_modifier(token) == expected

    def test_parse_modifiers_skips_words(self):
        """Test non-numeric tokens are ignored."""
        assert parse_modifiers(["+2", "heart", "-1"]) == [2, -1]


class TestActionRoll:
    """Test the Ironsworn action roll."""

    def test_dice_sizes(self):
        """Test one d6 then two d10 are rolled."""
        roller = _scripted(3, 4, 7)
        roll_action([], roller)
        assert roller.sizes == [6, 10, 10]

    def test_strong_hit(self):
        result = roll_action([2], _scripted(5, 3, 6))
        assert result.action_score == 7
        assert result.hits == 2
        assert result.outcome == ActionOutcome.STRONG_HIT

    def test_weak_hit(self):
        result = roll_action([2, 1], _scripted(3, 4, 7))
        assert result.action_score == 6
        assert result.outcome == ActionOutcome.WEAK_HIT

    def test_tie_is_not_a_hit(self):
        """Test the action score must strictly beat a challenge die."""
        result = roll_action([], _scripted(4, 4, 4))
        assert result.outcome == ActionOutcome.MISS
        assert result.is_match

    def test_miss(self):
        result = roll_action([], _scripted(1, 9, 10))
        assert result.outcome == ActionOutcome.MISS
        assert not result.is_match


class TestMoveRoll:
    """Test the Apocalypse World move roll."""

    @pytest.mark.parametrize(
        "dice,modifiers,expected",
        [
            ((3, 3), [], MoveOutcome.MISS),
            ((3, 3), [1], MoveOutcome.MIXED),
            ((4, 5), [], MoveOutcome.MIXED),
            ((5, 5), [], MoveOutcome.SUCCESS),
            ((6, 6), [-3], MoveOutcome.MIXED),
        ],
    )
    def test_bands(self, dice, modifiers, expected):
        result = roll_move(modifiers, _scripted(*dice))
        assert result.outcome == expected

    def test_total(self):
        result = roll_move([2, -1], _scripted(4, 5))
        assert result.total == 10


class TestYesNo:
    """Test the yes/no oracle roll."""

    def test_roll_under_is_yes(self):
        assert ask_yes_no(50, _scripted(50)).is_yes

    def test_roll_over_is_no(self):
        assert not ask_yes_no(50, _scripted(51)).is_yes

    def test_zero_odds_never_yes(self):
        assert not ask_yes_no(0, _scripted(1)).is_yes

    def test_odds_out_of_range(self):
        with pytest.raises(ValidationError):
            ask_yes_no(101, _scripted(1))
