"""Tests for the dice rolling skill."""

from __future__ import annotations

import pytest
from src.skills.dice import DiceResult, d, roll_dice, roll_many


def _scripted(*values: int):
    """A roller that returns the given values in order."""
    rolls = iter(values)
    return lambda sides: next(rolls)


class TestRollDice:
    """Test the roll_dice function."""

    def test_simple_roll(self):
        """Test basic NdX notation."""
        result = roll_dice("2d6")
        assert result.notation == "2d6"
        assert len(result.rolls) == 2
        assert all(1 <= r <= 6 for r in result.rolls)
        assert result.total == sum(result.rolls)
        assert result.modifier == 0
        assert result.kept is None

    def test_roll_with_modifier(self):
        """Test NdX+M notation."""
        result = roll_dice("1d20+5")
        assert result.notation == "1d20+5"
        assert len(result.rolls) == 1
        assert 1 <= result.rolls[0] <= 20
        assert result.modifier == 5
        assert result.total == result.rolls[0] + 5

    def test_roll_with_negative_modifier(self):
        """Test NdX-M notation."""
        result = roll_dice("1d20-3")
        assert result.modifier == -3
        assert result.total == result.rolls[0] - 3

    def test_implicit_single_die(self):
        """Test dX is read as 1dX."""
        result = roll_dice("d8", _scripted(5))
        assert result.rolls == [5]
        assert result.total == 5

    def test_keep_highest(self):
        """Test NdXkhN notation."""
        result = roll_dice("4d6kh3", _scripted(2, 6, 1, 4))
        assert result.rolls == [2, 6, 1, 4]
        assert result.kept == [6, 4, 2]
        assert result.total == 12

    def test_keep_lowest(self):
        """Test NdXklN notation."""
        result = roll_dice("2d20kl1", _scripted(17, 3))
        assert result.kept == [3]
        assert result.total == 3

    def test_scripted_roller_is_used(self):
        """Test the injected roller decides the dice."""
        result = roll_dice("2d6+1", _scripted(3, 4))
        assert isinstance(result, DiceResult)
        assert result.rolls == [3, 4]
        assert result.total == 8

    def test_invalid_notation(self):
        """Test that invalid notation raises ValueError."""
        with pytest.raises(ValueError, match="Invalid dice notation"):
            roll_dice("banana")

    def test_keep_more_than_rolled(self):
        """Test that keeping more dice than rolled raises ValueError."""
        with pytest.raises(ValueError, match="Cannot keep"):
            roll_dice("2d6kh5")

    def test_zero_sided_die(self):
        """Test that a zero-sided die is rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            roll_dice("1d0")

    def test_too_many_dice(self):
        """Test that huge dice pools are rejected."""
        with pytest.raises(ValueError, match="more than 100"):
            roll_dice("1000d6")


class TestSingleDie:
    """Test single-die helpers."""

    def test_d_in_range(self):
        """Test d() stays within its sides."""
        assert all(1 <= d(10) <= 10 for _ in range(200))

    def test_d1(self):
        """Test a one-sided die always rolls 1."""
        assert d(1) == 1

    def test_d_rejects_zero(self):
        """Test d(0) is invalid."""
        with pytest.raises(ValueError):
            d(0)

    def test_roll_many(self):
        """Test roll_many rolls the requested count."""
        assert roll_many(10, 2, _scripted(9, 1)) == [9, 1]
