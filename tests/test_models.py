"""Tests for command and oracle table models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.models import (
    ColumnsOutcome,
    CommandDefinition,
    CommandKind,
    Diagnostic,
    DiagnosticSeverity,
    LeafOutcome,
    NestedOutcome,
    OracleTable,
    OracleType,
    normalize_alias,
)


def _weather() -> OracleTable:
    return OracleTable(
        title="Weather",
        results={
            30: LeafOutcome(text="Clear"),
            70: LeafOutcome(text="Cloudy"),
            100: LeafOutcome(text="Storm"),
        },
    )


class TestNormalizeAlias:
    """Test alias normalization."""

    def test_spaces_become_hyphens(self):
        assert normalize_alias("High Chance") == "high-chance"

    def test_whitespace_runs_collapse(self):
        assert normalize_alias("high   chance") == "high-chance"
        assert normalize_alias("high\tchance") == "high-chance"

    def test_same_alias(self):
        """Test differently spaced aliases normalize to the same key."""
        assert normalize_alias("High Chance") == normalize_alias("high   chance")

    def test_outer_whitespace_trimmed(self):
        assert normalize_alias("  Roll ") == "roll"


class TestCommandDefinition:
    """Test CommandDefinition."""

    def test_resolve_argument_normalizes(self):
        command = CommandDefinition(
            key=CommandKind.ASK_THE_ORACLE,
            arg_aliases={"small-chance": "10"},
        )
        assert command.resolve_argument("Small Chance") == "10"
        assert command.resolve_argument("huge chance") is None

    def test_frozen(self):
        command = CommandDefinition(key=CommandKind.HELP)
        with pytest.raises(ValidationError):
            command.requires_owner = True


class TestOracleTable:
    """Test OracleTable validation and lookup."""

    def test_defaults(self):
        table = _weather()
        assert table.dice_sides == 100
        assert table.type == OracleType.SIMPLE

    def test_lookup_picks_smallest_qualifying_threshold(self):
        table = _weather()
        assert table.lookup(45) == LeafOutcome(text="Cloudy")
        assert table.lookup(30) == LeafOutcome(text="Clear")
        assert table.lookup(31) == LeafOutcome(text="Cloudy")
        assert table.lookup(1) == LeafOutcome(text="Clear")
        assert table.lookup(100) == LeafOutcome(text="Storm")

    @pytest.mark.parametrize("roll", [0, 101, -5])
    def test_lookup_rejects_out_of_range(self, roll):
        with pytest.raises(ValueError, match="outside"):
            _weather().lookup(roll)

    def test_thresholds_sorted(self):
        table = OracleTable(
            title="Odd order",
            results={100: LeafOutcome(text="C"), 9: LeafOutcome(text="A"), 50: LeafOutcome(text="B")},
        )
        assert table.thresholds == [9, 50, 100]
        assert table.lookup(10).text == "B"

    def test_coverage_gap_rejected(self):
        with pytest.raises(ValidationError, match="do not cover rolls 11-20"):
            OracleTable(
                title="Gap",
                dice_sides=20,
                results={5: LeafOutcome(text="A"), 10: LeafOutcome(text="B")},
            )

    def test_threshold_above_dice_rejected(self):
        with pytest.raises(ValidationError, match="outside 1-6"):
            OracleTable(title="Big", dice_sides=6, results={7: LeafOutcome(text="A")})

    def test_empty_results_rejected(self):
        with pytest.raises(ValidationError):
            OracleTable(title="Empty", results={})

    def test_outcome_must_match_type(self):
        with pytest.raises(ValidationError, match="columns outcome"):
            OracleTable(title="Mixed", results={100: ColumnsOutcome(values=["a", "b"])})

    def test_nested_outcome(self):
        sub = OracleTable(title="Detail", dice_sides=6, results={6: LeafOutcome(text="Major")})
        table = OracleTable(
            title="Outer",
            type=OracleType.NESTED,
            results={100: NestedOutcome(table=sub)},
        )
        outcome = table.lookup(20)
        assert isinstance(outcome, NestedOutcome)
        assert outcome.table.title == "Detail"


class TestDiagnostic:
    """Test Diagnostic."""

    def test_str(self):
        diagnostic = Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            source="command 'help'",
            message="is not supported. Skipping command.",
        )
        assert str(diagnostic) == "command 'help' is not supported. Skipping command."

    def test_log_level(self):
        import logging

        diagnostic = Diagnostic(severity=DiagnosticSeverity.ERROR, source="x", message="y")
        assert diagnostic.log_level == logging.ERROR
