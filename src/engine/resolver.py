"""
Oracle Resolver.

Turns a table and a roll into an outcome. Nested outcomes get a fresh
roll on their sub-table, bounded by the sub-table's own die.
"""

from __future__ import annotations

from pydantic import BaseModel

from src.models.oracle import ColumnsOutcome, LeafOutcome, NestedOutcome, OracleOutcome, OracleTable
from src.skills.dice import Roller, d


class OracleResult(BaseModel):
    """The outcome of one lookup, plus the follow-up lookup for nested tables."""

    table: OracleTable
    roll: int
    outcome: OracleOutcome
    nested: OracleResult | None = None


class OracleResolver:
    """
    Performs oracle lookups.

    The outcome for a roll is the one under the smallest threshold that is
    greater than or equal to the roll.
    """

    def __init__(self, roller: Roller = d) -> None:
        """
        Initialize the resolver.

        Args:
            roller: Single-die roller used for nested re-rolls
        """
        self.roller = roller

    def roll(self, table: OracleTable) -> OracleResult:
        """Roll the table's own die and resolve the result."""
        return self.resolve(table, self.roller(table.dice_sides))

    def resolve(self, table: OracleTable, roll: int) -> OracleResult:
        """
        Resolve a roll against a table.

        Args:
            table: A validated oracle table
            roll: A die result in [1, table.dice_sides]

        Returns:
            OracleResult, with the sub-table result filled in for nested outcomes

        Raises:
            ValueError: If the roll is outside the table's range
        """
        outcome = table.lookup(roll)
        nested = None
        if isinstance(outcome, NestedOutcome):
            sub_table = outcome.table
            nested = self.resolve(sub_table, self.roller(sub_table.dice_sides))
        return OracleResult(table=table, roll=roll, outcome=outcome, nested=nested)

    def format(self, result: OracleResult, mention: str) -> str:
        """Render a result as chat text addressed to the asker."""
        outcome = result.outcome

        if isinstance(outcome, LeafOutcome):
            return f"{mention} **{outcome.text}**."

        if isinstance(outcome, ColumnsOutcome):
            headers = result.table.headers
            pieces = []
            for i, value in enumerate(outcome.values):
                label = f"{headers[i]}: " if i < len(headers) else ""
                pieces.append(f"{label}**{value}**.")
            return f"{mention} " + " ".join(pieces)

        inner = result.nested
        if inner is None:
            raise ValueError(f"Nested result for '{result.table.title}' was never rolled")
        lines = [f"    **{inner.table.title}** vs. **{inner.roll}**…"]
        if inner.table.prompt:
            lines.append(f"    _{inner.table.prompt}_")
        lines.append(self.format(inner, mention))
        return "\n".join(lines)


OracleResult.model_rebuild()
