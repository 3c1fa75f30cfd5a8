"""
Oracle Table Models.

An oracle table maps inclusive upper-bound thresholds over a die roll to
outcomes. Thresholds partition [1, dice_sides] into contiguous buckets:
the outcome for a roll is the one stored under the smallest threshold
that is greater than or equal to the roll.

Outcomes are a tagged variant:
- LeafOutcome: a single sentence (simple tables)
- ColumnsOutcome: one value per column (multi-column tables)
- NestedOutcome: another table to roll on (nested tables)
"""

from __future__ import annotations

from bisect import bisect_left
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_DICE_SIDES = 100


class OracleType(str, Enum):
    """Supported oracle table layouts."""

    SIMPLE = "simple"
    MULTI_COLUMN = "multipleColumns"
    NESTED = "nested"


class LeafOutcome(BaseModel):
    """A plain text outcome."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["leaf"] = "leaf"
    text: str


class ColumnsOutcome(BaseModel):
    """An outcome with one value per column."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["columns"] = "columns"
    values: list[str] = Field(min_length=1)


class NestedOutcome(BaseModel):
    """An outcome that requires a second roll on a sub-table."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["nested"] = "nested"
    table: OracleTable


OracleOutcome = Annotated[
    Union[LeafOutcome, ColumnsOutcome, NestedOutcome],
    Field(discriminator="kind"),
]

_OUTCOME_KINDS = {
    OracleType.SIMPLE: "leaf",
    OracleType.MULTI_COLUMN: "columns",
    OracleType.NESTED: "nested",
}


class OracleTable(BaseModel):
    """A validated oracle table."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    type: OracleType = OracleType.SIMPLE
    dice_sides: int = Field(default=DEFAULT_DICE_SIDES, ge=1)
    headers: list[str] = Field(default_factory=list)
    prompt: str = ""
    aliases: list[str] = Field(default_factory=list, description="Normalized aliases")
    results: dict[int, OracleOutcome] = Field(min_length=1)

    @model_validator(mode="after")
    def validate_thresholds(self) -> OracleTable:
        """Thresholds must lie in range and cover every roll up to dice_sides."""
        for threshold in self.results:
            if threshold < 1 or threshold > self.dice_sides:
                raise ValueError(
                    f"threshold {threshold} is outside 1-{self.dice_sides}"
                )
        highest = max(self.results)
        if highest != self.dice_sides:
            raise ValueError(
                f"thresholds do not cover rolls {highest + 1}-{self.dice_sides}"
            )
        return self

    @model_validator(mode="after")
    def validate_outcome_kinds(self) -> OracleTable:
        """Every outcome must match the table's type."""
        expected = _OUTCOME_KINDS[self.type]
        for threshold, outcome in self.results.items():
            if outcome.kind != expected:
                raise ValueError(
                    f"result {threshold} is a {outcome.kind} outcome "
                    f"but the table type is '{self.type.value}'"
                )
        return self

    @property
    def thresholds(self) -> list[int]:
        """Thresholds in ascending order."""
        return sorted(self.results)

    def lookup(self, roll: int) -> OracleOutcome:
        """
        Find the outcome for a roll.

        Picks the smallest threshold greater than or equal to the roll.

        Raises:
            ValueError: If the roll is outside [1, dice_sides]
        """
        if roll < 1 or roll > self.dice_sides:
            raise ValueError(f"Roll {roll} is outside 1-{self.dice_sides} for '{self.title}'")
        thresholds = self.thresholds
        return self.results[thresholds[bisect_left(thresholds, roll)]]


NestedOutcome.model_rebuild()
