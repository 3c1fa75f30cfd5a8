"""
Oracle Catalog.

Validates raw oracle table definitions and indexes them by normalized
title and alias. Each entry is validated on its own: a bad entry is
skipped with a diagnostic and the rest still load.

Threshold keys are validated as a whole. One key that is not an integer
in [1, d], or a set of keys that leaves rolls uncovered, rejects the
entire table, so a lookup on a loaded table always has an outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.engine.registry import format_validation_error, register_aliases
from src.models.command import normalize_alias
from src.models.diagnostic import Diagnostic, DiagnosticSeverity
from src.models.oracle import (
    DEFAULT_DICE_SIDES,
    ColumnsOutcome,
    LeafOutcome,
    NestedOutcome,
    OracleOutcome,
    OracleTable,
    OracleType,
)

logger = logging.getLogger(__name__)


class ConfigValidationError(ValueError):
    """A configuration entry failed validation and must be skipped."""


class OracleTableDocument(BaseModel):
    """Raw shape of one oracle table in the configuration document."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    type: str | None = None
    d: int | None = Field(default=None, gt=0)
    headers: list[str] = Field(default_factory=list)
    prompt: str = ""
    results: dict[Any, Any] | None = None
    aliases: list[str] | None = None

    @field_validator("d", mode="before")
    @classmethod
    def reject_boolean_sides(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("d must be a positive integer")
        return value


def parse_oracle_type(raw: str | None) -> OracleType:
    """Map a configured type name to an OracleType; missing means simple."""
    if raw is None or raw == OracleType.SIMPLE.value:
        return OracleType.SIMPLE
    try:
        return OracleType(raw)
    except ValueError:
        raise ConfigValidationError(f"type '{raw}' is not supported.") from None


def parse_threshold(key: Any, dice_sides: int) -> int:
    """Parse a results key as an integer threshold in [1, dice_sides]."""
    try:
        threshold = int(str(key).strip())
    except ValueError:
        raise ConfigValidationError(f"results key '{key}' is not an integer.") from None
    if threshold < 1:
        raise ConfigValidationError(f"results key '{key}' is below the minimum value (1).")
    if threshold > dice_sides:
        raise ConfigValidationError(
            f"results key '{key}' is above the maximum ({dice_sides})."
        )
    return threshold


def parse_outcome(value: Any, oracle_type: OracleType) -> OracleOutcome:
    """Convert one raw result value into the outcome variant for the table type."""
    if oracle_type is OracleType.SIMPLE:
        if not isinstance(value, str):
            raise ConfigValidationError(f"result {value!r} is not text.")
        return LeafOutcome(text=value)

    if oracle_type is OracleType.MULTI_COLUMN:
        if (
            isinstance(value, str)
            or not isinstance(value, Sequence)
            or not value
            or not all(isinstance(v, str) for v in value)
        ):
            raise ConfigValidationError(f"result {value!r} is not a list of text columns.")
        return ColumnsOutcome(values=list(value))

    if not isinstance(value, Mapping):
        raise ConfigValidationError(f"result {value!r} is not a nested table.")
    try:
        return NestedOutcome(table=parse_oracle_table(value, nested=True))
    except ConfigValidationError as e:
        raise ConfigValidationError(f"has an invalid nested table: {e}") from e


def parse_oracle_table(raw: Any, *, nested: bool = False) -> OracleTable:
    """
    Validate one raw oracle table definition.

    Args:
        raw: The table definition as loaded from configuration
        nested: Whether this is a sub-table of a nested table

    Returns:
        A validated OracleTable (aliases not yet normalized against others)

    Raises:
        ConfigValidationError: If any part of the definition is invalid
    """
    if not isinstance(raw, Mapping):
        raise ConfigValidationError("is not a table definition.")

    try:
        document = OracleTableDocument.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(format_validation_error(e)) from e

    if not document.title.strip():
        raise ConfigValidationError("is missing a title field.")

    oracle_type = parse_oracle_type(document.type)
    if nested and oracle_type is OracleType.NESTED:
        raise ConfigValidationError("nests tables more than one level deep.")
    if nested and oracle_type is not OracleType.SIMPLE:
        raise ConfigValidationError(f"has type '{oracle_type.value}' but nested tables must be simple.")
    dice_sides = document.d if document.d is not None else DEFAULT_DICE_SIDES

    if not document.results:
        raise ConfigValidationError("does not have any results.")

    thresholds = {parse_threshold(key, dice_sides): value for key, value in document.results.items()}
    if len(thresholds) != len(document.results):
        raise ConfigValidationError("has results keys that repeat the same threshold.")

    highest = max(thresholds)
    if highest != dice_sides:
        raise ConfigValidationError(
            f"results do not cover rolls {highest + 1}-{dice_sides}."
        )

    results = {
        threshold: parse_outcome(thresholds[threshold], oracle_type)
        for threshold in sorted(thresholds)
    }

    try:
        return OracleTable(
            title=document.title,
            type=oracle_type,
            dice_sides=dice_sides,
            headers=document.headers,
            prompt=document.prompt,
            aliases=[normalize_alias(a) for a in document.aliases or []],
            results=results,
        )
    except ValidationError as e:
        raise ConfigValidationError(format_validation_error(e)) from e


class OracleCatalog:
    """
    Index of every loaded oracle table by normalized title and alias.

    Oracle aliases live in their own namespace, separate from commands.
    Built once at startup and read-only afterwards.
    """

    def __init__(
        self,
        tables: dict[str, OracleTable] | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> None:
        self._tables = dict(tables or {})
        self.diagnostics: list[Diagnostic] = list(diagnostics or [])

    @classmethod
    def build(cls, raw_oracles: Any) -> OracleCatalog:
        """
        Build a catalog from the raw oracle configuration document.

        Args:
            raw_oracles: Sequence of oracle table definitions

        Returns:
            A catalog that is always queryable, plus its diagnostics
        """
        tables: dict[str, OracleTable] = {}
        diagnostics: list[Diagnostic] = []

        if isinstance(raw_oracles, (str, bytes, Mapping)) or not isinstance(raw_oracles, Sequence):
            diagnostics.append(
                Diagnostic(
                    severity=DiagnosticSeverity.ERROR,
                    source="oracle configuration",
                    message="is not a list of oracle tables. No oracles loaded.",
                )
            )
            return cls(diagnostics=diagnostics)

        for index, raw in enumerate(raw_oracles):
            source = f"Oracle at index {index}"
            if isinstance(raw, Mapping) and isinstance(raw.get("title"), str) and raw["title"]:
                source = f"Oracle '{raw['title']}' at index {index}"

            try:
                table = parse_oracle_table(raw)
            except ConfigValidationError as e:
                diagnostics.append(
                    Diagnostic(
                        severity=DiagnosticSeverity.ERROR,
                        source=source,
                        message=f"{e} Skipping.",
                    )
                )
                continue

            register_aliases(
                tables,
                [table.title, *table.aliases],
                table,
                source=source,
                diagnostics=diagnostics,
            )

        logger.debug("Indexed %d oracle aliases", len(tables))
        return cls(tables=tables, diagnostics=diagnostics)

    def get(self, alias: str) -> OracleTable | None:
        """Find a table by its title or any alias."""
        return self._tables.get(normalize_alias(alias))

    @property
    def aliases(self) -> list[str]:
        """Every registered alias, in registration order."""
        return list(self._tables)

    @property
    def tables(self) -> list[OracleTable]:
        """Distinct loaded tables, in configuration order."""
        distinct = {id(table): table for table in self._tables.values()}
        return list(distinct.values())

    def __contains__(self, alias: object) -> bool:
        return isinstance(alias, str) and normalize_alias(alias) in self._tables

    def __len__(self) -> int:
        return len(self.tables)
