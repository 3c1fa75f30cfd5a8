"""
Core Data Models for the oracle bot.

These models are the typed form of the configuration documents:
- Commands: what can be typed and by whom
- Oracle tables: range-keyed random lookup tables
- Diagnostics: what went wrong while loading configuration
"""

from src.models.command import (
    LIKELIHOOD_ARGUMENTS,
    ORACLE_LOOKUP_TABLE,
    SUPPORTED_ARGUMENTS,
    CommandDefinition,
    CommandDocument,
    CommandKind,
    normalize_alias,
)
from src.models.diagnostic import Diagnostic, DiagnosticSeverity, log_diagnostics
from src.models.oracle import (
    DEFAULT_DICE_SIDES,
    ColumnsOutcome,
    LeafOutcome,
    NestedOutcome,
    OracleOutcome,
    OracleTable,
    OracleType,
)

__all__ = [
    # Commands
    "CommandDefinition",
    "CommandDocument",
    "CommandKind",
    "LIKELIHOOD_ARGUMENTS",
    "ORACLE_LOOKUP_TABLE",
    "SUPPORTED_ARGUMENTS",
    "normalize_alias",
    # Diagnostics
    "Diagnostic",
    "DiagnosticSeverity",
    "log_diagnostics",
    # Oracles
    "DEFAULT_DICE_SIDES",
    "ColumnsOutcome",
    "LeafOutcome",
    "NestedOutcome",
    "OracleOutcome",
    "OracleTable",
    "OracleType",
]
