"""
Configuration Diagnostics.

A diagnostic is a non-fatal message produced while loading configuration.
The offending entry is skipped and loading continues.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DiagnosticSeverity(str, Enum):
    """How serious a configuration diagnostic is."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LOG_LEVELS = {
    DiagnosticSeverity.INFO: logging.INFO,
    DiagnosticSeverity.WARNING: logging.WARNING,
    DiagnosticSeverity.ERROR: logging.ERROR,
}


class Diagnostic(BaseModel):
    """A single message produced while validating configuration."""

    model_config = ConfigDict(frozen=True)

    severity: DiagnosticSeverity
    source: str = Field(description="Which entry produced it, e.g. \"command 'help'\"")
    message: str

    def __str__(self) -> str:
        return f"{self.source} {self.message}"

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self.severity]


def log_diagnostics(diagnostics: Iterable[Diagnostic], logger: logging.Logger) -> int:
    """
    Log every diagnostic at the level matching its severity.

    Returns:
        Number of diagnostics logged
    """
    count = 0
    for diagnostic in diagnostics:
        logger.log(diagnostic.log_level, "%s", diagnostic)
        count += 1
    return count
