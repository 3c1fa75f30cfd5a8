"""
Alias Registry.

Builds the command dispatch table from the raw command configuration:
every alias maps to exactly one validated CommandDefinition. Building
never raises; malformed entries are skipped and reported as diagnostics.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from src.models.command import (
    SUPPORTED_ARGUMENTS,
    CommandDefinition,
    CommandDocument,
    CommandKind,
    normalize_alias,
)
from src.models.diagnostic import Diagnostic, DiagnosticSeverity

logger = logging.getLogger(__name__)

_KNOWN_KINDS = frozenset(kind.value for kind in CommandKind)


def format_validation_error(error: ValidationError) -> str:
    """Condense a pydantic ValidationError into one line."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        message = detail["msg"]
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def register_aliases(
    table: dict[str, Any],
    aliases: Iterable[str],
    target: Any,
    *,
    source: str,
    diagnostics: list[Diagnostic],
) -> list[str]:
    """
    Register aliases for a target, first registration wins.

    Aliases are normalized before the collision check. Aliases already
    present in the table are skipped with a warning.

    Returns:
        The normalized aliases that were actually registered
    """
    registered: list[str] = []
    for raw in aliases:
        if not isinstance(raw, str) or not normalize_alias(raw):
            diagnostics.append(
                Diagnostic(
                    severity=DiagnosticSeverity.WARNING,
                    source=source,
                    message=f"has a blank or non-text alias {raw!r}. Skipping.",
                )
            )
            continue
        alias = normalize_alias(raw)
        if alias in table:
            diagnostics.append(
                Diagnostic(
                    severity=DiagnosticSeverity.WARNING,
                    source=source,
                    message=f"is attempting to assign duplicate alias '{alias}'. Skipping.",
                )
            )
            continue
        table[alias] = target
        registered.append(alias)
    return registered


class AliasRegistry:
    """
    Maps every normalized command alias to its command definition.

    Built once at startup and read-only afterwards.
    """

    def __init__(
        self,
        commands: dict[CommandKind, CommandDefinition] | None = None,
        aliases: dict[str, CommandKind] | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> None:
        self._commands = dict(commands or {})
        self._aliases = dict(aliases or {})
        self.diagnostics: list[Diagnostic] = list(diagnostics or [])

    @classmethod
    def build(
        cls,
        raw_commands: Any,
        supported: Collection[str] | None = None,
        supported_arguments: Mapping[CommandKind, Collection[str]] | None = None,
    ) -> AliasRegistry:
        """
        Build a registry from the raw command configuration document.

        Args:
            raw_commands: Mapping of command key -> command entry
            supported: Command keys that have a handler (default: every CommandKind)
            supported_arguments: Argument allowlist per command

        Returns:
            A registry that is always queryable, plus its diagnostics
        """
        supported_keys = (
            {k.value for k in CommandKind} if supported is None else set(supported)
        )
        allowed_arguments = SUPPORTED_ARGUMENTS if supported_arguments is None else supported_arguments

        commands: dict[CommandKind, CommandDefinition] = {}
        aliases: dict[str, CommandKind] = {}
        diagnostics: list[Diagnostic] = []

        if not isinstance(raw_commands, Mapping):
            diagnostics.append(
                Diagnostic(
                    severity=DiagnosticSeverity.ERROR,
                    source="command configuration",
                    message="is not a mapping of command keys. No commands loaded.",
                )
            )
            return cls(diagnostics=diagnostics)

        for raw_key, entry in raw_commands.items():
            source = f"command '{raw_key}'"
            key = str(raw_key).strip().lower()

            if key not in supported_keys or key not in _KNOWN_KINDS:
                diagnostics.append(
                    Diagnostic(
                        severity=DiagnosticSeverity.WARNING,
                        source=source,
                        message="is not supported. Skipping command.",
                    )
                )
                continue
            kind = CommandKind(key)

            if kind in commands:
                diagnostics.append(
                    Diagnostic(
                        severity=DiagnosticSeverity.WARNING,
                        source=source,
                        message="is defined more than once. Skipping.",
                    )
                )
                continue

            try:
                document = CommandDocument.model_validate(entry if entry is not None else {})
            except ValidationError as e:
                diagnostics.append(
                    Diagnostic(
                        severity=DiagnosticSeverity.ERROR,
                        source=source,
                        message=f"is malformed ({format_validation_error(e)}). Skipping command.",
                    )
                )
                continue

            if document.aliases:
                registered = register_aliases(
                    aliases, document.aliases, kind, source=source, diagnostics=diagnostics
                )
            else:
                diagnostics.append(
                    Diagnostic(
                        severity=DiagnosticSeverity.INFO,
                        source=source,
                        message=f"does not have any aliases. Using '{key}' instead.",
                    )
                )
                registered = register_aliases(
                    aliases, [key], kind, source=source, diagnostics=diagnostics
                )

            commands[kind] = CommandDefinition(
                key=kind,
                aliases=registered,
                arg_aliases=cls._build_argument_aliases(
                    kind,
                    document.arg_aliases or {},
                    allowed_arguments.get(kind, ()),
                    source=source,
                    diagnostics=diagnostics,
                ),
                arg_labels=document.arg_labels or {},
                requires_owner=document.requires_owner,
                title=document.title,
                description=document.description,
                help_text=document.help_text,
                extra=dict(document.model_extra or {}),
            )

        logger.debug("Registered %d commands under %d aliases", len(commands), len(aliases))
        return cls(commands=commands, aliases=aliases, diagnostics=diagnostics)

    @staticmethod
    def _build_argument_aliases(
        kind: CommandKind,
        groups: Mapping[str, list[str] | None],
        allowed: Collection[str],
        *,
        source: str,
        diagnostics: list[Diagnostic],
    ) -> dict[str, str]:
        """Map normalized argument aliases to argument names for one command."""
        argument_aliases: dict[str, str] = {}
        for argument, group in groups.items():
            if not group:
                continue
            if argument not in allowed:
                diagnostics.append(
                    Diagnostic(
                        severity=DiagnosticSeverity.WARNING,
                        source=source,
                        message=f"argument '{argument}' is not supported. Skipping aliases.",
                    )
                )
                continue
            register_aliases(
                argument_aliases,
                group,
                argument,
                source=f"command '{kind.value}.{argument}'",
                diagnostics=diagnostics,
            )
        return argument_aliases

    def resolve(self, alias: str) -> CommandDefinition | None:
        """Look up a command by any of its aliases."""
        kind = self._aliases.get(normalize_alias(alias))
        return self._commands.get(kind) if kind is not None else None

    def get(self, kind: CommandKind) -> CommandDefinition | None:
        """Get a command definition by kind."""
        return self._commands.get(kind)

    def first_alias(self, kind: CommandKind) -> str | None:
        """The first alias registered for a command, if it was loaded."""
        command = self._commands.get(kind)
        if command is None or not command.aliases:
            return None
        return command.aliases[0]

    @property
    def aliases(self) -> dict[str, CommandKind]:
        """Copy of the alias -> command kind map."""
        return dict(self._aliases)

    @property
    def commands(self) -> list[CommandDefinition]:
        """Loaded commands in configuration order."""
        return list(self._commands.values())

    def __contains__(self, alias: object) -> bool:
        return isinstance(alias, str) and normalize_alias(alias) in self._aliases

    def __len__(self) -> int:
        return len(self._commands)
