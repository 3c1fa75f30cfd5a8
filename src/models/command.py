"""
Command Definition Models.

A command definition is the typed, validated form of one entry in the
command configuration document. Definitions are built once at startup
by the alias registry and never change afterwards.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_WHITESPACE = re.compile(r"\s+")


def normalize_alias(alias: str) -> str:
    """
    Normalize an alias for lookup.

    Lowercases and collapses every run of whitespace into a single hyphen,
    so "High Chance" and "high   chance" both become "high-chance".
    """
    return _WHITESPACE.sub("-", alias.strip().lower())


class CommandKind(str, Enum):
    """Every command the bot knows how to run."""

    ASK_THE_ORACLE = "ask_the_oracle"
    ROLL_ACTION_DICE = "roll_action_dice"
    ROLL_MOVE_DICE = "roll_move_dice"
    ROLL_DICE = "roll_dice"
    HELP = "help"
    RECONNECT = "reconnect"
    EXIT = "exit"
    EMBED_TEST = "embed_test"


# Argument name that hands "ask the oracle" off to a table lookup
ORACLE_LOOKUP_TABLE = "oracle_lookup_table"

LIKELIHOOD_ARGUMENTS: tuple[str, ...] = ("0", "10", "25", "50", "75", "90", "100")

SUPPORTED_ARGUMENTS: dict[CommandKind, tuple[str, ...]] = {
    CommandKind.ASK_THE_ORACLE: (ORACLE_LOOKUP_TABLE, *LIKELIHOOD_ARGUMENTS),
}


class CommandDocument(BaseModel):
    """Raw shape of one command entry in the configuration document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    aliases: list[str] | None = None
    arg_aliases: dict[str, list[str] | None] | None = Field(default=None, alias="argAliases")
    arg_labels: dict[int, str] | None = Field(default=None, alias="argLabels")
    requires_owner: bool = Field(default=False, alias="requiresOwner")
    title: str = ""
    description: str = ""
    help_text: str = Field(default="", alias="helpText")


class CommandDefinition(BaseModel):
    """A validated command, ready for dispatch."""

    model_config = ConfigDict(frozen=True)

    key: CommandKind
    aliases: list[str] = Field(default_factory=list, description="Registered, normalized")
    arg_aliases: dict[str, str] = Field(
        default_factory=dict, description="Normalized argument alias -> argument name"
    )
    arg_labels: dict[int, str] = Field(default_factory=dict)
    requires_owner: bool = False
    title: str = ""
    description: str = ""
    help_text: str = ""
    extra: dict[str, Any] = Field(
        default_factory=dict, description="Unknown keys passed through to handlers"
    )

    def resolve_argument(self, alias: str) -> str | None:
        """Return the argument name an alias points to, if any."""
        return self.arg_aliases.get(normalize_alias(alias))
