"""
Engine Data Models for the oracle bot.

Defines the data that flows through one dispatch:
- MessageEvent: an incoming chat message
- ParsedCommand: the command key and arguments pulled out of it
- Embed / SentMessage: outbound rich content and delivered messages
- BotConfig: runtime settings
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ChannelKind(str, Enum):
    """Kinds of conversation a message can arrive in."""

    TEXT = "text"
    DIRECT = "dm"


class Channel(BaseModel):
    """A conversation that messages are sent to."""

    model_config = ConfigDict(frozen=True)

    id: str
    kind: ChannelKind = ChannelKind.TEXT


class Author(BaseModel):
    """The sender of a message."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""

    @property
    def mention(self) -> str:
        """Chat markup that pings this user."""
        return f"<@{self.id}>"


class MessageEvent(BaseModel):
    """An incoming (or edited) chat message."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Identity of the message, stable across edits")
    content: str
    author: Author
    channel: Channel
    mentions: list[str] = Field(default_factory=list, description="Mentioned user ids")


class ParsedCommand(BaseModel):
    """The command part of a relevant message."""

    model_config = ConfigDict(frozen=True)

    command_key: str = Field(description="First token, lowercased")
    args: list[str] = Field(default_factory=list, description="Remaining tokens")
    content: str = Field(default="", description="Remaining tokens rejoined with spaces")


class Embed(BaseModel):
    """A small rich-content block attached to a message."""

    model_config = ConfigDict(extra="allow")

    type: str = "rich"
    title: str = ""
    description: str = ""


class SentMessage(BaseModel):
    """A message the bot has delivered."""

    id: str
    channel: Channel
    content: str
    embed: Embed | None = None


class DispatchStatus(str, Enum):
    """Where a dispatch ended up."""

    DISCARDED = "discarded"
    DENIED = "denied"
    COMPLETED = "completed"
    FAILED = "failed"


class BotConfig(BaseModel):
    """
    Runtime configuration.

    Configuration via environment variables:
        ORACLE_BOT_PREFIXES: Comma separated command prefixes (default: ".")
        ORACLE_BOT_OWNER_ID: User id allowed to run owner-only commands
        ORACLE_BOT_ID: The bot's own user id
        ORACLE_BOT_COMMANDS: Path to a commands JSON document (default: bundled)
        ORACLE_BOT_ORACLES: Path to an oracles JSON document (default: bundled)
    """

    prefixes: list[str] = Field(default_factory=lambda: ["."])
    owner_id: str | None = None
    bot_id: str = "oracle-bot"
    commands_path: Path | None = None
    oracles_path: Path | None = None

    @classmethod
    def from_env(cls) -> BotConfig:
        """Build a configuration from environment variables."""
        values: dict[str, object] = {}

        if os.getenv("ORACLE_BOT_PREFIXES"):
            prefixes = [p.strip() for p in os.getenv("ORACLE_BOT_PREFIXES", "").split(",")]
            values["prefixes"] = [p for p in prefixes if p]

        if os.getenv("ORACLE_BOT_OWNER_ID"):
            values["owner_id"] = os.getenv("ORACLE_BOT_OWNER_ID")

        if os.getenv("ORACLE_BOT_ID"):
            values["bot_id"] = os.getenv("ORACLE_BOT_ID")

        if os.getenv("ORACLE_BOT_COMMANDS"):
            values["commands_path"] = os.getenv("ORACLE_BOT_COMMANDS")

        if os.getenv("ORACLE_BOT_ORACLES"):
            values["oracles_path"] = os.getenv("ORACLE_BOT_ORACLES")

        return cls.model_validate(values)

    @property
    def primary_prefix(self) -> str:
        return self.prefixes[0] if self.prefixes else ""
