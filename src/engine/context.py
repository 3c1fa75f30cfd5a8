"""
Application Context.

Everything a command needs at runtime, built once at startup and passed
explicitly to the dispatcher and handlers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.engine.catalog import OracleCatalog
from src.engine.models import BotConfig, SentMessage
from src.engine.registry import AliasRegistry
from src.engine.resolver import OracleResolver
from src.models.command import CommandKind
from src.skills.dice import Roller, d

if TYPE_CHECKING:
    from src.transport.interfaces import MessageSender


class FollowUpStore:
    """
    Remembers which reply belongs to which originating message.

    Entries are written once per originating message and never replaced,
    so a later edit of that message can find the reply to update.
    """

    def __init__(self) -> None:
        self._replies: dict[str, SentMessage] = {}

    def record(self, event_id: str, reply: SentMessage) -> None:
        """Associate a reply with the message that caused it."""
        if event_id in self._replies:
            raise ValueError(f"A reply is already recorded for message '{event_id}'")
        self._replies[event_id] = reply

    def get(self, event_id: str) -> SentMessage | None:
        return self._replies.get(event_id)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._replies

    def __len__(self) -> int:
        return len(self._replies)


@dataclass(frozen=True)
class AppContext:
    """Shared, read-only state for one running bot."""

    config: BotConfig
    registry: AliasRegistry
    catalog: OracleCatalog
    sender: MessageSender
    roller: Roller = d
    resolver: OracleResolver | None = None
    followups: FollowUpStore = field(default_factory=FollowUpStore)

    def __post_init__(self) -> None:
        # Nested tables re-roll through the resolver, so it shares the roller.
        if self.resolver is None:
            object.__setattr__(self, "resolver", OracleResolver(self.roller))

    def is_owner(self, user_id: str) -> bool:
        """Whether a user may run owner-only commands."""
        return self.config.owner_id is not None and user_id == self.config.owner_id

    @property
    def bot_mention(self) -> str:
        return f"<@{self.config.bot_id}>"

    def help_hint(self, command_key: str, args: list[str] | None = None) -> str | None:
        """
        Point the user at the help command for a command.

        Returns None when no help command is loaded.
        """
        help_alias = self.registry.first_alias(CommandKind.HELP)
        if help_alias is None:
            return None
        suffix = f" {' '.join(args)}" if args else ""
        return (
            f"Type `{self.config.primary_prefix}{help_alias} {command_key}{suffix}` for help."
        )
