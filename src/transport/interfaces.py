"""
Messaging interface definitions for the oracle bot.

Uses Protocol classes to define the contract for outbound chat effects.
Implementations can wrap a real chat service or record messages in memory
for testing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.engine.models import Channel, Embed, SentMessage


class MessageSender(Protocol):
    """
    Interface for the chat service connection.

    The core only ever sends and edits messages, and asks the connection
    to reconnect or shut down.
    """

    async def send(
        self, channel: Channel, content: str, embed: Embed | None = None
    ) -> SentMessage:
        """Send a message to a channel."""
        ...

    async def edit(
        self, message: SentMessage, content: str, embed: Embed | None = None
    ) -> SentMessage:
        """Replace the content of a message the bot sent earlier."""
        ...

    async def reconnect(self) -> None:
        """Drop and re-establish the connection."""
        ...

    async def shutdown(self) -> None:
        """Close the connection for good."""
        ...
