"""
In-memory implementation of the messaging interface.

Stores every outbound effect in lists, making tests fast and isolated
from any real chat service.
"""

from __future__ import annotations

from uuid import uuid4

from src.engine.models import Channel, Embed, SentMessage


class InMemorySender:
    """In-memory implementation of MessageSender for testing."""

    def __init__(self) -> None:
        self.sent: list[SentMessage] = []
        self.edits: list[SentMessage] = []
        self.reconnects = 0
        self.closed = False
        self._messages: dict[str, SentMessage] = {}

    async def send(
        self, channel: Channel, content: str, embed: Embed | None = None
    ) -> SentMessage:
        """Record a sent message."""
        if self.closed:
            raise RuntimeError("Connection is closed")
        message = SentMessage(id=str(uuid4()), channel=channel, content=content, embed=embed)
        self.sent.append(message)
        self._messages[message.id] = message
        return message

    async def edit(
        self, message: SentMessage, content: str, embed: Embed | None = None
    ) -> SentMessage:
        """Record an edit to a previously sent message."""
        if message.id not in self._messages:
            raise ValueError(f"Unknown message '{message.id}'")
        updated = message.model_copy(update={"content": content, "embed": embed})
        self._messages[message.id] = updated
        self.edits.append(updated)
        return updated

    async def reconnect(self) -> None:
        """Count a reconnect request."""
        self.reconnects += 1

    async def shutdown(self) -> None:
        """Mark the connection as closed."""
        self.closed = True

    def get_message(self, message_id: str) -> SentMessage | None:
        """Current state of a sent message."""
        return self._messages.get(message_id)

    @property
    def last(self) -> SentMessage | None:
        """Most recently sent message."""
        return self.sent[-1] if self.sent else None

    def clear(self) -> None:
        """Forget all recorded effects."""
        self.sent.clear()
        self.edits.clear()
        self._messages.clear()
