"""
Messaging layer for the oracle bot.

The chat service itself lives outside the core; these classes define
what the core needs from it and provide an in-memory stand-in.
"""

from src.transport.interfaces import MessageSender
from src.transport.memory import InMemorySender

__all__ = ["InMemorySender", "MessageSender"]
