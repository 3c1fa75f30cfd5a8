"""
Service layer for the oracle bot.

Services are the command handlers: they read the application context,
run skills, and send replies.
"""

from __future__ import annotations

from src.services.commands import COMMAND_HANDLERS, ArgumentInvalid, CommandHandler
from src.services.embeds import MessageOptions, error_embed, parse_options
from src.services.help import render_help_list, render_help_text

__all__ = [
    "COMMAND_HANDLERS",
    "ArgumentInvalid",
    "CommandHandler",
    "MessageOptions",
    "error_embed",
    "parse_options",
    "render_help_list",
    "render_help_text",
]
