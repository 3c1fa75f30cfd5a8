"""
Help text rendering.

Help text is authored in the command configuration and may contain
placeholders:
    ${helpList}  every command the reader is allowed to see
    ${selfPing}  a mention of the bot itself
"""

from __future__ import annotations

from src.engine.context import AppContext

NO_DOCUMENTATION = "_(No documentation)_"
OWNER_MARKER = "&"


def render_help_list(app: AppContext, user_id: str) -> str:
    """List commands with their aliases; owner-only commands only for the owner."""
    entries = []
    for command in app.registry.commands:
        marker = ""
        if command.requires_owner:
            if not app.is_owner(user_id):
                continue
            marker = OWNER_MARKER
        aliases = ", ".join(f"`{alias}`" for alias in command.aliases)
        entries.append(f"{aliases}\n{marker}**{command.title}**\n    {command.description}")
    return "\n\n".join(entries)


def render_help_text(app: AppContext, help_text: str, user_id: str) -> str:
    """Fill in the placeholders in a command's help text."""
    if not help_text:
        return NO_DOCUMENTATION
    if "${helpList}" in help_text:
        help_text = help_text.replace("${helpList}", render_help_list(app, user_id))
    if "${selfPing}" in help_text:
        help_text = help_text.replace("${selfPing}", app.bot_mention)
    return help_text
