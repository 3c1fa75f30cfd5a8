"""
Dispatcher.

Handles one incoming chat message from start to finish:
address check, tokenizing, alias resolution, owner gate, and handler
invocation. Handler failures are reported to the user and logged; they
never escape to the event loop.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable, Mapping

from src.engine.context import AppContext
from src.engine.models import ChannelKind, DispatchStatus, MessageEvent, ParsedCommand
from src.models.command import CommandKind
from src.services.embeds import error_embed, parse_options

logger = logging.getLogger(__name__)

Handler = Callable[[AppContext, MessageEvent, ParsedCommand], Awaitable[None]]

PERMISSION_DENIED = "You don't have permission to do that!"


class Dispatcher:
    """
    Routes chat messages to command handlers.

    Holds no mutable state of its own; everything shared lives in the
    AppContext it is given.
    """

    def __init__(self, app: AppContext, handlers: Mapping[CommandKind, Handler]) -> None:
        """
        Initialize the dispatcher.

        Args:
            app: Application context built at startup
            handlers: Handler for each command kind
        """
        self.app = app
        self.handlers = dict(handlers)
        self._mention = re.compile(rf"<@.?{re.escape(app.config.bot_id)}>")

    def parse(self, event: MessageEvent) -> ParsedCommand | None:
        """
        Pull the command out of a message, if the message is meant for the bot.

        A message is relevant when it starts with a prefix, mentions the bot,
        or arrives in a direct channel. The bot's own messages never are.

        Returns:
            ParsedCommand, or None when the message should be ignored
        """
        bot_id = self.app.config.bot_id
        if event.author.id == bot_id:
            return None

        mentioned = bot_id in event.mentions or bool(self._mention.search(event.content))
        content = self._mention.sub("", event.content).strip()

        has_prefix = False
        for prefix in self.app.config.prefixes:
            if prefix and content.startswith(prefix):
                content = content[len(prefix):]
                has_prefix = True
                break

        relevant = has_prefix or mentioned or event.channel.kind == ChannelKind.DIRECT
        if not relevant:
            return None

        tokens = content.split()
        if not tokens:
            return None

        args = tokens[1:]
        return ParsedCommand(command_key=tokens[0].lower(), args=args, content=" ".join(args))

    async def dispatch(self, event: MessageEvent) -> DispatchStatus:
        """
        Handle one incoming message.

        Returns:
            Where the dispatch ended: discarded, denied, completed or failed
        """
        parsed = self.parse(event)
        if parsed is None:
            return DispatchStatus.DISCARDED

        command = self.app.registry.resolve(parsed.command_key)
        if command is None:
            return DispatchStatus.DISCARDED

        handler = self.handlers.get(command.key)
        if handler is None:
            logger.error("Command '%s' is registered but has no handler", command.key.value)
            return DispatchStatus.DISCARDED

        logger.info(
            "%s (%s): %s", event.author.name or event.author.id, event.channel.kind.value, event.content
        )

        if command.requires_owner and not self.app.is_owner(event.author.id):
            await self.app.sender.send(event.channel, f"{event.author.mention} {PERMISSION_DENIED}")
            return DispatchStatus.DENIED

        try:
            await handler(self.app, event, parsed)
        except Exception as error:
            logger.exception("Error encountered while handling %r", event.content)
            output = f"{event.author.mention} Error: {error}."
            hint = self.app.help_hint(parsed.command_key)
            if hint:
                output += f"\n{hint}"
            await self.app.sender.send(event.channel, output)
            return DispatchStatus.FAILED

        return DispatchStatus.COMPLETED

    async def dispatch_edit(self, event: MessageEvent) -> DispatchStatus:
        """
        Re-evaluate an edited message that produced an embed reply.

        The reply recorded for the message is edited in place. Messages
        invoked through the embed command contribute only their arguments;
        anything else contributes its whole text.
        """
        target = self.app.followups.get(event.id)
        if target is None or target.embed is None or target.embed.type != "rich":
            return DispatchStatus.DISCARDED

        parsed = self.parse(event)
        if parsed is None:
            return DispatchStatus.DISCARDED

        command = self.app.registry.resolve(parsed.command_key)
        if command is not None and command.key == CommandKind.EMBED_TEST:
            content = parsed.content
        else:
            content = event.content

        options = parse_options(content)
        try:
            await self.app.sender.edit(target, options.content or target.content, options.embed)
        except Exception as error:
            logger.exception("Could not edit reply to message %s", event.id)
            await self.app.sender.send(target.channel, event.author.mention, error_embed(error))
            return DispatchStatus.FAILED

        return DispatchStatus.COMPLETED
