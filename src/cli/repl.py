"""
Interactive console for the oracle bot.

Feeds typed lines through the dispatcher as direct messages and prints
whatever the bot sends back. Stands in for a real chat connection.
"""

from __future__ import annotations

import asyncio
import logging
from uuid import uuid4

from src.content import load_documents
from src.engine.bootstrap import build_app_context, create_dispatcher
from src.engine.context import AppContext
from src.engine.dispatcher import Dispatcher
from src.engine.models import Author, BotConfig, Channel, ChannelKind, Embed, MessageEvent, SentMessage
from src.models.command import CommandKind
from src.transport.memory import InMemorySender

CONSOLE_USER_ID = "console-user"


class ConsoleSender(InMemorySender):
    """Records messages like the in-memory sender and prints them."""

    async def send(
        self, channel: Channel, content: str, embed: Embed | None = None
    ) -> SentMessage:
        message = await super().send(channel, content, embed)
        print(content)
        if embed is not None:
            print(f"[{embed.title}]\n{embed.description}")
        print()
        return message

    async def edit(
        self, message: SentMessage, content: str, embed: Embed | None = None
    ) -> SentMessage:
        updated = await super().edit(message, content, embed)
        print(f"(edited) {content}")
        return updated

    async def reconnect(self) -> None:
        await super().reconnect()
        print("(reconnected)")


class OracleConsole:
    """
    Interactive console session.

    Every line is sent as a direct message from the console user, so no
    prefix is needed.
    """

    def __init__(self, config: BotConfig) -> None:
        self.config = config
        self.sender = ConsoleSender()
        commands, oracles = load_documents(config)
        self.app: AppContext = build_app_context(config, commands, oracles, self.sender)
        self.dispatcher: Dispatcher = create_dispatcher(self.app)
        self.author = Author(id=config.owner_id or CONSOLE_USER_ID, name="console")
        self.channel = Channel(id="console", kind=ChannelKind.DIRECT)

    def make_event(self, text: str) -> MessageEvent:
        """Wrap a typed line as an incoming message."""
        return MessageEvent(
            id=str(uuid4()),
            content=text,
            author=self.author,
            channel=self.channel,
        )

    async def run(self) -> None:
        """Run the interactive loop until shutdown or end of input."""
        help_alias = self.app.registry.first_alias(CommandKind.HELP)
        print("Oracle bot console. Type a command" + (f", or '{help_alias}' for help." if help_alias else "."))
        print()

        while not self.sender.closed:
            try:
                line = input("> ").strip()
            except (KeyboardInterrupt, EOFError):
                print()
                break

            if not line:
                continue

            await self.dispatcher.dispatch(self.make_event(line))

        print("Farewell.")


def run_console(config: BotConfig | None = None) -> None:
    """Run the console with the given (or environment) configuration."""
    console = OracleConsole(config or BotConfig.from_env())
    asyncio.run(console.run())


def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(description="Tabletop oracle bot console")
    parser.add_argument("--commands", help="Path to a commands JSON document")
    parser.add_argument("--oracles", help="Path to an oracles JSON document")
    parser.add_argument("--owner", help="User id allowed to run owner-only commands")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%m/%d/%y %H:%M:%S",
    )

    config = BotConfig.from_env()
    updates: dict[str, object] = {}
    if args.commands:
        updates["commands_path"] = args.commands
    if args.oracles:
        updates["oracles_path"] = args.oracles
    if args.owner:
        updates["owner_id"] = args.owner
    if updates:
        config = BotConfig.model_validate({**config.model_dump(), **updates})

    run_console(config)


if __name__ == "__main__":
    main()
