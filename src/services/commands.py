"""
Command Handlers.

One coroutine per CommandKind. Every handler takes the application
context, the incoming event and its parsed command, and talks back
through the context's sender. Failures propagate to the dispatcher,
which reports them to the user.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable

from src.engine.context import AppContext
from src.engine.models import MessageEvent, ParsedCommand
from src.models.command import ORACLE_LOOKUP_TABLE, CommandDefinition, CommandKind
from src.services.embeds import parse_options
from src.services.help import render_help_text
from src.skills.dice import roll_dice
from src.skills.moves import ActionOutcome, MoveOutcome, ask_yes_no, parse_modifiers, roll_action, roll_move

logger = logging.getLogger(__name__)

CommandHandler = Callable[[AppContext, MessageEvent, ParsedCommand], Awaitable[None]]

_WHOLE_NUMBER = re.compile(r"^\+?\d+$")

ACTION_OUTCOME_TEXT = {
    ActionOutcome.MISS: "Miss...",
    ActionOutcome.WEAK_HIT: "Weak hit!",
    ActionOutcome.STRONG_HIT: "_Strong hit!_",
}

MOVE_OUTCOME_TEXT = {
    MoveOutcome.MISS: "Miss...",
    MoveOutcome.MIXED: "Mixed success!",
    MoveOutcome.SUCCESS: "_Success!_",
}


class ArgumentInvalid(ValueError):
    """A command was given arguments it cannot use."""


def _with_hint(app: AppContext, text: str, command_key: str, args: list[str] | None = None) -> str:
    hint = app.help_hint(command_key, args)
    return f"{text}\n{hint}" if hint else text


def _comment_line(args: list[str]) -> str:
    return f'"{" ".join(args)}"\n' if args else ""


def _command(app: AppContext, kind: CommandKind) -> CommandDefinition:
    command = app.registry.get(kind)
    if command is None:
        raise RuntimeError(f"Command '{kind.value}' is not loaded")
    return command


async def ask_the_oracle(app: AppContext, event: MessageEvent, parsed: ParsedCommand) -> None:
    """
    Ask a yes/no question at a given likelihood.

    The first argument is a likelihood alias or a whole number 0-100.
    If it is an alias of the oracle table lookup, the rest of the
    arguments go to the table lookup instead.
    """
    command = _command(app, CommandKind.ASK_THE_ORACLE)
    args = parsed.args

    listed = ", ".join(f"`{alias}`" for alias in command.arg_aliases)
    invalid = _with_hint(
        app,
        f"{event.author.mention} A likelihood is required. Please use a whole number "
        f"between 0-100 or one of the following:\n{listed}",
        parsed.command_key,
    )

    if not args:
        await app.sender.send(event.channel, invalid)
        return

    argument = command.resolve_argument(args[0])
    if argument == ORACLE_LOOKUP_TABLE:
        await oracle_lookup_table(app, event, parsed.command_key, args[1:], args[0])
        return

    odds_text = argument if argument is not None else args[0]
    if not _WHOLE_NUMBER.match(odds_text) or int(odds_text) > 100:
        await app.sender.send(event.channel, invalid)
        return
    odds = int(odds_text)

    label = command.arg_labels.get(odds)
    if label is None:
        likelihood = f"The result is **{odds}%** likely vs."
    else:
        likelihood = f"The result is {label} (**{odds}%**) vs."

    result = ask_yes_no(odds, app.roller)
    answer = "**Yes**." if result.is_yes else "**No**."
    output = (
        f"{likelihood} **{result.roll}**…\n"
        f"{_comment_line(args[1:])}"
        f"{event.author.mention} {answer}"
    )
    await app.sender.send(event.channel, output)


async def oracle_lookup_table(
    app: AppContext,
    event: MessageEvent,
    command_key: str,
    args: list[str],
    table_alias: str,
) -> None:
    """Roll on an oracle table: `<table> [comment...]`."""
    listing = "Please specify an Oracle from the list:\n" + ", ".join(
        f"`{alias}`" for alias in app.catalog.aliases
    )

    if not args:
        output = f"{event.author.mention} {listing}"
        await app.sender.send(event.channel, _with_hint(app, output, command_key, [table_alias]))
        return

    name = args[0].lower()
    table = app.catalog.get(name)
    if table is None:
        output = f"{event.author.mention} Oracle `{name}` not found. {listing}"
        await app.sender.send(event.channel, _with_hint(app, output, command_key, [table_alias]))
        return

    result = app.resolver.resolve(table, app.roller(table.dice_sides))
    output = (
        f"Consulting the Oracle of **{table.title}** vs. **{result.roll}**…\n"
        f"{_comment_line(args[1:])}"
        f"{app.resolver.format(result, event.author.mention)}"
    )
    await app.sender.send(event.channel, output)


async def roll_action_dice(app: AppContext, event: MessageEvent, parsed: ParsedCommand) -> None:
    """Ironsworn action roll: d6 + modifiers vs. two d10."""
    modifiers = parse_modifiers(parsed.args)
    result = roll_action(modifiers, app.roller)

    challenge = [
        f"__{die}__" if result.action_score > die else str(die)
        for die in result.challenge_dice
    ]
    modifier_text = "".join(f"{'-' if m < 0 else '+'}{abs(m)}" for m in modifiers)

    output = f"**{result.action_score}**"
    if modifier_text:
        output += f" (**{result.action_die}**{modifier_text})"
    output += f" vs. **{challenge[0]}** & **{challenge[1]}**"
    output += f"\n{event.author.mention} {ACTION_OUTCOME_TEXT[result.outcome]}"
    if result.is_match:
        output += " _MATCH!_"
    await app.sender.send(event.channel, output)


async def roll_move_dice(app: AppContext, event: MessageEvent, parsed: ParsedCommand) -> None:
    """Apocalypse World move: 2d6 + modifiers."""
    modifiers = parse_modifiers(parsed.args)
    result = roll_move(modifiers, app.roller)

    modifier_text = "".join(f" {'-' if m < 0 else '+'} {abs(m)}" for m in modifiers)
    first, second = result.dice
    output = (
        f"**{result.total}** (**{first}** & **{second}**{modifier_text})\n"
        f"{event.author.mention} {MOVE_OUTCOME_TEXT[result.outcome]}"
    )
    await app.sender.send(event.channel, output)


async def roll_dice_expression(app: AppContext, event: MessageEvent, parsed: ParsedCommand) -> None:
    """Roll standard dice notation, e.g. `2d6+1` or `4d6 kh3`."""
    expression = "".join(parsed.args)
    if not expression:
        raise ArgumentInvalid("A dice expression such as `2d6+1` is required")

    result = roll_dice(expression, app.roller)
    rolls = ", ".join(str(r) for r in result.rolls)
    output = f"{event.author.mention} `{result.notation}` **{result.total}** ({rolls})"
    if result.kept is not None:
        output += f" kept {', '.join(str(k) for k in result.kept)}"
    await app.sender.send(event.channel, output)


async def help_message(app: AppContext, event: MessageEvent, parsed: ParsedCommand) -> None:
    """Show help for a command, or the general help text."""
    output = event.author.mention
    target = app.registry.get(CommandKind.HELP)

    if parsed.args:
        requested = app.registry.resolve(parsed.args[0])
        if requested is None:
            output += f" Command `{parsed.args[0]}` not recognized."
        else:
            target = requested

    help_text = target.help_text if target is not None else ""
    output += "\n" + render_help_text(app, help_text, event.author.id)
    await app.sender.send(event.channel, output)


async def reconnect(app: AppContext, event: MessageEvent, parsed: ParsedCommand) -> None:
    """Drop and re-establish the chat connection."""
    author = event.author
    logger.info("Reset request received from %s (%s).", author.id, author.name)
    await app.sender.send(event.channel, f"Resetting at the request of {author.mention}.")
    await app.sender.reconnect()


async def exit_process(app: AppContext, event: MessageEvent, parsed: ParsedCommand) -> None:
    """Shut the bot down."""
    author = event.author
    logger.info("Shutdown request received from %s (%s).", author.id, author.name)
    await app.sender.send(event.channel, f"Shutting down at the request of {author.mention}.")
    await app.sender.shutdown()


async def embed_test(app: AppContext, event: MessageEvent, parsed: ParsedCommand) -> None:
    """Send a message built from JSON options; editing the request edits the reply."""
    options = parse_options(parsed.content)
    sent = await app.sender.send(
        event.channel, options.content or event.author.mention, options.embed
    )
    app.followups.record(event.id, sent)


COMMAND_HANDLERS: dict[CommandKind, CommandHandler] = {
    CommandKind.ASK_THE_ORACLE: ask_the_oracle,
    CommandKind.ROLL_ACTION_DICE: roll_action_dice,
    CommandKind.ROLL_MOVE_DICE: roll_move_dice,
    CommandKind.ROLL_DICE: roll_dice_expression,
    CommandKind.HELP: help_message,
    CommandKind.RECONNECT: reconnect,
    CommandKind.EXIT: exit_process,
    CommandKind.EMBED_TEST: embed_test,
}
