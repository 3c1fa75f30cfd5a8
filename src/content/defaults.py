"""
Bundled configuration documents.

Used when no configuration files are supplied. They have the same shape
as the JSON documents the loader reads.
"""

from __future__ import annotations

from typing import Any

DEFAULT_COMMANDS: dict[str, dict[str, Any]] = {
    "ask_the_oracle": {
        "aliases": ["ask", "oracle", "ask the oracle"],
        "argAliases": {
            "oracle_lookup_table": ["table", "lookup", "t"],
            "10": ["small chance", "sc", "unlikely"],
            "25": ["low chance", "lc"],
            "50": ["50/50", "even", "fifty fifty"],
            "75": ["likely", "l"],
            "90": ["almost certain", "ac", "certain"],
        },
        "argLabels": {
            "10": "**Small Chance**",
            "25": "**Unlikely**",
            "50": "**50/50**",
            "75": "**Likely**",
            "90": "**Almost Certain**",
        },
        "title": "Ask the Oracle",
        "description": "Ask a yes/no question, or roll on an oracle table.",
        "helpText": (
            "**Ask the Oracle**\n"
            "`.ask <likelihood> [question]` rolls d100 against the likelihood.\n"
            "`.ask table <oracle> [question]` rolls on an oracle table."
        ),
    },
    "roll_action_dice": {
        "aliases": ["action", "act", "a"],
        "title": "Action Roll",
        "description": "Roll d6 plus modifiers against two d10 challenge dice.",
        "helpText": "**Action Roll**\n`.action [+stat] [+adds]`",
    },
    "roll_move_dice": {
        "aliases": ["move", "aw"],
        "title": "Move Roll",
        "description": "Roll 2d6 plus modifiers: 10+ success, 7-9 mixed, 6- miss.",
        "helpText": "**Move Roll**\n`.move [+stat]`",
    },
    "roll_dice": {
        "aliases": ["roll", "r"],
        "title": "Roll Dice",
        "description": "Roll dice notation such as `2d6+1` or `4d6kh3`.",
        "helpText": "**Roll Dice**\n`.roll <notation>`",
    },
    "help": {
        "aliases": ["help", "h", "?"],
        "title": "Help",
        "description": "List commands, or show help for one command.",
        "helpText": "Commands for ${selfPing}:\n\n${helpList}",
    },
    "reconnect": {
        "aliases": ["reconnect", "reset"],
        "requiresOwner": True,
        "title": "Reconnect",
        "description": "Drop and re-establish the chat connection.",
        "helpText": "**Reconnect**\n`.reconnect`",
    },
    "exit": {
        "aliases": ["exit", "shutdown"],
        "requiresOwner": True,
        "title": "Shut Down",
        "description": "Stop the bot.",
        "helpText": "**Shut Down**\n`.exit`",
    },
    "embed_test": {
        "aliases": ["embed"],
        "requiresOwner": True,
        "title": "Embed Test",
        "description": "Send a message from JSON options. Edit the request to update it.",
        "helpText": '**Embed Test**\n`.embed {"content": "text", "embed": {"title": "..."}}`',
    },
}

DEFAULT_ORACLES: list[dict[str, Any]] = [
    {
        "title": "Weather",
        "aliases": ["sky"],
        "results": {"30": "Clear", "70": "Cloudy", "90": "Rain", "100": "Storm"},
    },
    {
        "title": "Action Theme",
        "type": "multipleColumns",
        "aliases": ["at", "theme"],
        "headers": ["Action", "Theme"],
        "results": {
            "20": ["Scheme", "Risk"],
            "40": ["Clash", "Bond"],
            "60": ["Defend", "Secret"],
            "80": ["Explore", "Power"],
            "100": ["Betray", "Legacy"],
        },
    },
    {
        "title": "Pay the Price",
        "aliases": ["price", "ptp"],
        "results": {
            "25": "A friend or ally is put in harm's way",
            "50": "You are separated from something or someone",
            "75": "Your action has an unintended effect",
            "100": "A new danger or foe is revealed",
        },
    },
    {
        "title": "Location",
        "type": "nested",
        "aliases": ["place", "loc"],
        "results": {
            "50": {
                "title": "Wilds",
                "prompt": "What lies in the wild?",
                "d": 6,
                "results": {"2": "Forest", "4": "Hills", "6": "Marsh"},
            },
            "100": {
                "title": "Settlement",
                "prompt": "What kind of place do people live in here?",
                "d": 4,
                "results": {"1": "Hamlet", "3": "Village", "4": "Hold"},
            },
        },
    },
]
