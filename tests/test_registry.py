"""Tests for the alias registry."""

from __future__ import annotations

from src.engine.registry import AliasRegistry
from src.models import CommandKind, DiagnosticSeverity


def _messages(registry: AliasRegistry) -> list[str]:
    return [str(d) for d in registry.diagnostics]


class TestCommandAliases:
    """Test command alias registration."""

    def test_aliases_resolve_to_command(self):
        registry = AliasRegistry.build({"roll_dice": {"aliases": ["r", "roll"]}})
        assert registry.resolve("r").key == CommandKind.ROLL_DICE
        assert registry.resolve("roll").key == CommandKind.ROLL_DICE
        assert registry.diagnostics == []

    def test_aliases_are_normalized(self):
        registry = AliasRegistry.build({"ask_the_oracle": {"aliases": ["Ask The Oracle"]}})
        assert registry.resolve("ask-the-oracle").key == CommandKind.ASK_THE_ORACLE
        assert registry.resolve("ask   the oracle").key == CommandKind.ASK_THE_ORACLE
        assert "ask-the-oracle" in registry

    def test_first_registration_wins(self):
        registry = AliasRegistry.build(
            {
                "roll_dice": {"aliases": ["r", "roll"]},
                "roll_move_dice": {"aliases": ["roll", "move"]},
            }
        )
        assert registry.resolve("roll").key == CommandKind.ROLL_DICE
        assert registry.resolve("move").key == CommandKind.ROLL_MOVE_DICE
        assert registry.get(CommandKind.ROLL_MOVE_DICE).aliases == ["move"]

        warnings = [d for d in registry.diagnostics if d.severity == DiagnosticSeverity.WARNING]
        assert len(warnings) == 1
        assert warnings[0].source == "command 'roll_move_dice'"
        assert "duplicate alias 'roll'" in warnings[0].message

    def test_collision_detected_after_normalizing(self):
        registry = AliasRegistry.build(
            {
                "ask_the_oracle": {"aliases": ["High Chance"]},
                "roll_dice": {"aliases": ["high   chance", "r"]},
            }
        )
        assert registry.resolve("high-chance").key == CommandKind.ASK_THE_ORACLE
        assert any("duplicate alias 'high-chance'" in m for m in _messages(registry))

    def test_missing_aliases_uses_key(self):
        registry = AliasRegistry.build({"help": {"title": "Help"}})
        assert registry.resolve("help").key == CommandKind.HELP
        assert registry.first_alias(CommandKind.HELP) == "help"
        assert registry.diagnostics[0].severity == DiagnosticSeverity.INFO

    def test_empty_aliases_uses_key(self):
        registry = AliasRegistry.build({"exit": {"aliases": []}})
        assert registry.resolve("exit").key == CommandKind.EXIT

    def test_blank_alias_skipped(self):
        registry = AliasRegistry.build({"help": {"aliases": ["   ", "h"]}})
        assert registry.get(CommandKind.HELP).aliases == ["h"]
        assert any("blank" in m for m in _messages(registry))

    def test_key_is_case_insensitive(self):
        registry = AliasRegistry.build({"HELP": {"aliases": ["h"]}})
        assert registry.resolve("h").key == CommandKind.HELP

    def test_lookup_of_unknown_alias(self):
        registry = AliasRegistry.build({"help": {"aliases": ["h"]}})
        assert registry.resolve("nope") is None
        assert "nope" not in registry


class TestCommandSkipping:
    """Test that bad entries are skipped without breaking the registry."""

    def test_unsupported_command_skipped(self):
        registry = AliasRegistry.build(
            {"summon_dragon": {"aliases": ["dragon"]}, "help": {"aliases": ["h"]}}
        )
        assert registry.resolve("dragon") is None
        assert registry.resolve("h") is not None
        assert "command 'summon_dragon' is not supported. Skipping command." in _messages(registry)

    def test_supported_set_limits_commands(self):
        registry = AliasRegistry.build(
            {"help": {"aliases": ["h"]}, "roll_dice": {"aliases": ["r"]}},
            supported={"help"},
        )
        assert registry.resolve("r") is None
        assert len(registry) == 1

    def test_malformed_entry_skipped(self):
        registry = AliasRegistry.build(
            {
                "help": "not a mapping",
                "roll_dice": {"aliases": "r"},
                "exit": {"aliases": ["exit"]},
            }
        )
        assert registry.get(CommandKind.HELP) is None
        assert registry.get(CommandKind.ROLL_DICE) is None
        assert registry.resolve("exit").key == CommandKind.EXIT
        errors = [d for d in registry.diagnostics if d.severity == DiagnosticSeverity.ERROR]
        assert len(errors) == 2

    def test_non_mapping_document(self):
        registry = AliasRegistry.build(["help"])
        assert len(registry) == 0
        assert registry.resolve("help") is None
        assert registry.diagnostics[0].severity == DiagnosticSeverity.ERROR

    def test_none_document(self):
        registry = AliasRegistry.build(None)
        assert len(registry) == 0

    def test_none_entry_uses_defaults(self):
        registry = AliasRegistry.build({"help": None})
        assert registry.resolve("help").key == CommandKind.HELP


class TestArgumentAliases:
    """Test per-command argument aliases."""

    def test_supported_arguments_registered(self):
        registry = AliasRegistry.build(
            {
                "ask_the_oracle": {
                    "aliases": ["ask"],
                    "argAliases": {
                        "oracle_lookup_table": ["table", "t"],
                        "10": ["Small Chance"],
                    },
                }
            }
        )
        command = registry.resolve("ask")
        assert command.arg_aliases == {"table": "oracle_lookup_table", "t": "oracle_lookup_table", "small-chance": "10"}
        assert command.resolve_argument("small   chance") == "10"

    def test_unsupported_argument_skipped(self):
        registry = AliasRegistry.build(
            {
                "ask_the_oracle": {
                    "aliases": ["ask"],
                    "argAliases": {"maybe": ["m"], "50": ["even"]},
                }
            }
        )
        assert registry.resolve("ask").arg_aliases == {"even": "50"}
        assert any("argument 'maybe' is not supported" in m for m in _messages(registry))

    def test_command_without_arguments_gets_none(self):
        registry = AliasRegistry.build(
            {"roll_dice": {"aliases": ["r"], "argAliases": {"sides": ["s"]}}}
        )
        assert registry.resolve("r").arg_aliases == {}
        assert len(registry.diagnostics) == 1

    def test_argument_alias_first_wins(self):
        registry = AliasRegistry.build(
            {
                "ask_the_oracle": {
                    "aliases": ["ask"],
                    "argAliases": {"10": ["low"], "25": ["low", "lc"]},
                }
            }
        )
        assert registry.resolve("ask").arg_aliases == {"low": "10", "lc": "25"}
        assert any("ask_the_oracle.25" in m and "duplicate alias 'low'" in m for m in _messages(registry))

    def test_argument_aliases_separate_from_commands(self):
        registry = AliasRegistry.build(
            {
                "roll_dice": {"aliases": ["table"]},
                "ask_the_oracle": {"aliases": ["ask"], "argAliases": {"oracle_lookup_table": ["table"]}},
            }
        )
        assert registry.resolve("table").key == CommandKind.ROLL_DICE
        assert registry.resolve("ask").resolve_argument("table") == "oracle_lookup_table"
        assert registry.diagnostics == []

    def test_empty_argument_group_ignored(self):
        registry = AliasRegistry.build(
            {"ask_the_oracle": {"aliases": ["ask"], "argAliases": {"10": [], "25": None}}}
        )
        assert registry.resolve("ask").arg_aliases == {}
        assert registry.diagnostics == []


class TestCommandData:
    """Test the rest of the command definition."""

    def test_fields_copied(self):
        registry = AliasRegistry.build(
            {
                "exit": {
                    "aliases": ["exit"],
                    "requiresOwner": True,
                    "title": "Shut Down",
                    "description": "Stop the bot.",
                    "helpText": "`.exit`",
                    "argLabels": {"50": "50/50"},
                    "color": "red",
                }
            }
        )
        command = registry.get(CommandKind.EXIT)
        assert command.requires_owner is True
        assert command.title == "Shut Down"
        assert command.description == "Stop the bot."
        assert command.help_text == "`.exit`"
        assert command.arg_labels == {50: "50/50"}
        assert command.extra == {"color": "red"}

    def test_commands_in_configuration_order(self):
        registry = AliasRegistry.build(
            {"roll_dice": {"aliases": ["r"]}, "help": {"aliases": ["h"]}}
        )
        assert [c.key for c in registry.commands] == [CommandKind.ROLL_DICE, CommandKind.HELP]
        assert registry.aliases == {"r": CommandKind.ROLL_DICE, "h": CommandKind.HELP}
