"""CommandRegistry: fixed table built once, exact lookup, sorted listing."""

import pytest

from core.commands import AddCommand, Command, HelpCommand, ListCommand


def test_builtin_commands_are_registered(registry):
    assert isinstance(registry.lookup("help"), HelpCommand)
    assert isinstance(registry.lookup("add"), AddCommand)
    assert "list" in registry
    assert len(registry) == 4


def test_lookup_is_exact_and_case_sensitive(registry):
    assert registry.lookup("HELP") is None
    assert registry.lookup("hel") is None


def test_all_is_sorted_by_name(registry):
    assert [c.name for c in registry.all()] == ["add", "help", "history", "list"]


def test_duplicate_names_are_rejected():
    from core.registry import CommandRegistry

    with pytest.raises(ValueError, match="duplicate"):
        CommandRegistry([HelpCommand(), HelpCommand()])


def test_nameless_command_is_rejected():
    from core.registry import CommandRegistry

    class Nameless(Command):
        async def exec(self, request, args):
            return None

    with pytest.raises(ValueError):
        CommandRegistry([Nameless()])


def test_registry_table_is_read_only(registry):
    with pytest.raises(TypeError):
        registry._commands["x"] = ListCommand()
