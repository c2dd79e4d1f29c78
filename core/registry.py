# core/registry.py
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional
from core.commands import AddCommand, Command, HelpCommand, HistoryCommand, ListCommand
from repository.bookmark_repository import BookmarkRepository


class CommandRegistry:
    """
    Fixed table of built-in commands.

    Registration happens only through the constructor; the table is a
    read-only mapping afterwards, so concurrent lookups need no locking.
    """

    def __init__(self, commands: Iterable[Command]) -> None:
        table: Dict[str, Command] = {}
        for cmd in commands:
            if not cmd.name:
                raise ValueError(f"command without a name: {cmd!r}")
            if cmd.name in table:
                raise ValueError(f"duplicate command name: {cmd.name}")
            table[cmd.name] = cmd
        self._commands = MappingProxyType(table)

    def lookup(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    def all(self) -> List[Command]:
        return [self._commands[n] for n in sorted(self._commands)]

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)


def builtin_registry(bookmarks: BookmarkRepository) -> CommandRegistry:
    return CommandRegistry(
        [
            AddCommand(bookmarks),
            HelpCommand(),
            HistoryCommand(),
            ListCommand(),
        ]
    )
