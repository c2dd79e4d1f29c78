# core/commands.py
from abc import ABC, abstractmethod
from typing import Sequence
from fastapi import Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse, Response
from model.bookmark import Bookmark
from repository.bookmark_repository import BookmarkRepository
from util.constants import InternalURIs
from util.errors import CommandError


class Command(ABC):
    """
    A built-in behavior addressed by a unique, case-sensitive name.

    Commands hold no per-request state; anything durable goes through a
    repository handed to the constructor.
    """

    name: str = ""
    description: str = ""

    @abstractmethod
    async def exec(self, request: Request, args: Sequence[str]) -> Response:
        """Run the command. Raise CommandError on bad input."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class _RedirectCommand(Command):
    target: str = InternalURIs.INDEX

    async def exec(self, request: Request, args: Sequence[str]) -> Response:
        return RedirectResponse(self.target, status_code=status.HTTP_302_FOUND)


class HelpCommand(_RedirectCommand):
    name = "help"
    description = "Display help page"
    target = InternalURIs.HELP


class ListCommand(_RedirectCommand):
    name = "list"
    description = "List all bookmarks and commands"
    target = InternalURIs.LIST


class HistoryCommand(_RedirectCommand):
    name = "history"
    description = "Show usage history, newest first"
    target = InternalURIs.HISTORY


class AddCommand(Command):
    name = "add"
    description = "Add a bookmark: ?q=add <name> <url-with-%s>"

    def __init__(self, bookmarks: BookmarkRepository) -> None:
        self._bookmarks = bookmarks

    async def exec(self, request: Request, args: Sequence[str]) -> Response:
        # Exactly a name and one absolute URL. The path form splits a URL on
        # "/" into several args and drops its query string, so it never fits.
        parts = [a for a in args if a]
        if len(parts) != 2 or "://" not in parts[1]:
            raise CommandError("usage: ?q=add <name> <url> (path form not supported)")
        name, url = parts
        await self._bookmarks.put(Bookmark(name=name, url_template=url))
        return PlainTextResponse(f"Bookmark {name} added", status_code=status.HTTP_201_CREATED)
