# core/dispatcher.py
import logging
from typing import Sequence
from core.entities import (
    Action,
    FallbackRedirect,
    RunBookmark,
    RunCommand,
    ShowIndex,
    Unresolved,
)
from core.registry import CommandRegistry
from repository.bookmark_repository import BookmarkRepository
from util.functions import fill_template

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Decide what a typed token means.

    Precedence: empty token -> index, then built-in commands, then
    bookmarks, then the default redirect, else unresolved.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        bookmarks: BookmarkRepository,
        default_url: str = "",
    ) -> None:
        self._registry = registry
        self._bookmarks = bookmarks
        self._default_url = default_url

    async def resolve(
        self, token: str, args: Sequence[str], query: str = ""
    ) -> Action:
        """
        `query` is the raw text the user typed, used only by the default
        redirect; path-style requests pass an empty string.
        """
        if not token:
            return ShowIndex()

        command = self._registry.lookup(token)
        if command is not None:
            return RunCommand(command=command, args=list(args))

        bookmark = await self._bookmarks.get(token)
        if bookmark is not None:
            return RunBookmark(bookmark=bookmark, query=" ".join(args))

        if self._default_url:
            url = fill_template(self._default_url, query) if query else self._default_url
            return FallbackRedirect(url=url)

        logger.info("dispatch.unresolved token=%s", token)
        return Unresolved(token=token)
