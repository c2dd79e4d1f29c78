# service/link_service.py
import logging
from typing import List, Optional, Sequence
from fastapi import Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from core.dispatcher import Dispatcher
from core.entities import (
    Action,
    FallbackRedirect,
    RunBookmark,
    RunCommand,
    ShowIndex,
    Unresolved,
)
from core.registry import CommandRegistry
from model.api import CommandInfo, IndexResponse
from model.bookmark import Bookmark
from model.history import HistoryEntry
from repository.bookmark_repository import BookmarkRepository
from repository.history_repository import HistoryRepository
from util.constants import HISTORY_ERROR_HEADER
from util.enums import ErrorMessage
from util.errors import AppError, CommandExecutionError, HistoryAppendError
from util.timing import timed

logger = logging.getLogger(__name__)

INDEX_USAGE = "Type a command or bookmark name followed by search terms, e.g. 'gh fastapi'."


class LinkService:
    def __init__(
        self,
        dispatcher: Dispatcher,
        registry: CommandRegistry,
        bookmarks: BookmarkRepository,
        history: HistoryRepository,
        title: str = "Search",
    ) -> None:
        self._dispatcher = dispatcher
        self._registry = registry
        self._bookmarks = bookmarks
        self._history = history
        self._title = title

    async def handle(
        self, request: Request, token: str, args: Sequence[str], query: str = ""
    ) -> Response:
        """
        Resolve the token and perform the resulting action.
        Commands and bookmarks that succeed are recorded in history; a
        failure to record never replaces the response already produced.
        """
        with timed(logger, "dispatch", token=token or "-"):
            action = await self._dispatcher.resolve(token, args, query)
            response = await self._perform(request, action)

        if response is not None:
            return response
        if isinstance(action, Unresolved):
            raise AppError(
                f"{ErrorMessage.INVALID_COMMAND.value.message}: {action.token}",
                ErrorMessage.INVALID_COMMAND.value.http_status,
            )
        raise TypeError(f"unhandled action: {action!r}")

    async def _perform(self, request: Request, action: Action) -> Optional[Response]:
        if isinstance(action, ShowIndex):
            return JSONResponse(
                IndexResponse(title=self._title, usage=INDEX_USAGE).model_dump()
            )

        if isinstance(action, RunCommand):
            command = action.command
            try:
                response = await command.exec(request, action.args)
            except Exception as e:
                logger.error("command.failed name=%s err=%s", command.name, e)
                raise CommandExecutionError(command.name, e) from e
            return await self._record(response, command.name, "")

        if isinstance(action, RunBookmark):
            response = RedirectResponse(
                action.bookmark.target(action.query),
                status_code=status.HTTP_302_FOUND,
            )
            return await self._record(response, action.bookmark.name, action.query)

        if isinstance(action, FallbackRedirect):
            return RedirectResponse(action.url, status_code=status.HTTP_302_FOUND)

        return None

    async def _record(self, response: Response, command: str, value: str) -> Response:
        try:
            await self.record_history(command, value)
        except HistoryAppendError as e:
            logger.error("history.unrecorded command=%s err=%s", command, e.cause)
            response.headers[HISTORY_ERROR_HEADER] = type(e.cause).__name__
        return response

    async def record_history(self, command: str, value: str) -> HistoryEntry:
        return await self._history.append(command, value)

    async def list_bookmarks(self) -> List[Bookmark]:
        return await self._bookmarks.list()

    def list_commands(self) -> List[CommandInfo]:
        return [
            CommandInfo(name=c.name, description=c.description)
            for c in self._registry.all()
        ]

    async def list_history(self) -> List[HistoryEntry]:
        return await self._history.list()
