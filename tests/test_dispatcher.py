"""Dispatcher: resolution precedence.

Invariants:
    - empty token -> ShowIndex
    - commands strictly precede bookmarks of the same name
    - bookmarks receive their args joined by single spaces
    - no match -> FallbackRedirect when a default URL exists, else Unresolved
"""

from core.dispatcher import Dispatcher
from core.entities import (
    FallbackRedirect,
    RunBookmark,
    RunCommand,
    ShowIndex,
    Unresolved,
)
from model.bookmark import Bookmark


async def test_empty_token_shows_index(dispatcher):
    assert await dispatcher.resolve("", []) == ShowIndex()


async def test_command_wins_over_bookmark_with_same_name(dispatcher, bookmarks):
    await bookmarks.put(Bookmark(name="help", url_template="https://shadow.example/%s"))

    action = await dispatcher.resolve("help", ["me"])

    assert isinstance(action, RunCommand)
    assert action.command.name == "help"
    assert action.args == ["me"]


async def test_bookmark_resolves_with_joined_args(dispatcher, bookmarks):
    await bookmarks.put(Bookmark(name="gh", url_template="https://github.com/search?q=%s"))

    action = await dispatcher.resolve("gh", ["fast", "api"])

    assert isinstance(action, RunBookmark)
    assert action.query == "fast api"
    assert action.bookmark.target(action.query) == "https://github.com/search?q=fast api"


async def test_bookmark_substitution_example(dispatcher, bookmarks):
    await bookmarks.put(Bookmark(name="gh", url_template="https://github.com/search?q=%s"))

    action = await dispatcher.resolve("gh", ["golang"])

    assert action.bookmark.target(action.query) == "https://github.com/search?q=golang"


async def test_unknown_token_falls_back_with_raw_query(dispatcher):
    action = await dispatcher.resolve("what", ["is", "this"], query="what is this")
    assert action == FallbackRedirect(url="https://search.example/?q=what is this")


async def test_fallback_without_query_keeps_literal_template(dispatcher):
    action = await dispatcher.resolve("what", [])
    assert action == FallbackRedirect(url="https://search.example/?q=%s")


async def test_unknown_token_without_fallback_is_unresolved(registry, bookmarks):
    d = Dispatcher(registry, bookmarks, default_url="")
    assert await d.resolve("what", [], query="what") == Unresolved(token="what")
