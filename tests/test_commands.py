"""Built-in commands: redirects and the bookmark-adding command."""

import pytest

from core.commands import AddCommand, HelpCommand, HistoryCommand, ListCommand
from util.errors import CommandError


@pytest.mark.parametrize(
    "command,target",
    [(HelpCommand(), "/help"), (ListCommand(), "/list"), (HistoryCommand(), "/history")],
)
async def test_redirect_commands(command, target):
    res = await command.exec(None, [])
    assert res.status_code == 302
    assert res.headers["location"] == target


async def test_add_stores_bookmark(bookmarks):
    res = await AddCommand(bookmarks).exec(None, ["so", "https://stackoverflow.com/search?q=%s"])

    assert res.status_code == 201
    saved = await bookmarks.get("so")
    assert saved.url_template == "https://stackoverflow.com/search?q=%s"


async def test_add_requires_name_and_url(bookmarks):
    with pytest.raises(CommandError):
        await AddCommand(bookmarks).exec(None, ["so"])
    assert await bookmarks.get("so") is None
