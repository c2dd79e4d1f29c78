# model/api.py
from pydantic import BaseModel
from model.bookmark import Bookmark
from model.history import HistoryEntry
from util.functions import format_stamp


class CommandInfo(BaseModel):
    name: str
    description: str


class IndexResponse(BaseModel):
    title: str
    usage: str


class HelpResponse(BaseModel):
    usage: list[str]
    commands: list[CommandInfo]


class ListResponse(BaseModel):
    bookmarks: list[Bookmark]
    commands: list[CommandInfo]


class HistoryEntryView(BaseModel):
    timestamp: int
    command: str
    value: str
    when: str
    what: str

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> "HistoryEntryView":
        return cls(
            timestamp=entry.timestamp,
            command=entry.command,
            value=entry.value,
            when=format_stamp(entry.timestamp),
            what=f"{entry.command} {entry.value}",
        )


class HistoryResponse(BaseModel):
    entries: list[HistoryEntryView]
