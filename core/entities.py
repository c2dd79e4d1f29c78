# core/entities.py
from dataclasses import dataclass, field
from typing import List, Union
from core.commands import Command
from model.bookmark import Bookmark


@dataclass(frozen=True)
class ShowIndex:
    """Empty input: render the landing page, record nothing."""


@dataclass(frozen=True)
class RunCommand:
    command: Command
    args: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RunBookmark:
    bookmark: Bookmark
    query: str  # args joined with single spaces


@dataclass(frozen=True)
class FallbackRedirect:
    url: str


@dataclass(frozen=True)
class Unresolved:
    token: str


Action = Union[ShowIndex, RunCommand, RunBookmark, FallbackRedirect, Unresolved]
