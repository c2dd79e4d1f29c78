# controller/controller_dependencies.py
from fastapi import Request
from config.settings import Settings, settings
from core.dispatcher import Dispatcher
from core.registry import builtin_registry
from repository.bookmark_repository import BookmarkRepository
from repository.history_repository import HistoryRepository
from repository.store import KeyValueStore
from service.link_service import LinkService
from service.suggestion_service import SuggestionService


def build_link_service(store: KeyValueStore, cfg: Settings = settings) -> LinkService:
    """Wire repositories, registry and dispatcher around one store handle."""
    _bookmarks = BookmarkRepository(store)
    _history = HistoryRepository(store)
    _registry = builtin_registry(_bookmarks)
    _dispatcher = Dispatcher(_registry, _bookmarks, default_url=cfg.DEFAULT_URL)
    return LinkService(_dispatcher, _registry, _bookmarks, _history, title=cfg.TITLE)


def get_link_service(request: Request) -> LinkService:
    return request.app.state.link_service


def get_suggestion_service() -> SuggestionService:
    return SuggestionService(settings.SUGGEST_URL, timeout=settings.SUGGEST_TIMEOUT_SECONDS)
