# repository/bookmark_repository.py
import logging
from typing import List, Mapping, Optional
from model.bookmark import Bookmark
from repository.namespaces import BOOKMARKS
from repository.store import KeyValueStore
from pydantic import ValidationError
from util.constants import DEFAULT_BOOKMARKS
from util.errors import NotFoundError, SerializationError

logger = logging.getLogger(__name__)


class BookmarkRepository:
    """
    Named URL templates stored one per key as raw template bytes.

    Keys are "bookmark_<name>"; names are case-sensitive and writing an
    existing name overwrites it.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @staticmethod
    def _key(name: str) -> bytes:
        return f"{BOOKMARKS}{name}".encode("utf-8")

    @staticmethod
    def _name(key: bytes) -> str:
        return key.decode("utf-8")[len(BOOKMARKS):]

    @staticmethod
    def _decode(key: bytes, name: str, raw: bytes) -> Bookmark:
        try:
            return Bookmark(name=name, url_template=raw.decode("utf-8"))
        except (UnicodeDecodeError, ValidationError) as e:
            raise SerializationError(key, type(e).__name__) from e

    async def get(self, name: str) -> Optional[Bookmark]:
        if not name:
            return None
        try:
            raw = await self._store.get(self._key(name))
        except NotFoundError:
            return None
        # A corrupt record is a server-side failure, not an absent bookmark.
        return self._decode(self._key(name), name, raw)

    async def put(self, bookmark: Bookmark) -> None:
        await self._store.put(
            self._key(bookmark.name), bookmark.url_template.encode("utf-8")
        )
        logger.info("bookmark.put name=%s", bookmark.name)

    async def list(self) -> List[Bookmark]:
        out: List[Bookmark] = []

        async def _collect(key: bytes) -> None:
            if key == BOOKMARKS.encode("utf-8"):
                return  # nameless record, unreachable by get()
            try:
                raw = await self._store.get(key)
            except NotFoundError:
                return
            try:
                out.append(self._decode(key, self._name(key), raw))
            except SerializationError as e:
                logger.warning("bookmark.decode.skip %s", e)

        await self._store.scan(BOOKMARKS, _collect)
        return out

    async def ensure_defaults(
        self, defaults: Mapping[str, str] = DEFAULT_BOOKMARKS
    ) -> int:
        """Write every default bookmark that does not exist yet."""
        written = 0
        for name, template in defaults.items():
            if await self.get(name) is not None:
                continue
            await self.put(Bookmark(name=name, url_template=template))
            written += 1
        logger.info("bookmark.defaults written=%d", written)
        return written
