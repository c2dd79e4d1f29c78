# repository/store.py
import logging
from typing import Awaitable, Callable, List, Union
from redis.asyncio import Redis
from redis.exceptions import RedisError
from util.errors import NotFoundError, StoreClosedError, StoreIOError

logger = logging.getLogger(__name__)

Key = Union[str, bytes]
Visitor = Callable[[bytes], Awaitable[None]]

_GLOB_SPECIALS = b"\\*?[]"


def _as_bytes(key: Key) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else key


def _glob_escape(prefix: bytes) -> bytes:
    out = bytearray()
    for b in prefix:
        if b in _GLOB_SPECIALS:
            out.append(ord("\\"))
        out.append(b)
    return bytes(out)


class KeyValueStore:
    """
    Redis-backed ordered key -> bytes map.

    Flow:
    - Point reads/writes go straight to Redis (GET/SET).
    - Prefix scans collect matching keys with SCAN, sort them byte-wise and
      visit them in ascending order.
    - Every RedisError surfaces as StoreIOError; after close() every call
      raises StoreClosedError.
    """

    def __init__(self, client: Redis) -> None:
        self._client = client
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> Redis:
        if self._closed:
            raise StoreClosedError()
        return self._client

    async def put(self, key: Key, value: bytes) -> None:
        r = self._ensure_open()
        k = _as_bytes(key)
        try:
            await r.set(k, value)
        except RedisError as e:
            logger.error("store.put.error key=%r err=%s", k, type(e).__name__)
            raise StoreIOError("put", k) from e

    async def get(self, key: Key) -> bytes:
        r = self._ensure_open()
        k = _as_bytes(key)
        try:
            raw = await r.get(k)
        except RedisError as e:
            logger.error("store.get.error key=%r err=%s", k, type(e).__name__)
            raise StoreIOError("get", k) from e
        if raw is None:
            raise NotFoundError(k)
        return raw

    async def keys(self, prefix: Key) -> List[bytes]:
        r = self._ensure_open()
        p = _as_bytes(prefix)
        try:
            found = [k async for k in r.scan_iter(match=_glob_escape(p) + b"*")]
        except RedisError as e:
            logger.error("store.scan.error prefix=%r err=%s", p, type(e).__name__)
            raise StoreIOError("scan", p) from e
        # SCAN may repeat keys and has no order.
        return sorted(set(found))

    async def scan(self, prefix: Key, visit: Visitor) -> None:
        """
        Await `visit(key)` for each key starting with `prefix`, ascending.
        The first exception from `visit` stops the scan and propagates.
        """
        for k in await self.keys(prefix):
            await visit(k)

    async def is_empty(self) -> bool:
        r = self._ensure_open()
        try:
            return int(await r.dbsize()) == 0
        except RedisError as e:
            raise StoreIOError("dbsize") from e

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            await self._client.aclose()
        except RedisError as e:
            raise StoreIOError("close") from e
