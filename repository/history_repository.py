# repository/history_repository.py
import logging
import time
from typing import Callable, List
from pydantic import ValidationError
from model.history import HistoryEntry
from repository.namespaces import HISTORY, TIMESTAMP_WIDTH
from repository.store import KeyValueStore
from util.errors import (
    HistoryAppendError,
    NotFoundError,
    SerializationError,
    StoreError,
)

logger = logging.getLogger(__name__)


def history_key(timestamp: int) -> bytes:
    # Fixed width keeps byte order equal to numeric order for any int64.
    return f"{HISTORY}{timestamp:0{TIMESTAMP_WIDTH}d}".encode("utf-8")


class HistoryRepository:
    """
    Flow:
    - append() writes one immutable JSON record per resolved invocation,
      keyed by its nanosecond timestamp.
    - list() scans the namespace in ascending key order, decodes each record
      (skipping undecodable ones) and returns newest first.
    """

    def __init__(
        self, store: KeyValueStore, clock: Callable[[], int] = time.time_ns
    ) -> None:
        self._store = store
        self._clock = clock
        self._last_ts = 0

    def _next_timestamp(self) -> int:
        # No await between read and update, so concurrent tasks cannot collide.
        ts = self._clock()
        if ts <= self._last_ts:
            ts = self._last_ts + 1
        self._last_ts = ts
        return ts

    async def append(self, command: str, value: str) -> HistoryEntry:
        entry = HistoryEntry(
            timestamp=self._next_timestamp(), command=command, value=value
        )
        payload = entry.model_dump_json().encode("utf-8")
        try:
            await self._store.put(history_key(entry.timestamp), payload)
        except StoreError as e:
            logger.error("history.append.error command=%s err=%s", command, e)
            raise HistoryAppendError(command, e) from e
        return entry

    @staticmethod
    def _decode(key: bytes, raw: bytes) -> HistoryEntry:
        try:
            return HistoryEntry.model_validate_json(raw)
        except ValidationError as e:
            raise SerializationError(key, f"{e.error_count()} validation error(s)") from e

    async def list(self) -> List[HistoryEntry]:
        entries: List[HistoryEntry] = []

        async def _collect(key: bytes) -> None:
            try:
                raw = await self._store.get(key)
            except NotFoundError:
                return
            try:
                entries.append(self._decode(key, raw))
            except SerializationError as e:
                logger.warning("history.decode.skip %s", e)

        await self._store.scan(HISTORY, _collect)
        entries.reverse()
        return entries
