"""HistoryRepository: append/list round trip, ordering, corruption tolerance.

Invariants:
    - timestamps from one repository are strictly increasing, even if the clock stalls
    - list() returns newest first
    - one undecodable record is skipped; the rest are still returned
    - history keys are fixed width so byte order equals numeric order
"""

import json

import pytest

from repository.history_repository import HistoryRepository, history_key
from util.errors import HistoryAppendError, StoreClosedError


async def test_append_then_list_round_trip(history):
    before = await history.append("g", "first")
    entry = await history.append("gh", "golang")

    listed = await history.list()
    assert listed[0].command == "gh"
    assert listed[0].value == "golang"
    assert listed[0].timestamp == entry.timestamp
    assert entry.timestamp > before.timestamp


async def test_list_is_reverse_chronological(history):
    for name in ["A", "B", "C"]:
        await history.append(name, "")

    assert [e.command for e in await history.list()] == ["C", "B", "A"]


async def test_stalled_clock_still_yields_increasing_timestamps(store):
    repo = HistoryRepository(store, clock=lambda: 1_000)
    stamps = [(await repo.append("x", str(i))).timestamp for i in range(3)]
    assert stamps == [1_000, 1_001, 1_002]


async def test_record_is_json_under_history_key(store):
    repo = HistoryRepository(store, clock=lambda: 42)
    await repo.append("gh", "golang")

    raw = await store.get(history_key(42))
    assert json.loads(raw) == {"timestamp": 42, "command": "gh", "value": "golang"}


def test_history_key_is_fixed_width():
    assert history_key(5) == b"history_0000000000000000005"
    assert history_key(1_700_000_000_000_000_000) == b"history_1700000000000000000"
    assert history_key(9) < history_key(10)


async def test_corrupted_record_is_skipped(history, store):
    await history.append("A", "")
    await store.put(history_key(1), b"{not json")
    await store.put(history_key(2), b'{"command": "missing timestamp"}')
    await history.append("B", "")

    assert [e.command for e in await history.list()] == ["B", "A"]


async def test_list_ignores_bookmark_namespace(history, store):
    await store.put("bookmark_history", b"https://example.com/%s")
    await history.append("A", "")

    listed = await history.list()
    assert [e.command for e in listed] == ["A"]


async def test_append_failure_raises_history_append_error(history, store):
    await store.close()
    with pytest.raises(HistoryAppendError) as exc:
        await history.append("gh", "golang")
    assert isinstance(exc.value.cause, StoreClosedError)
